# utils/validators.py
import math


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


# ---- Numeric parsing & validators ----

def try_parse_float(x):
    """
    Best-effort parse to float.

    Returns:
        (ok: bool, value: float|None)

    ok == False means parsing failed and value is None.
    Booleans are rejected even though Python treats them as ints, and so are
    NaN and the infinities, which no amount or quantity can be.
    """
    if isinstance(x, bool):
        return False, None
    try:
        val = float(x)
    except (TypeError, ValueError):
        return False, None
    if not math.isfinite(val):
        return False, None
    return True, val


def is_strictly_positive_number(x) -> bool:
    """
    True iff x parses to a float and value > 0.
    """
    ok, val = try_parse_float(x)
    return bool(ok and val is not None and val > 0)


def is_whole_number(x) -> bool:
    """True iff x is an int, or a float/str holding an integral value (e.g. 3.0, "3")."""
    ok, val = try_parse_float(x)
    return bool(ok and val is not None and val.is_integer())


def is_positive_int(x) -> bool:
    """True iff x is a whole number > 0."""
    return is_whole_number(x) and float(x) > 0


def is_non_negative_int(x) -> bool:
    """True iff x is a whole number >= 0."""
    return is_whole_number(x) and float(x) >= 0
