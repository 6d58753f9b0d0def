# utils/helpers.py
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
import logging
import uuid
from typing import Union, Optional

NumberLike = Union[float, int, str]

_log = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def now_str() -> str:
    """Return the current local timestamp as ISO string (YYYY-MM-DDTHH:MM:SS)."""
    return datetime.now().isoformat(timespec="seconds")


def new_id() -> str:
    """Fresh opaque record identifier; independent of the wall clock."""
    return uuid.uuid4().hex


def to_decimal(v: NumberLike) -> Decimal:
    """Parse via str() so 0.1 stays 0.1 instead of its binary expansion."""
    try:
        return Decimal(str(v))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def money(v: Union[NumberLike, Decimal]) -> float:
    """Round a monetary amount to cents (half-up) and return it as float."""
    d = v if isinstance(v, Decimal) else to_decimal(v)
    return float(d.quantize(_CENT, rounding=ROUND_HALF_UP))


def fmt_money(
    v: NumberLike,
    places: int = 2,
    *,
    strict: bool = False,
    sentinel: Optional[str] = None,
) -> str:
    """
    Format a number as money with thousands separators and a fixed number of decimals.

    Behavior on parse failure:
      - By default (strict=False, sentinel=None), returns str(v).
      - If `sentinel` is provided (e.g., "N/A"), returns that sentinel instead.
      - If `strict=True`, raises ValueError on parse failures.
    """
    try:
        x = float(v)
    except Exception as e:
        # Log at debug level to aid troubleshooting without spamming user logs.
        _log.debug("fmt_money: failed to parse %r as float: %s", v, e)
        if strict:
            raise ValueError(f"Could not parse {v!r} as a number.") from e
        return str(sentinel) if sentinel is not None else str(v)
    return f"{x:,.{places}f}"
