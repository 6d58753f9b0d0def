from __future__ import annotations
from typing import Optional

from ....constants import STATUS_PAID, STATUS_PARTIAL, STATUS_UNPAID

# ---------- Descriptions (UI copy / tooltips) ----------
DESCRIPTIONS = {
    STATUS_UNPAID:  "Credit sale with nothing paid yet.",
    STATUS_PARTIAL: "Part of the balance has been paid.",
    STATUS_PAID:    "Fully settled.",
}

# (Optional) style tokens the UI can map to colors/icons
STYLES = {
    STATUS_UNPAID:  {"badge": "danger",  "fg": "#991B1B", "bg": "#FEE2E2"},
    STATUS_PARTIAL: {"badge": "warning", "fg": "#92400E", "bg": "#FEF3C7"},
    STATUS_PAID:    {"badge": "success", "fg": "#065F46", "bg": "#D1FAE5"},
}

# ---------- API ----------

def normalize(state: Optional[str]) -> Optional[str]:
    """Strip & title-case; return None if empty. Does NOT invent synonyms."""
    if state is None:
        return None
    s = str(state).strip().title()
    return s or None


def description(state: str) -> str:
    """Short human description for tooltips; empty string if unknown."""
    s = normalize(state)
    return DESCRIPTIONS.get(s, "")


def style_tokens(state: str) -> dict:
    """
    Return a small style dict: e.g., {'badge': 'success', 'fg': '#065F46', 'bg': '#D1FAE5'}.
    Unknown states fall back to the 'Unpaid' style.
    """
    s = normalize(state)
    return STYLES.get(s, STYLES[STATUS_UNPAID])

