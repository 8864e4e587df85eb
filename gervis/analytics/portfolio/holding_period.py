"""
Recommended holding period parsing.

Product sheets state the holding period either as a number of years or as
free text ("5 anni", "18 months", "medium term").
"""
import re
from decimal import Decimal
from typing import Any, Optional

from ..types import to_decimal

YEAR_PATTERN = re.compile(r'(\d+)[\s-]*(?:year|yr|anno|anni)', re.IGNORECASE)
MONTH_PATTERN = re.compile(r'(\d+)[\s-]*(?:month|mo|mese|mesi)', re.IGNORECASE)

# Years assumed for qualitative horizons
TERM_DEFAULTS = (
    ("short", Decimal(2)),
    ("medium", Decimal(5)),
    ("long", Decimal(10)),
)


def parse_holding_period(raw: Any) -> Optional[Decimal]:
    """
    Convert a recommended holding period to years.
    
    Returns:
        Years as Decimal, or None if the value cannot be interpreted
    """
    if raw is None or isinstance(raw, bool):
        return None
    if not isinstance(raw, str):
        return to_decimal(raw)
    
    text = raw.strip().lower()
    numeric = to_decimal(text) if text else None
    if numeric is not None:
        return numeric
    
    year_match = YEAR_PATTERN.search(text)
    if year_match:
        return Decimal(int(year_match.group(1)))
    
    month_match = MONTH_PATTERN.search(text)
    if month_match:
        return Decimal(int(month_match.group(1))) / Decimal(12)
    
    for term, years in TERM_DEFAULTS:
        if term in text:
            return years
    
    return None
