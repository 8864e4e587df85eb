"""
Display strings for portfolio metrics, as shown on portfolio cards,
dialogs and the PDF export.
"""
from decimal import Decimal
from typing import Dict, Optional, Union

from gervis.config import settings
from .types import PortfolioMetricsResult

Number = Union[int, float, Decimal]

# Upper SRI bound (inclusive) of each band
SRI_RISK_BANDS = (
    (2, "low"),
    (3, "moderate"),
    (4, "medium"),
    (5, "high"),
)


def _label(not_available: Optional[str]) -> str:
    return not_available if not_available is not None else settings.NOT_AVAILABLE_LABEL


def format_ter(ter: Optional[Number], not_available: Optional[str] = None) -> str:
    """Format TER as a percentage with two decimals, e.g. "1.10%"."""
    if ter is None:
        return _label(not_available)
    return f"{float(ter):.2f}%"


def format_sri(sri: Optional[Number], not_available: Optional[str] = None) -> str:
    """Format SRI on the 1-7 scale, e.g. "4.0 / 7". Zero is not a valid class."""
    if not sri:
        return _label(not_available)
    return f"{float(sri):.1f} / 7"


def format_horizon(horizon: Optional[Number], not_available: Optional[str] = None) -> str:
    """Format the holding horizon in years, e.g. "7.0 years"."""
    if horizon is None or horizon <= 0:
        return _label(not_available)
    return f"{float(horizon):.1f} years"


def sri_risk_band(sri: Optional[Number]) -> str:
    """Classify an SRI into a risk band, "unknown" when missing."""
    if not sri:
        return "unknown"
    for upper, band in SRI_RISK_BANDS:
        if sri <= upper:
            return band
    return "very_high"


def format_portfolio_metrics(
    result: PortfolioMetricsResult,
    not_available: Optional[str] = None,
) -> Dict[str, str]:
    """Format all three metrics of a PortfolioMetricsResult."""
    return {
        "ter": format_ter(result.ter, not_available),
        "sri": format_sri(result.sri, not_available),
        "horizon": format_horizon(result.horizon, not_available),
    }
