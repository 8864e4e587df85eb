"""
Portfolio Metrics Module
Pure functions for portfolio analytics.
"""

from .portfolio_metrics import (
    DEFAULT_HOLDING_PERIOD_YEARS,
    normalize_assets,
    calculate_portfolio_ter,
    calculate_portfolio_sri,
    calculate_portfolio_horizon,
    calculate_all_portfolio_metrics,
)
from .holding_period import parse_holding_period
from .allocation import AllocationItem, analyze_portfolio_allocation

__all__ = [
    "DEFAULT_HOLDING_PERIOD_YEARS",
    "normalize_assets",
    "calculate_portfolio_ter",
    "calculate_portfolio_sri",
    "calculate_portfolio_horizon",
    "calculate_all_portfolio_metrics",
    "parse_holding_period",
    "AllocationItem",
    "analyze_portfolio_allocation",
]
