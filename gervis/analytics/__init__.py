"""
Gervis Analytics Engine
Pure, testable portfolio metric calculations.
"""

from .types import AssetMetrics, PortfolioMetricsResult, PortfolioAnalysisResult
from .portfolio.portfolio_metrics import (
    calculate_portfolio_ter,
    calculate_portfolio_sri,
    calculate_portfolio_horizon,
    calculate_all_portfolio_metrics,
)
from .portfolio.allocation import AllocationItem, analyze_portfolio_allocation
from .portfolio.holding_period import parse_holding_period
from .formatting import (
    format_ter,
    format_sri,
    format_horizon,
    format_portfolio_metrics,
    sri_risk_band,
)

__all__ = [
    # Types
    "AssetMetrics",
    "PortfolioMetricsResult",
    "PortfolioAnalysisResult",
    # Portfolio Metrics
    "calculate_portfolio_ter",
    "calculate_portfolio_sri",
    "calculate_portfolio_horizon",
    "calculate_all_portfolio_metrics",
    # Model portfolio analysis
    "AllocationItem",
    "analyze_portfolio_allocation",
    "parse_holding_period",
    # Display
    "format_ter",
    "format_sri",
    "format_horizon",
    "format_portfolio_metrics",
    "sri_risk_band",
]
