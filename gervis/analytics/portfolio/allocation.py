"""
Model portfolio allocation analysis.

Model portfolios hold percentages of catalogue products rather than
monetary values, so every average here is weighted by percentage.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from ..types import PortfolioAnalysisResult, to_decimal
from .holding_period import parse_holding_period

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "other"


@dataclass
class AllocationItem:
    """Share of a model portfolio invested in one catalogue product."""
    product_id: int
    percentage: Decimal
    category: Optional[str] = None
    
    def __post_init__(self):
        self.percentage = to_decimal(self.percentage) or Decimal(0)


def _product_field(product: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        value = product.get(name)
        if value is not None:
            return value
    return None


def analyze_portfolio_allocation(
    allocations: Iterable[AllocationItem],
    products: Mapping[int, Mapping[str, Any]],
) -> PortfolioAnalysisResult:
    """
    Analyze a model portfolio allocation.
    
    Args:
        allocations: Allocation items (product id and percentage)
        products: Product records by id with category, sri and
            recommended_holding_period (numeric or free text)
    
    Returns:
        Percentage-weighted average risk (0 when unknown), average
        investment horizon in years (None when unknown) and the sum of
        percentages per asset class
    """
    result = PortfolioAnalysisResult()
    
    risk_sum = Decimal(0)
    risk_weight = Decimal(0)
    horizon_sum = Decimal(0)
    horizon_weight = Decimal(0)
    
    for item in allocations:
        product = products.get(item.product_id)
        if product is None:
            logger.debug(f"Skipping allocation for unknown product {item.product_id}")
            continue
        
        weight = item.percentage / Decimal(100)
        
        category = _product_field(product, "category") or item.category or DEFAULT_CATEGORY
        result.asset_class_distribution[category] = (
            result.asset_class_distribution.get(category, Decimal(0)) + item.percentage
        )
        
        sri = to_decimal(_product_field(product, "sri", "sri_risk"))
        if sri:
            risk_sum += sri * weight
            risk_weight += weight
        
        horizon = parse_holding_period(
            _product_field(product, "recommended_holding_period", "recommendedHoldingPeriod")
        )
        if horizon is not None:
            horizon_sum += horizon * weight
            horizon_weight += weight
    
    if risk_weight > 0:
        result.average_risk = risk_sum / risk_weight
    if horizon_weight > 0:
        result.average_investment_horizon = horizon_sum / horizon_weight
    
    return result
