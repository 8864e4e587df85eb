"""
Portfolio Metrics
Value-weighted cost, risk and horizon figures for a client portfolio.

Metrics:
1. TER: (avgEntry + avgExit) / avgHoldingPeriod + avgOngoing + avgTransaction
   where avgHoldingPeriod is the value-weighted harmonic mean of
   recommended holding periods (5 years when none is known)
2. SRI: round(sum(sri_i * value_i) / sum(value_i)), clamped to 1-7
3. Horizon: sum(period_i * value_i) / sum(value_i)

Assets with value <= 0 never contribute. SRI and horizon only count assets
where the field is present and non-zero. None means "not computable",
which also covers sums too large for the Decimal context.
"""
import functools
import logging
from decimal import (
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..types import AssetMetrics, PortfolioMetricsResult

logger = logging.getLogger(__name__)

DEFAULT_HOLDING_PERIOD_YEARS = Decimal(5)
SRI_MIN = 1
SRI_MAX = 7

AssetInput = Union[AssetMetrics, Mapping[str, Any]]

# Signals that yield Infinity or NaN instead of raising inside the calculators
_UNTRAPPED_SIGNALS = (Overflow, InvalidOperation, DivisionByZero)


def _without_decimal_traps(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with localcontext() as context:
            for signal in _UNTRAPPED_SIGNALS:
                context.traps[signal] = False
            return func(*args, **kwargs)
    return wrapper


def normalize_assets(assets: Optional[Iterable[AssetInput]]) -> List[AssetMetrics]:
    """Accept AssetMetrics or raw records (camelCase or snake_case)."""
    if not assets:
        return []
    return [
        asset if isinstance(asset, AssetMetrics) else AssetMetrics.from_record(asset)
        for asset in assets
    ]


@_without_decimal_traps
def calculate_portfolio_ter(assets: Optional[Iterable[AssetInput]]) -> Optional[Decimal]:
    """
    Calculate the value-weighted Total Expense Ratio of a portfolio.
    
    Entry and exit fees are one-time costs, so they are amortized over the
    average holding period. Ongoing and transaction costs are already
    annual and are added as they are.
    
    Returns:
        TER in percent, or None when no asset carries positive value
    """
    holdings = normalize_assets(assets)
    if not holdings:
        return None
    
    total_value = Decimal(0)
    weighted_entry_fee = Decimal(0)
    weighted_exit_fee = Decimal(0)
    weighted_ongoing_charge = Decimal(0)
    weighted_transaction_cost = Decimal(0)
    # Sum of value / period; total_value over this is the harmonic mean
    weighted_holding_period = Decimal(0)
    
    for asset in holdings:
        value = asset.value
        if value <= 0:
            continue
        
        total_value += value
        weighted_entry_fee += (asset.entry_fee or Decimal(0)) * value
        weighted_exit_fee += (asset.exit_fee or Decimal(0)) * value
        weighted_ongoing_charge += (asset.ongoing_charge or Decimal(0)) * value
        weighted_transaction_cost += (asset.transaction_cost or Decimal(0)) * value
        
        period = asset.recommended_holding_period
        if period and period > 0:
            weighted_holding_period += value / period
    
    if total_value == 0:
        logger.debug("TER not computable: no asset with positive value")
        return None
    
    avg_entry_fee = weighted_entry_fee / total_value
    avg_exit_fee = weighted_exit_fee / total_value
    avg_ongoing_charge = weighted_ongoing_charge / total_value
    avg_transaction_cost = weighted_transaction_cost / total_value
    
    avg_holding_period = DEFAULT_HOLDING_PERIOD_YEARS
    if weighted_holding_period > 0:
        avg_holding_period = total_value / weighted_holding_period
    
    ter = (
        (avg_entry_fee + avg_exit_fee) / avg_holding_period
        + avg_ongoing_charge
        + avg_transaction_cost
    )
    if not ter.is_finite():
        logger.debug("TER not computable: weighted sums out of Decimal range")
        return None
    return ter


@_without_decimal_traps
def calculate_portfolio_sri(assets: Optional[Iterable[AssetInput]]) -> Optional[int]:
    """
    Calculate the value-weighted Synthetic Risk Indicator of a portfolio.
    
    The mean is rounded half up to the nearest integer and clamped to the
    1-7 SRI scale. An sri of 0 counts as missing.
    """
    holdings = normalize_assets(assets)
    if not holdings:
        return None
    
    total_value = Decimal(0)
    weighted_sri = Decimal(0)
    valid_asset_count = 0
    
    for asset in holdings:
        if asset.value <= 0 or not asset.sri:
            continue
        total_value += asset.value
        weighted_sri += asset.sri * asset.value
        valid_asset_count += 1
    
    if valid_asset_count == 0 or total_value == 0:
        logger.debug("SRI not computable: no valued asset carries a risk class")
        return None
    
    avg_sri = weighted_sri / total_value
    if avg_sri.is_nan():
        logger.debug("SRI not computable: weighted sums out of Decimal range")
        return None
    
    # Clamp before rounding so huge means never reach quantize
    avg_sri = max(Decimal(SRI_MIN), min(Decimal(SRI_MAX), avg_sri))
    return int(avg_sri.quantize(Decimal(1), rounding=ROUND_HALF_UP))


@_without_decimal_traps
def calculate_portfolio_horizon(assets: Optional[Iterable[AssetInput]]) -> Optional[Decimal]:
    """
    Calculate the value-weighted recommended holding horizon in years.
    
    This is a plain arithmetic mean, unlike the harmonic holding period
    used inside calculate_portfolio_ter.
    """
    holdings = normalize_assets(assets)
    if not holdings:
        return None
    
    total_value = Decimal(0)
    weighted_holding_period = Decimal(0)
    valid_asset_count = 0
    
    for asset in holdings:
        if asset.value <= 0 or not asset.recommended_holding_period:
            continue
        total_value += asset.value
        weighted_holding_period += asset.recommended_holding_period * asset.value
        valid_asset_count += 1
    
    if valid_asset_count == 0 or total_value == 0:
        logger.debug("Horizon not computable: no valued asset has a holding period")
        return None
    
    horizon = weighted_holding_period / total_value
    if not horizon.is_finite():
        logger.debug("Horizon not computable: weighted sums out of Decimal range")
        return None
    return horizon


def calculate_all_portfolio_metrics(assets: Optional[Iterable[AssetInput]]) -> PortfolioMetricsResult:
    """Run the TER, SRI and horizon calculators over the same holdings."""
    holdings = normalize_assets(assets)
    return PortfolioMetricsResult(
        ter=calculate_portfolio_ter(holdings),
        sri=calculate_portfolio_sri(holdings),
        horizon=calculate_portfolio_horizon(holdings),
    )
