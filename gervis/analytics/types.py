"""
Data structures for the portfolio metrics engine.

Numeric fields are held as Decimal. Anything that cannot be read as a
finite number is stored as None, so the calculators never see garbage.
"""
from dataclasses import dataclass, field, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional


def to_decimal(raw: Any) -> Optional[Decimal]:
    """
    Coerce a raw numeric value to Decimal.
    
    Returns None for None, booleans, non-numeric strings, NaN and infinities.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        number = raw
    else:
        try:
            number = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            return None
    if not number.is_finite():
        return None
    return number


# camelCase keys sent by the web client -> dataclass field names
_CAMEL_CASE_FIELDS = {
    "productName": "product_name",
    "entryFee": "entry_fee",
    "exitFee": "exit_fee",
    "ongoingCharge": "ongoing_charge",
    "transactionCost": "transaction_cost",
    "recommendedHoldingPeriod": "recommended_holding_period",
}

_NUMERIC_FIELDS = (
    "entry_fee",
    "exit_fee",
    "ongoing_charge",
    "transaction_cost",
    "recommended_holding_period",
    "sri",
)


@dataclass
class AssetMetrics:
    """
    One holding of a client portfolio.
    
    value is the weighting basis for every average; fees are percentages;
    recommended_holding_period is in years; sri is the 1-7 risk class.
    """
    id: Optional[int] = None
    value: Decimal = Decimal(0)
    category: Optional[str] = None
    description: Optional[str] = None
    isin: Optional[str] = None
    product_name: Optional[str] = None
    entry_fee: Optional[Decimal] = None
    exit_fee: Optional[Decimal] = None
    ongoing_charge: Optional[Decimal] = None
    transaction_cost: Optional[Decimal] = None
    recommended_holding_period: Optional[Decimal] = None
    sri: Optional[Decimal] = None
    
    def __post_init__(self):
        self.value = to_decimal(self.value) or Decimal(0)
        for name in _NUMERIC_FIELDS:
            setattr(self, name, to_decimal(getattr(self, name)))
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> 'AssetMetrics':
        """
        Build from a mapping with camelCase or snake_case keys.
        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, raw in record.items():
            name = _CAMEL_CASE_FIELDS.get(key, key)
            if name in known:
                kwargs[name] = raw
        return cls(**kwargs)
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "value": float(self.value),
            "category": self.category,
            "description": self.description,
            "isin": self.isin,
            "productName": self.product_name,
            "entryFee": _to_float(self.entry_fee),
            "exitFee": _to_float(self.exit_fee),
            "ongoingCharge": _to_float(self.ongoing_charge),
            "transactionCost": _to_float(self.transaction_cost),
            "recommendedHoldingPeriod": _to_float(self.recommended_holding_period),
            "sri": _to_float(self.sri),
        }


@dataclass
class PortfolioMetricsResult:
    """
    Combined portfolio metrics.
    None means the metric is not computable, which is not the same as zero.
    """
    ter: Optional[Decimal] = None
    sri: Optional[int] = None
    horizon: Optional[Decimal] = None
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "ter": _to_float(self.ter),
            "sri": self.sri,
            "horizon": _to_float(self.horizon),
        }


@dataclass
class PortfolioAnalysisResult:
    """Analysis of a percentage-based model portfolio allocation."""
    average_risk: Decimal = Decimal(0)
    average_investment_horizon: Optional[Decimal] = None
    asset_class_distribution: Dict[str, Decimal] = field(default_factory=dict)
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "average_risk": float(self.average_risk),
            "average_investment_horizon": _to_float(self.average_investment_horizon),
            "asset_class_distribution": {
                category: float(percentage)
                for category, percentage in self.asset_class_distribution.items()
            },
        }


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None
