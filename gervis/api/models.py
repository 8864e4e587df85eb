"""
Pydantic models for the Portfolio Metrics API.
Request/Response models for API endpoints.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union
from decimal import Decimal

from gervis.analytics import AssetMetrics, AllocationItem


class AssetMetricsRequest(BaseModel):
    """One portfolio holding. Accepts the web client's camelCase keys."""
    id: Optional[int] = None
    value: Optional[Decimal] = Field(None, description="Holding value; missing or <= 0 is ignored by every metric")
    category: Optional[str] = None
    description: Optional[str] = None
    isin: Optional[str] = None
    product_name: Optional[str] = Field(None, alias="productName")
    entry_fee: Optional[Decimal] = Field(None, alias="entryFee", description="Entry fee (%)")
    exit_fee: Optional[Decimal] = Field(None, alias="exitFee", description="Exit fee (%)")
    ongoing_charge: Optional[Decimal] = Field(None, alias="ongoingCharge", description="Ongoing charges (%)")
    transaction_cost: Optional[Decimal] = Field(None, alias="transactionCost", description="Transaction costs (%)")
    recommended_holding_period: Optional[Decimal] = Field(
        None, alias="recommendedHoldingPeriod", description="Recommended holding period (years)"
    )
    sri: Optional[Decimal] = Field(None, description="Synthetic risk indicator (1-7)")
    
    class Config:
        populate_by_name = True
    
    def to_asset(self) -> AssetMetrics:
        return AssetMetrics(**self.model_dump())


class PortfolioMetricsRequest(BaseModel):
    """Request model for POST /portfolio/metrics."""
    assets: List[AssetMetricsRequest] = Field(default_factory=list)
    
    def to_assets(self) -> List[AssetMetrics]:
        return [asset.to_asset() for asset in self.assets]


class MetricsDisplay(BaseModel):
    """Formatted metric strings."""
    ter: str
    sri: str
    horizon: str


class PortfolioMetricsResponse(BaseModel):
    """Response model for POST /portfolio/metrics."""
    ter: Optional[float] = None
    sri: Optional[int] = None
    horizon: Optional[float] = None
    sri_band: str
    display: MetricsDisplay


class SingleMetricResponse(BaseModel):
    """Response model for POST /portfolio/metrics/{metric}."""
    metric: str
    value: Optional[float] = None
    display: str


class AllocationItemRequest(BaseModel):
    """Share of a model portfolio invested in one product."""
    product_id: int = Field(..., alias="isinId")
    percentage: Decimal = Field(..., ge=0, le=100)
    category: Optional[str] = None
    
    class Config:
        populate_by_name = True
    
    def to_item(self) -> AllocationItem:
        return AllocationItem(
            product_id=self.product_id,
            percentage=self.percentage,
            category=self.category,
        )


class ProductRequest(BaseModel):
    """Catalogue product referenced by an allocation."""
    id: int
    category: Optional[str] = None
    sri: Optional[Decimal] = Field(None, alias="sri_risk")
    recommended_holding_period: Optional[Union[Decimal, str]] = Field(
        None, alias="recommendedHoldingPeriod"
    )
    
    class Config:
        populate_by_name = True


class AllocationAnalysisRequest(BaseModel):
    """Request model for POST /portfolio/allocation/analysis."""
    allocations: List[AllocationItemRequest] = Field(default_factory=list)
    products: List[ProductRequest] = Field(default_factory=list)
    
    def products_by_id(self) -> Dict[int, dict]:
        return {product.id: product.model_dump() for product in self.products}


class PortfolioAnalysisResponse(BaseModel):
    """Response model for POST /portfolio/allocation/analysis."""
    average_risk: float
    average_investment_horizon: Optional[float] = None
    average_investment_horizon_display: str
    asset_class_distribution: Dict[str, float]
