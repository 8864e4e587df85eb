"""
Portfolio Metrics Service main application.
Exposes the portfolio metric calculators to the Gervis web client.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gervis.config import settings
from gervis.error_models import ErrorCode, create_error_response
from gervis.sentry_init import init_sentry
from gervis.analytics import (
    calculate_all_portfolio_metrics,
    calculate_portfolio_horizon,
    calculate_portfolio_sri,
    calculate_portfolio_ter,
    analyze_portfolio_allocation,
    format_horizon,
    format_portfolio_metrics,
    format_sri,
    format_ter,
    sri_risk_band,
)
from .models import (
    PortfolioMetricsRequest,
    PortfolioMetricsResponse,
    MetricsDisplay,
    SingleMetricResponse,
    AllocationAnalysisRequest,
    PortfolioAnalysisResponse,
)

logging.getLogger("gervis").setLevel(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

init_sentry()

app = FastAPI(
    title=f"{settings.APP_NAME} Portfolio Metrics Service",
    version=settings.APP_VERSION,
    description="TER, SRI and holding horizon calculations for client portfolios"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# metric name -> (calculator, formatter)
METRICS = {
    "ter": (calculate_portfolio_ter, format_ter),
    "sri": (calculate_portfolio_sri, format_sri),
    "horizon": (calculate_portfolio_horizon, format_horizon),
}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors in the standard error format."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    error_response, status_code = create_error_response(
        error_code=ErrorCode.VALIDATION_ERROR,
        message="Invalid request payload",
        detail=first.get("msg"),
        field=".".join(location) or None,
        status_code=422,
        metadata={"error_count": len(errors)},
    )
    logger.info(f"Rejected request to {request.url.path}: {error_response.detail}")
    return JSONResponse(status_code=status_code, content=error_response.model_dump(mode="json"))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Return unexpected failures in the standard error format."""
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    error_response, status_code = create_error_response(
        error_code=ErrorCode.INTERNAL_ERROR,
        message="Internal server error",
        detail=type(exc).__name__,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return JSONResponse(status_code=status_code, content=error_response.model_dump(mode="json"))


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "portfolio_metrics"}


@app.post("/portfolio/metrics", response_model=PortfolioMetricsResponse)
async def portfolio_metrics(request: PortfolioMetricsRequest):
    """
    Calculate all portfolio metrics.
    
    Returns:
    - TER in percent
    - SRI on the 1-7 scale and its risk band
    - Recommended horizon in years
    - Display strings, with the N/A label for metrics that are not computable
    """
    result = calculate_all_portfolio_metrics(request.to_assets())
    data = result.to_dict()
    return PortfolioMetricsResponse(
        **data,
        sri_band=sri_risk_band(result.sri),
        display=MetricsDisplay(**format_portfolio_metrics(result)),
    )


@app.post("/portfolio/metrics/{metric}", response_model=SingleMetricResponse)
async def single_portfolio_metric(metric: str, request: PortfolioMetricsRequest):
    """Calculate one metric: ter, sri or horizon."""
    if metric not in METRICS:
        error_response, status_code = create_error_response(
            error_code=ErrorCode.NOT_FOUND,
            message=f"Unknown portfolio metric: {metric}",
            detail=f"Supported metrics: {', '.join(METRICS)}",
            field="metric",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        return JSONResponse(status_code=status_code, content=error_response.model_dump(mode="json"))
    
    calculate, format_metric = METRICS[metric]
    value = calculate(request.to_assets())
    return SingleMetricResponse(
        metric=metric,
        value=float(value) if value is not None else None,
        display=format_metric(value),
    )


@app.post("/portfolio/allocation/analysis", response_model=PortfolioAnalysisResponse)
async def allocation_analysis(request: AllocationAnalysisRequest):
    """
    Analyze a model portfolio allocation.
    
    Allocations referencing unknown products are skipped.
    """
    result = analyze_portfolio_allocation(
        [item.to_item() for item in request.allocations],
        request.products_by_id(),
    )
    return PortfolioAnalysisResponse(
        **result.to_dict(),
        average_investment_horizon_display=format_horizon(result.average_investment_horizon),
    )
