"""
Unit tests for the Portfolio Metrics API.
"""
import pytest


@pytest.mark.unit
class TestHealth:
    """Test health endpoint."""
    
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "portfolio_metrics"}


@pytest.mark.unit
class TestPortfolioMetricsEndpoint:
    """Test POST /portfolio/metrics."""
    
    def test_all_metrics(self, client, sample_assets):
        response = client.post("/portfolio/metrics", json={"assets": sample_assets})
        
        assert response.status_code == 200
        data = response.json()
        assert data["ter"] == pytest.approx(1.1)
        assert data["sri"] == 4
        assert data["horizon"] == pytest.approx(5.0)
        assert data["sri_band"] == "medium"
        assert data["display"] == {"ter": "1.10%", "sri": "4.0 / 7", "horizon": "5.0 years"}
    
    def test_empty_portfolio(self, client):
        response = client.post("/portfolio/metrics", json={"assets": []})
        
        assert response.status_code == 200
        data = response.json()
        assert data["ter"] is None
        assert data["sri"] is None
        assert data["horizon"] is None
        assert data["sri_band"] == "unknown"
        assert data["display"] == {"ter": "N/A", "sri": "N/A", "horizon": "N/A"}
    
    def test_snake_case_fields(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [
                {"id": 1, "value": 100, "recommended_holding_period": 4, "entry_fee": 1},
                {"id": 2, "value": 300, "recommended_holding_period": 8},
            ]}
        )
        
        assert response.status_code == 200
        assert response.json()["horizon"] == pytest.approx(7.0)
    
    def test_worthless_assets_are_not_errors(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [{"id": 1, "value": -10, "sri": 7}, {"id": 2, "value": 0}]}
        )
        
        assert response.status_code == 200
        assert response.json()["display"]["sri"] == "N/A"
    
    def test_null_value_is_ignored(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [
                {"id": 1, "value": None, "sri": 7, "recommendedHoldingPeriod": 10},
                {"id": 2, "value": 100, "sri": 4, "recommendedHoldingPeriod": 5},
            ]}
        )
        
        assert response.status_code == 200
        data = response.json()
        assert data["sri"] == 4
        assert data["horizon"] == pytest.approx(5.0)
    
    def test_only_null_values(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [{"id": 1, "value": None, "sri": 4}]}
        )
        
        assert response.status_code == 200
        assert response.json()["display"] == {"ter": "N/A", "sri": "N/A", "horizon": "N/A"}
    
    def test_huge_sri_is_clamped(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [{"id": 1, "value": 100, "sri": 1e30}]}
        )
        
        assert response.status_code == 200
        assert response.json()["sri"] == 7
    
    def test_free_text_isin_accepted(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [{"id": 1, "value": 100, "sri": 3, "isin": "  IE00B4L5Y983 (acc)  "}]}
        )
        
        assert response.status_code == 200
        assert response.json()["sri"] == 3
    
    def test_invalid_value(self, client):
        response = client.post(
            "/portfolio/metrics",
            json={"assets": [{"id": 1, "value": "a lot"}]}
        )
        
        assert response.status_code == 422
        data = response.json()
        assert data["error"] is True
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["field"] == "assets.0.value"


@pytest.mark.unit
class TestSingleMetricEndpoint:
    """Test POST /portfolio/metrics/{metric}."""
    
    def test_horizon(self, client):
        response = client.post(
            "/portfolio/metrics/horizon",
            json={"assets": [
                {"id": 1, "value": 100, "recommendedHoldingPeriod": 4},
                {"id": 2, "value": 300, "recommendedHoldingPeriod": 8},
            ]}
        )
        
        assert response.status_code == 200
        assert response.json() == {"metric": "horizon", "value": 7.0, "display": "7.0 years"}
    
    def test_ter_default_holding_period(self, client):
        response = client.post(
            "/portfolio/metrics/ter",
            json={"assets": [{"id": 1, "value": 100, "entryFee": 2, "exitFee": 3}]}
        )
        
        assert response.status_code == 200
        assert response.json()["value"] == pytest.approx(1.0)
        assert response.json()["display"] == "1.00%"
    
    def test_sri_not_computable(self, client):
        response = client.post(
            "/portfolio/metrics/sri",
            json={"assets": [{"id": 1, "value": 100, "sri": 0}]}
        )
        
        assert response.status_code == 200
        assert response.json() == {"metric": "sri", "value": None, "display": "N/A"}
    
    def test_unknown_metric(self, client, sample_assets):
        response = client.post("/portfolio/metrics/sharpe", json={"assets": sample_assets})
        
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "NOT_FOUND"
        assert data["field"] == "metric"
        assert "ter, sri, horizon" in data["detail"]


@pytest.mark.unit
class TestAllocationAnalysisEndpoint:
    """Test POST /portfolio/allocation/analysis."""
    
    def test_analysis(self, client):
        response = client.post(
            "/portfolio/allocation/analysis",
            json={
                "allocations": [
                    {"isinId": 1, "percentage": 60},
                    {"isinId": 2, "percentage": 40},
                    {"isinId": 3, "percentage": 10},
                ],
                "products": [
                    {"id": 1, "category": "equity", "sri_risk": 6, "recommendedHoldingPeriod": "7 anni"},
                    {"id": 2, "category": "bonds", "sri": 2, "recommended_holding_period": 3},
                ],
            }
        )
        
        assert response.status_code == 200
        data = response.json()
        assert data["average_risk"] == pytest.approx(4.4)
        assert data["average_investment_horizon"] == pytest.approx(5.4)
        assert data["average_investment_horizon_display"] == "5.4 years"
        assert data["asset_class_distribution"] == {"equity": 60.0, "bonds": 40.0}
    
    def test_empty(self, client):
        response = client.post("/portfolio/allocation/analysis", json={})
        
        assert response.status_code == 200
        data = response.json()
        assert data["average_risk"] == 0.0
        assert data["average_investment_horizon"] is None
        assert data["average_investment_horizon_display"] == "N/A"
        assert data["asset_class_distribution"] == {}
    
    def test_percentage_out_of_range(self, client):
        response = client.post(
            "/portfolio/allocation/analysis",
            json={"allocations": [{"isinId": 1, "percentage": 140}], "products": []}
        )
        
        assert response.status_code == 422
        assert response.json()["field"] == "allocations.0.percentage"


@pytest.mark.unit
class TestUnexpectedErrors:
    """Unexpected failures use the standard error body."""
    
    def test_internal_error(self, monkeypatch, sample_assets):
        from fastapi.testclient import TestClient
        from gervis.api import main
        
        def broken(assets):
            raise RuntimeError("calculator failure")
        
        monkeypatch.setattr(main, "calculate_all_portfolio_metrics", broken)
        client = TestClient(main.app, raise_server_exceptions=False)
        
        response = client.post("/portfolio/metrics", json={"assets": sample_assets})
        
        assert response.status_code == 500
        data = response.json()
        assert data["error"] is True
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["detail"] == "RuntimeError"
