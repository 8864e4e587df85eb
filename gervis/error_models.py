"""
Standard error response models for API consistency.
All API endpoints use these models for error responses.
"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for API responses."""
    # Validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    
    # Resource
    NOT_FOUND = "NOT_FOUND"
    
    # Server
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    All API error responses follow this structure.
    """
    error: bool = Field(default=True, description="Always true for error responses")
    error_code: ErrorCode = Field(..., description="Standard error code")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    field: Optional[str] = Field(None, description="Field name if validation error")
    timestamp: Optional[str] = Field(None, description="Error timestamp (ISO format)")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Additional error metadata")

    class Config:
        json_schema_extra = {
            "example": {
                "error": True,
                "error_code": "NOT_FOUND",
                "message": "Unknown portfolio metric",
                "detail": "Supported metrics: ter, sri, horizon",
                "field": "metric",
                "timestamp": "2024-01-01T00:00:00Z",
                "metadata": {}
            }
        }


def create_error_response(
    error_code: ErrorCode,
    message: str,
    detail: Optional[str] = None,
    field: Optional[str] = None,
    status_code: int = 400,
    metadata: Optional[Dict[str, Any]] = None
) -> tuple[ErrorResponse, int]:
    """
    Helper function to create standardized error responses.
    
    Args:
        error_code: Standard error code
        message: Human-readable error message
        detail: Additional error details
        field: Field name if validation error
        status_code: HTTP status code
        metadata: Additional error metadata
    
    Returns:
        Tuple of (ErrorResponse, status_code)
    """
    from datetime import datetime, timezone
    
    error_response = ErrorResponse(
        error=True,
        error_code=error_code,
        message=message,
        detail=detail,
        field=field,
        timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S") + "Z",
        metadata=metadata or {}
    )
    
    return error_response, status_code
