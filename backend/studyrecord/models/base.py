"""
Strict Base Models for API Response Validation

Every analytics value object is built by a service and serialized by the
router. Response models validate their own fields but tolerate extra
attributes so they can be populated straight from ORM rows.

Usage:
    class ItemResponse(StrictResponse):
        id: str
        name: str

    ItemResponse.model_validate(db_item)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class StrictResponse(BaseModel):
    """
    Base model for API response bodies.

    Features:
        - extra="ignore": Silently ignores extra fields (DB may have more columns)
        - validate_default=True: Validates default values
        - from_attributes=True: Allows ORM model conversion
    """

    model_config = ConfigDict(
        extra="ignore",  # Allow extra fields in responses
        validate_default=True,  # Validate defaults
        from_attributes=True,  # Enable ORM conversion
    )


class ErrorDetail(StrictResponse):
    """
    Standardized error response detail.

    Matches the error format from the error_handling middleware.
    """

    error: str  # Error code (e.g., "validation_error")
    message: str  # Human-readable message
    error_id: str  # Correlation ID for log lookup
    details: Optional[dict] = None  # Additional context
    timestamp: datetime
