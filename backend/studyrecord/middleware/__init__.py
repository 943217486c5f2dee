"""
Middleware Package

Provides FastAPI error handling and the service exception taxonomy.
"""

from studyrecord.middleware.error_handling import (
    ErrorHandlingMiddleware,
    NotFoundError,
    ServiceError,
    ValidationError,
    handle_endpoint_errors,
    setup_error_handling,
)

__all__ = [
    "ErrorHandlingMiddleware",
    "NotFoundError",
    "ServiceError",
    "ValidationError",
    "handle_endpoint_errors",
    "setup_error_handling",
]
