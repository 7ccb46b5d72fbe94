"""
Exception hierarchy for the pricing engine.
Every error carries a stable error code, a message and optional details
so the HTTP layer can render it without knowing the concrete type.
"""

from __future__ import annotations

from typing import Any, Optional


class PricingEngineError(Exception):
    """Base class for all pricing engine errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(PricingEngineError):
    """A service description could not be priced (unknown tag, bad duration, ...)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class ParameterValidationError(PricingEngineError):
    """Pricing parameters fall outside the configured bounds."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PARAM_001", details=details)


class StorageError(PricingEngineError):
    """The parameter store could not be written."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)
