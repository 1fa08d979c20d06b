"""Custom exception hierarchy for the drink order bot."""

from __future__ import annotations

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class DecodeError(ApplicationError):
    """Raised when an inbound body or payload cannot be parsed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "decode_error"


class ValidationError(ApplicationError):
    """Raised when a well-formed request cannot be acted upon."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"


class UnknownShopError(ValidationError):
    code = "unknown_shop"

    def __init__(self, shop: str) -> None:
        super().__init__(f"We cannot buy drink from {shop}")
        self.shop = shop


class UnknownStepError(ValidationError):
    code = "unknown_step"


class UpstreamSendError(ApplicationError):
    """Raised when Slack rejects or fails to receive an outbound message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "upstream_send_error"


class ConfigurationError(Exception):
    """Raised when the process cannot start with the current environment."""
