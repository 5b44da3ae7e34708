from typing import Any, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional extra context (what was received, which field failed)
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = (
                self.details if isinstance(self.details, str) else str(self.details)
            )
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is missing or malformed (400)."""

    http_status = 400
    default_message = "Invalid input"


class UnauthorizedError(ServiceError):
    """Raised when a credential or password does not check out (401)."""

    http_status = 401
    default_message = "Unauthorized"


class ForbiddenError(ServiceError):
    """Raised when the caller is authenticated but not entitled (403)."""

    http_status = 403
    default_message = "Forbidden"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found (404)."""

    http_status = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    """Raised when a uniqueness rule would be violated (409)."""

    http_status = 409
    default_message = "Conflict"


class UpstreamError(ServiceError):
    """Raised when an external dependency such as the media host fails (502)."""

    http_status = 502
    default_message = "Upstream service failed"
