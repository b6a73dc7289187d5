"""
Common exception classes raised by the service layer.
Routers translate these into HTTP responses.
"""
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class RingConnectError(Exception):
    """Base exception class for RingConnect errors"""
    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to standard error format"""
        return {
            "code": self.code,
            "message": str(self),
            "details": self.details
        }


class RecordDecodeError(RingConnectError):
    """Raised when a stored or external record does not match its expected shape"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="RECORD_DECODE_ERROR", details=details)


class NotFoundError(RingConnectError):
    """Raised when a requested resource is not found"""
    def __init__(self, resource_type: str, resource_id: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        message = f"{resource_type} not found" if resource_id is None else f"{resource_type} with id '{resource_id}' not found"
        super().__init__(message, code="RESOURCE_NOT_FOUND", details=details)
        self.resource_type = resource_type


class PermissionDeniedError(RingConnectError):
    """Raised when the acting user does not own the resource"""
    def __init__(self, message: str = "Not enough permissions", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="PERMISSION_DENIED", details=details)


class ConflictError(RingConnectError):
    """Raised when a write would violate a uniqueness rule"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFLICT", details=details)


class InvalidOperationError(RingConnectError):
    """Raised when a request is well-formed but not allowed in the current state"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_OPERATION", details=details)


class MediaValidationError(RingConnectError):
    """Raised when an upload has an unsupported type or exceeds its size limit"""
    def __init__(self, message: str, too_large: bool = False, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="MEDIA_TOO_LARGE" if too_large else "MEDIA_UNSUPPORTED", details=details)
        self.too_large = too_large


def parse_record(schema: Type[SchemaT], data: Any) -> SchemaT:
    """Validate a loosely-typed record into ``schema`` or raise RecordDecodeError."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RecordDecodeError(
            f"Invalid {schema.__name__} record",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def to_http_exception(error: RingConnectError) -> HTTPException:
    """Map a service-layer error to the HTTP status routers answer with."""
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, PermissionDeniedError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(error, MediaValidationError):
        status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE if error.too_large else status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    elif isinstance(error, (InvalidOperationError, RecordDecodeError)):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=str(error))
