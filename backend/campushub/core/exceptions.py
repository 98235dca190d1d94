"""
Custom Exceptions for Campus Hub
================================

Every error raised by the record managers, the session layer and the
generation flows derives from CampusHubError so the API layer can turn it
into a consistent error envelope.

Usage:
    from campushub.core.exceptions import RecordNotFoundError, ValidationError

    if record_id not in manager:
        raise RecordNotFoundError("Student", record_id)

    raise ValidationError.for_field("end_date", "End date cannot be before start date.")
"""

from typing import Optional, Any, Dict, List, Mapping


class CampusHubError(Exception):
    """Base exception for all Campus Hub errors"""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(CampusHubError):
    """User authentication failed"""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTH_FAILED")


class SessionExpiredError(AuthenticationError):
    """Session token has expired or was logged out"""

    def __init__(self, message: str = "Session has expired"):
        super().__init__(message)
        self.code = "SESSION_EXPIRED"


class InvalidTokenError(AuthenticationError):
    """Session token is invalid"""

    def __init__(self):
        super().__init__("Invalid session token")
        self.code = "INVALID_TOKEN"


class AuthorizationError(CampusHubError):
    """User not authorized for this action"""

    def __init__(self, message: str = "Not authorized", action: Optional[str] = None,
                 entity_type: Optional[str] = None):
        super().__init__(message, code="NOT_AUTHORIZED")
        if action:
            self.details["action"] = action
        if entity_type:
            self.details["entity_type"] = entity_type


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(CampusHubError):
    """Base class for not found errors"""

    def __init__(self, resource_type: str, resource_id: str):
        code = resource_type.upper().replace(" ", "_")
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            code=f"{code}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class RecordNotFoundError(ResourceNotFoundError):
    """No record with the given identifier exists in a managed collection"""


NotFoundError = RecordNotFoundError


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(CampusHubError):
    """Submitted fields violate the declared schema.

    ``errors`` maps each offending field to one or more messages. Nothing is
    mutated when this is raised.
    """

    def __init__(self, errors: Mapping[str, List[str]], message: str = "Validation failed"):
        self.errors: Dict[str, List[str]] = {field: list(msgs) for field, msgs in errors.items()}
        super().__init__(message, code="VALIDATION_ERROR", details={"errors": self.errors})

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]}, message=message)

    @property
    def fields(self) -> List[str]:
        return list(self.errors)


class DuplicateRequestError(CampusHubError):
    """The same request is already in flight"""

    def __init__(self, message: str = "An identical request is already being processed"):
        super().__init__(message, code="DUPLICATE_REQUEST")


# ============================================
# AI/Claude Errors
# ============================================

class AIServiceError(CampusHubError):
    """AI service (Claude) error"""

    def __init__(self, message: str):
        super().__init__(message, code="AI_SERVICE_ERROR")


class GenerationFailure(AIServiceError):
    """A structured generation flow could not produce a valid result"""

    def __init__(self, message: str, flow: Optional[str] = None):
        super().__init__(message)
        self.code = "GENERATION_FAILED"
        if flow:
            self.details["flow"] = flow


class AIResponseParseError(GenerationFailure):
    """Failed to parse AI response"""

    def __init__(self, message: str = "Failed to parse AI response", flow: Optional[str] = None):
        super().__init__(message, flow=flow)
        self.code = "AI_PARSE_ERROR"


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: CampusHubError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "success": False,
        "error": error.to_dict()
    }
