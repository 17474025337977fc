# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Zuora SOAP)
# Description: Exception types for the Zuora SOAP client.
# ============================================================================
"""
Zuora SOAP Exceptions.

Single Responsibility: Define exception types for Zuora SOAP operations.
"""


class ZuoraError(Exception):
    """
    Base exception for Zuora SOAP errors.

    Attributes:
        error_code: Machine-readable error code
        error_message: Human-readable error description
    """

    def __init__(self, error_code: str, error_message: str):
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(f"{error_code}: {error_message}")


class SoapConnectionError(ZuoraError):
    """Unable to reach Zuora, or the request failed before a response arrived."""

    def __init__(self, message: str):
        super().__init__("CONNECTION_ERROR", message)


class SoapErrorResponse(ZuoraError):
    """Login answered with a non-success status (invalid credentials)."""

    def __init__(self, message: str = "Unable to connect with provided credentials", status_code: int | None = None):
        self.status_code = status_code
        super().__init__("AUTH_ERROR", message)


class SoapPreconditionError(ZuoraError):
    """Request cannot be built: no session token, or a body that is not valid XML."""

    def __init__(self, message: str):
        super().__init__("PRECONDITION_FAILED", message)


class UnknownObjectTypeError(ZuoraError, KeyError):
    """Object type is not registered in the object registry."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__("UNKNOWN_OBJECT", f"Object type '{type_name}' not registered in registry")

    def __str__(self) -> str:
        return f"{self.error_code}: {self.error_message}"
