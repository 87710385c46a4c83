"""Error hierarchy for the onboarding client.

Every client operation either returns its value or raises exactly one
of these. Transport errors pass through the services unchanged.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error kinds."""

    JSON_ERROR = "JSON_ERROR"
    """The response lacked the expected payload."""

    INCORRECT_PARAMETERS = "INCORRECT_PARAMETERS"
    """The caller supplied insufficient or invalid arguments."""

    BACKEND_ERROR = "BACKEND_ERROR"
    """The server reported a failure."""

    NETWORK_ERROR = "NETWORK_ERROR"
    """The request could not reach the server."""

    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    """The server rejected the credentials."""

    INVALID_SESSION = "INVALID_SESSION"
    """The user token is no longer valid."""


class KycSdkError(Exception):
    """Base exception for all client errors."""

    error_code: ErrorCode = ErrorCode.BACKEND_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class JsonError(KycSdkError):
    """Raised when a response is missing an expected payload."""

    error_code = ErrorCode.JSON_ERROR

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class IncorrectParametersError(KycSdkError):
    """Raised when an operation is called with unusable arguments."""

    error_code = ErrorCode.INCORRECT_PARAMETERS


class BackendError(KycSdkError):
    """Raised when the server reports a failure.

    `code` is the server's opaque error code; `reason` its optional
    explanation.
    """

    error_code = ErrorCode.BACKEND_ERROR

    def __init__(
        self,
        code: int | str,
        reason: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(reason or f"Backend error {code}")
        self.code = code
        self.reason = reason
        self.status_code = status_code


class TransportError(KycSdkError):
    """Base for transport-level failures."""

    error_code = ErrorCode.NETWORK_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(TransportError):
    """Raised when the request fails before a response arrives."""


class AuthenticationError(TransportError):
    """Raised when the server rejects the request credentials."""

    error_code = ErrorCode.AUTHENTICATION_ERROR


class InvalidSessionError(AuthenticationError):
    """Raised when the user token is rejected on a filtered call."""

    error_code = ErrorCode.INVALID_SESSION
