"""
Shared error types for the Trade360 SDK.

Every failure surfaced by a client derives from ``Trade360Exception`` and
carries a stable ``code`` tag, so callers can branch on ``exc.code`` as
well as on the exception class.
"""

from typing import Dict, Any, List, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error description."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class Trade360Exception(Exception):
    """Base exception for the Trade360 SDK."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


# Configuration errors: raised at first use of a misconfigured client.

class ConfigurationError(Trade360Exception):
    """Caller misconfiguration. Fatal for the affected client."""

    def __init__(self, code: str = "CONFIGURATION_ERROR", message: str = "Invalid client configuration",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(code, message, details)


class InvalidBaseUrlError(ConfigurationError):
    """Base URL missing or not an absolute http(s) URL."""

    def __init__(self, message: str = "Base URL is missing or invalid", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_BASE_URL", message, details)


class MissingCredentialsError(ConfigurationError):
    """Package credentials required by the client role are absent."""

    def __init__(self, message: str = "Package credentials cannot be null", details: Optional[Dict[str, Any]] = None):
        super().__init__("MISSING_CREDENTIALS", message, details)


class UnknownClientError(ConfigurationError):
    """No client registered under the requested name."""

    def __init__(self, name: str):
        super().__init__("UNKNOWN_CLIENT", f"No client registered as '{name}'", {"name": name})


# Protocol violations: the provider broke the envelope contract.

class ProtocolViolation(Trade360Exception):
    """Provider/wire contract broken. Never retried."""


class HeaderMissingError(ProtocolViolation):
    """Response envelope has no header."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("HEADER_MISSING", "header missing", details)


class BodyMissingError(ProtocolViolation):
    """Response envelope has no body."""

    def __init__(self, errors: Optional[List[str]] = None, details: Optional[Dict[str, Any]] = None):
        self.errors = errors or []
        details = dict(details or {})
        if self.errors:
            details["errors"] = self.errors
        super().__init__("BODY_MISSING", "body missing", details)


class MalformedPayloadError(ProtocolViolation):
    """Response bytes are not a decodable envelope."""

    def __init__(self, message: str = "Malformed payload", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_PAYLOAD", message, details)


# Transport errors

class TransportError(Trade360Exception):
    """Transport-level failure that retrying will not fix."""

    def __init__(self, message: str = "Transport error", details: Optional[Dict[str, Any]] = None,
                 code: str = "TRANSPORT_ERROR"):
        super().__init__(code, message, details)


class TransientTransportError(TransportError):
    """Timeout, connection failure or transient HTTP status. Retried."""

    def __init__(self, message: str = "Transient transport error", status_code: Optional[int] = None,
                 retry_after: Optional[float] = None, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        self.retry_after = retry_after
        self.attempts = 1
        details = dict(details or {})
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details, code="TRANSIENT_TRANSPORT_ERROR")


class HttpStatusError(Trade360Exception):
    """Non-success HTTP status whose payload is not an envelope."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(
            "HTTP_STATUS_ERROR",
            f"HTTP {status_code}",
            {"status_code": status_code, "body": body[:500]}
        )


class CircuitOpenError(Trade360Exception):
    """Call rejected because the named client's circuit breaker is open."""

    def __init__(self, name: str, retry_in: float = 0.0):
        self.retry_in = retry_in
        super().__init__(
            "CIRCUIT_OPEN",
            f"Circuit breaker '{name}' is OPEN - blocking call",
            {"name": name, "retry_in": round(retry_in, 3)}
        )


class RequestCancelledError(Trade360Exception):
    """Call cancelled by the caller or its deadline expired."""

    def __init__(self, message: str = "Request cancelled", details: Optional[Dict[str, Any]] = None):
        super().__init__("CANCELLED", message, details)


class RequestValidationError(Trade360Exception):
    """Request rejected client-side before dispatch."""

    def __init__(self, message: str = "Request validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("REQUEST_VALIDATION_ERROR", message, details)
