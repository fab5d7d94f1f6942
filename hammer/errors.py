"""Error codes and exceptions shared by the gate, the stores and the routes."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Application error codes."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"


@dataclass(eq=False)
class HammerError(Exception):
    """Base error with code, user-safe message and HTTP status."""

    code: ErrorCode
    message: str
    status: int = 500

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AuthError(HammerError):
    """Raised by token verification and gate checks."""


class Unauthenticated(AuthError):
    """Raised when the Authorization header is missing or malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAUTHENTICATED,
            message="Unauthorized access",
            status=401,
        )


class Forbidden(AuthError):
    """Raised for bad tokens, non-admin callers and ownership mismatches."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="Forbidden access",
            status=403,
        )


class InvalidToken(AuthError):
    """Raised when a token signature or payload does not verify."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(code=ErrorCode.INVALID_TOKEN, message=reason, status=403)


class TokenExpired(AuthError):
    """Raised when a token is past its expiry."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.TOKEN_EXPIRED, message="Token expired", status=403)


class NotFound(HammerError):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message, status=404)


class UpstreamFailure(HammerError):
    """Raised when the database or the payment provider fails."""

    def __init__(self, message: str = "Upstream service failure") -> None:
        super().__init__(code=ErrorCode.UPSTREAM_FAILURE, message=message, status=502)
