"""
Error taxonomy for the hosts bounded context.

Every failure surfaced by the API is an ApiError tagged with one
ErrorKind. The payload is either a free-form diagnostic (info) or a
fixed message chosen by the caller (message); only the latter is safe
to show to clients verbatim.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Fixed set of externally observable error categories."""

    BAD_REQUEST = "BadRequest"
    INVALID_PAYLOAD = "InvalidPayload"
    MISSING_RECORD = "MissingRecord"
    MISSING_SIGNATURE = "MissingSignature"
    INVALID_SIGNATURE = "InvalidSignature"
    DATABASE = "Database"


class ApiError(Exception):
    """Base error for all hosts API failures.

    Attributes:
        kind: The error category.
        detail: Diagnostic or fixed message text, if any.
        exposable: Whether detail may be returned to the client.
    """

    def __init__(
        self,
        kind: ErrorKind,
        detail: Optional[str] = None,
        exposable: bool = False,
    ) -> None:
        self.kind = kind
        self.detail = detail
        self.exposable = exposable
        super().__init__(detail or kind.value)

    @classmethod
    def info(cls, kind: ErrorKind, detail: str) -> "ApiError":
        """Build an error carrying an internal diagnostic string."""
        return cls(kind, detail, exposable=False)

    @classmethod
    def message(cls, kind: ErrorKind, text: str) -> "ApiError":
        """Build an error carrying a fixed message safe for clients."""
        return cls(kind, text, exposable=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, detail={self.detail!r})"


class DatabaseError(ApiError):
    """Raised when the document store cannot be reached or a query fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(ErrorKind.DATABASE, reason, exposable=False)
        self.reason = reason
