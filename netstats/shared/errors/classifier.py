"""
Failure classification.

Maps any exception raised while serving a request onto the fixed
ErrorKind taxonomy, and each kind onto its HTTP status code.
"""

from fastapi.exceptions import RequestValidationError
from pymongo.errors import PyMongoError

from netstats.domain.hosts.errors import ApiError, DatabaseError, ErrorKind

STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INVALID_PAYLOAD: 400,
    ErrorKind.MISSING_RECORD: 404,
    ErrorKind.MISSING_SIGNATURE: 401,
    ErrorKind.INVALID_SIGNATURE: 401,
    ErrorKind.DATABASE: 500,
}


def status_for(kind: ErrorKind) -> int:
    """Return the HTTP status code of an error kind."""
    return STATUS_CODES[kind]


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Request validation failed"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}"


def classify(exc: Exception) -> ApiError:
    """Turn an exception into a categorized ApiError.

    - ApiError passes through unchanged.
    - Request validation errors become InvalidPayload when the body is
      at fault and BadRequest for path, query or header problems.
    - Driver errors become Database.
    - Anything else is treated as a generic server-side failure.
    """
    if isinstance(exc, ApiError):
        return exc
    if isinstance(exc, RequestValidationError):
        body_error = any(
            err.get("loc", ("",))[0] == "body" for err in exc.errors()
        )
        kind = ErrorKind.INVALID_PAYLOAD if body_error else ErrorKind.BAD_REQUEST
        return ApiError.message(kind, _describe_validation(exc))
    if isinstance(exc, PyMongoError):
        return DatabaseError(str(exc))
    return ApiError.info(ErrorKind.DATABASE, f"{type(exc).__name__}: {exc}")
