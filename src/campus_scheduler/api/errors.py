"""Translation of manager errors into HTTP responses."""

from fastapi import HTTPException, status

from campus_scheduler.core.exceptions import (
    AuthenticationError,
    ConstraintViolationError,
    PolicyViolationError,
    RecordNotFoundError,
    SchedulerError,
)


def http_error(exc: Exception) -> HTTPException:
    """Map a SchedulerError (or ValueError) to the matching HTTPException."""
    if isinstance(exc, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, PolicyViolationError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, ConstraintViolationError):
        code = (
            status.HTTP_409_CONFLICT
            if exc.kind == ConstraintViolationError.UNIQUE
            else status.HTTP_400_BAD_REQUEST
        )
        return HTTPException(status_code=code, detail=str(exc))
    if isinstance(exc, AuthenticationError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    if isinstance(exc, (ValueError, SchedulerError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    raise TypeError(f"No HTTP mapping for {type(exc).__name__}")
