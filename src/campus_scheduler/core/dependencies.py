"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes:
request-scoped managers and the RequestContext of the caller.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.database import get_db
from campus_scheduler.core.exceptions import AuthenticationError
from campus_scheduler.core.security import decode_access_token
from campus_scheduler.utils import (
    classroom_manager,
    course_manager,
    feedback_manager,
    identity_manager,
    profile_manager,
    timetable_manager,
)

# auto_error=False: requests without a token run as the anonymous context
security = HTTPBearer(auto_error=False)


def get_identity_manager(db: Session = Depends(get_db)) -> identity_manager.IdentityManager:
    """Get IdentityManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        IdentityManager instance.
    """
    return identity_manager.IdentityManager(db)


def get_profile_manager(db: Session = Depends(get_db)) -> profile_manager.ProfileManager:
    """Get ProfileManager instance with request-scoped DB session."""
    return profile_manager.ProfileManager(db)


def get_classroom_manager(db: Session = Depends(get_db)) -> classroom_manager.ClassroomManager:
    """Get ClassroomManager instance with request-scoped DB session."""
    return classroom_manager.ClassroomManager(db)


def get_course_manager(db: Session = Depends(get_db)) -> course_manager.CourseManager:
    """Get CourseManager instance with request-scoped DB session."""
    return course_manager.CourseManager(db)


def get_timetable_manager(db: Session = Depends(get_db)) -> timetable_manager.TimetableManager:
    """Get TimetableManager instance with request-scoped DB session."""
    return timetable_manager.TimetableManager(db)


def get_feedback_manager(db: Session = Depends(get_db)) -> feedback_manager.FeedbackManager:
    """Get FeedbackManager instance with request-scoped DB session."""
    return feedback_manager.FeedbackManager(db)


def get_request_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> RequestContext:
    """Resolve the caller's RequestContext from the bearer token.

    No token means the anonymous context. A token that does not verify, or
    that names an identity which no longer exists, is rejected.

    Raises:
        HTTPException: 401 if a token is present but invalid.
    """
    if credentials is None:
        return RequestContext.anonymous()
    try:
        identity_id = decode_access_token(credentials.credentials)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        )
    if identity_manager.IdentityManager(db).get_identity(identity_id) is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Identity not found",
        )
    return RequestContext.for_identity(identity_id)


def require_identity(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
    """Like get_request_context, but anonymous callers get a 401."""
    if not ctx.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return ctx


# Type aliases for dependency injection
IdentityManagerDep = Annotated[
    identity_manager.IdentityManager, Depends(get_identity_manager)
]
ProfileManagerDep = Annotated[
    profile_manager.ProfileManager, Depends(get_profile_manager)
]
ClassroomManagerDep = Annotated[
    classroom_manager.ClassroomManager, Depends(get_classroom_manager)
]
CourseManagerDep = Annotated[
    course_manager.CourseManager, Depends(get_course_manager)
]
TimetableManagerDep = Annotated[
    timetable_manager.TimetableManager, Depends(get_timetable_manager)
]
FeedbackManagerDep = Annotated[
    feedback_manager.FeedbackManager, Depends(get_feedback_manager)
]
ContextDep = Annotated[RequestContext, Depends(get_request_context)]
AuthenticatedContextDep = Annotated[RequestContext, Depends(require_identity)]
