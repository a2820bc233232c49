"""Authentication routes.

This module handles HTTP endpoints for signup, login and the current
identity. Signing up creates the identity; its profile is created by the
on-identity-created trigger in the same transaction.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from campus_scheduler.api.errors import http_error
from campus_scheduler.core.dependencies import (
    AuthenticatedContextDep,
    ContextDep,
    IdentityManagerDep,
    ProfileManagerDep,
)
from campus_scheduler.core.exceptions import (
    AuthenticationError,
    ConstraintViolationError,
    RecordNotFoundError,
)
from campus_scheduler.core.security import create_access_token
from campus_scheduler.schemas.identity import (
    AuthResponse,
    CurrentIdentityResponse,
    IdentityInfo,
    LoginRequest,
    SignupRequest,
)
from campus_scheduler.schemas.profile import ProfileInfo
from campus_scheduler.utils.identity_manager import IdentityAlreadyExistsError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
)
def signup(req: SignupRequest, identity_manager: IdentityManagerDep) -> AuthResponse:
    """Register a new identity and return an access token.

    Args:
        req: Signup request with email, password and optional name/metadata.
        identity_manager: Injected IdentityManager instance.

    Returns:
        AuthResponse with identity information and JWT token.

    Raises:
        HTTPException: 409 if the email is already registered, 400 if the
            database rejects the identity otherwise.
    """
    metadata = dict(req.metadata)
    if req.name is not None:
        metadata["name"] = req.name
    try:
        identity = identity_manager.create_identity(req.email, req.password, metadata)
    except IdentityAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ConstraintViolationError as e:
        raise http_error(e)
    return AuthResponse(
        identity=IdentityInfo.model_validate(identity),
        token=create_access_token(identity.id),
    )


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(req: LoginRequest, identity_manager: IdentityManagerDep) -> AuthResponse:
    """Login with email and password.

    Raises:
        HTTPException: 401 if the credentials are wrong.
    """
    try:
        identity = identity_manager.authenticate(req.email, req.password)
    except AuthenticationError as e:
        raise http_error(e)
    return AuthResponse(
        identity=IdentityInfo.model_validate(identity),
        token=create_access_token(identity.id),
    )


@router.post("/logout", summary="Log out")
def logout(ctx: ContextDep, identity_manager: IdentityManagerDep) -> dict:
    """Logout endpoint.

    Note: Since we're using stateless JWT tokens, logout is handled
    client-side by removing the token. This endpoint notifies auth-state
    subscribers and exists for API consistency.
    """
    identity_manager.sign_out(ctx.identity_id)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/me", response_model=CurrentIdentityResponse, summary="Current identity")
def me(
    ctx: AuthenticatedContextDep,
    identity_manager: IdentityManagerDep,
    profile_manager: ProfileManagerDep,
) -> CurrentIdentityResponse:
    identity = identity_manager.get_identity(ctx.identity_id)
    try:
        profile = ProfileInfo.model_validate(profile_manager.get_own_profile(ctx))
    except RecordNotFoundError:
        logger.warning("Identity %s has no profile", ctx.identity_id)
        profile = None
    return CurrentIdentityResponse(
        identity=IdentityInfo.model_validate(identity), profile=profile
    )
