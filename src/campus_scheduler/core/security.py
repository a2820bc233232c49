"""JWT access tokens. The ``sub`` claim carries the identity id."""

from datetime import datetime, timedelta
from typing import Optional

import pytz
from jose import JWTError, jwt

from campus_scheduler.config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM, JWT_SECRET_KEY
from campus_scheduler.core.exceptions import AuthenticationError


def create_access_token(identity_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token.

    Args:
        identity_id: Identity the token is issued to.
        expires_delta: Optional expiration time delta.

    Returns:
        Encoded JWT token string.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(pytz.utc) + expires_delta
    return jwt.encode({"sub": identity_id, "exp": expire}, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """Verify a token and return its identity id.

    Raises:
        AuthenticationError: If the token is malformed, expired or has no subject.
    """
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as exc:
        raise AuthenticationError("Invalid authentication credentials") from exc
    identity_id = payload.get("sub")
    if identity_id is None:
        raise AuthenticationError("Invalid authentication credentials")
    return identity_id
