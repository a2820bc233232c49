"""Identity management utilities.

This module provides identity storage, password hashing and credential
checks. Inserting an identity fires the on-identity-created trigger, so the
matching profile is written in the same transaction.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

import bcrypt
import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_scheduler import config
from campus_scheduler.core.exceptions import (
    AuthenticationError,
    ConstraintViolationError,
    RecordNotFoundError,
)
# Registers the on-identity-created handler
from campus_scheduler.core import triggers  # noqa: F401
from campus_scheduler.models import IdentityModel
from campus_scheduler.utils.auth_events import (
    SIGNED_IN,
    SIGNED_OUT,
    SIGNED_UP,
    AuthStateNotifier,
    auth_notifier,
)

logger = logging.getLogger(__name__)


class IdentityAlreadyExistsError(Exception):
    """Exception raised when trying to sign up with an email that is taken."""

    pass


def normalize_email(email: str) -> str:
    return email.strip().lower()


class IdentityManager:
    """Manages identity persistence and authentication using SQLAlchemy."""

    def __init__(self, db: Session, notifier: AuthStateNotifier = auth_notifier):
        """Initialize IdentityManager.

        Args:
            db: SQLAlchemy Session.
            notifier: Receives SIGNED_UP / SIGNED_IN / SIGNED_OUT events.
        """
        self.db = db
        self.notifier = notifier

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password.

        Returns:
            Hashed password (bcrypt hash string).
        """
        # bcrypt only looks at the first 72 bytes
        password_bytes = password.encode("utf-8")[:72]
        salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
        return bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a bcrypt hash.

        Args:
            plain_password: Plain text password to verify.
            hashed_password: Bcrypt hash string to verify against.

        Returns:
            True if password matches, False otherwise.
        """
        try:
            return bcrypt.checkpw(
                plain_password.encode("utf-8")[:72], hashed_password.encode("utf-8")
            )
        except ValueError as e:
            logger.error("Password verification error: %s", e)
            return False

    def create_identity(
        self,
        email: str,
        password: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> IdentityModel:
        """Create a new identity (and, through the trigger, its profile).

        Args:
            email: Login email, stored lower-cased.
            password: Plain text password.
            metadata: Signup metadata; a "name" key becomes the profile name.

        Returns:
            The created IdentityModel.

        Raises:
            IdentityAlreadyExistsError: If the email is already registered.
            ConstraintViolationError: If the database rejects the row otherwise.
        """
        email = normalize_email(email)
        if self.get_identity_by_email(email) is not None:
            raise IdentityAlreadyExistsError(f"Identity '{email}' already exists")

        identity = IdentityModel(
            email=email,
            password_hash=self.hash_password(password),
            user_metadata=dict(metadata or {}),
        )
        # Two concurrent signups can both pass the check above; the unique
        # index on email catches the loser.
        try:
            self.db.add(identity)
            self.db.commit()
            self.db.refresh(identity)
        except IntegrityError as e:
            self.db.rollback()
            error = ConstraintViolationError.from_integrity_error(e)
            if error.kind == ConstraintViolationError.UNIQUE:
                raise IdentityAlreadyExistsError(f"Identity '{email}' already exists") from e
            logger.warning("Signup for %s rejected: %s", email, error.detail)
            raise error from e

        logger.info("Created identity: %s", identity.id)
        self.notifier.emit(SIGNED_UP, identity.id)
        return identity

    def get_identity(self, identity_id: str) -> Optional[IdentityModel]:
        return self.db.query(IdentityModel).filter(IdentityModel.id == identity_id).first()

    def get_identity_by_email(self, email: str) -> Optional[IdentityModel]:
        return (
            self.db.query(IdentityModel)
            .filter(IdentityModel.email == normalize_email(email))
            .first()
        )

    def authenticate(self, email: str, password: str) -> IdentityModel:
        """Check credentials and record the sign-in.

        Raises:
            AuthenticationError: If the email is unknown or the password wrong.
        """
        identity = self.get_identity_by_email(email)
        if identity is None or not self.verify_password(password, identity.password_hash):
            raise AuthenticationError("Invalid email or password")

        identity.last_sign_in_at = datetime.now(pytz.utc)
        self.db.commit()
        self.db.refresh(identity)
        self.notifier.emit(SIGNED_IN, identity.id)
        return identity

    def sign_out(self, identity_id: Optional[str]) -> None:
        """Tokens are stateless; signing out only notifies subscribers."""
        self.notifier.emit(SIGNED_OUT, identity_id)

    def delete_identity(self, identity_id: str) -> None:
        """Delete an identity.

        Runs with elevated privilege (no policy check). The profile, the
        identity's feedback and the profile's timetable entries are removed
        by ON DELETE CASCADE.

        Raises:
            RecordNotFoundError: If the identity does not exist.
        """
        identity = self.get_identity(identity_id)
        if identity is None:
            raise RecordNotFoundError(IdentityModel.__tablename__, identity_id)
        self.db.delete(identity)
        self.db.commit()
        logger.info("Deleted identity: %s", identity_id)
