"""Profile management module.

Profiles are publicly readable; only the owning identity may insert or
update its profile. Role changes go through ``assign_role``, which is an
elevated operation used by the command line.
"""

import logging
from typing import List, Optional

from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.exceptions import RecordNotFoundError
from campus_scheduler.models import ProfileModel, UserRole
from campus_scheduler.utils.record_manager import RecordManager

logger = logging.getLogger(__name__)


class ProfileManager(RecordManager):
    """Manages profile operations using SQLAlchemy."""

    model = ProfileModel
    updatable_fields = ("name", "department", "phone")

    def list_profiles(
        self,
        ctx: RequestContext,
        role: Optional[UserRole] = None,
        department: Optional[str] = None,
    ) -> List[ProfileModel]:
        """List profiles, optionally narrowed to one role or department.

        Args:
            ctx: The acting identity.
            role: Only return profiles with this role.
            department: Only return profiles in this department.

        Returns:
            Profiles sorted by name.
        """
        query = self.visible(ctx)
        if role is not None:
            query = query.filter(ProfileModel.role == UserRole(role).value)
        if department:
            query = query.filter(ProfileModel.department == department)
        return query.order_by(ProfileModel.name).all()

    def get_profile(self, ctx: RequestContext, profile_id: str) -> ProfileModel:
        return self.get(ctx, profile_id)

    def get_profile_by_owner(self, ctx: RequestContext, user_id: str) -> ProfileModel:
        """Fetch the single profile owned by ``user_id``.

        Raises:
            RecordNotFoundError: If the identity has no visible profile.
        """
        profile = self.visible(ctx).filter(ProfileModel.user_id == user_id).first()
        if profile is None:
            raise RecordNotFoundError(self.table, user_id)
        return profile

    def get_own_profile(self, ctx: RequestContext) -> ProfileModel:
        if not ctx.is_authenticated:
            raise RecordNotFoundError(self.table)
        return self.get_profile_by_owner(ctx, ctx.identity_id)

    def create_profile(
        self,
        ctx: RequestContext,
        user_id: str,
        name: str,
        email: str,
        department: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> ProfileModel:
        """Insert a profile for ``user_id``.

        Signup already creates one, so for an existing identity this fails on
        the one-profile-per-identity constraint.
        """
        return self.create(
            ctx,
            user_id=user_id,
            name=name,
            email=email,
            department=department,
            phone=phone,
        )

    def update_profile(self, ctx: RequestContext, profile_id: str, **changes) -> ProfileModel:
        return self.update(ctx, profile_id, **changes)

    def assign_role(self, profile_id: str, role: UserRole) -> ProfileModel:
        """Change a profile's role without consulting policies.

        Raises:
            RecordNotFoundError: If the profile does not exist.
        """
        profile = self.db.query(ProfileModel).filter(ProfileModel.id == profile_id).first()
        if profile is None:
            raise RecordNotFoundError(self.table, profile_id)
        profile.role = UserRole(role).value
        self._commit()
        self.db.refresh(profile)
        logger.info("Assigned role %s to profile %s", profile.role, profile_id)
        return profile
