"""Write-path triggers.

Two handlers run inside the flush of the write that fires them, so they
commit or roll back together with it:

* on-identity-created: a new identity gets its profile row.
* on-before-persist: updated rows get a fresh ``updated_at``.
"""

import logging

from sqlalchemy import event

from campus_scheduler.models import TIMESTAMPED_MODELS, IdentityModel, ProfileModel
from campus_scheduler.models.base import new_uuid, utcnow
from campus_scheduler.models.enums import UserRole

logger = logging.getLogger(__name__)


@event.listens_for(IdentityModel, "after_insert")
def handle_new_identity(mapper, connection, target: IdentityModel) -> None:
    """Insert the profile for a freshly created identity.

    Writes straight through the flush connection, so no policy applies:
    the new identity owns no profile yet.
    """
    metadata = target.user_metadata or {}
    name = metadata.get("name")
    if name is None:
        name = target.email
    now = utcnow()
    connection.execute(
        ProfileModel.__table__.insert().values(
            id=new_uuid(),
            user_id=target.id,
            name=name,
            email=target.email,
            role=UserRole.STUDENT.value,
            created_at=now,
            updated_at=now,
        )
    )
    logger.info("Created profile for identity %s", target.id)


def touch_updated_at(mapper, connection, target) -> None:
    """Stamp the modification time of a row that is about to be updated."""
    target.updated_at = utcnow()


for _model in TIMESTAMPED_MODELS:
    event.listen(_model, "before_update", touch_updated_at)
