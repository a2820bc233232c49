"""Policy-aware base class for the table managers.

Every read goes through the SELECT policies of the table and every write is
authorized before it is committed. Constraint failures reported by the
database are rolled back and surfaced as ConstraintViolationError.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.exceptions import (
    ConstraintViolationError,
    PolicyViolationError,
    RecordNotFoundError,
)
from campus_scheduler.core.policies import POLICIES, Command, PolicyRegistry
# Registers the updated_at handler on every timestamped model
from campus_scheduler.core import triggers  # noqa: F401

logger = logging.getLogger(__name__)


class RecordManager:
    """Manages reads and writes of one table on behalf of a request context."""

    model = None
    # Columns a caller may change through update(); None means any mapped column
    updatable_fields: Optional[tuple] = None

    def __init__(self, db: Session, policies: PolicyRegistry = POLICIES):
        """Initialize the manager.

        Args:
            db: SQLAlchemy Session.
            policies: Policy registry consulted on every operation.
        """
        self.db = db
        self.policies = policies

    @property
    def table(self) -> str:
        return self.model.__tablename__

    def visible(self, ctx: RequestContext) -> Query:
        """Query over the rows ``ctx`` is allowed to see."""
        return self.db.query(self.model).filter(
            self.policies.visible_clause(self.model, ctx)
        )

    def get(self, ctx: RequestContext, record_id: str):
        """Fetch one visible row by primary key.

        Raises:
            RecordNotFoundError: If the row does not exist or is hidden by policy.
        """
        row = self.visible(ctx).filter(self.model.id == record_id).first()
        if row is None:
            raise RecordNotFoundError(self.table, record_id)
        return row

    def create(self, ctx: RequestContext, **values):
        """Insert a row after checking the INSERT policies against it.

        Raises:
            PolicyViolationError: If no INSERT policy holds for the new row.
            ConstraintViolationError: If the database rejects the row.
        """
        row = self.model(**values)
        self.policies.authorize(self.db, ctx, Command.INSERT, row)
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        logger.info("Inserted %s row %s", self.table, row.id)
        return row

    def update(self, ctx: RequestContext, record_id: str, **changes):
        """Apply ``changes`` to a visible row.

        The UPDATE policies must hold for the row before the change and for
        the row as it will be written.

        Raises:
            RecordNotFoundError: If the row is missing or not visible.
            PolicyViolationError: If the update is not permitted.
            ConstraintViolationError: If the database rejects the new values.
        """
        row = self.get(ctx, record_id)
        self.policies.authorize(self.db, ctx, Command.UPDATE, row)
        self._apply(row, changes)
        try:
            self.policies.authorize(self.db, ctx, Command.UPDATE, row)
        except PolicyViolationError:
            self.db.rollback()
            raise
        self._commit()
        self.db.refresh(row)
        logger.info("Updated %s row %s", self.table, row.id)
        return row

    def delete(self, ctx: RequestContext, record_id: str) -> None:
        """Delete a visible row; dependent rows go with it via ON DELETE CASCADE.

        Raises:
            RecordNotFoundError: If the row is missing or not visible.
            PolicyViolationError: If no DELETE policy holds.
        """
        row = self.get(ctx, record_id)
        self.policies.authorize(self.db, ctx, Command.DELETE, row)
        self.db.delete(row)
        self._commit()
        logger.info("Deleted %s row %s", self.table, record_id)

    def _apply(self, row, changes: Dict[str, Any]) -> None:
        if self.updatable_fields is not None:
            rejected = sorted(set(changes) - set(self.updatable_fields))
            if rejected:
                raise ValueError(
                    f"Fields {rejected} of {self.table} cannot be updated"
                )
        for field, value in changes.items():
            setattr(row, field, value)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            error = ConstraintViolationError.from_integrity_error(exc)
            logger.warning("Write to %s rejected: %s", self.table, error.detail)
            raise error from exc
