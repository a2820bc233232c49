"""Row-level authorization policies.

Each table carries a set of named policies. A policy applies to one command
(or to ALL of them) and holds a predicate over the acting identity and the
row. An operation is permitted when at least one applicable policy holds;
with no applicable policy the operation is denied.

Predicates work two ways:

* ``clause()`` renders them as SQL so SELECT filters rows in the query.
* ``holds()`` evaluates them for one concrete row before a write.

``HasProfileRole`` is an EXISTS subquery against ``profiles`` evaluated on
every check, so a role change is visible to the very next request.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from sqlalchemy import false, or_, select, true
from sqlalchemy.orm import Session

from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.exceptions import PolicyViolationError
from campus_scheduler.models import (
    ClassroomModel,
    CourseModel,
    FeedbackModel,
    ProfileModel,
    TimetableModel,
)
from campus_scheduler.models.enums import UserRole

logger = logging.getLogger(__name__)


class Command(str, Enum):
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ALL = "ALL"


class Predicate:
    """Boolean rule over the acting identity and a row."""

    def clause(self, model, ctx: RequestContext):
        raise NotImplementedError

    def holds(self, db: Session, ctx: RequestContext, row) -> bool:
        raise NotImplementedError


class Anyone(Predicate):
    def clause(self, model, ctx):
        return true()

    def holds(self, db, ctx, row):
        return True

    def __repr__(self):
        return "Anyone()"


class IsOwner(Predicate):
    """The row's owner column equals the acting identity."""

    def __init__(self, column: str):
        self.column = column

    def clause(self, model, ctx):
        if not ctx.is_authenticated:
            return false()
        return getattr(model, self.column) == ctx.identity_id

    def holds(self, db, ctx, row):
        return ctx.is_authenticated and getattr(row, self.column) == ctx.identity_id

    def __repr__(self):
        return f"IsOwner({self.column!r})"


class HasProfileRole(Predicate):
    """The acting identity owns a profile whose role is one of ``roles``."""

    def __init__(self, *roles: UserRole):
        self.roles = tuple(role.value for role in roles)

    def clause(self, model, ctx):
        if not ctx.is_authenticated:
            return false()
        return (
            select(ProfileModel.id)
            .where(
                ProfileModel.user_id == ctx.identity_id,
                ProfileModel.role.in_(self.roles),
            )
            .correlate(None)
            .exists()
        )

    def holds(self, db, ctx, row):
        if not ctx.is_authenticated:
            return False
        return bool(db.query(self.clause(None, ctx)).scalar())

    def __repr__(self):
        return f"HasProfileRole{self.roles!r}"


@dataclass(frozen=True)
class Policy:
    name: str
    table: str
    command: Command
    predicate: Predicate

    def applies_to(self, command: Command) -> bool:
        return self.command == Command.ALL or self.command == command


class PolicyRegistry:
    """Holds the policies of every guarded table."""

    def __init__(self):
        self._policies: Dict[str, List[Policy]] = {}

    def register(self, policy: Policy) -> Policy:
        self._policies.setdefault(policy.table, []).append(policy)
        return policy

    def policies_for(self, table: str, command: Command) -> List[Policy]:
        return [p for p in self._policies.get(table, []) if p.applies_to(command)]

    def tables(self) -> Tuple[str, ...]:
        return tuple(self._policies)

    def visible_clause(self, model, ctx: RequestContext):
        """SQL filter that keeps only the rows ``ctx`` may SELECT."""
        policies = self.policies_for(model.__tablename__, Command.SELECT)
        if not policies:
            return false()
        return or_(*[p.predicate.clause(model, ctx) for p in policies])

    def is_permitted(
        self, db: Session, ctx: RequestContext, command: Command, row
    ) -> bool:
        table = row.__tablename__
        for policy in self.policies_for(table, command):
            if policy.predicate.holds(db, ctx, row):
                logger.debug("%s on %s permitted by %r", command.value, table, policy.name)
                return True
        return False

    def authorize(self, db: Session, ctx: RequestContext, command: Command, row) -> None:
        """Raise PolicyViolationError unless some policy permits ``command`` on ``row``.

        Args:
            db: Session used to evaluate subquery predicates.
            ctx: The acting identity.
            command: INSERT, UPDATE or DELETE.
            row: ORM instance in the state to be checked.

        Raises:
            PolicyViolationError: If no applicable policy holds.
        """
        if not self.is_permitted(db, ctx, command, row):
            logger.warning(
                "Denied %s on %s for identity %s",
                command.value,
                row.__tablename__,
                ctx.identity_id or "<anonymous>",
            )
            raise PolicyViolationError(row.__tablename__, command.value)


def build_default_policies() -> PolicyRegistry:
    registry = PolicyRegistry()
    admin = HasProfileRole(UserRole.ADMIN)
    staff = HasProfileRole(UserRole.ADMIN, UserRole.FACULTY)
    owner = IsOwner("user_id")

    profiles = ProfileModel.__tablename__
    registry.register(Policy("Users can view all profiles", profiles, Command.SELECT, Anyone()))
    registry.register(Policy("Users can update their own profile", profiles, Command.UPDATE, owner))
    registry.register(Policy("Users can insert their own profile", profiles, Command.INSERT, owner))

    classrooms = ClassroomModel.__tablename__
    registry.register(Policy("Anyone can view classrooms", classrooms, Command.SELECT, Anyone()))
    registry.register(Policy("Admins can manage classrooms", classrooms, Command.ALL, admin))

    courses = CourseModel.__tablename__
    registry.register(Policy("Anyone can view courses", courses, Command.SELECT, Anyone()))
    registry.register(Policy("Admins can manage courses", courses, Command.ALL, admin))

    timetable = TimetableModel.__tablename__
    registry.register(Policy("Anyone can view timetable", timetable, Command.SELECT, Anyone()))
    registry.register(
        Policy("Admins and faculty can manage timetable", timetable, Command.ALL, staff)
    )

    feedback = FeedbackModel.__tablename__
    registry.register(Policy("Users can view their own feedback", feedback, Command.SELECT, owner))
    registry.register(Policy("Users can create feedback", feedback, Command.INSERT, owner))
    registry.register(Policy("Admins can view all feedback", feedback, Command.SELECT, admin))
    registry.register(Policy("Users can update their own feedback", feedback, Command.UPDATE, owner))
    registry.register(Policy("Admins can review feedback", feedback, Command.UPDATE, admin))
    return registry


POLICIES = build_default_policies()
