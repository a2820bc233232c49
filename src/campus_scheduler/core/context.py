"""Per-request acting identity.

Every authorization check receives a RequestContext explicitly instead of
reading a global "current user".
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    """The identity on whose behalf a request runs."""

    identity_id: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "RequestContext":
        return cls(identity_id=None)

    @classmethod
    def for_identity(cls, identity_id: str) -> "RequestContext":
        return cls(identity_id=identity_id)

    @property
    def is_authenticated(self) -> bool:
        return self.identity_id is not None
