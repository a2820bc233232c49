"""Custom exception classes for the campus scheduler.

This module defines application-specific exceptions following Google Python
Style Guide. The storage engine's own error taxonomy (constraint violations,
policy denials, missing rows) is mapped onto these classes by the managers.
"""

from typing import Optional


class SchedulerError(Exception):
    """Base exception for all campus scheduler errors."""

    pass


class RecordNotFoundError(SchedulerError):
    """Raised when a requested row does not exist or is not visible."""

    def __init__(self, table: str, record_id: Optional[str] = None):
        """Initialize the exception.

        Args:
            table: Name of the table that was queried.
            record_id: The ID (or lookup key) that was not found.
        """
        self.table = table
        self.record_id = record_id
        if record_id is None:
            super().__init__(f"No matching row in '{table}'")
        else:
            super().__init__(f"Row '{record_id}' not found in '{table}'")


class PolicyViolationError(SchedulerError):
    """Raised when no policy permits the requested operation."""

    def __init__(self, table: str, command: str):
        """Initialize the exception.

        Args:
            table: Name of the guarded table.
            command: The rejected command (INSERT, UPDATE or DELETE).
        """
        self.table = table
        self.command = command
        super().__init__(
            f"{command} on '{table}' violates row-level security policy"
        )


class ConstraintViolationError(SchedulerError):
    """Raised when a write breaks a UNIQUE, CHECK, NOT NULL or FOREIGN KEY rule."""

    UNIQUE = "unique"
    CHECK = "check"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    INTEGRITY = "integrity"

    def __init__(self, kind: str, detail: str):
        """Initialize the exception.

        Args:
            kind: One of the class-level kind constants.
            detail: Driver message describing the violated constraint.
        """
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind} constraint violated: {detail}")

    @classmethod
    def from_integrity_error(cls, exc: Exception) -> "ConstraintViolationError":
        """Classify a driver IntegrityError by its message.

        Both SQLite ("UNIQUE constraint failed") and PostgreSQL
        ("violates unique constraint") phrasings are recognised.
        """
        detail = str(getattr(exc, "orig", None) or exc)
        lowered = detail.lower()
        if "unique" in lowered or "duplicate key" in lowered:
            kind = cls.UNIQUE
        elif "foreign key" in lowered:
            kind = cls.FOREIGN_KEY
        elif "not null" in lowered or "null value" in lowered:
            kind = cls.NOT_NULL
        elif "check" in lowered:
            kind = cls.CHECK
        else:
            kind = cls.INTEGRITY
        return cls(kind, detail)


class AuthenticationError(SchedulerError):
    """Raised when credentials or tokens cannot be verified."""

    pass


class ConfigurationError(SchedulerError):
    """Raised when there is a configuration error."""

    pass
