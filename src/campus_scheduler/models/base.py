"""Declarative base and column helpers shared by all models."""

import uuid
from datetime import datetime

import pytz
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_uuid() -> str:
    """Random primary key for every table."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(pytz.utc)
