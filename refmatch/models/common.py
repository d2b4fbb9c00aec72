"""Helpers shared by the ORM models."""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Python-side timestamp: microsecond resolution keeps ordering stable on SQLite
    return datetime.now(timezone.utc)
