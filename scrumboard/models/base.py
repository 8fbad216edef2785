"""Shared column helpers for the ORM models"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    # SQLite stores naive datetimes; keep UTC wall time with microseconds
    return datetime.now(timezone.utc).replace(tzinfo=None)
