"""SQLAlchemy Declarative Base - shared base class and column types for all ORM models.

Invariants:
    - All models inherit from Base
    - Record identifiers are 64-bit integers issued by the database, strictly increasing
    - creation_time is integer milliseconds since the Unix epoch

Design Decisions:
    - RecordId falls back to INTEGER on SQLite: only INTEGER PRIMARY KEY auto-increments there
"""

import time

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase


RecordId = BigInteger().with_variant(Integer, "sqlite")


def now_millis() -> int:
    return int(time.time() * 1000)


class Base(DeclarativeBase):
    """Base class for all minigame ORM models."""
    pass
