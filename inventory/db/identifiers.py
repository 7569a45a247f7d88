"""Primary-key assignment policies for inventory entities."""
from __future__ import annotations

from enum import Enum

from sqlalchemy import func
from sqlalchemy.orm import Session


class IdentifierPolicy(str, Enum):
    # Key comes from the create payload and is stored as-is
    CALLER_SUPPLIED = "caller_supplied"
    # Key is one greater than the largest existing key (1 for an empty table)
    MAX_PLUS_ONE = "max_plus_one"


def next_sequential_id(db: Session, column) -> int:
    """Return ``max(column) + 1`` or 1 when the table is empty.

    Not safe under concurrent writers: two sessions can read the same maximum
    and the slower insert then fails on the primary key.
    """
    current = db.query(func.max(column)).scalar()
    return (current or 0) + 1


def resolve_identifier(policy: IdentifierPolicy, db: Session, column, supplied: int | None) -> int | None:
    if policy is IdentifierPolicy.MAX_PLUS_ONE:
        return next_sequential_id(db, column)
    return supplied
