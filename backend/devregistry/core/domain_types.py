"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DeveloperId wraps the store-assigned integer key — never a bare int in domain logic
    - DeveloperStatus has exactly two states; the only transition is ACTIVE -> DELETED
    - Enum values equal their names: the wire format and the DB column store "ACTIVE"/"DELETED"
    - DeveloperId values outside the signed 32-bit range never reach the store

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DeveloperId = NewType("DeveloperId", int)


# ─── Enums ───────────────────────────────────────────────────────

class DeveloperStatus(str, Enum):
    """Developer lifecycle states — maps to DB `status` column."""
    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


# ─── Bounds ──────────────────────────────────────────────────────

# developers.id is a 32-bit INTEGER column on PostgreSQL
MIN_DEVELOPER_ID = -(2**31)
MAX_DEVELOPER_ID = 2**31 - 1


def is_storable_developer_id(value: int) -> bool:
    """True when value fits the id column; larger ids can never exist."""
    return MIN_DEVELOPER_ID <= value <= MAX_DEVELOPER_ID
