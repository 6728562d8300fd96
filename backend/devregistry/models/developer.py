"""Developer ORM — explicit schema for the `developers` table.

Invariants:
    - id is an integer primary key assigned by the store on first insert
    - first_name, last_name, email, specialty are non-nullable strings
    - status is stored as the enum name ("ACTIVE"/"DELETED"), never NULL
    - email is indexed but NOT unique: updates may introduce duplicates

Design Decisions:
    - native_enum=False: VARCHAR column, portable between PostgreSQL and SQLite
    - No unique constraint on email: create-time check lives in DeveloperService,
      a constraint would reject updates that duplicate an email
"""

from sqlalchemy import Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devregistry.core.domain_types import DeveloperStatus
from devregistry.db.base import Base

# Column list checked at start-up (infrastructure/database.py)
DEVELOPER_COLUMNS = (
    "id", "first_name", "last_name", "email", "specialty", "status",
)


class Developer(Base):
    """A single developer record."""
    __tablename__ = "developers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    specialty: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    status: Mapped[DeveloperStatus] = mapped_column(
        SAEnum(
            DeveloperStatus, name="developer_status",
            native_enum=False, length=16,
        ),
        nullable=False,
        default=DeveloperStatus.ACTIVE,
        server_default=DeveloperStatus.ACTIVE.value,
    )

    def __repr__(self) -> str:
        return f"<Developer id={self.id} email={self.email!r} status={self.status}>"
