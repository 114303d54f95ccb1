"""Paper ORM — persists a published paper.

Invariants:
    - id is an autoincrement integer primary key, immutable once assigned
    - title, published_in, year are non-nullable (validated upstream: year > 1900)
    - updated_at is refreshed explicitly by every write path
    - authors is a read path ordered by Author.id ascending

Design Decisions:
    - authors is viewonly: links are written through the paper_authors table only,
      so the ORM never holds a second, mutable copy of the relation
    - lazy="raise": every read path must ask for authors explicitly (selectinload)
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Paper(Base):
    """Paper entity — linked to one or more authors."""
    __tablename__ = "papers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    published_in: Mapped[str] = mapped_column(String(500), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )

    # Relationships
    authors: Mapped[list["Author"]] = relationship(
        "Author", secondary="paper_authors",
        order_by="Author.id", viewonly=True, lazy="raise",
    )
