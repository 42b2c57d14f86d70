"""City ORM: one row per tenant in the control database.

Invariants:
    - id is UUID primary key (client-default uuid4)
    - slug is unique across active and inactive rows (lookup returns at most one row)
    - Styling columns and db_url are nullable; readers coalesce them to ""
    - is_active gates theme delivery; it is not a query predicate

Design Decisions:
    - Generic Uuid type: native uuid on PostgreSQL, CHAR(32) on SQLite test databases
    - Rows are written by the administrative tooling; this service only reads
"""

import uuid

from sqlalchemy import Boolean, String, Text, Uuid, true
from sqlalchemy.orm import Mapped, mapped_column

from control_plane.db.base import Base


class City(Base):
    """Tenant record: identity, branding, data-plane pointer, active flag."""
    __tablename__ = "cities"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    primary_color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    accent_color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    db_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(),
    )
