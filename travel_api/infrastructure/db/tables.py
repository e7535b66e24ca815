from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("uid", String(128)),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(255)),
    Column("profile_pic", String(1024)),
    Column("role", String(16), nullable=False, default="user"),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
)

packages = Table(
    "packages",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("price", Numeric(12, 2)),
    Column("description", Text),
    Column("location", String(255)),
    Column("duration", String(100)),
    Column("images", JSON, nullable=False, default=list),
    Column("availability", Boolean, nullable=False, default=True),
    Column("valid_from", DateTime(timezone=True)),
    Column("valid_till", DateTime(timezone=True)),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
    Column("updated_at", DateTime(timezone=True)),
)

resorts = Table(
    "resorts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("location", String(255), nullable=False),
    Column("price_per_night", Numeric(12, 2)),
    Column("price", Numeric(12, 2)),
    Column("description", Text),
    Column("amenities", JSON, nullable=False, default=list),
    Column("images", JSON, nullable=False, default=list),
    Column("rating", Numeric(3, 2)),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
    Column("updated_at", DateTime(timezone=True)),
)

bookings = Table(
    "bookings",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("user_id", String(128)),
    Column("user_email", String(255), index=True),
    Column("item_type", String(16), nullable=False),
    Column("item_id", String(64), nullable=False),
    Column("item_title", String(255), nullable=False),
    Column("start_date", DateTime(timezone=True)),
    Column("nights", Integer),
    Column("guests", Integer, nullable=False, default=1),
    Column("note", Text, nullable=False, default=""),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("currency", String(3), nullable=False),
    Column("payment_id", String(255), nullable=False),
    Column("status", String(32), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, index=True),
    UniqueConstraint("payment_id", name="uq_bookings_payment_id"),
)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo on read; every stored timestamp is UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
