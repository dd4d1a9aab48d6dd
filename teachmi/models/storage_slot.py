"""
StorageSlot model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Text
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StorageSlot(SQLModel, table=True):
    """StorageSlot table - key/value slots holding serialized client state."""
    __tablename__ = "storage_slot"

    key: str = Field(primary_key=True, max_length=100)  # e.g., 'teachmi_progress'
    value: str = Field(sa_column=Column(Text, nullable=False))  # JSON payload
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
