"""
Progress store: persists the learner's rating records in a single storage slot.

The slot holds a JSON array of {card_id, rating, reviewed_at} objects. A missing
or unreadable payload loads as an empty record set; a database that cannot be
reached at all raises PersistenceUnavailableError.
"""
import logging
from typing import Dict, Iterable, List, Sequence

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from teachmi.core.exceptions import PersistenceUnavailableError
from teachmi.models.storage_slot import StorageSlot, utc_now
from teachmi.schemas.progress import ProgressRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(List[ProgressRecord])


def build_lookup(records: Iterable[ProgressRecord]) -> Dict[str, ProgressRecord]:
    """
    Map card id to its latest record.

    The record with the highest reviewed_at wins; on equal timestamps the one
    appearing later in the sequence wins.
    """
    lookup: Dict[str, ProgressRecord] = {}
    for record in records:
        current = lookup.get(record.card_id)
        if current is None or record.reviewed_at >= current.reviewed_at:
            lookup[record.card_id] = record
    return lookup


class ProgressStore:
    """Load/save/clear for the serialized progress slot."""

    def __init__(self, engine: Engine, storage_key: str = "teachmi_progress"):
        self.engine = engine
        self.storage_key = storage_key

    def load(self) -> List[ProgressRecord]:
        """Return persisted records, or an empty list if none are stored or the payload is corrupt."""
        try:
            with Session(self.engine) as session:
                slot = session.get(StorageSlot, self.storage_key)
                raw = slot.value if slot else None
        except SQLAlchemyError as e:
            logger.error(f"Progress storage unavailable while loading '{self.storage_key}': {str(e)}")
            raise PersistenceUnavailableError(f"Failed to load progress: {str(e)}") from e

        if not raw:
            return []

        try:
            return _records_adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(
                f"Discarding corrupt progress payload in '{self.storage_key}' "
                f"({e.error_count()} error(s)); starting from empty progress"
            )
            return []

    def save(self, records: Sequence[ProgressRecord]) -> None:
        """Overwrite the slot with the given records."""
        payload = _records_adapter.dump_json(list(records), exclude_none=True).decode("utf-8")
        try:
            with Session(self.engine) as session:
                slot = session.get(StorageSlot, self.storage_key)
                if slot is None:
                    slot = StorageSlot(key=self.storage_key, value=payload)
                else:
                    slot.value = payload
                    slot.updated_at = utc_now()
                session.add(slot)
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Progress storage unavailable while saving '{self.storage_key}': {str(e)}")
            raise PersistenceUnavailableError(f"Failed to save progress: {str(e)}") from e

    def clear(self) -> None:
        """Remove the slot entirely."""
        try:
            with Session(self.engine) as session:
                slot = session.get(StorageSlot, self.storage_key)
                if slot is not None:
                    session.delete(slot)
                    session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Progress storage unavailable while clearing '{self.storage_key}': {str(e)}")
            raise PersistenceUnavailableError(f"Failed to clear progress: {str(e)}") from e
