"""
Study session controller: the API the presentation layer calls.

Owns the progress store, cooldown tracker and card selector for one learner.
The in-memory record list is authoritative and is written through to the store
on every change; the card-id lookup is rebuilt from it on every query.
"""
import logging
import random
import time
from typing import Callable, List, Optional, Sequence

from teachmi.core.exceptions import ValidationError
from teachmi.models.enums import Rating
from teachmi.schemas.card import Card
from teachmi.schemas.progress import ProgressRecord, ProgressSummary, ReviewedEntry
from teachmi.services.completion_service import is_complete, summarize_progress
from teachmi.services.cooldown_service import CooldownTracker
from teachmi.services.progress_store import ProgressStore, build_lookup
from teachmi.services.selection_service import CardSelector

logger = logging.getLogger(__name__)


def current_time_ms() -> int:
    return int(time.time() * 1000)


class SessionController:
    """Facade over next-card selection, rating and completion."""

    def __init__(
        self,
        deck: Sequence[Card],
        store: ProgressStore,
        rng=None,
        clock: Callable[[], int] = current_time_ms,
    ):
        rng = rng if rng is not None else random.Random()
        self.deck: List[Card] = list(deck)
        self.store = store
        self.clock = clock
        self.cooldown = CooldownTracker(rng)
        self.selector = CardSelector(rng)
        self._records: List[ProgressRecord] = store.load()
        logger.info(
            f"Session started with {len(self.deck)} card(s) and {len(self._records)} progress record(s)"
        )

    def _set_records(self, records: List[ProgressRecord]) -> None:
        self.store.save(records)
        self._records = records

    def progress_lookup(self):
        return build_lookup(self._records)

    def get_next_card(self) -> Optional[Card]:
        return self.selector.select_next(self.deck, self.progress_lookup(), self.cooldown)

    def rate_card(self, card_id: str, rating: Rating) -> ProgressRecord:
        """Record a rating for a card, replacing any earlier record for it."""
        try:
            rating = Rating(rating)
        except ValueError:
            raise ValidationError(f"Rating must be one of: {', '.join(r.value for r in Rating)}. Got: {rating}")

        record = ProgressRecord(card_id=card_id, rating=rating, reviewed_at=self.clock())
        records = [r for r in self._records if r.card_id != card_id]
        records.append(record)
        self._set_records(records)
        return record

    def toggle_rating(self, card_id: str) -> Optional[ProgressRecord]:
        """Flip a card between known and unknown. Returns None, changing nothing, if it was never rated."""
        current = self.progress_lookup().get(card_id)
        if current is None:
            return None

        toggled = current.model_copy(update={"rating": current.rating.flipped(), "reviewed_at": self.clock()})
        records = [r for r in self._records if r.card_id != card_id]
        records.append(toggled)
        self._set_records(records)
        return toggled

    def reset_progress(self) -> None:
        """Forget all ratings and cooldown state."""
        self.store.clear()
        self._records = []
        self.cooldown.reset()
        logger.info("Progress reset")

    def is_complete(self) -> bool:
        return is_complete(self.deck, self.progress_lookup())

    def reviewed_cards(self) -> List[ProgressRecord]:
        """Records sorted most recently reviewed first."""
        return sorted(self.progress_lookup().values(), key=lambda r: r.reviewed_at, reverse=True)

    def reviewed_entries(self) -> List[ReviewedEntry]:
        cards_by_id = {card.id: card for card in self.deck}
        return [
            ReviewedEntry(record=record, card=cards_by_id.get(record.card_id))
            for record in self.reviewed_cards()
        ]

    def progress_summary(self) -> ProgressSummary:
        return summarize_progress(self.deck, self.progress_lookup())
