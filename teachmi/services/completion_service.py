"""
Deck completion and progress counts.
"""
from typing import Mapping, Sequence

from teachmi.models.enums import Rating
from teachmi.schemas.card import Card
from teachmi.schemas.progress import ProgressRecord, ProgressSummary


def is_complete(deck: Sequence[Card], progress_lookup: Mapping[str, ProgressRecord]) -> bool:
    """True iff the deck is non-empty and every card is rated known."""
    if not deck:
        return False
    for card in deck:
        record = progress_lookup.get(card.id)
        if record is None or record.rating != Rating.KNOWN:
            return False
    return True


def summarize_progress(deck: Sequence[Card], progress_lookup: Mapping[str, ProgressRecord]) -> ProgressSummary:
    """Count deck cards per state. Records for ids outside the deck are not counted."""
    known = 0
    unknown = 0
    for card in deck:
        record = progress_lookup.get(card.id)
        if record is None:
            continue
        if record.rating == Rating.KNOWN:
            known += 1
        else:
            unknown += 1

    return ProgressSummary(
        total=len(deck),
        known=known,
        unknown=unknown,
        unseen=len(deck) - known - unknown,
        complete=is_complete(deck, progress_lookup),
    )
