"""
Next-card selection.

Two pools are drawn from: cards never rated ("unseen") and cards rated unknown
that are out of cooldown ("retry"). Known cards are never shown again.
"""
import logging
from typing import Mapping, Optional, Sequence

from teachmi.models.enums import Rating
from teachmi.schemas.card import Card
from teachmi.schemas.progress import ProgressRecord
from teachmi.services.cooldown_service import CooldownTracker

logger = logging.getLogger(__name__)

# Chance of drawing from the retry pool when both pools have cards
RETRY_POOL_PROBABILITY = 0.7


class CardSelector:
    """
    Picks the next card to show.

    `rng` must provide random() and choice(seq); a random.Random instance does.
    """

    def __init__(self, rng, retry_probability: float = RETRY_POOL_PROBABILITY):
        self.rng = rng
        self.retry_probability = retry_probability

    def select_next(
        self,
        deck: Sequence[Card],
        progress_lookup: Mapping[str, ProgressRecord],
        cooldown: CooldownTracker,
    ) -> Optional[Card]:
        """
        Select the next card and record it as shown.

        Returns None when neither pool has a card. That does not mean the deck
        is complete: unknown cards may all be cooling down.
        """
        unseen = []
        retry_eligible = []
        for card in deck:
            record = progress_lookup.get(card.id)
            if record is None:
                unseen.append(card)
            elif record.rating == Rating.UNKNOWN and cooldown.is_eligible(card.id):
                retry_eligible.append(card)

        if retry_eligible and (not unseen or self.rng.random() < self.retry_probability):
            pool = retry_eligible
        else:
            pool = unseen

        if not pool:
            logger.debug("No eligible card: unseen and retry pools are empty")
            return None

        chosen = self.rng.choice(pool)
        record = progress_lookup.get(chosen.id)
        cooldown.record_shown(chosen.id, record.rating if record else None)
        return chosen
