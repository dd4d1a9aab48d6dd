"""
Cooldown tracking for cards the learner rated unknown.

A disliked card stays out of rotation until it has dropped out of the last `w`
shown cards, where `w` is a per-card window drawn uniformly from
[MIN_COOLDOWN, MAX_COOLDOWN] and re-drawn every time the card is shown again.
State lives in memory only and starts empty for every session.
"""
import random
from typing import Dict, List, Optional, Sequence

from teachmi.models.enums import Rating

MIN_COOLDOWN = 5
MAX_COOLDOWN = 10

# Once history grows past HISTORY_TRIM_AT entries it is cut back to HISTORY_KEEP
HISTORY_TRIM_AT = 50
HISTORY_KEEP = 30


class CooldownTracker:
    """Recent-history and per-card cooldown windows for one session."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self._history: List[str] = []
        self._windows: Dict[str, int] = {}

    @property
    def recent_history(self) -> List[str]:
        return list(self._history)

    def window_for(self, card_id: str) -> Optional[int]:
        """Currently assigned window, or None if the card has none yet."""
        return self._windows.get(card_id)

    def _draw_window(self) -> int:
        return self.rng.randint(MIN_COOLDOWN, MAX_COOLDOWN)

    def is_eligible(self, card_id: str, recent_history: Optional[Sequence[str]] = None) -> bool:
        """
        Whether the card is out of cooldown.

        Assigns the card a window on first check. Defaults to this tracker's
        own history when none is given.
        """
        if card_id not in self._windows:
            self._windows[card_id] = self._draw_window()
        window = self._windows[card_id]
        history = self._history if recent_history is None else recent_history
        return card_id not in history[-window:]

    def record_shown(self, card_id: str, rating: Optional[Rating] = None) -> None:
        """Append a shown card to history; re-draw its window if it is rated unknown."""
        self._history.append(card_id)
        if len(self._history) > HISTORY_TRIM_AT:
            self._history = self._history[-HISTORY_KEEP:]

        if rating == Rating.UNKNOWN:
            self._windows[card_id] = self._draw_window()

    def reset(self) -> None:
        self._history = []
        self._windows.clear()
