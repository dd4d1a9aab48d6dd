"""
Model enums.
"""
from enum import Enum


class Rating(str, Enum):
    """Rating a learner gives a card."""
    KNOWN = "thumbs_up"
    UNKNOWN = "thumbs_down"

    def flipped(self) -> "Rating":
        return Rating.UNKNOWN if self is Rating.KNOWN else Rating.KNOWN
