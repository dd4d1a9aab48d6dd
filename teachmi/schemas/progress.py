"""
Progress schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from teachmi.models.enums import Rating
from teachmi.schemas.card import Card


class ProgressRecord(BaseModel):
    """A learner's latest rating for one card. This is also the persisted shape."""
    card_id: str = Field(..., description="Identifier of the rated card")
    rating: Rating = Field(..., description="'thumbs_up' (known) or 'thumbs_down' (unknown)")
    reviewed_at: int = Field(..., description="Last review time, milliseconds since epoch")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "card_id": "card-001",
                "rating": "thumbs_down",
                "reviewed_at": 1718000000000
            }
        }


class RateCardRequest(BaseModel):
    """Request to rate a card."""
    card_id: str = Field(..., min_length=1, description="Identifier of the card being rated")
    rating: Rating


class ToggleRatingResponse(BaseModel):
    """Response from toggling a rating. `record` is None when nothing was toggled."""
    toggled: bool
    record: Optional[ProgressRecord] = None


class ReviewedEntry(BaseModel):
    """A reviewed record together with its card, when the card is still in the deck."""
    record: ProgressRecord
    card: Optional[Card] = None


class ReviewedEntriesResponse(BaseModel):
    """Reviewed cards, most recently reviewed first."""
    entries: List[ReviewedEntry]


class ProgressSummary(BaseModel):
    """Counts of cards per progress state."""
    total: int
    known: int
    unknown: int
    unseen: int
    complete: bool
