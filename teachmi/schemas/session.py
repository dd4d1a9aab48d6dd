"""
Study session schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from teachmi.schemas.card import Card


class NextCardResponse(BaseModel):
    """Next card to show.

    `card` is None when nothing is available right now; `complete` tells the
    caller whether that is because every card is known.
    """
    card: Optional[Card] = None
    complete: bool = Field(..., description="Whether every card in the deck is rated known")


class CompletionResponse(BaseModel):
    """Deck completion status."""
    complete: bool


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str
