"""
Deck browsing endpoints.
"""
from fastapi import APIRouter, Depends
from typing import Optional

from teachmi.core.exceptions import NotFoundError
from teachmi.schemas.card import Card, CardsResponse
from teachmi.services.deck_service import find_card, search_cards
from teachmi.services.session_service import SessionController
from teachmi.api.v1.endpoints.utils import get_session_controller

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=CardsResponse)
async def list_cards(
    q: Optional[str] = None,
    controller: SessionController = Depends(get_session_controller)
):
    """List deck cards in deck order, optionally filtered by a search query
    matched against the target word, its reading and translation, and the sentence."""
    cards = search_cards(controller.deck, q)
    return CardsResponse(cards=cards, total=len(cards))


@router.get("/{card_id}", response_model=Card)
async def get_card(
    card_id: str,
    controller: SessionController = Depends(get_session_controller)
):
    """Get a single card by ID."""
    card = find_card(controller.deck, card_id)
    if card is None:
        raise NotFoundError(f"Card with id {card_id} not found")
    return card
