"""
Study session endpoints.
"""
from fastapi import APIRouter, Depends, status
import logging

from teachmi.schemas.progress import ProgressRecord, RateCardRequest, ToggleRatingResponse
from teachmi.schemas.session import CompletionResponse, MessageResponse, NextCardResponse
from teachmi.services.session_service import SessionController
from teachmi.api.v1.endpoints.utils import get_session_controller

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.get("/next", response_model=NextCardResponse)
async def get_next_card(
    controller: SessionController = Depends(get_session_controller)
):
    """
    Draw the next card to show.

    `card` is null when no card is available right now. Check `complete` to
    tell a finished deck apart from unknown cards that are all cooling down;
    in the latter case the client should keep the current card and ask again later.
    """
    card = controller.get_next_card()
    return NextCardResponse(card=card, complete=controller.is_complete())


@router.post("/rate", response_model=ProgressRecord, status_code=status.HTTP_200_OK)
async def rate_card(
    request: RateCardRequest,
    controller: SessionController = Depends(get_session_controller)
):
    """Rate a card known (thumbs_up) or unknown (thumbs_down), replacing any earlier rating."""
    record = controller.rate_card(request.card_id, request.rating)
    logger.debug(f"Rated card {record.card_id} as {record.rating.value}")
    return record


@router.post("/toggle/{card_id}", response_model=ToggleRatingResponse)
async def toggle_rating(
    card_id: str,
    controller: SessionController = Depends(get_session_controller)
):
    """Flip a rated card between known and unknown. Unrated cards are left alone."""
    record = controller.toggle_rating(card_id)
    return ToggleRatingResponse(toggled=record is not None, record=record)


@router.post("/reset", response_model=MessageResponse)
async def reset_progress(
    controller: SessionController = Depends(get_session_controller)
):
    """Clear all ratings and cooldown state."""
    controller.reset_progress()
    return MessageResponse(message="Progress reset")


@router.get("/complete", response_model=CompletionResponse)
async def get_completion(
    controller: SessionController = Depends(get_session_controller)
):
    """Whether every card in the deck is rated known."""
    return CompletionResponse(complete=controller.is_complete())
