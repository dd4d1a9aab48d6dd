"""
Progress endpoints.
"""
from fastapi import APIRouter, Depends

from teachmi.schemas.progress import ProgressSummary, ReviewedEntriesResponse
from teachmi.services.session_service import SessionController
from teachmi.api.v1.endpoints.utils import get_session_controller

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ReviewedEntriesResponse)
async def get_reviewed_cards(
    controller: SessionController = Depends(get_session_controller)
):
    """Reviewed cards, most recently reviewed first. `card` is null for ids no longer in the deck."""
    return ReviewedEntriesResponse(entries=controller.reviewed_entries())


@router.get("/summary", response_model=ProgressSummary)
async def get_progress_summary(
    controller: SessionController = Depends(get_session_controller)
):
    """Known, unknown and unseen card counts."""
    return controller.progress_summary()
