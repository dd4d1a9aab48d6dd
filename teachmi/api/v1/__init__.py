"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from teachmi.api.v1.endpoints import cards, session, progress

api_router = APIRouter()

# Each router defines its own prefix
api_router.include_router(cards.router)
api_router.include_router(session.router)
api_router.include_router(progress.router)
