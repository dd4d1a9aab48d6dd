from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from typing import Callable, Optional, Sequence
import logging
import traceback
from teachmi.core.config import settings
from teachmi.core.database import engine as default_engine, init_db
from teachmi.core.exceptions import (
    TeachmiException,
    ValidationError,
    NotFoundError,
    DeckError,
    PersistenceUnavailableError,
)
from teachmi.schemas.card import Card
from teachmi.services.deck_service import load_deck
from teachmi.services.progress_store import ProgressStore
from teachmi.services.session_service import SessionController, current_time_ms

# Import API router
from teachmi.api.v1 import api_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    deck: Optional[Sequence[Card]] = None,
    engine: Optional[Engine] = None,
    rng=None,
    clock: Callable[[], int] = current_time_ms,
) -> FastAPI:
    """
    Build the API application.

    The deck defaults to the asset at settings.deck_path and the engine to the
    one configured from settings.database_url; both are resolved at startup.
    """
    app = FastAPI(title="Teachmi API", version="1.0.0")

    # Add exception handler for validation errors to log details
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Log validation errors with full details for debugging."""
        body = await request.body()
        logger.error(f"Validation error on {request.method} {request.url.path}")
        logger.error(f"Request body: {body.decode('utf-8') if body else 'empty'}")
        logger.error(f"Validation errors: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors(), "body": body.decode('utf-8') if body else None},
        )

    # Add exception handler for custom application exceptions
    @app.exception_handler(TeachmiException)
    async def teachmi_exception_handler(request: Request, exc: TeachmiException):
        """Handle custom application exceptions."""
        if isinstance(exc, ValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
        elif isinstance(exc, NotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        elif isinstance(exc, PersistenceUnavailableError):
            status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    # Add global exception handler for unhandled errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions and return a JSON 500."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

        # In development, show full error details
        if settings.is_development:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                    "traceback": traceback.format_exc()
                },
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal server error occurred. Please try again later.",
                "type": "InternalServerError"
            },
        )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Initialize storage, load the deck and start the study session."""
        bind = engine or default_engine
        init_db(bind)

        try:
            cards = list(deck) if deck is not None else load_deck(settings.deck_path)
        except DeckError as e:
            logger.error(f"Cannot start without a valid deck: {str(e)}")
            raise

        store = ProgressStore(bind, settings.storage_key)
        app.state.session_controller = SessionController(cards, store, rng=rng, clock=clock)

    @app.get("/")
    async def root():
        return {
            "message": "Teachmi API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()
