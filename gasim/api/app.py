"""
FastAPI Application - REST API for the browser front end.

Endpoints:
    POST   /api/v1/sessions                        Create sandbox session
    GET    /api/v1/sessions                        List active sessions
    GET    /api/v1/sessions/{id}                   Get session status
    DELETE /api/v1/sessions/{id}                   End session
    GET    /api/v1/sessions/{id}/state             Get zone snapshot
    POST   /api/v1/sessions/{id}/load              Load deck (replaces game)
    POST   /api/v1/sessions/{id}/draw              Draw from main deck
    POST   /api/v1/sessions/{id}/draw-material     Draw from material deck
    POST   /api/v1/sessions/{id}/move              Move a card to a zone
    POST   /api/v1/sessions/{id}/toggle-rest       Rest / wake a card
    GET    /api/v1/catalog                         Search card catalog

Every command endpoint returns the full snapshot after the command.
Moving or resting a card that is no longer in play is not an error:
the unchanged snapshot comes back.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import logging
import os

from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    LoadDeckRequest,
    MoveCardRequest,
    ToggleRestRequest,
    # Response models
    SessionResponse,
    SessionListResponse,
    EndSessionResponse,
    GameStateResponse,
    CatalogResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

logger = logging.getLogger(__name__)

# Environment configuration
GASIM_ENV = os.getenv("GASIM_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
SESSION_MAX_IDLE = int(os.getenv("GASIM_SESSION_MAX_IDLE", "3600"))

# HTTP status per error code
_STATUS_CODES = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.INVALID_ZONE: 422,
    ErrorCode.DECK_LIMIT: 422,
    ErrorCode.EMPTY_DECK: 422,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="GA Sandbox API",
        description="""
Sandbox for the Grand Archive trading-card game.

Load a deck, then move cards between the eight zones by hand:
`material_deck`, `main_deck`, `hand`, `material_zone`, `battle_zone`,
`graveyard`, `banished`, `memory`.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_ZONE` | Zone name is not one of the eight zones |
| `DECK_LIMIT` | Material deck over 12 or main deck over 60 |
| `EMPTY_DECK` | Load requested with no cards |
| `VALIDATION_ERROR` | Request body failed validation |
| `INTERNAL_ERROR` | Unexpected server error |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()
    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=_STATUS_CODES.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    def respond(result):
        if isinstance(result, ErrorResponse):
            return make_error_response(result)
        return result

    @app.exception_handler(RequestValidationError)
    def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(ErrorResponse(
            error="Request validation failed",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": jsonable_encoder(exc.errors())},
        ))

    @app.exception_handler(Exception)
    def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return make_error_response(ErrorResponse(
            error="Internal server error",
            error_code=ErrorCode.INTERNAL_ERROR,
        ))

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        tags=["Sessions"],
        summary="Create a new sandbox session",
    )
    def create_session(request: CreateSessionRequest) -> SessionResponse:
        api_service.session_manager.cleanup_stale_sessions(SESSION_MAX_IDLE)
        return api_service.create_session(request)

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a sandbox session",
    )
    def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get the zone snapshot",
    )
    def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_game_state(session_id))

    # =========================================================================
    # Command Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/load",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Load a deck, replacing the current game",
    )
    def load_deck(
        session_id: str, request: LoadDeckRequest
    ) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.load_deck(session_id, request))

    @app.post(
        "/api/v1/sessions/{session_id}/draw",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Draw the top card of the main deck",
    )
    def draw_card(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.draw_card(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/draw-material",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Draw the top card of the material deck",
    )
    def draw_material(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.draw_material(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/move",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Move a card to the end of a zone",
    )
    def move_card(
        session_id: str, request: MoveCardRequest
    ) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.move_card(session_id, request))

    @app.post(
        "/api/v1/sessions/{session_id}/toggle-rest",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Rest or wake a card",
    )
    def toggle_rest(
        session_id: str, request: ToggleRestRequest
    ) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.toggle_rest(session_id, request))

    # =========================================================================
    # Catalog Endpoint
    # =========================================================================

    @app.get(
        "/api/v1/catalog",
        response_model=CatalogResponse,
        tags=["Catalog"],
        summary="Search the card catalog",
    )
    def search_catalog(
        search: Annotated[Optional[str], Query(description="Name filter")] = None,
        refresh: Annotated[bool, Query(description="Refetch from the catalog")] = False,
    ) -> CatalogResponse:
        return api_service.search_catalog(search=search, refresh=refresh)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", service="gasim", version=__version__)

    @app.get("/", tags=["System"])
    def root():
        """Root endpoint with API info."""
        return {
            "name": "GA Sandbox API",
            "version": __version__,
            "env": GASIM_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    logger.debug("Created app (env=%s)", GASIM_ENV)
    return app


# For running directly: uvicorn gasim.api.app:app
app = create_app()
