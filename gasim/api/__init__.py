"""
API Module - Browser front end interface.

Exposes the engine via REST API. The front end:
1. Searches the card catalog
2. Creates a session
3. Loads the deck it built
4. Sends one command per gesture (draw, move, rest)
5. Re-renders from the snapshot returned by each command

All state is session-scoped. No persistent user accounts.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    LoadDeckRequest,
    MoveCardRequest,
    ToggleRestRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    CatalogResponse,
    ErrorResponse,
    # Shared
    CardDefinitionModel,
    CardInstanceModel,
    ZoneModel,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "LoadDeckRequest",
    "MoveCardRequest",
    "ToggleRestRequest",
    # Responses
    "SessionResponse",
    "GameStateResponse",
    "CatalogResponse",
    "ErrorResponse",
    # Shared
    "CardDefinitionModel",
    "CardInstanceModel",
    "ZoneModel",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
