"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between the browser front end
and the engine. Zone contents are sent in full after every command so
the client can re-render from the snapshot alone.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_ZONE: Zone name is not one of the eight zones
- DECK_LIMIT: Material deck over 12 or main deck over 60 cards
- EMPTY_DECK: Load requested with no cards at all
- VALIDATION_ERROR: Request body failed validation
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from ..engine_core.state import ZoneName


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    CREATED = "created"
    ACTIVE = "active"
    ENDED = "ended"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_ZONE = "INVALID_ZONE"
    DECK_LIMIT = "DECK_LIMIT"
    EMPTY_DECK = "EMPTY_DECK"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardDefinitionModel(BaseModel):
    """Catalog card data."""
    id: str
    name: str
    types: list[str] = Field(default_factory=list)
    element: str = "NORM"
    cost: int = Field(0, ge=0)
    image_url: str = ""
    text: str = ""

    model_config = {"from_attributes": True}


class CardInstanceModel(CardDefinitionModel):
    """A card in play: definition plus instance id and rested flag."""
    uid: str
    rested: bool = False


class ZoneModel(BaseModel):
    """Contents of one zone, head (top) first."""
    zone: ZoneName
    card_count: int = 0
    cards: list[CardInstanceModel] = Field(default_factory=list)


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to open a sandbox session."""
    player_name: str = "Player"
    seed: Optional[int] = Field(None, description="Fix the shuffle for reproducible games")


class LoadDeckRequest(BaseModel):
    """Deck lists handed over by the deck builder."""
    material: list[CardDefinitionModel] = Field(default_factory=list)
    main: list[CardDefinitionModel] = Field(default_factory=list)


class MoveCardRequest(BaseModel):
    """Move an instance to the end of a zone."""
    uid: str
    target_zone: str = Field(description="Zone name, snake_case or camelCase")


class ToggleRestRequest(BaseModel):
    """Flip an instance's rested flag."""
    uid: str


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """Full snapshot of the eight zones."""
    session_id: str
    status: SessionStatus
    zones: list[ZoneModel] = Field(default_factory=list)
    total_cards: int = 0
    command_count: int = 0
    api_version: str = "v1"


class SessionResponse(BaseModel):
    """Session summary."""
    session_id: str
    status: SessionStatus
    player_name: str
    seed: int
    created_at: float
    deck_sizes: dict[str, int] = Field(default_factory=dict)
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    success: bool
    session_id: str


class CatalogResponse(BaseModel):
    """Catalog search result."""
    cards: list[CardDefinitionModel] = Field(default_factory=list)
    count: int = 0
    search: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "gasim"
    version: str = "0.1.0"
