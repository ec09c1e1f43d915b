"""
API Service - Business logic layer between API and engine.

The service:
1. Manages sessions
2. Translates API requests to session commands
3. Turns GameState snapshots into responses
4. Serves the card catalog

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

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
    # Enums
    ErrorCode,
    SessionStatus,
)
from ..catalog import CatalogClient, search_cards
from ..deck import DeckBuilder, DeckLimitError, EmptyDeckError
from ..engine_core.errors import UnknownZoneError
from ..engine_core.state import CardDefinition, CardInstance, GameState, ZoneName
from ..session import SessionManager, Session, SessionState

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service for the browser front end.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest())
        service.load_deck(session.session_id, LoadDeckRequest(...))
        state = service.draw_card(session.session_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    catalog_client: CatalogClient | None = None

    # Reject decks over 12 material / 60 main cards
    enforce_limits: bool = True

    # Catalog fetched on first use
    _catalog: list[CardDefinition] | None = None

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Create a new sandbox session."""
        session = self.session_manager.create_session(
            seed=request.seed,
            player_name=request.player_name,
        )
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._build_game_state(session)

    # =========================================================================
    # Commands
    # =========================================================================

    def load_deck(
        self, session_id: str, request: LoadDeckRequest
    ) -> GameStateResponse | ErrorResponse:
        """Replace the session's game with a freshly loaded deck."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        material = [self._definition_from_model(card) for card in request.material]
        main = [self._definition_from_model(card) for card in request.main]

        if self.enforce_limits:
            try:
                action = DeckBuilder.from_lists(material, main).to_action()
            except DeckLimitError as e:
                return ErrorResponse(
                    error=str(e),
                    error_code=ErrorCode.DECK_LIMIT,
                    details={"deck": e.deck, "limit": e.limit},
                )
            except EmptyDeckError as e:
                return ErrorResponse(error=str(e), error_code=ErrorCode.EMPTY_DECK)
            material, main = action.material, action.main

        session.load_deck(material, main)
        return self._build_game_state(session)

    def draw_card(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.draw_card()
        return self._build_game_state(session)

    def draw_material(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.draw_material()
        return self._build_game_state(session)

    def move_card(
        self, session_id: str, request: MoveCardRequest
    ) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        try:
            session.move_card(request.uid, request.target_zone)
        except UnknownZoneError as e:
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.INVALID_ZONE,
                details={"zones": [zone.value for zone in ZoneName]},
            )
        return self._build_game_state(session)

    def toggle_rest(
        self, session_id: str, request: ToggleRestRequest
    ) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.toggle_rest(request.uid)
        return self._build_game_state(session)

    # =========================================================================
    # Catalog
    # =========================================================================

    def search_catalog(
        self, search: str | None = None, refresh: bool = False
    ) -> CatalogResponse:
        """
        Search the card catalog by name.

        The catalog is fetched once and reused; refresh=True refetches.
        A failed fetch yields an empty result, not an error, and is
        retried on the next call.
        """
        if not self._catalog or refresh:
            client = self.catalog_client or CatalogClient()
            logger.info("Fetching card catalog from %s", client.base_url)
            self._catalog = client.fetch_cards()

        cards = search_cards(self._catalog, search) if search else list(self._catalog)
        return CatalogResponse(
            cards=[self._definition_to_model(card) for card in cards],
            count=len(cards),
            search=search,
        )

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _session_status(self, session: Session) -> SessionStatus:
        """Convert session state to API status."""
        mapping = {
            SessionState.CREATED: SessionStatus.CREATED,
            SessionState.ACTIVE: SessionStatus.ACTIVE,
            SessionState.ENDED: SessionStatus.ENDED,
            SessionState.ABANDONED: SessionStatus.ENDED,
        }
        return mapping.get(session.status, SessionStatus.ACTIVE)

    def _session_to_response(self, session: Session) -> SessionResponse:
        state = session.state
        return SessionResponse(
            session_id=session.session_id,
            status=self._session_status(session),
            player_name=session.player_name,
            seed=session.seed,
            created_at=session.created_at,
            deck_sizes={
                ZoneName.MATERIAL_DECK.value: len(state.material_deck),
                ZoneName.MAIN_DECK.value: len(state.main_deck),
            },
        )

    def _build_game_state(self, session: Session) -> GameStateResponse:
        """Build the full snapshot response."""
        state: GameState = session.state
        zones = [
            ZoneModel(
                zone=name,
                card_count=len(cards),
                cards=[self._instance_to_model(card) for card in cards],
            )
            for name, cards in state.zones().items()
        ]
        return GameStateResponse(
            session_id=session.session_id,
            status=self._session_status(session),
            zones=zones,
            total_cards=state.total_cards,
            command_count=session.command_count,
        )

    @staticmethod
    def _definition_from_model(model: CardDefinitionModel) -> CardDefinition:
        return CardDefinition(
            id=model.id,
            name=model.name,
            types=tuple(model.types),
            element=model.element,
            cost=model.cost,
            image_url=model.image_url,
            text=model.text,
        )

    @staticmethod
    def _definition_to_model(card: CardDefinition) -> CardDefinitionModel:
        return CardDefinitionModel(
            id=card.id,
            name=card.name,
            types=list(card.types),
            element=card.element,
            cost=card.cost,
            image_url=card.image_url,
            text=card.text,
        )

    @staticmethod
    def _instance_to_model(card: CardInstance) -> CardInstanceModel:
        return CardInstanceModel(
            id=card.card_id,
            name=card.name,
            types=list(card.types),
            element=card.element,
            cost=card.cost,
            image_url=card.image_url,
            text=card.text,
            uid=card.uid,
            rested=card.rested,
        )
