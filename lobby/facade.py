"""
GameFacade: the single entry point for UIs, scripts and tests.

The facade holds no game rules. Each command builds the matching action,
hands it to the store together with the reducer, and returns the persisted
game. The store notifies subscribers.

Example:
    facade = GameFacade(InMemoryGameStore())
    await facade.create_game("g1", player_id="alice")
    await facade.join_game("g1", "bob")
    game = await facade.start_game("g1")
"""

import logging
import random
from typing import Any, Callable, Dict, List, Optional

from core.errors import GameError, NotFoundError
from core.observable import Subscription
from core.store import GameStore
from games.elder_sign.actions import (
    ForceGameState,
    JoinGame,
    NewGame,
    NextRound,
    PauseGame,
    PlayCard,
    RestartGame,
    SetInvestigator,
    StartGame,
    UpdateGameOptions,
    game_id_of,
)
from games.elder_sign.models import Game, GameOptions, is_terminal
from games.elder_sign.reducer import resolve_reducer
from games.elder_sign.views import private_view

logger = logging.getLogger(__name__)


class GameFacade:
    """
    Async command surface over a ``GameStore``.

    Every command raises the reducer's ``GameError`` unchanged when the
    action is rejected; nothing is persisted in that case.
    """

    def __init__(
        self,
        store: GameStore,
        rng: Optional[random.Random] = None,
        default_options: Optional[GameOptions] = None,
    ):
        self.store = store
        self.rng = rng
        self.default_options = default_options

    # ------------------------------------------------------------------
    # commands
    # ------------------------------------------------------------------

    async def create_game(
        self,
        game_id: str,
        player_id: Optional[str] = None,
        options: Optional[GameOptions] = None,
    ) -> Game:
        """Create a game, seating *player_id* if given."""
        if options is None and self.default_options is not None:
            options = self.default_options.model_copy()
        return await self._dispatch(NewGame(game_id=game_id, player_id=player_id, options=options))

    async def join_game(self, game_id: str, player_id: str) -> Game:
        return await self._dispatch(JoinGame(game_id=game_id, player_id=player_id))

    async def update_game_options(self, game_id: str, options: GameOptions) -> Game:
        return await self._dispatch(UpdateGameOptions(game_id=game_id, options=options))

    async def start_game(self, game_id: str) -> Game:
        return await self._dispatch(StartGame(game_id=game_id))

    async def investigate(
        self, game_id: str, source_player: str, target_player: str, card_number: int
    ) -> Game:
        """*source_player* reveals card *card_number* (1-based) from *target_player*."""
        return await self._dispatch(
            PlayCard(
                game_id=game_id,
                source_player=source_player,
                target_player=target_player,
                card_number=card_number,
            )
        )

    async def restart_game(self, game_id: str) -> Game:
        return await self._dispatch(RestartGame(game_id=game_id))

    async def next_round(self, game_id: str) -> Game:
        return await self._dispatch(NextRound(game_id=game_id))

    async def pause_game(self, game_id: str) -> Game:
        return await self._dispatch(PauseGame(game_id=game_id))

    async def set_investigator(self, game_id: str, target_player: str) -> Game:
        """Test/admin only."""
        return await self._dispatch(SetInvestigator(game_id=game_id, target_player=target_player))

    async def force_game_state(self, game: Game) -> Game:
        """Test/admin only."""
        return await self._dispatch(ForceGameState(game=game))

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    async def list_games(self) -> List[Game]:
        """All games, oldest first."""
        games = self.store.snapshot_all().values()
        return [
            game.model_copy(deep=True)
            for game in sorted(games, key=lambda game: (game.created, game.id))
        ]

    async def get_game(self, game_id: str) -> Game:
        game = self.store.snapshot(game_id)
        if game is None:
            raise NotFoundError(f"No game {game_id} exists.", game_id=game_id)
        return game.model_copy(deep=True)

    async def get_player_view(self, game_id: str, player_id: str) -> Dict[str, Any]:
        """What *player_id* is allowed to see of *game_id*."""
        return private_view(await self.get_game(game_id), player_id)

    # ------------------------------------------------------------------
    # subscriptions
    # ------------------------------------------------------------------

    def subscribe_to_game(
        self, game_id: str, observer: Callable[[Optional[Game]], None]
    ) -> Subscription:
        """Receive the current game now (None if absent) and every change after."""
        return self.store.game_for_id(game_id).subscribe(observer)

    def subscribe_to_games(
        self, observer: Callable[[Dict[str, Game]], None]
    ) -> Subscription:
        return self.store.all_games().subscribe(observer)

    # ------------------------------------------------------------------
    # dispatch
    # ------------------------------------------------------------------

    async def _dispatch(self, action) -> Game:
        game_id = game_id_of(action)
        try:
            game = await self.store.apply_to(game_id, resolve_reducer(action, self.rng))
        except GameError as e:
            logger.info("Rejected %s on %s [%s]: %s", action.type, game_id, e.kind, e.message)
            raise

        logger.debug("Accepted %s on %s", action.type, game_id)
        if is_terminal(game.state) and not isinstance(action, ForceGameState):
            logger.info("Game %s finished: %s", game_id, game.state.value)
        return game
