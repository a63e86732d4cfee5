"""
Abstract GameStore interface.

A store is the persistence collaborator of the game core. Reducers never
touch storage themselves; instead the store loads the current game, hands it
to a reducer and persists whatever the reducer returns.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from core.observable import BehaviorSubject


GameReducer = Callable[[Optional[Any]], Any]
"""A function that takes the current game (or None) and returns the new game."""


class GameStore(ABC):
    """
    Abstract base class for game storage.

    Contract:
    - ``apply_to`` is atomic from the caller's point of view: if the reducer
      raises, nothing is persisted and the error propagates to the awaiting
      caller.
    - Calls to ``apply_to`` for the same game ID never interleave. Different
      game IDs may proceed concurrently.
    - Observables returned by ``game_for_id`` and ``all_games`` replay the
      latest value on subscribe and emit only on value changes.
    - Values handed out (to reducers or to observers) are copies; mutating
      them never affects stored state.
    """

    @abstractmethod
    async def apply_to(self, game_id: str, reducer: GameReducer) -> Any:
        """
        Apply ``reducer`` to the stored game and persist the result.

        Args:
            game_id: ID of the game to update. The reducer receives None if
                the game does not exist yet.
            reducer: Pure function from the old game to the new game

        Returns:
            A copy of the game as persisted

        Raises:
            Whatever the reducer raises; the stored game is left untouched.
        """
        pass

    @abstractmethod
    def game_for_id(self, game_id: str) -> BehaviorSubject:
        """
        Subscribe target for a single game.

        The initial value is None if the game does not exist yet.
        """
        pass

    @abstractmethod
    def all_games(self) -> BehaviorSubject:
        """Subscribe target for the full ``{game_id: game}`` index."""
        pass

    def snapshot(self, game_id: str) -> Optional[Any]:
        """Return the latest known value of one game (None if absent)."""
        return self.game_for_id(game_id).value

    def snapshot_all(self) -> Dict[str, Any]:
        """Return the latest known value of every game."""
        return dict(self.all_games().value)
