"""In-process game store. State is lost when the process exits."""

from typing import Dict, Optional

from games.elder_sign.models import Game
from lobby.storage.base import ObservableGameStore


class InMemoryGameStore(ObservableGameStore):
    """Keeps every game in a dict. The default store for tests and local play."""

    def __init__(self):
        super().__init__()
        self._games: Dict[str, Game] = {}

    def _read(self, game_id: str) -> Optional[Game]:
        return self._games.get(game_id)

    def _write(self, game: Game) -> None:
        self._games[game.id] = game

    def _read_all(self) -> Dict[str, Game]:
        return dict(self._games)
