"""
File-backed game store.

Each game is one JSON document under ``data_dir``:

    data_dir/
      <quoted game id>.json

Documents are the pydantic JSON form of ``Game`` and are replaced
atomically on every write, so a crashed process never leaves a half-written
game behind.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union
from urllib.parse import quote

from games.elder_sign.models import Game
from lobby.storage.base import ObservableGameStore

logger = logging.getLogger(__name__)

SUFFIX = ".json"


class JsonFileGameStore(ObservableGameStore):
    """
    Persists games as JSON files.

    Example:
        store = JsonFileGameStore("./game_data")
        facade = GameFacade(store)
    """

    def __init__(self, data_dir: Union[str, Path]):
        super().__init__()
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, game_id: str) -> Path:
        """File that holds *game_id*. IDs are percent-encoded."""
        return self.data_dir / f"{quote(game_id, safe='')}{SUFFIX}"

    def _read(self, game_id: str) -> Optional[Game]:
        path = self.path_for(game_id)
        if not path.exists():
            return None
        return Game.model_validate_json(path.read_text(encoding="utf-8"))

    def _write(self, game: Game) -> None:
        path = self.path_for(game.id)
        tmp_path = path.with_name(path.name + ".tmp")
        tmp_path.write_text(game.model_dump_json(indent=2), encoding="utf-8")
        tmp_path.replace(path)
        logger.debug("Wrote %s", path)

    def _read_all(self) -> Dict[str, Game]:
        games: Dict[str, Game] = {}
        for path in sorted(self.data_dir.glob(f"*{SUFFIX}")):
            game = Game.model_validate_json(path.read_text(encoding="utf-8"))
            games[game.id] = game
        return games
