"""
Lobby: runs Elder Sign games for callers.

Components:
- facade: GameFacade, the async command and query surface
- storage: In-memory and JSON-file game stores
- config: LobbyConfig, load_config(), create_facade()
- display: Rich console rendering of a table
"""

from lobby.facade import GameFacade
from lobby.storage import InMemoryGameStore, JsonFileGameStore, ObservableGameStore
from lobby.config import (
    LobbyConfig,
    load_config,
    create_config,
    create_facade,
    configure_logging,
)

__all__ = [
    "GameFacade",
    "InMemoryGameStore",
    "JsonFileGameStore",
    "ObservableGameStore",
    "LobbyConfig",
    "load_config",
    "create_config",
    "create_facade",
    "configure_logging",
]
