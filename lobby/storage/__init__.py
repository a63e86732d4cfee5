"""Game stores: in-memory and one-JSON-file-per-game."""

from lobby.storage.base import ObservableGameStore
from lobby.storage.memory import InMemoryGameStore
from lobby.storage.json_files import JsonFileGameStore

__all__ = ["ObservableGameStore", "InMemoryGameStore", "JsonFileGameStore"]
