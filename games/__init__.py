"""
Game implementations.

Each game is a self-contained submodule under games/<game_type>/ exposing
its data model, actions and a ``reduce(game, action, rng=None)`` entry
point, and is listed in ``GAME_TYPES``.
"""

from importlib import import_module

GAME_TYPES = ("elder_sign",)


def get_game_module(game_type: str):
    """
    Return the game package for *game_type*.

    Raises:
        ValueError: If the game type is not listed in ``GAME_TYPES``
    """
    if game_type not in GAME_TYPES:
        raise ValueError(f"Unknown game type: {game_type}. Available: {list(GAME_TYPES)}")
    return import_module(f"games.{game_type}")
