"""Single entry point mapping any action to its reducer."""

import random
from functools import partial
from typing import Callable, Dict, Optional

from core.store import GameReducer
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
)
from games.elder_sign.card_reducers import on_play_card
from games.elder_sign.game_reducers import (
    on_force_game_state,
    on_join_game,
    on_new_game,
    on_next_round,
    on_pause_game,
    on_restart_game,
    on_set_investigator,
    on_start_game,
    on_update_game_options,
)
from games.elder_sign.models import Game


REDUCERS: Dict[type, Callable] = {
    NewGame: on_new_game,
    JoinGame: on_join_game,
    UpdateGameOptions: on_update_game_options,
    StartGame: on_start_game,
    RestartGame: on_restart_game,
    NextRound: on_next_round,
    PauseGame: on_pause_game,
    PlayCard: on_play_card,
    SetInvestigator: on_set_investigator,
    ForceGameState: on_force_game_state,
}


def reduce(game: Optional[Game], action, rng: Optional[random.Random] = None) -> Game:
    """Apply *action* to *game* and return the new game."""
    handler = REDUCERS.get(type(action))
    if handler is None:
        raise ValueError(f"Unknown action type: '{type(action).__name__}'")
    return handler(game, action, rng=rng)


def resolve_reducer(action, rng: Optional[random.Random] = None) -> GameReducer:
    """Bind *action* into a one-argument reducer for ``GameStore.apply_to``."""
    if type(action) not in REDUCERS:
        raise ValueError(f"Unknown action type: '{type(action).__name__}'")
    return partial(reduce, action=action, rng=rng)
