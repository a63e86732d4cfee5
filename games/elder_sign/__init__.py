"""Elder Sign game module.

A hidden-role card game for 2–13 players. Cultists and Investigators take
turns revealing cards from each other's hands over up to four rounds; the
Investigators win by revealing enough Elder Signs, the Cultists by revealing
every Cthulhu or by running out the clock.

Components:
- models:         Card/role vocabulary and the Game/Player data model
- setups:         Player-count table and deck constants
- actions:        Action union accepted by the reducers
- utilities:      Shuffling and dealing
- game_reducers:  Lifecycle reducers (new, join, options, start, restart, ...)
- card_reducers:  The card-play turn engine
- reducer:        Action -> reducer dispatch
- views:          Public and per-player views
- cards:          Card and role descriptions
- testing:        Fixtures for tests and examples
"""

from games.elder_sign.models import (
    Card,
    Role,
    GameState,
    Game,
    GameOptions,
    Player,
    RoleSecret,
    CardSecret,
    get_player_or_die,
    is_terminal,
)
from games.elder_sign.setups import PLAYER_SETUPS, SUPPORTED_SPECIAL_CARDS, MAX_ROUNDS
from games.elder_sign.actions import (
    Action,
    NewGame,
    JoinGame,
    UpdateGameOptions,
    StartGame,
    RestartGame,
    NextRound,
    PauseGame,
    PlayCard,
    SetInvestigator,
    ForceGameState,
    parse_action,
)
from games.elder_sign.reducer import reduce, resolve_reducer
from games.elder_sign.views import public_view, private_view

__all__ = [
    "Card",
    "Role",
    "GameState",
    "Game",
    "GameOptions",
    "Player",
    "RoleSecret",
    "CardSecret",
    "get_player_or_die",
    "is_terminal",
    "PLAYER_SETUPS",
    "SUPPORTED_SPECIAL_CARDS",
    "MAX_ROUNDS",
    "Action",
    "NewGame",
    "JoinGame",
    "UpdateGameOptions",
    "StartGame",
    "RestartGame",
    "NextRound",
    "PauseGame",
    "PlayCard",
    "SetInvestigator",
    "ForceGameState",
    "parse_action",
    "reduce",
    "resolve_reducer",
    "public_view",
    "private_view",
]

GAME_TYPE = "elder_sign"
