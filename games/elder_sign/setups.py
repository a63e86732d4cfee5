"""Static game tables for Elder Sign.

All player-count-dependent constants live here so that the reducers stay
table-driven. Values are keyed by the number of players (2-13).
"""

from dataclasses import dataclass
from typing import Dict, List

from core.errors import InvalidArgumentError
from games.elder_sign.models import Card, GameOptions


@dataclass(frozen=True)
class PlayerSetup:
    """Role distribution and deck composition for one player count."""

    investigators: int
    cultists: int
    elder_signs: int

    @property
    def deck_size(self) -> int:
        return self.elder_signs * CARDS_PER_ELDER_SIGN


MAX_ROUNDS = 4

# Each elder sign brings this many cards into the deck (rocks pad the rest).
CARDS_PER_ELDER_SIGN = 5


# ── player setups (keyed by player count) ─────────────────────────────────────

PLAYER_SETUPS: Dict[int, PlayerSetup] = {
    2:  PlayerSetup(investigators=1, cultists=1, elder_signs=2),
    3:  PlayerSetup(investigators=2, cultists=1, elder_signs=3),
    4:  PlayerSetup(investigators=3, cultists=2, elder_signs=4),
    5:  PlayerSetup(investigators=4, cultists=2, elder_signs=5),
    6:  PlayerSetup(investigators=4, cultists=2, elder_signs=6),
    7:  PlayerSetup(investigators=5, cultists=3, elder_signs=7),
    8:  PlayerSetup(investigators=6, cultists=3, elder_signs=8),
    9:  PlayerSetup(investigators=7, cultists=3, elder_signs=9),
    10: PlayerSetup(investigators=7, cultists=4, elder_signs=10),
    11: PlayerSetup(investigators=7, cultists=4, elder_signs=11),
    12: PlayerSetup(investigators=8, cultists=4, elder_signs=12),
    13: PlayerSetup(investigators=8, cultists=5, elder_signs=13),
}

MIN_PLAYERS = min(PLAYER_SETUPS)
MAX_PLAYERS = max(PLAYER_SETUPS)


def setup_for(num_players: int) -> PlayerSetup:
    """Return the setup for *num_players*, or raise if unsupported."""
    setup = PLAYER_SETUPS.get(num_players)
    if setup is None:
        raise InvalidArgumentError(
            f"We only support {MIN_PLAYERS}-{MAX_PLAYERS} players at this time, "
            f"got {num_players}."
        )
    return setup


# ── special cards ─────────────────────────────────────────────────────────────

SUPPORTED_SPECIAL_CARDS: List[Card] = [
    Card.EVIL_PRESENCE,
    Card.INSANITYS_GRASP,
    Card.MIRAGE,
    Card.PARANOIA,
    Card.PRIVATE_EYE,
]

# The options used when a game is created without any.
DEFAULT_OPTIONS = GameOptions(special_card_count=0, cthulhu_count=1)
