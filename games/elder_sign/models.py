"""Data model for Elder Sign: card and role vocabulary, players and games.

The ``Game`` aggregate is a plain pydantic model. Reducers copy it with
``model_copy(deep=True)`` before mutating, and two games are equal when all of
their fields are equal, which is what the storage layer relies on to
deduplicate notifications.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from core.errors import NotFoundError


PlayerId = str
GameId = str


class Card(Enum):
    """The cards that can appear in a player's hand."""

    FUTILE_INVESTIGATION = "Rock"
    ELDER_SIGN = "Light"
    CTHULHU = "Cthulhu"
    INSANITYS_GRASP = "Insanity's Grasp"
    EVIL_PRESENCE = "Evil Presence"
    MIRAGE = "Mirage"
    PARANOIA = "Paranoia"
    PRIVATE_EYE = "Private Eye"


class Role(Enum):
    """The roles players can be assigned."""

    NOT_SET = "Not set"
    CULTIST = "Cultist"
    INVESTIGATOR = "Investigator"


class GameState(Enum):
    """The states a game can be in."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    PAUSED = "Paused"
    INVESTIGATORS_WON = "Investigators Win"
    CULTISTS_WON = "Cultists Win"


TERMINAL_STATES = {GameState.INVESTIGATORS_WON, GameState.CULTISTS_WON}


def is_terminal(state: GameState) -> bool:
    """Return True if *state* ends the game."""
    return state in TERMINAL_STATES


# ── card-letter codec (fixtures, compact rendering) ──────────────────────────

_LETTER_TO_CARD: Dict[str, Card] = {
    "C": Card.CTHULHU,
    "S": Card.ELDER_SIGN,
    "M": Card.MIRAGE,
    "E": Card.EVIL_PRESENCE,
    "P": Card.PARANOIA,
    "I": Card.PRIVATE_EYE,
    "G": Card.INSANITYS_GRASP,
    "R": Card.FUTILE_INVESTIGATION,
}

_CARD_TO_LETTER: Dict[Card, str] = {card: letter for letter, card in _LETTER_TO_CARD.items()}


def card_from_letter(letter: str) -> Card:
    """Decode one fixture letter. Unknown letters are rocks."""
    return _LETTER_TO_CARD.get(letter.upper(), Card.FUTILE_INVESTIGATION)


def card_letter(card: Card) -> str:
    return _CARD_TO_LETTER[card]


# ── options ───────────────────────────────────────────────────────────────────


class GameOptions(BaseModel):
    """Options configurable before a game starts.

    Attributes:
        special_card_count: How many distinct special cards to mix into the
            deck, drawn at random from the supported special set.
        cthulhu_count: How many Cthulhu cards are in the deck. All of them
            must be revealed for the cultists to win by Cthulhu.
    """

    special_card_count: int = Field(
        default=0,
        ge=0,
        le=5,
        description="Number of special cards drawn into the deck (0-5)",
    )
    cthulhu_count: int = Field(
        default=1,
        ge=1,
        description="Number of Cthulhu cards in the deck",
    )

    class Config:
        extra = "forbid"


# ── secrets ───────────────────────────────────────────────────────────────────


class RoleSecret(BaseModel):
    """Knowledge of another player's role. Valid for the whole game."""

    type: Literal["role"] = "role"
    player: PlayerId
    role: Role


class CardSecret(BaseModel):
    """Knowledge of a card at a hand position. Stale after the next redeal."""

    type: Literal["card"] = "card"
    player: PlayerId
    card: Card
    card_number: int


Secret = Annotated[Union[RoleSecret, CardSecret], Field(discriminator="type")]


# ── players & games ───────────────────────────────────────────────────────────


class Player(BaseModel):
    """A player in the game."""

    id: PlayerId
    role: Role = Role.NOT_SET
    hand: List[Card] = Field(default_factory=list)
    secrets: List[Secret] = Field(default_factory=list)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Game(BaseModel):
    """A single game instance.

    ``visible_cards`` accumulates across rounds; a round boundary is reached
    whenever its length is a multiple of the number of players.
    ``history`` holds the JSON form of every accepted action, oldest first.
    """

    id: GameId
    round: int = 1
    player_list: List[Player] = Field(default_factory=list)
    current_investigator_id: Optional[PlayerId] = None
    visible_cards: List[Card] = Field(default_factory=list)
    discards: List[Card] = Field(default_factory=list)
    paranoid_player_id: Optional[PlayerId] = None
    state: GameState = GameState.NOT_STARTED
    options: GameOptions = Field(default_factory=GameOptions)
    created: datetime = Field(default_factory=_utcnow)
    history: List[Dict[str, Any]] = Field(default_factory=list)

    def player_ids(self) -> List[PlayerId]:
        return [player.id for player in self.player_list]

    def has_player(self, player_id: PlayerId) -> bool:
        return any(player.id == player_id for player in self.player_list)

    def total_cards(self) -> int:
        """Cards in hands + visible + discards; constant within a game."""
        in_hands = sum(len(player.hand) for player in self.player_list)
        return in_hands + len(self.visible_cards) + len(self.discards)


def get_player_or_die(game: Game, player_id: PlayerId) -> Player:
    """Gets a player within a game or raises ``NotFoundError``."""
    for player in game.player_list:
        if player.id == player_id:
            return player
    raise NotFoundError(f"No player with ID {player_id} in game {game.id}", game_id=game.id)
