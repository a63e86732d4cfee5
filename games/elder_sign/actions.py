"""Actions accepted by the Elder Sign reducers.

Actions form a discriminated union on the ``type`` field. Every accepted
action except ``ForceGameState`` is appended to ``Game.history`` in its JSON
form, so the history doubles as an audit log.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from games.elder_sign.models import Game, GameId, GameOptions, PlayerId


class NewGame(BaseModel):
    type: Literal["new_game"] = "new_game"
    game_id: GameId
    options: Optional[GameOptions] = None
    player_id: Optional[PlayerId] = None


class JoinGame(BaseModel):
    type: Literal["join_game"] = "join_game"
    game_id: GameId
    player_id: PlayerId


class UpdateGameOptions(BaseModel):
    type: Literal["update_game_options"] = "update_game_options"
    game_id: GameId
    options: GameOptions


class StartGame(BaseModel):
    type: Literal["start_game"] = "start_game"
    game_id: GameId


class RestartGame(BaseModel):
    type: Literal["restart_game"] = "restart_game"
    game_id: GameId


class NextRound(BaseModel):
    type: Literal["next_round"] = "next_round"
    game_id: GameId


class PauseGame(BaseModel):
    type: Literal["pause_game"] = "pause_game"
    game_id: GameId


class PlayCard(BaseModel):
    """The current investigator reveals card ``card_number`` (1-based) of the target."""

    type: Literal["play_card"] = "play_card"
    game_id: GameId
    source_player: PlayerId
    target_player: PlayerId
    card_number: int


class SetInvestigator(BaseModel):
    """Test/admin only: hand the flashlight to ``target_player``."""

    type: Literal["set_investigator"] = "set_investigator"
    game_id: GameId
    target_player: PlayerId


class ForceGameState(BaseModel):
    """Test/admin only: replace the whole game."""

    type: Literal["force_game_state"] = "force_game_state"
    game: Game


Action = Annotated[
    Union[
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
    ],
    Field(discriminator="type"),
]

_ACTION_ADAPTER = TypeAdapter(Action)


def parse_action(data: Dict[str, Any]):
    """Validate a raw dict (e.g. a history entry) into the matching action."""
    return _ACTION_ADAPTER.validate_python(data)


def game_id_of(action) -> GameId:
    """Return the ID of the game *action* targets."""
    if isinstance(action, ForceGameState):
        return action.game.id
    return action.game_id


def history_entry(action) -> Dict[str, Any]:
    """The JSON form of *action* as stored in ``Game.history``."""
    return action.model_dump(mode="json")
