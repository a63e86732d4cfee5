"""Lifecycle reducers: create, join, configure, start, restart, pause, advance.

Every reducer has the shape ``(game_or_None, action, rng=None) -> Game``. The
incoming game is never mutated; reducers work on a deep copy and return it,
or raise a ``GameError`` without side effects.
"""

import random
from typing import List, Optional

from core.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from games.elder_sign.actions import (
    ForceGameState,
    JoinGame,
    NewGame,
    NextRound,
    PauseGame,
    RestartGame,
    SetInvestigator,
    StartGame,
    UpdateGameOptions,
    history_entry,
)
from games.elder_sign.models import (
    Card,
    Game,
    GameOptions,
    GameState,
    Player,
    Role,
    get_player_or_die,
)
from games.elder_sign.setups import (
    DEFAULT_OPTIONS,
    MAX_ROUNDS,
    SUPPORTED_SPECIAL_CARDS,
    PlayerSetup,
    setup_for,
)
from games.elder_sign.utilities import (
    add_values,
    collect_and_redeal,
    deal_cards_to_players,
    shuffle,
)


# ------------------------------------------------------------------
# reducers
# ------------------------------------------------------------------


def on_new_game(
    old_game: Optional[Game], action: NewGame, rng: Optional[random.Random] = None
) -> Game:
    """Handles a new game action, optionally seating the creating player."""
    if old_game is not None:
        raise AlreadyExistsError(f"Game {old_game.id} already exists.", game_id=old_game.id)

    options = action.options or DEFAULT_OPTIONS
    game = Game(id=action.game_id, options=options.model_copy())
    game.history.append(history_entry(action))

    if action.player_id:
        game = on_join_game(game, JoinGame(game_id=action.game_id, player_id=action.player_id))
    return game


def on_join_game(
    game: Optional[Game], action: JoinGame, rng: Optional[random.Random] = None
) -> Game:
    """Handles a new player joining the game."""
    game = _copy_or_die(game, action.game_id)
    if game.has_player(action.player_id):
        raise AlreadyExistsError(f"{action.player_id} is already in {game.id}", game_id=game.id)
    if game.state != GameState.NOT_STARTED:
        raise InvalidStateError(f"{game.id} is already in progress.", game_id=game.id)

    game.player_list.append(Player(id=action.player_id))
    game.history.append(history_entry(action))
    return game


def on_update_game_options(
    game: Optional[Game], action: UpdateGameOptions, rng: Optional[random.Random] = None
) -> Game:
    """Replaces the game options. Only allowed before the game starts."""
    game = _copy_or_die(game, action.game_id)
    if game.state != GameState.NOT_STARTED:
        raise InvalidStateError(f"{game.id} is already in progress.", game_id=game.id)

    game.options = action.options.model_copy()
    game.history.append(history_entry(action))
    return game


def on_start_game(
    game: Optional[Game], action: StartGame, rng: Optional[random.Random] = None
) -> Game:
    """Handles a start game action: roles, hands and the first investigator."""
    game = _copy_or_die(game, action.game_id)
    if game.state != GameState.NOT_STARTED:
        raise InvalidStateError(f"{game.id} has already been started.", game_id=game.id)

    start_game(game, rng)
    game.history.append(history_entry(action))
    return game


def on_restart_game(
    game: Optional[Game], action: RestartGame, rng: Optional[random.Random] = None
) -> Game:
    """Replaces the game with a freshly started one over the same roster."""
    old = _copy_or_die(game, action.game_id)

    new_game = Game(
        id=old.id,
        player_list=[Player(id=player.id) for player in old.player_list],
        options=old.options.model_copy(),
    )
    start_game(new_game, rng)
    return new_game


def on_next_round(
    game: Optional[Game], action: NextRound, rng: Optional[random.Random] = None
) -> Game:
    """Resumes a paused game into the next round with a fresh deal."""
    game = _copy_or_die(game, action.game_id)
    if game.state != GameState.PAUSED:
        raise InvalidStateError(
            f"Game must be paused to go to the next round, but was in state {game.state.value}",
            game_id=game.id,
        )
    if game.round >= MAX_ROUNDS:
        raise InvalidStateError(
            f"{game.id} is already in round {game.round} of {MAX_ROUNDS}.", game_id=game.id
        )

    game.state = GameState.IN_PROGRESS
    game.round += 1
    game.paranoid_player_id = None
    collect_and_redeal(game, rng)
    game.history.append(history_entry(action))
    return game


def on_pause_game(
    game: Optional[Game], action: PauseGame, rng: Optional[random.Random] = None
) -> Game:
    """Pauses a game in progress; ``on_next_round`` resumes it."""
    game = _copy_or_die(game, action.game_id)
    if game.state != GameState.IN_PROGRESS:
        raise InvalidStateError(
            f"Only games in progress can be paused, but {game.id} was in state "
            f"{game.state.value}",
            game_id=game.id,
        )

    game.state = GameState.PAUSED
    game.history.append(history_entry(action))
    return game


def on_force_game_state(
    game: Optional[Game], action: ForceGameState, rng: Optional[random.Random] = None
) -> Game:
    """Replaces the game wholesale. No validation."""
    return action.game.model_copy(deep=True)


def on_set_investigator(
    game: Optional[Game], action: SetInvestigator, rng: Optional[random.Random] = None
) -> Game:
    """Hands the flashlight to a specific player, ignoring turn order."""
    game = _copy_or_die(game, action.game_id)
    game.current_investigator_id = get_player_or_die(game, action.target_player).id
    game.history.append(history_entry(action))
    return game


# ------------------------------------------------------------------
# transitions
# ------------------------------------------------------------------


def start_game(game: Game, rng: Optional[random.Random] = None) -> None:
    """Moves *game* (in place) from NOT_STARTED to IN_PROGRESS."""
    setup = setup_for(len(game.player_list))
    options = game.options or DEFAULT_OPTIONS
    _check_deck_fits(game, setup, options)

    source = rng or random
    starting_player = source.randrange(len(game.player_list))
    game.current_investigator_id = game.player_list[starting_player].id

    assign_roles(game.player_list, setup, rng)
    generate_initial_hands(game.player_list, setup, options, rng)

    game.state = GameState.IN_PROGRESS


def assign_roles(
    players: List[Player], setup: PlayerSetup, rng: Optional[random.Random] = None
) -> None:
    """Deals one role per player from the shuffled role pool."""
    roles: List[Role] = []
    add_values(roles, Role.INVESTIGATOR, setup.investigators)
    add_values(roles, Role.CULTIST, setup.cultists)

    shuffle(roles, rng)
    for player in players:
        if not roles:
            raise InvalidArgumentError("Ran out of roles.")
        player.role = roles.pop()


def generate_initial_hands(
    players: List[Player],
    setup: PlayerSetup,
    options: GameOptions,
    rng: Optional[random.Random] = None,
) -> None:
    """Builds the starting deck and deals it.

    Deck: Cthulhus, the setup's elder signs, a random draw of distinct
    special cards, then rocks up to ``elder_signs * 5`` cards.
    """
    cards: List[Card] = []
    add_values(cards, Card.CTHULHU, options.cthulhu_count)
    add_values(cards, Card.ELDER_SIGN, setup.elder_signs)

    specials = list(SUPPORTED_SPECIAL_CARDS)
    shuffle(specials, rng)
    cards.extend(specials[:options.special_card_count])

    add_values(cards, Card.FUTILE_INVESTIGATION, setup.deck_size - len(cards))

    deal_cards_to_players(players, cards, rng)


# ------------------------------------------------------------------
# private helpers
# ------------------------------------------------------------------


def _copy_or_die(game: Optional[Game], game_id: str) -> Game:
    if game is None:
        raise NotFoundError(f"No game {game_id} exists.", game_id=game_id)
    return game.model_copy(deep=True)


def _check_deck_fits(game: Game, setup: PlayerSetup, options: GameOptions) -> None:
    fixed = options.cthulhu_count + setup.elder_signs + options.special_card_count
    if fixed > setup.deck_size:
        raise InvalidArgumentError(
            f"{options.cthulhu_count} Cthulhu, {setup.elder_signs} elder signs and "
            f"{options.special_card_count} special cards do not fit in a deck of "
            f"{setup.deck_size} for {len(game.player_list)} players.",
            game_id=game.id,
        )
