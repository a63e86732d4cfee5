"""The card-play reducer: the turn engine of Elder Sign.

Turn flow
---------
1. the current investigator picks card ``n`` from another player's hand
2. the card is removed from that hand and appended to ``visible_cards``
3. the card's effect is applied (see ``CARD_EFFECTS``)
4. end of round: when still IN_PROGRESS and the visible pile grew to a
   multiple of the player count
   +-- round 4  ->  CULTISTS_WON
   +-- else     ->  round++, paranoia cleared, hands + discards redealt
5. flashlight: stays with the paranoid player unless the round just ended,
   otherwise passes to the investigated player
6. the action is appended to the history
"""

import random
from typing import Callable, Dict, Optional

from core.errors import (
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    TurnViolationError,
)
from games.elder_sign.actions import PlayCard, history_entry
from games.elder_sign.models import (
    Card,
    Game,
    GameState,
    Player,
    RoleSecret,
    get_player_or_die,
)
from games.elder_sign.setups import MAX_ROUNDS
from games.elder_sign.utilities import collect_and_redeal, count_cards


class CardPlay:
    """Everything a card effect needs to know about the current play."""

    def __init__(self, game: Game, source: Player, target: Player, card: Card):
        self.game = game
        self.source = source
        self.target = target
        self.card = card
        # Effects that do not grow the visible pile clear this flag.
        self.check_end_of_round = True


# ------------------------------------------------------------------
# reducer
# ------------------------------------------------------------------


def on_play_card(
    game: Optional[Game], action: PlayCard, rng: Optional[random.Random] = None
) -> Game:
    """Resolves a single investigation.

    Raises:
        NotFoundError: unknown game, target or source player
        InvalidStateError: the game is not in progress
        InvalidArgumentError: the card number is outside the target's hand
        TurnViolationError: the source is not the current investigator, or
            is investigating themselves
    """
    if game is None:
        raise NotFoundError(f"No game {action.game_id} exists.", game_id=action.game_id)
    if game.state != GameState.IN_PROGRESS:
        raise InvalidStateError(f"{game.id} is not in progress.", game_id=game.id)

    game = game.model_copy(deep=True)
    target = get_player_or_die(game, action.target_player)

    # Card numbers are 1 based.
    if action.card_number < 1:
        raise InvalidArgumentError("Card number must be >= 1.", game_id=game.id)
    if action.card_number > len(target.hand):
        raise InvalidArgumentError(
            f"{target.id} only has {len(target.hand)} cards", game_id=game.id
        )
    if game.current_investigator_id != action.source_player:
        raise TurnViolationError(
            f"{action.source_player} is not the current investigator.", game_id=game.id
        )
    if action.source_player == action.target_player:
        raise TurnViolationError("You cannot investigate yourself.", game_id=game.id)
    source = get_player_or_die(game, action.source_player)

    card = target.hand.pop(action.card_number - 1)
    game.visible_cards.append(card)

    play = CardPlay(game, source, target, card)
    apply_card_effect(play)

    round_ended = False
    if play.check_end_of_round:
        round_ended = handle_potential_end_of_round(game, rng)

    if game.paranoid_player_id is not None and not round_ended:
        game.current_investigator_id = game.paranoid_player_id
    else:
        game.current_investigator_id = target.id

    game.history.append(history_entry(action))
    return game


def handle_potential_end_of_round(game: Game, rng: Optional[random.Random] = None) -> bool:
    """Ends the round if every player has been investigated once.

    Returns:
        True if the round ended (including the game ending on round 4)
    """
    if game.state != GameState.IN_PROGRESS:
        return False
    if not game.player_list or len(game.visible_cards) % len(game.player_list) != 0:
        return False

    if game.round >= MAX_ROUNDS:
        # Out of rounds: the investigators failed.
        game.state = GameState.CULTISTS_WON
        return True

    game.round += 1
    game.paranoid_player_id = None
    collect_and_redeal(game, rng)
    return True


def elder_signs_revealed(game: Game) -> int:
    return count_cards(game.visible_cards, Card.ELDER_SIGN)


def cthulhus_in_hands(game: Game) -> int:
    return sum(count_cards(player.hand, Card.CTHULHU) for player in game.player_list)


# ------------------------------------------------------------------
# card effects
# ------------------------------------------------------------------


def _no_effect(play: CardPlay) -> None:
    pass


def _elder_sign(play: CardPlay) -> None:
    game = play.game
    if elder_signs_revealed(game) >= len(game.player_list):
        game.state = GameState.INVESTIGATORS_WON


def _cthulhu(play: CardPlay) -> None:
    # Every Cthulhu has to surface before the cultists win.
    if cthulhus_in_hands(play.game) == 0:
        play.game.state = GameState.CULTISTS_WON


def _evil_presence(play: CardPlay) -> None:
    play.game.discards.extend(play.target.hand)
    play.target.hand = []


def _mirage(play: CardPlay) -> None:
    game = play.game
    # Skip the mirage that was just appended at the tail.
    for index in range(len(game.visible_cards) - 2, -1, -1):
        if game.visible_cards[index] == Card.ELDER_SIGN:
            game.discards.append(Card.ELDER_SIGN)
            game.visible_cards[index] = Card.MIRAGE
            game.visible_cards.pop()
            play.check_end_of_round = False
            break

    if game.round >= MAX_ROUNDS:
        game.state = GameState.CULTISTS_WON


def _paranoia(play: CardPlay) -> None:
    play.game.paranoid_player_id = play.target.id


def _private_eye(play: CardPlay) -> None:
    play.source.secrets.append(RoleSecret(player=play.target.id, role=play.target.role))


CARD_EFFECTS: Dict[Card, Callable[[CardPlay], None]] = {
    Card.FUTILE_INVESTIGATION: _no_effect,
    Card.INSANITYS_GRASP: _no_effect,
    Card.ELDER_SIGN: _elder_sign,
    Card.CTHULHU: _cthulhu,
    Card.EVIL_PRESENCE: _evil_presence,
    Card.MIRAGE: _mirage,
    Card.PARANOIA: _paranoia,
    Card.PRIVATE_EYE: _private_eye,
}


def apply_card_effect(play: CardPlay) -> None:
    """Dispatches to the effect of the revealed card."""
    effect = CARD_EFFECTS.get(play.card)
    if effect is None:
        raise InvalidArgumentError(f"Invalid card type: {play.card}", game_id=play.game.id)
    effect(play)
