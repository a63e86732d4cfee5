"""Fixtures for building games in tests and examples.

Hands and visible piles are written as card letters (see
``models.card_from_letter``), e.g. ``{"p1": "CSRRR", "p2": "RRRRR"}``.
"""

from typing import Dict, List, Optional, Sequence

from games.elder_sign.models import (
    Card,
    Game,
    GameState,
    Player,
    PlayerId,
    Role,
    card_from_letter,
)


def cards_from_letters(letters: str) -> List[Card]:
    return [card_from_letter(letter) for letter in letters]


def make_game(
    game_id: str,
    round: int,
    hands: Dict[str, str],
    visible_cards: str = "",
    role: Role = Role.CULTIST,
) -> Game:
    """An IN_PROGRESS game with the given hands; the first player investigates."""
    game = Game(
        id=game_id,
        round=round,
        state=GameState.IN_PROGRESS,
        player_list=[
            Player(id=player_id, role=role, hand=cards_from_letters(hand))
            for player_id, hand in hands.items()
        ],
        visible_cards=cards_from_letters(visible_cards),
    )
    if game.player_list:
        game.current_investigator_id = game.player_list[0].id
    return game


class GameBuilder:
    """Fluent builder for games that need more control than ``make_game``."""

    def __init__(self, game_id: str):
        self._game = Game(id=game_id, round=0, state=GameState.IN_PROGRESS)

    def set_state(self, state: GameState) -> "GameBuilder":
        self._game.state = state
        return self

    def set_round(self, round: int) -> "GameBuilder":
        self._game.round = round
        return self

    def add_player(
        self,
        player_id: PlayerId,
        role: Role = Role.NOT_SET,
        hand: Optional[Sequence[Card]] = None,
    ) -> "GameBuilder":
        self._game.player_list.append(Player(id=player_id, role=role, hand=list(hand or [])))
        return self

    def set_investigator(self, player_id: PlayerId) -> "GameBuilder":
        self._game.current_investigator_id = player_id
        return self

    def build(self) -> Game:
        return self._game.model_copy(deep=True)


def all_hand_cards(game: Game) -> List[Card]:
    cards: List[Card] = []
    for player in game.player_list:
        cards.extend(player.hand)
    return cards
