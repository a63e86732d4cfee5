"""Randomisation and dealing helpers."""

import random
from typing import List, Optional, Sequence, TypeVar

from games.elder_sign.models import Card, Game, Player

T = TypeVar("T")


def shuffle(items: List[T], rng: Optional[random.Random] = None) -> None:
    """Fisher-Yates shuffle of *items*, in place.

    Args:
        items: The list to permute
        rng: Random source; the module-level ``random`` generator if None
    """
    source = rng or random
    current = len(items)
    while current > 0:
        picked = source.randrange(current)
        current -= 1
        items[current], items[picked] = items[picked], items[current]


def deal_cards_to_players(
    players: Sequence[Player],
    cards: List[Card],
    rng: Optional[random.Random] = None,
) -> None:
    """Shuffle *cards* and deal them out one at a time in player-list order.

    Every hand is cleared first. Dealing stops as soon as the pool is empty,
    so with an uneven split the earlier players get the extra cards. The
    *cards* list is consumed.
    """
    shuffle(cards, rng)

    for player in players:
        player.hand = []

    if not players:
        return

    while cards:
        for player in players:
            player.hand.append(cards.pop())
            if not cards:
                return


def collect_and_redeal(game: Game, rng: Optional[random.Random] = None) -> None:
    """Gather every hand plus the discards and deal them back out.

    Discards (e.g. from Evil Presence) only stay out for the round they were
    discarded in.
    """
    remaining: List[Card] = []
    for player in game.player_list:
        remaining.extend(player.hand)
        player.hand = []
    remaining.extend(game.discards)
    game.discards = []
    deal_cards_to_players(game.player_list, remaining, rng)


def add_values(items: List[T], value: T, count: int) -> None:
    """Append *count* copies of *value* to *items*."""
    items.extend([value] * max(count, 0))


def count_cards(cards: Sequence[Card], card: Card) -> int:
    return sum(1 for c in cards if c == card)
