"""Tests for shuffling, dealing and the static tables."""

import random
from collections import Counter

import pytest

from core.errors import InvalidArgumentError
from games.elder_sign.models import Card, Player
from games.elder_sign.setups import (
    CARDS_PER_ELDER_SIGN,
    MAX_PLAYERS,
    MIN_PLAYERS,
    PLAYER_SETUPS,
    setup_for,
)
from games.elder_sign.utilities import (
    add_values,
    collect_and_redeal,
    count_cards,
    deal_cards_to_players,
    shuffle,
)
from games.elder_sign.testing import all_hand_cards, make_game


def _players(n: int):
    return [Player(id=f"p{i}") for i in range(n)]


# ── TestShuffle ───────────────────────────────────────────────────────────────


class TestShuffle:
    def test_is_a_permutation(self):
        items = list(range(50))
        shuffle(items, random.Random(5))
        assert sorted(items) == list(range(50))

    def test_seeded_shuffle_is_reproducible(self):
        a, b = list(range(20)), list(range(20))
        shuffle(a, random.Random(9))
        shuffle(b, random.Random(9))
        assert a == b

    def test_empty_and_single(self):
        empty, single = [], ["x"]
        shuffle(empty)
        shuffle(single)
        assert empty == []
        assert single == ["x"]

    def test_every_position_reachable(self):
        rng = random.Random(0)
        firsts = set()
        for _ in range(200):
            items = [0, 1, 2, 3]
            shuffle(items, rng)
            firsts.add(items[0])
        assert firsts == {0, 1, 2, 3}


# ── TestDeal ──────────────────────────────────────────────────────────────────


class TestDeal:
    @pytest.mark.parametrize("n_cards,n_players", [(10, 2), (17, 4), (3, 5), (0, 3), (65, 13)])
    def test_floor_or_ceil_and_nothing_left(self, n_cards, n_players):
        players = _players(n_players)
        cards = [Card.FUTILE_INVESTIGATION] * n_cards
        deal_cards_to_players(players, cards, random.Random(1))

        sizes = [len(p.hand) for p in players]
        assert sum(sizes) == n_cards
        assert cards == []
        assert min(sizes) >= n_cards // n_players
        assert max(sizes) <= -(-n_cards // n_players)

    def test_earlier_players_get_extra_cards(self):
        players = _players(3)
        deal_cards_to_players(players, [Card.FUTILE_INVESTIGATION] * 7)
        assert [len(p.hand) for p in players] == [3, 2, 2]

    def test_hands_are_cleared_first(self):
        players = _players(2)
        players[0].hand = [Card.CTHULHU] * 4
        deal_cards_to_players(players, [Card.ELDER_SIGN, Card.ELDER_SIGN])
        assert [card for p in players for card in p.hand] == [Card.ELDER_SIGN, Card.ELDER_SIGN]

    def test_no_players(self):
        cards = [Card.ELDER_SIGN]
        deal_cards_to_players([], cards)
        assert cards == [Card.ELDER_SIGN]

    def test_collect_and_redeal_includes_discards(self):
        game = make_game("g", 1, {"p1": "CR", "p2": "S"}, "RR")
        game.discards = [Card.PARANOIA]
        collect_and_redeal(game, random.Random(2))

        assert game.discards == []
        assert Counter(all_hand_cards(game)) == Counter(
            [Card.CTHULHU, Card.FUTILE_INVESTIGATION, Card.ELDER_SIGN, Card.PARANOIA]
        )
        assert len(game.visible_cards) == 2


# ── TestHelpers ───────────────────────────────────────────────────────────────


class TestHelpers:
    def test_add_values(self):
        items = [Card.CTHULHU]
        add_values(items, Card.ELDER_SIGN, 2)
        add_values(items, Card.MIRAGE, 0)
        assert items == [Card.CTHULHU, Card.ELDER_SIGN, Card.ELDER_SIGN]

    def test_count_cards(self):
        cards = [Card.ELDER_SIGN, Card.CTHULHU, Card.ELDER_SIGN]
        assert count_cards(cards, Card.ELDER_SIGN) == 2
        assert count_cards(cards, Card.MIRAGE) == 0


# ── TestSetups ────────────────────────────────────────────────────────────────


class TestSetups:
    def test_supported_range(self):
        assert (MIN_PLAYERS, MAX_PLAYERS) == (2, 13)
        assert sorted(PLAYER_SETUPS) == list(range(2, 14))

    def test_one_elder_sign_per_player(self):
        for n, setup in PLAYER_SETUPS.items():
            assert setup.elder_signs == n
            assert setup.deck_size == n * CARDS_PER_ELDER_SIGN
            assert setup.investigators + setup.cultists >= n

    @pytest.mark.parametrize("n", [0, 1, 14, 100])
    def test_unsupported_counts(self, n):
        with pytest.raises(InvalidArgumentError, match="2-13"):
            setup_for(n)
