"""Tests for the GameFacade.

Coverage:
- Create / join / options / start / restart through the store
- Player-count limits surfaced to callers
- Investigation scenarios end to end (forced state + set investigator)
- Pause and next round
- Subscriptions and player views
- Logging of accepted and rejected actions
"""

import asyncio
import logging
import random

import pytest

from core.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    TurnViolationError,
)
from games.elder_sign.models import Card, GameOptions, GameState
from games.elder_sign.testing import cards_from_letters, make_game
from lobby.facade import GameFacade
from lobby.storage import InMemoryGameStore


# ── helpers ───────────────────────────────────────────────────────────────────


def _facade(seed: int = 0) -> GameFacade:
    return GameFacade(InMemoryGameStore(), rng=random.Random(seed))


def _run(coro):
    return asyncio.run(coro)


async def _seat(facade: GameFacade, game_id: str, n: int) -> None:
    await facade.create_game(game_id, "player1")
    for i in range(2, n + 1):
        await facade.join_game(game_id, f"player{i}")


async def _forced(facade: GameFacade, hands, visible="", investigator="p0", round=1):
    await facade.force_game_state(make_game("t", round, hands, visible))
    await facade.set_investigator("t", investigator)


# ── TestCreateGame ────────────────────────────────────────────────────────────


class TestCreateGame:
    def test_creates_games_in_not_started_state(self):
        facade = _facade()

        async def scenario():
            await facade.create_game("id1", "player1")
            await facade.create_game("id2", "player2")
            return await facade.list_games(), await facade.get_game("id1")

        games, game1 = _run(scenario())
        assert [g.id for g in games] == ["id1", "id2"]
        assert all(g.state == GameState.NOT_STARTED for g in games)
        assert game1.player_ids() == ["player1"]

    def test_rejects_existing_id(self):
        facade = _facade()
        _run(facade.create_game("id1", "player1"))
        with pytest.raises(AlreadyExistsError):
            _run(facade.create_game("id1"))

    def test_get_missing_game(self):
        with pytest.raises(NotFoundError):
            _run(_facade().get_game("nope"))

    def test_default_options_applied(self):
        facade = GameFacade(
            InMemoryGameStore(), default_options=GameOptions(special_card_count=3)
        )
        game = _run(facade.create_game("g"))
        assert game.options.special_card_count == 3

    def test_returned_game_is_a_copy(self):
        facade = _facade()
        game = _run(facade.create_game("g", "a"))
        game.player_list.clear()
        assert _run(facade.get_game("g")).player_ids() == ["a"]


# ── TestStartGame ─────────────────────────────────────────────────────────────


class TestStartGame:
    def test_sets_game_in_progress(self):
        facade = _facade()

        async def scenario():
            await _seat(facade, "game1", 4)
            await facade.start_game("game1")
            return await facade.get_game("game1")

        game = _run(scenario())
        assert game.state == GameState.IN_PROGRESS
        assert sum(len(p.hand) for p in game.player_list) == 20

    def test_allows_up_to_max_players(self):
        facade = _facade()

        async def scenario():
            await _seat(facade, "game1", 13)
            return await facade.start_game("game1")

        assert _run(scenario()).state == GameState.IN_PROGRESS

    def test_rejects_more_than_max_players(self):
        facade = _facade()
        _run(_seat(facade, "game1", 14))
        with pytest.raises(InvalidArgumentError, match="2-13"):
            _run(facade.start_game("game1"))
        assert _run(facade.get_game("game1")).state == GameState.NOT_STARTED

    def test_join_missing_game(self):
        with pytest.raises(NotFoundError):
            _run(_facade().join_game("game1", "player2"))


# ── TestOptionsAndRestart ─────────────────────────────────────────────────────


class TestOptionsAndRestart:
    def test_updates_options(self):
        facade = _facade()
        _run(facade.create_game("game1", "player1"))
        _run(facade.update_game_options("game1", GameOptions(cthulhu_count=1, special_card_count=2)))
        game = _run(facade.get_game("game1"))
        assert game.options == GameOptions(cthulhu_count=1, special_card_count=2)

    def test_update_missing_game(self):
        with pytest.raises(NotFoundError):
            _run(_facade().update_game_options("game1", GameOptions(special_card_count=1)))

    def test_restart_resets_game(self):
        facade = _facade()

        async def scenario():
            await _seat(facade, "game1", 2)
            await facade.start_game("game1")
            await facade.restart_game("game1")
            return await facade.get_game("game1")

        game = _run(scenario())
        assert game.id == "game1"
        assert game.round == 1
        assert game.visible_cards == []
        assert game.state == GameState.IN_PROGRESS

    def test_restart_missing_game(self):
        with pytest.raises(NotFoundError):
            _run(_facade().restart_game("game1"))


# ── TestInvestigate ───────────────────────────────────────────────────────────


class TestInvestigate:
    def test_initial_rock_pick(self):
        facade = _facade()

        async def scenario():
            await _forced(facade, {"p0": "CSRRR", "p1": "RRRRR", "p2": "SSSRR", "p3": "RRRRR"})
            return await facade.investigate("t", "p0", "p1", 1)

        game = _run(scenario())
        assert game.visible_cards == [Card.FUTILE_INVESTIGATION]
        assert game.player_list[1].hand == cards_from_letters("RRRR")
        assert game.current_investigator_id == "p1"
        assert game.state == GameState.IN_PROGRESS

    def test_initial_cthulhu_pick(self):
        facade = _facade()

        async def scenario():
            await _forced(
                facade,
                {"p0": "CRRRR", "p1": "RRRRR", "p2": "SSSSR", "p3": "RRRRR"},
                investigator="p1",
            )
            return await facade.investigate("t", "p1", "p0", 1)

        game = _run(scenario())
        assert game.visible_cards == [Card.CTHULHU]
        assert game.current_investigator_id == "p0"
        assert game.state == GameState.CULTISTS_WON

    def test_next_round_on_last_card(self):
        facade = _facade()

        async def scenario():
            await _forced(facade, {"p0": "RRRRC", "p1": "RRRRR", "p2": "SSSSR", "p3": "RRRRR"})
            await facade.investigate("t", "p0", "p1", 1)
            await facade.investigate("t", "p1", "p2", 1)
            await facade.investigate("t", "p2", "p3", 1)
            return await facade.investigate("t", "p3", "p0", 1)

        game = _run(scenario())
        assert game.visible_cards == cards_from_letters("RSRR")
        assert [len(p.hand) for p in game.player_list] == [4, 4, 4, 4]
        assert game.current_investigator_id == "p0"
        assert game.round == 2

    def test_fourth_round_ends_game(self):
        facade = _facade()

        async def scenario():
            await _forced(
                facade,
                {"p0": "RC", "p1": "RR", "p2": "RS", "p3": "RR"},
                visible="SSSRRRRRRRRR",
                round=4,
            )
            await facade.investigate("t", "p0", "p1", 1)
            await facade.investigate("t", "p1", "p2", 1)
            await facade.investigate("t", "p2", "p3", 1)
            return await facade.investigate("t", "p3", "p0", 1)

        game = _run(scenario())
        assert game.state == GameState.CULTISTS_WON
        assert game.round == 4

    def test_wrong_player_rejected_and_nothing_stored(self):
        facade = _facade()
        _run(_forced(facade, {"p0": "RR", "p1": "RR", "p2": "RR"}))
        before = _run(facade.get_game("t"))

        with pytest.raises(TurnViolationError):
            _run(facade.investigate("t", "p1", "p2", 1))
        assert _run(facade.get_game("t")) == before


# ── TestPause ─────────────────────────────────────────────────────────────────


class TestPause:
    def test_pause_then_next_round(self):
        facade = _facade()

        async def scenario():
            await _forced(facade, {"p0": "RR", "p1": "SR"})
            await facade.pause_game("t")
            return await facade.next_round("t")

        game = _run(scenario())
        assert game.state == GameState.IN_PROGRESS
        assert game.round == 2


# ── TestSubscriptions ─────────────────────────────────────────────────────────


class TestSubscriptions:
    def test_emits_on_every_accepted_action(self):
        facade = _facade()
        states = []

        async def scenario():
            await facade.create_game("id", "player1")
            facade.subscribe_to_game("id", states.append)
            for name in ("p1", "p2", "p3"):
                await facade.join_game("id", name)
            await facade.start_game("id")
            await facade.force_game_state(
                make_game("id", 1, {"p1": "SSRRR", "p2": "RRRRR", "p3": "SSRRR", "p4": "RRRRC"})
            )
            await facade.set_investigator("id", "p1")
            await facade.investigate("id", "p1", "p4", 5)

        _run(scenario())
        assert len(states) == 8
        assert states[0].player_ids() == ["player1"]
        assert states[-1].state == GameState.CULTISTS_WON

    def test_rejected_actions_do_not_emit(self):
        facade = _facade()
        states = []
        _run(facade.create_game("id", "a"))
        facade.subscribe_to_game("id", states.append)

        with pytest.raises(AlreadyExistsError):
            _run(facade.join_game("id", "a"))
        assert len(states) == 1

    def test_subscribe_before_creation(self):
        facade = _facade()
        states = []
        sub = facade.subscribe_to_game("later", states.append)
        _run(facade.create_game("later"))
        sub.unsubscribe()
        _run(facade.join_game("later", "x"))

        assert states[0] is None
        assert len(states) == 2

    def test_subscribe_to_games(self):
        facade = _facade()
        indexes = []
        facade.subscribe_to_games(indexes.append)
        _run(facade.create_game("a"))
        _run(facade.create_game("b"))
        assert [sorted(index) for index in indexes] == [[], ["a"], ["a", "b"]]


# ── TestPlayerView ────────────────────────────────────────────────────────────


class TestPlayerView:
    def test_player_view(self):
        facade = _facade()
        _run(_forced(facade, {"p0": "RR", "p1": "SC"}))
        view = _run(facade.get_player_view("t", "p1"))

        assert view["me"]["hand"] == ["Light", "Cthulhu"]
        assert view["me"]["my_turn"] is False
        assert "hand" not in view["players"][0]

    def test_unknown_player(self):
        facade = _facade()
        _run(_forced(facade, {"p0": "RR", "p1": "SC"}))
        with pytest.raises(NotFoundError):
            _run(facade.get_player_view("t", "p9"))


# ── TestLogging ───────────────────────────────────────────────────────────────


class TestLogging:
    def test_rejection_logged_with_kind(self, caplog):
        facade = _facade()
        with caplog.at_level(logging.INFO, logger="lobby.facade"):
            with pytest.raises(NotFoundError):
                _run(facade.start_game("ghost"))
        assert "not_found" in caplog.text

    def test_finished_game_logged(self, caplog):
        facade = _facade()
        _run(_forced(facade, {"p0": "RR", "p1": "CR"}))
        with caplog.at_level(logging.INFO, logger="lobby.facade"):
            _run(facade.investigate("t", "p0", "p1", 1))
        assert "Cultists Win" in caplog.text
