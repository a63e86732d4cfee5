"""Public and per-player views of a game.

A view is a plain JSON-able dict. The public view contains only what every
player at the table can see; the private view adds what one player knows.
Other players' hands and roles never appear in either view while the game
is running.
"""

from typing import Any, Dict, List, Optional

from games.elder_sign.card_reducers import cthulhus_in_hands, elder_signs_revealed
from games.elder_sign.cards import describe_card, describe_role
from games.elder_sign.models import Game, GameState, PlayerId, get_player_or_die, is_terminal


def elder_signs_needed(game: Game) -> int:
    """Elder signs still to be revealed for the investigators to win."""
    return max(len(game.player_list) - elder_signs_revealed(game), 0)


def cthulhus_remaining(game: Game) -> int:
    return cthulhus_in_hands(game)


def _last_revealed(game: Game) -> Optional[Dict[str, str]]:
    if not game.visible_cards:
        return None
    card = game.visible_cards[-1]
    return {"card": card.value, "description": describe_card(card)}


def public_view(game: Game) -> Dict[str, Any]:
    reveal_roles = is_terminal(game.state)
    players: List[Dict[str, Any]] = []
    for player in game.player_list:
        entry: Dict[str, Any] = {
            "id": player.id,
            "hand_size": len(player.hand),
            "is_investigator": player.id == game.current_investigator_id,
            "is_paranoid": player.id == game.paranoid_player_id,
        }
        if reveal_roles:
            entry["role"] = player.role.value
        players.append(entry)

    return {
        "id": game.id,
        "round": game.round,
        "state": game.state.value,
        "options": game.options.model_dump(),
        "current_investigator_id": game.current_investigator_id,
        "paranoid_player_id": game.paranoid_player_id,
        "visible_cards": [card.value for card in game.visible_cards],
        "last_revealed": _last_revealed(game),
        "discard_count": len(game.discards),
        "elder_signs_needed": elder_signs_needed(game),
        "players": players,
    }


def private_view(game: Game, player_id: PlayerId) -> Dict[str, Any]:
    """What *player_id* sees: the public view plus their own hand and secrets.

    Raises:
        NotFoundError: if the player is not in the game
    """
    me = get_player_or_die(game, player_id)
    my_turn = game.state == GameState.IN_PROGRESS and game.current_investigator_id == me.id

    view = public_view(game)
    view["me"] = {
        "id": me.id,
        "role": me.role.value,
        "role_description": describe_role(me.role),
        "hand": [card.value for card in me.hand],
        "secrets": [secret.model_dump(mode="json") for secret in me.secrets],
        "my_turn": my_turn,
        "valid_targets": (
            [p.id for p in game.player_list if p.id != me.id and p.hand] if my_turn else []
        ),
    }
    return view
