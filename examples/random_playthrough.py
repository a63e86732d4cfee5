#!/usr/bin/env python3
"""
Random Playthrough

Seats a table of players, starts a game and lets every investigator pick a
random card from a random other player until the game ends. The table is
rendered after each round and at the end.

Usage:
    python examples/random_playthrough.py [players] [seed] [config.yaml]
"""

import asyncio
import random
import sys
import uuid
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console

from games.elder_sign.models import GameState
from lobby.config import create_config, create_facade, load_config
from lobby.display import render_game


async def play(num_players: int, seed: int, config_path: str = None) -> None:
    config = load_config(config_path) if config_path else create_config(seed=seed)
    facade = create_facade(config)
    console = Console()
    picker = random.Random(seed)
    game_id = f"random-{seed}-{uuid.uuid4().hex[:8]}"

    await facade.create_game(game_id, "player_1")
    for i in range(2, num_players + 1):
        await facade.join_game(game_id, f"player_{i}")
    game = await facade.start_game(game_id)
    render_game(game, console=console)

    while game.state == GameState.IN_PROGRESS:
        targets = [
            p for p in game.player_list
            if p.id != game.current_investigator_id and p.hand
        ]
        if not targets:
            console.print("[red]Nobody left to investigate.[/]")
            break

        target = picker.choice(targets)
        card_number = picker.randint(1, len(target.hand))
        previous_round = game.round
        game = await facade.investigate(game_id, game.current_investigator_id, target.id, card_number)
        console.print(
            f"[dim]{game.history[-1]['source_player']} → {target.id} #{card_number}:[/] "
            f"{game.visible_cards[-1].value}"
        )
        if game.round != previous_round:
            render_game(game, console=console)

    render_game(game, console=console)


def main():
    num_players = int(sys.argv[1]) if len(sys.argv) > 1 else 5
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 42
    config_path = sys.argv[3] if len(sys.argv) > 3 else None
    asyncio.run(play(num_players, seed, config_path))


if __name__ == "__main__":
    main()
