"""
Rich terminal display for an Elder Sign table.

Renders three sections:
  1. Header panel (game id, round, state, elder signs still needed)
  2. Player table (hand size, flashlight, paranoia, role when visible)
  3. Revealed cards, with the text of the latest one
"""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from games.elder_sign.cards import describe_card
from games.elder_sign.models import Card, Game, GameState, Role, is_terminal
from games.elder_sign.setups import MAX_ROUNDS
from games.elder_sign.views import cthulhus_remaining, elder_signs_needed


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

_CARD_STYLES = {
    Card.ELDER_SIGN: "bold bright_green",
    Card.CTHULHU: "bold red",
    Card.FUTILE_INVESTIGATION: "dim",
    Card.MIRAGE: "magenta",
}


def _card_markup(card: Card) -> str:
    style = _CARD_STYLES.get(card, "yellow")
    return f"[{style}]{card.value}[/]"


def format_cards(cards: Sequence[Card]) -> str:
    """Comma-separated rich markup for *cards*."""
    if not cards:
        return "[dim]none[/]"
    return ", ".join(_card_markup(card) for card in cards)


def _state_markup(state: GameState) -> str:
    if state == GameState.INVESTIGATORS_WON:
        return f"[bold bright_green]{state.value}[/]"
    if state == GameState.CULTISTS_WON:
        return f"[bold red]{state.value}[/]"
    if state == GameState.IN_PROGRESS:
        return f"[cyan]{state.value}[/]"
    return f"[dim]{state.value}[/]"


def _role_markup(role: Role) -> str:
    if role == Role.CULTIST:
        return "[red]Cultist[/]"
    if role == Role.INVESTIGATOR:
        return "[green]Investigator[/]"
    return "[dim]—[/]"


# ---------------------------------------------------------------------------
# Main renderer
# ---------------------------------------------------------------------------


def render_game(
    game: Game,
    console: Optional[Console] = None,
    viewer: Optional[str] = None,
) -> None:
    """
    Render *game* to the terminal.

    Roles are shown for every player once the game is over; before that only
    *viewer*'s own role (and hand) is shown.
    """
    if console is None:
        console = Console()

    reveal_all = is_terminal(game.state)

    # === Header panel =====================================================
    console.print(Panel(
        Text.assemble(
            (f"Round {game.round} of {MAX_ROUNDS}", "bold bright_white"),
            ("  •  ", "dim"),
            (f"{elder_signs_needed(game)} elder signs needed", "cyan"),
            ("  •  ", "dim"),
            (f"{cthulhus_remaining(game)} Cthulhu hidden", "cyan"),
        ),
        title=f"[bold bright_cyan]  {game.id}  [/]",
        subtitle=_state_markup(game.state),
        border_style="cyan",
        expand=False,
        padding=(0, 2),
    ))

    # === Players ==========================================================
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold dim")
    table.add_column("Player", style="bold")
    table.add_column("Cards", justify="right")
    table.add_column("", width=3)
    table.add_column("Role")
    table.add_column("Hand")

    for player in game.player_list:
        markers = ""
        if player.id == game.current_investigator_id:
            markers += "🔦"
        if player.id == game.paranoid_player_id:
            markers += "[magenta]P[/]"

        is_viewer = player.id == viewer
        table.add_row(
            player.id,
            str(len(player.hand)),
            markers,
            _role_markup(player.role) if reveal_all or is_viewer else "[dim]?[/]",
            format_cards(player.hand) if reveal_all or is_viewer else "",
        )

    console.print(table)

    # === Revealed cards ===================================================
    console.print(f"[bold]Revealed:[/] {format_cards(game.visible_cards)}")
    if game.visible_cards:
        console.print(f"[dim italic]{describe_card(game.visible_cards[-1])}[/]")
    if game.discards:
        console.print(f"[dim]{len(game.discards)} cards set aside until next round[/]")
