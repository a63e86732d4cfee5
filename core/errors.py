"""
Error taxonomy shared by every game and storage component.

Reducers fail fast and synchronously by raising one of these. Each error
carries a stable ``kind`` string so that callers (UIs, logs, tests) can
branch on the category without matching on message text.
"""

from typing import Optional


class GameError(ValueError):
    """
    Base class for all rule and lookup failures.

    Subclasses ``ValueError`` so that callers treating any bad input as a
    value error keep working.

    Attributes:
        kind: Stable, machine-readable error category
        game_id: The game the failure relates to, if known
    """

    kind = "game_error"

    def __init__(self, message: str, game_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.game_id = game_id


class NotFoundError(GameError):
    """A referenced game or player does not exist."""

    kind = "not_found"


class InvalidStateError(GameError):
    """The action is not allowed in the game's current lifecycle state."""

    kind = "invalid_state"


class AlreadyExistsError(InvalidStateError):
    """The game or player being created already exists."""

    kind = "already_exists"


class InvalidArgumentError(GameError):
    """Structurally bad input: card number, player count, exhausted pools."""

    kind = "invalid_argument"


class TurnViolationError(GameError):
    """The acting player is not entitled to act (wrong turn, self-target)."""

    kind = "turn_violation"
