"""
Core game-agnostic contracts for the Elder Sign table.

This module provides the error taxonomy, the storage interface that game
reducers are applied through, and the subscription primitive used to push
state changes to observers.
"""

from core.errors import (
    GameError,
    NotFoundError,
    InvalidStateError,
    AlreadyExistsError,
    InvalidArgumentError,
    TurnViolationError,
)
from core.observable import BehaviorSubject, Subscription
from core.store import GameStore, GameReducer

__all__ = [
    "GameError",
    "NotFoundError",
    "InvalidStateError",
    "AlreadyExistsError",
    "InvalidArgumentError",
    "TurnViolationError",
    "BehaviorSubject",
    "Subscription",
    "GameStore",
    "GameReducer",
]
