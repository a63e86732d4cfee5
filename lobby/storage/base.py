"""
Shared machinery for observable game stores.

``ObservableGameStore`` implements the ``GameStore`` contract on top of three
storage primitives (``_read``, ``_write``, ``_read_all``) that concrete
backends provide. It owns the per-game locks and the subjects that push
changes to subscribers.
"""

import asyncio
import logging
from abc import abstractmethod
from typing import Dict, Optional

from core.errors import InvalidArgumentError
from core.observable import BehaviorSubject
from core.store import GameReducer, GameStore
from games.elder_sign.models import Game

logger = logging.getLogger(__name__)


def _copy(game: Optional[Game]) -> Optional[Game]:
    return game.model_copy(deep=True) if game is not None else None


class ObservableGameStore(GameStore):
    """
    Base class for stores that notify subscribers after every write.

    Subclasses implement:
    - _read(game_id): the stored game or None
    - _write(game): persist one game (replacing any previous version)
    - _read_all(): every stored game keyed by ID

    ``apply_to`` runs ``_read`` and ``_write`` in a worker thread, so they
    may block. Only one of them runs at a time for a given game.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._subjects: Dict[str, BehaviorSubject] = {}
        self._index: Optional[BehaviorSubject] = None

    # ------------------------------------------------------------------
    # storage primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def _read(self, game_id: str) -> Optional[Game]:
        pass

    @abstractmethod
    def _write(self, game: Game) -> None:
        pass

    @abstractmethod
    def _read_all(self) -> Dict[str, Game]:
        pass

    # ------------------------------------------------------------------
    # GameStore
    # ------------------------------------------------------------------

    async def apply_to(self, game_id: str, reducer: GameReducer) -> Game:
        async with self._lock_for(game_id):
            # Backends may block on I/O; keep it off the event loop.
            current = _copy(await asyncio.to_thread(self._read, game_id))
            updated = reducer(current)
            if updated.id != game_id:
                raise InvalidArgumentError(
                    f"Reducer for {game_id} produced game {updated.id}.", game_id=game_id
                )

            await asyncio.to_thread(self._write, _copy(updated))
            logger.debug("Stored game %s (round %d, %s)", game_id, updated.round, updated.state.value)
            self._publish(updated)
            return _copy(updated)

    def game_for_id(self, game_id: str) -> BehaviorSubject:
        subject = self._subjects.get(game_id)
        if subject is None:
            subject = BehaviorSubject(_copy(self._read(game_id)))
            self._subjects[game_id] = subject
        return subject

    def all_games(self) -> BehaviorSubject:
        if self._index is None:
            self._index = BehaviorSubject(
                {game_id: _copy(game) for game_id, game in self._read_all().items()}
            )
        return self._index

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _lock_for(self, game_id: str) -> asyncio.Lock:
        lock = self._locks.get(game_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[game_id] = lock
        return lock

    def _publish(self, game: Game) -> None:
        subject = self._subjects.get(game.id)
        if subject is not None:
            subject.next(_copy(game))

        if self._index is not None:
            games = dict(self._index.value)
            games[game.id] = _copy(game)
            self._index.next(games)
