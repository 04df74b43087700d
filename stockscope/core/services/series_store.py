"""Series store holding the single active series."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from stockscope.core.exceptions.base import NoValidDataError
from stockscope.core.models.series import SeriesSnapshot, SeriesState, StockPoint
from stockscope.core.services.window import prepare_series

SeriesListener = Callable[[SeriesSnapshot], None]


class SeriesStore:
    """Owns zero or one series and hands out immutable snapshots.

    Writers that complete asynchronously take a generation from
    :meth:`issue_generation` before suspending and pass it to
    :meth:`replace`; only the most recently issued generation may commit.
    """

    def __init__(self) -> None:
        self._points: tuple[StockPoint, ...] = ()
        self._state = SeriesState.EMPTY
        self._latest_generation = 0
        self._committed_generation = 0
        self._listeners: list[SeriesListener] = []

    @property
    def state(self) -> SeriesState:
        return self._state

    @property
    def latest_generation(self) -> int:
        return self._latest_generation

    def issue_generation(self) -> int:
        """Reserve the next generation; earlier ones become stale."""

        self._latest_generation += 1
        return self._latest_generation

    def is_current(self, generation: int) -> bool:
        return generation == self._latest_generation

    def replace(self, points: Iterable[StockPoint], generation: int | None = None) -> bool:
        """Sort, window and swap in ``points``.

        Returns ``False`` without touching the store when ``generation`` is
        stale. Without a generation the replace always commits.

        Raises:
            NoValidDataError: ``points`` is empty.
        """

        if generation is not None and not self.is_current(generation):
            logger.warning(
                "Discarding stale series update",
                generation=generation,
                latest_generation=self._latest_generation,
            )
            return False

        series = prepare_series(points)
        if not series:
            raise NoValidDataError()
        if generation is None:
            generation = self.issue_generation()

        self._points = series
        self._state = SeriesState.LOADED
        self._committed_generation = generation
        logger.info("Series replaced", generation=generation, points=len(series))
        self._notify()
        return True

    def clear(self) -> None:
        """Reset to the empty series and invalidate pending writers."""

        self._points = ()
        self._state = SeriesState.EMPTY
        self._committed_generation = self.issue_generation()
        logger.info("Series cleared", generation=self._committed_generation)
        self._notify()

    def current(self) -> SeriesSnapshot:
        """Return a read-only snapshot of the stored series."""

        return SeriesSnapshot(
            state=self._state,
            generation=self._committed_generation,
            points=self._points,
        )

    def subscribe(self, listener: SeriesListener) -> Callable[[], None]:
        """Register ``listener`` for series changes; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.current()
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["SeriesListener", "SeriesStore"]
