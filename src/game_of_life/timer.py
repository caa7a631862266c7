"""Repeating step timer with an adjustable period.

The caller supplies the current time in milliseconds, so the timer itself
never sleeps or reads a clock.
"""

from loguru import logger

DEFAULT_INTERVAL_MS = 100


class StepTimer:
    def __init__(self, interval_ms: int = DEFAULT_INTERVAL_MS):
        self._interval_ms = self._validate(interval_ms)
        self._next_due: float | None = None

    @staticmethod
    def _validate(interval_ms: int) -> int:
        if isinstance(interval_ms, bool) or not isinstance(interval_ms, int) or interval_ms <= 0:
            raise ValueError(f"interval must be a positive number of milliseconds, got {interval_ms!r}")
        return interval_ms

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def set_interval(self, interval_ms: int) -> None:
        """Change the period; a pending tick is rescheduled from its start."""
        interval_ms = self._validate(interval_ms)
        if self._next_due is not None:
            self._next_due += interval_ms - self._interval_ms
        self._interval_ms = interval_ms
        logger.debug(f"Step interval set to {interval_ms} ms")

    @property
    def running(self) -> bool:
        return self._next_due is not None

    def start(self, now_ms: float) -> None:
        self._next_due = now_ms + self._interval_ms

    def stop(self) -> None:
        self._next_due = None

    def poll(self, now_ms: float) -> int:
        """Return 1 if a tick is due at `now_ms`, else 0.

        Missed ticks are dropped rather than replayed: after a stall the
        next deadline is measured from `now_ms`.
        """
        if self._next_due is None or now_ms < self._next_due:
            return 0
        self._next_due += self._interval_ms
        if self._next_due <= now_ms:
            self._next_due = now_ms + self._interval_ms
        return 1
