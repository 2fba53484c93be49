# power.py
from typing import Callable, List


class TickTimer:
    """Countdown that fires `callback` once after `ticks` calls to tick(), unless cancelled."""

    def __init__(self, ticks: int, callback: Callable[[], None]):
        self.remaining = ticks
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def armed(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True

    def tick(self) -> bool:
        if not self.armed:
            return False
        self.remaining -= 1
        if self.remaining <= 0:
            self.fired = True
            self.callback()
            return True
        return False


class PowerState:
    """
    The player's empowered window.

    activate() always cancels the outstanding warning/expiry pair before arming
    a fresh one, so a stale expiry can never end a newer window.
    """

    def __init__(self, duration_ticks: int, warning_ticks: int):
        self.duration_ticks = duration_ticks
        self.warning_ticks = warning_ticks
        self.active = False
        self.about_to_expire = False
        self._timers: List[TickTimer] = []

    def activate(self) -> None:
        self.cancel()
        self.active = True
        self.about_to_expire = False
        # warning first so an expiry in the same tick has the last word
        self._timers = [
            TickTimer(self.warning_ticks, self._warn),
            TickTimer(self.duration_ticks, self._expire),
        ]

    def tick(self) -> None:
        for timer in self._timers:
            timer.tick()
        self._timers = [t for t in self._timers if t.armed]

    def cancel(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers = []

    def reset(self) -> None:
        self.cancel()
        self.active = False
        self.about_to_expire = False

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def _warn(self) -> None:
        self.about_to_expire = True

    def _expire(self) -> None:
        self.active = False
        self.about_to_expire = False
