"""Single-threaded schedulers for delayed, cancellable callbacks."""
from __future__ import annotations

import time
from typing import Callable, List

Callback = Callable[[], None]


class ScheduledCall:
    """Cancellation token for a callback registered with a scheduler."""

    __slots__ = ("_callback", "due_at_ms", "sequence", "_cancelled", "_fired")

    def __init__(self, callback: Callback, due_at_ms: float, sequence: int) -> None:
        self._callback = callback
        self.due_at_ms = due_at_ms
        self.sequence = sequence
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._fired)

    def cancel(self) -> bool:
        """Cancel the call. Returns True if it was still pending."""
        if not self.pending:
            return False
        self._cancelled = True
        return True

    def _fire(self) -> None:
        self._fired = True
        self._callback()


class Scheduler:
    """Base scheduler. Callbacks only ever run on the caller's thread."""

    def __init__(self) -> None:
        self._calls: List[ScheduledCall] = []
        self._sequence = 0

    def now_ms(self) -> float:
        raise NotImplementedError

    def schedule(self, callback: Callback, delay_ms: float) -> ScheduledCall:
        """Register ``callback`` to run ``delay_ms`` milliseconds from now."""
        if delay_ms < 0:
            raise ValueError("delay_ms must be non-negative.")
        self._sequence += 1
        call = ScheduledCall(callback, self.now_ms() + delay_ms, self._sequence)
        self._calls.append(call)
        return call

    def pending_count(self) -> int:
        return sum(1 for call in self._calls if call.pending)

    def next_due_ms(self) -> float | None:
        """Return the due time of the earliest pending call, if any."""
        self._discard_inactive()
        if not self._calls:
            return None
        return min(call.due_at_ms for call in self._calls)

    def wait_until_idle(self) -> int:
        """Let every pending call fire. Returns the number fired."""
        raise NotImplementedError

    def run_pending(self) -> int:
        """Fire every call that is due now, in due order. Returns the number fired."""
        fired = 0
        while True:
            call = self._pop_due(self.now_ms())
            if call is None:
                return fired
            call._fire()
            fired += 1

    def _pop_due(self, now_ms: float) -> ScheduledCall | None:
        self._discard_inactive()
        due = [call for call in self._calls if call.due_at_ms <= now_ms]
        if not due:
            return None
        call = min(due, key=lambda c: (c.due_at_ms, c.sequence))
        self._calls.remove(call)
        return call

    def _discard_inactive(self) -> None:
        self._calls = [call for call in self._calls if call.pending]


class ManualScheduler(Scheduler):
    """Scheduler driven by a virtual clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        super().__init__()
        self._now_ms = start_ms

    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, delta_ms: float) -> int:
        """Move the clock forward, firing calls at their own due times."""
        if delta_ms < 0:
            raise ValueError("Cannot move the clock backwards.")
        target = self._now_ms + delta_ms
        fired = 0
        while True:
            next_due = self.next_due_ms()
            if next_due is None or next_due > target:
                break
            self._now_ms = max(self._now_ms, next_due)
            fired += self.run_pending()
        self._now_ms = target
        return fired

    def run_all(self) -> int:
        """Advance until nothing is pending."""
        fired = 0
        while True:
            next_due = self.next_due_ms()
            if next_due is None:
                return fired
            fired += self.advance(max(0.0, next_due - self._now_ms))

    def wait_until_idle(self) -> int:
        return self.run_all()


class RealtimeScheduler(Scheduler):
    """Wall-clock scheduler; the owner decides when to sleep and fire."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__()
        self._clock = clock
        self._sleep = sleep

    def now_ms(self) -> float:
        return self._clock() * 1000.0

    def wait_until_idle(self) -> int:
        fired = 0
        while True:
            next_due = self.next_due_ms()
            if next_due is None:
                return fired
            remaining_ms = next_due - self.now_ms()
            if remaining_ms > 0:
                self._sleep(remaining_ms / 1000.0)
            fired += self.run_pending()
