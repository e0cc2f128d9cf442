import heapq
import logging
import math
from typing import Callable, List, Optional

from simcore.errors import InvalidScheduleError
from simcore.event import Event

logger = logging.getLogger(__name__)


class EventQueue:
    """Simulation clock plus the pending activations, ordered by
    (time, priority, insertion order).

    A smaller priority value runs first among events sharing a time. Events
    whose time lies past ``end_time`` are dropped when the run reaches them.
    """

    def __init__(self, start_time: float = 0.0, end_time: float = math.inf):
        if end_time < start_time:
            raise ValueError(f"end_time {end_time} precedes start_time {start_time}")
        self.start_time = float(start_time)
        self.end_time = float(end_time)

        # DES structures
        self.now = self.start_time
        self._heap: List[Event] = []
        self._event_counter = 0
        self._stopped = False

        # stats
        self.executed = 0
        self.discarded = 0

    def __len__(self) -> int:
        return len(self._heap)

    # event queue helpers
    def schedule(self, time: float, priority: int, behavior: Callable[[], None], label: Optional[str] = None) -> Event:
        time = float(time)
        if math.isnan(time) or time < self.now:
            raise InvalidScheduleError(time, self.now, label)
        self._event_counter += 1
        ev = Event(time=time, priority=priority, order=self._event_counter, behavior=behavior, label=label)
        heapq.heappush(self._heap, ev)
        logger.debug(f"[t={self.now}] enqueue {label} at t={time} prio={priority}")
        return ev

    def peek(self) -> Optional[Event]:
        if not self._heap:
            return None
        return self._heap[0]

    def pop_event(self) -> Optional[Event]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def stop(self) -> None:
        """Halt the run loop once the behavior currently executing returns."""
        self._stopped = True

    # main DES loop
    def run(self) -> float:
        self._stopped = False
        while self._heap and not self._stopped:
            if self._heap[0].time > self.end_time:
                self.discarded += len(self._heap)
                logger.debug(f"[t={self.now}] run ceiling t={self.end_time} reached, dropping {len(self._heap)} event(s)")
                self._heap.clear()
                self.now = self.end_time
                break
            ev = self.pop_event()
            self.now = ev.time
            logger.debug(f"[t={self.now}] handle {ev.label} prio={ev.priority}")
            self.executed += 1
            ev.behavior()
        return self.now
