import heapq
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from simcore.errors import UnsatisfiableRequestError

logger = logging.getLogger(__name__)


@dataclass(order=True)
class Waiter:
    priority: int
    arrival: int
    owner: Any = field(compare=False)
    units: int = field(compare=False)
    wake: Callable[[], None] = field(compare=False)


class ResourcePool:
    """A named stock of interchangeable units with a priority wait-line.

    A request that fits is granted at once. Waiters are served head-first:
    by priority (smaller value first), then by arrival, and a waiter that
    does not fit blocks the rest of the wait-line.
    """

    def __init__(self, name: str, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity of '{name}' must be non-negative, got {capacity}")
        self.name = name
        self.capacity = int(capacity)
        self.in_use = 0
        self.holders: Dict[Any, int] = {}
        self._queue: List[Waiter] = []
        self._arrivals = 0

        # stats
        self.entries = 0
        self.max_in_use = 0
        self.max_queue_length = 0

    @property
    def free(self) -> int:
        return max(0, self.capacity - self.in_use)

    @property
    def waiting(self) -> int:
        return len(self._queue)

    def acquire(self, owner: Any, units: int, priority: int, wake: Callable[[], None]) -> bool:
        """Grant ``units`` to ``owner`` now and return True, or queue the
        request and return False; ``wake`` is called once it is granted."""
        if units <= 0:
            raise ValueError(f"must acquire at least one unit of '{self.name}', got {units}")
        if units > self.capacity:
            raise UnsatisfiableRequestError(self.name, units, self.capacity)
        if self.in_use + units <= self.capacity:
            self._grant(owner, units)
            return True
        self._arrivals += 1
        heapq.heappush(self._queue, Waiter(priority, self._arrivals, owner, units, wake))
        self.max_queue_length = max(self.max_queue_length, len(self._queue))
        logger.debug(f"  {self.name}: {owner} waits for {units} unit(s), queued={len(self._queue)}")
        return False

    def release(self, owner: Any, units: int) -> None:
        held = self.holders.get(owner, 0)
        if units <= 0 or units > held:
            raise ValueError(f"{owner} cannot release {units} unit(s) of '{self.name}', holds {held}")
        if held == units:
            del self.holders[owner]
        else:
            self.holders[owner] = held - units
        self.in_use -= units
        logger.debug(f"  {self.name}: {owner} released {units} unit(s), in_use={self.in_use}/{self.capacity}")
        self._admit_waiters()

    def release_all(self, owner: Any) -> int:
        held = self.holders.get(owner, 0)
        if held:
            self.release(owner, held)
        return held

    def set_capacity(self, capacity: int) -> None:
        """Change capacity at once. Growth admits waiters in the same step;
        shrinking never evicts units already in use."""
        if capacity < 0:
            raise ValueError(f"capacity of '{self.name}' must be non-negative, got {capacity}")
        self.capacity = int(capacity)
        logger.debug(f"  {self.name}: capacity set to {self.capacity}, in_use={self.in_use}")
        self._admit_waiters()

    def _grant(self, owner: Any, units: int) -> None:
        self.in_use += units
        self.holders[owner] = self.holders.get(owner, 0) + units
        self.entries += 1
        self.max_in_use = max(self.max_in_use, self.in_use)
        logger.debug(f"  {self.name}: granted {units} unit(s) to {owner}, in_use={self.in_use}/{self.capacity}")

    def _admit_waiters(self) -> None:
        while self._queue and self.in_use + self._queue[0].units <= self.capacity:
            waiter = heapq.heappop(self._queue)
            self._grant(waiter.owner, waiter.units)
            waiter.wake()

    def __repr__(self):
        return f"ResourcePool({self.name}, capacity={self.capacity}, in_use={self.in_use}, queued={len(self._queue)})"
