from dataclasses import dataclass
from typing import Any, Callable, Dict, Generator, Optional, Tuple

from simcore.resource import ResourcePool


# ------------------------- Suspend commands --------------------------
@dataclass(frozen=True)
class Hold:
    """Suspend for a fixed, non-negative duration."""
    duration: float


class SampledHold:
    """Suspend for a duration drawn when the actor reaches this point.

    The runtime re-draws until the sample actually moves the clock forward.
    """

    def __init__(self, draw: Callable[..., float], *args: Any):
        self.draw = draw
        self.args: Tuple[Any, ...] = args

    def __repr__(self):
        return f"SampledHold({getattr(self.draw, '__name__', self.draw)}{self.args})"


@dataclass(frozen=True)
class Acquire:
    pool: ResourcePool
    units: int = 1


@dataclass(frozen=True)
class Release:
    pool: ResourcePool
    units: int = 1


Behavior = Generator[Any, None, None]


class Actor:
    """A suspendable unit of simulated work.

    Subclasses implement ``behavior`` as a generator yielding ``Hold``,
    ``SampledHold``, ``Acquire`` and ``Release`` commands; returning ends the
    actor and gives back whatever units it still holds.
    """
    _pid_counter = 1

    priority = 0

    def __init__(self, name: Optional[str] = None, priority: Optional[int] = None):
        self.pid = Actor._pid_counter
        Actor._pid_counter += 1
        self.name = name or type(self).__name__
        if priority is not None:
            self.priority = priority
        self.state = 'NEW'
        self.held: Dict[ResourcePool, int] = {}
        self._steps: Optional[Behavior] = None

    def behavior(self) -> Behavior:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.name}(pid={self.pid}, state={self.state})"
