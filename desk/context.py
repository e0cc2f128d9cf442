from dataclasses import dataclass
from typing import Any

from desk.stats import Statistics
from simcore.resource import ResourcePool
from simcore.runtime import ActorRuntime
from simcore.sampling import Distributions


# ----------------------------- Priorities -----------------------------
# smaller runs first at equal time, and is served first in a wait-line
PRIORITY_BOUNDARY = 0
PRIORITY_GENERATOR = 1
PRIORITY_INTAKE = 2
PRIORITY_URGENT_SERVICE = 3
PRIORITY_SERVICE = 4


@dataclass
class DeskContext:
    """State shared by every actor of one workday.

    Mutated only from inside an executing actor step.
    """
    config: Any
    runtime: ActorRuntime
    stats: Statistics
    dist: Distributions
    office: ResourcePool
    riders: ResourcePool
    universal: ResourcePool
    universal_mode: bool = False

    # gates
    is_open: bool = True
    taking_dd_requests: bool = True
    escalation_count: int = 0

    @property
    def now(self) -> float:
        return self.runtime.now

    def office_pool(self) -> ResourcePool:
        return self.universal if self.universal_mode else self.office

    def ride_pool(self) -> ResourcePool:
        return self.universal if self.universal_mode else self.riders

    def can_escalate(self) -> bool:
        return self.taking_dd_requests and self.escalation_count < self.config.escalation_cap
