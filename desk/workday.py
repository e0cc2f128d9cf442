"""
Workday model of the service desk: business constants and the assembly of
one simulated day (pools, gates, generators, shift boundaries).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from deskio.parser import DeskParameters
from desk.context import DeskContext
from desk.generators import (DiagnosticsRequestGenerator, InstallRequestGenerator, IntakeCutoff,
                             RideRequestGenerator, ShiftClose)
from desk.stats import Statistics
from simcore.event_queue import EventQueue
from simcore.resource import ResourcePool
from simcore.runtime import ActorRuntime
from simcore.sampling import Distributions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkdayConfig:
    shift_length: float = 480.0
    run_end: float = 1000.0
    universal_capacity: int = 5

    # diagnostics intake and escalation stop at this fraction of the shift
    intake_cutoff_fraction: float = 0.5
    escalation_probability: float = 0.1
    escalation_cap: int = 3

    # arrivals of a category are spread over this fraction of the shift
    arrival_window: float = 1.0
    diagnostics_rate_factor: float = 2.0

    ride_intake_time: float = 3.0
    diagnostics_intake_time: float = 5.0
    install_intake_time: float = 3.0

    ride_travel: tuple = (10.0, 15.0)
    ride_repair_mean: float = 40.0
    diagnostics_mean: float = 150.0
    install_time: tuple = (10.0, 20.0)
    deployment_setup: float = 120.0
    deployment_overtime: float = 90.0

    @property
    def intake_cutoff(self) -> float:
        return self.shift_length * self.intake_cutoff_fraction

    def arrival_mean(self, target: int, rate_factor: float = 1.0) -> float:
        return self.shift_length * self.arrival_window / (target * rate_factor)


class DeskSimulation:
    """One workday: builds the engine and the desk, runs it, exposes results."""

    def __init__(self, params: DeskParameters, config: Optional[WorkdayConfig] = None,
                 seed: Optional[int] = None, universal_capacity: Optional[int] = None):
        self.params = params
        self.config = config or WorkdayConfig()
        if universal_capacity is None:
            universal_capacity = self.config.universal_capacity

        self.queue = EventQueue(start_time=0.0, end_time=self.config.run_end)
        self.runtime = ActorRuntime(self.queue)
        self.stats = Statistics()
        self.context = DeskContext(
            config=self.config,
            runtime=self.runtime,
            stats=self.stats,
            dist=Distributions(seed),
            office=ResourcePool("Office Workers", params.office_workers),
            riders=ResourcePool("Ride Workers", params.ride_workers),
            universal=ResourcePool("Universal Workers", universal_capacity),
            universal_mode=params.universal_mode,
        )
        self.generators = [
            RideRequestGenerator(self.context, params.ride_target),
            DiagnosticsRequestGenerator(self.context, params.diagnostics_target),
            InstallRequestGenerator(self.context, params.install_target),
        ]
        self._started = False

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        if self.params.universal_mode:
            logger.info("universal staffing mode enabled")
        for gen in self.generators:
            self.runtime.spawn(gen)
        self.runtime.spawn(ShiftClose(self.context), delay=self.config.shift_length)
        self.runtime.spawn(IntakeCutoff(self.context), delay=self.config.intake_cutoff)

    def run(self) -> Statistics:
        self.start()
        end = self.queue.run()
        logger.info(f"simulation finished at t={end}, {self.queue.executed} event(s) executed")
        return self.stats

    def pools(self):
        """The pools the staffing mode actually uses."""
        ctx = self.context
        if ctx.universal_mode:
            return [ctx.universal]
        return [ctx.office, ctx.riders]
