import logging

from desk.context import PRIORITY_BOUNDARY, PRIORITY_GENERATOR, DeskContext
from desk.tasks import DiagnosticsRequest, InstallRequest, RideRequest
from simcore.process import Actor, SampledHold

logger = logging.getLogger(__name__)


# -------------------------- Shift boundaries ---------------------------
class ShiftClose(Actor):
    priority = PRIORITY_BOUNDARY

    def __init__(self, ctx: DeskContext):
        super().__init__()
        self.ctx = ctx

    def behavior(self):
        self.ctx.is_open = False
        logger.info(f"[t={self.ctx.now}] desk closed")
        yield from ()


class IntakeCutoff(Actor):
    """Stops diagnostics intake and escalations."""
    priority = PRIORITY_BOUNDARY

    def __init__(self, ctx: DeskContext):
        super().__init__()
        self.ctx = ctx

    def behavior(self):
        self.ctx.taking_dd_requests = False
        logger.info(f"[t={self.ctx.now}] no more diagnostics or deployment intake")
        yield from ()


# ------------------------------ Generators -----------------------------
class RequestGenerator(Actor):
    """Spawns ``target`` intake tasks at normally distributed gaps.

    Once a gate is found shut or the quota is used up the generator ends for
    good; it never waits for a gate to reopen.
    """
    priority = PRIORITY_GENERATOR
    task_class = None
    rate_factor = 1.0

    def __init__(self, ctx: DeskContext, target: int):
        super().__init__()
        self.ctx = ctx
        self.target = int(target)
        self.made = 0

    def accepting(self) -> bool:
        return self.ctx.is_open and self.made < self.target

    def gap(self) -> SampledHold:
        mean = self.ctx.config.arrival_mean(self.target, self.rate_factor)
        return SampledHold(self.ctx.dist.normal, mean, mean / 4)

    def behavior(self):
        if self.target <= 0:
            logger.info(f"{self.name}: nothing to generate")
            return
        yield self.gap()
        while self.accepting():
            self.ctx.runtime.spawn(self.task_class(self.ctx))
            self.made += 1
            yield self.gap()
        logger.info(f"[t={self.ctx.now}] {self.name} inert after {self.made}/{self.target} request(s)")


class RideRequestGenerator(RequestGenerator):
    task_class = RideRequest


class DiagnosticsRequestGenerator(RequestGenerator):
    task_class = DiagnosticsRequest

    def __init__(self, ctx: DeskContext, target: int):
        super().__init__(ctx, target)
        self.rate_factor = ctx.config.diagnostics_rate_factor

    def accepting(self) -> bool:
        return super().accepting() and self.ctx.taking_dd_requests


class InstallRequestGenerator(RequestGenerator):
    task_class = InstallRequest
