"""
Service desk actors.

Intake tasks take a call, occupy an office seat for a fixed time and hand the
job over to a service task. Service tasks queue for the staff that does the
job and only work while the desk is open; whoever gets a worker after the
shift closed gives it straight back and stays counted as queued.
"""

import logging

from desk import stats
from desk.context import (PRIORITY_INTAKE, PRIORITY_SERVICE, PRIORITY_URGENT_SERVICE,
                          DeskContext)
from simcore.process import Acquire, Actor, Hold, Release, SampledHold

logger = logging.getLogger(__name__)


class DeskTask(Actor):
    category = None

    def __init__(self, ctx: DeskContext):
        super().__init__()
        self.ctx = ctx


# ---------------------------- Service tasks ----------------------------
class Ride(DeskTask):
    """On-site repair: travel there, fix it, travel back."""
    category = stats.RIDE
    priority = PRIORITY_SERVICE

    def behavior(self):
        ctx, cfg = self.ctx, self.ctx.config
        pool = ctx.ride_pool()
        ctx.stats.increment(stats.service_queue(self.category))
        yield Acquire(pool)
        if ctx.is_open:
            yield SampledHold(ctx.dist.uniform, *cfg.ride_travel)
            yield SampledHold(ctx.dist.exponential, cfg.ride_repair_mean)
            yield SampledHold(ctx.dist.uniform, *cfg.ride_travel)
            ctx.stats.decrement(stats.service_queue(self.category))
        yield Release(pool)


class NetworkDeployment(DeskTask):
    """Escalated ride. After setup the crew stays on site until overtime
    ends, and the ride pool gets a replacement worker meanwhile."""
    category = stats.RIDE
    priority = PRIORITY_URGENT_SERVICE

    def behavior(self):
        ctx, cfg = self.ctx, self.ctx.config
        pool = ctx.ride_pool()
        ctx.stats.increment(stats.service_queue(self.category))
        yield Acquire(pool)
        yield Hold(cfg.deployment_setup)
        pool.set_capacity(pool.capacity + 1)
        ctx.stats.decrement(stats.service_queue(self.category))
        yield Hold(max(0.0, cfg.shift_length + cfg.deployment_overtime - ctx.now))
        yield Release(pool)


class Diagnostics(DeskTask):
    category = stats.DIAGNOSTICS
    priority = PRIORITY_SERVICE

    def behavior(self):
        ctx, cfg = self.ctx, self.ctx.config
        pool = ctx.office_pool()
        ctx.stats.increment(stats.service_queue(self.category))
        yield Acquire(pool)
        if ctx.is_open:
            yield SampledHold(ctx.dist.exponential, cfg.diagnostics_mean)
            ctx.stats.decrement(stats.service_queue(self.category))
        yield Release(pool)


class SoftwareInstall(DeskTask):
    category = stats.INSTALL
    priority = PRIORITY_URGENT_SERVICE

    def behavior(self):
        ctx, cfg = self.ctx, self.ctx.config
        pool = ctx.office_pool()
        ctx.stats.increment(stats.service_queue(self.category))
        yield Acquire(pool)
        if ctx.is_open:
            yield SampledHold(ctx.dist.uniform, *cfg.install_time)
            ctx.stats.decrement(stats.service_queue(self.category))
        yield Release(pool)


# ---------------------------- Intake tasks -----------------------------
class RideRequest(DeskTask):
    category = stats.RIDE
    priority = PRIORITY_INTAKE

    def behavior(self):
        ctx = self.ctx
        pool = ctx.office_pool()
        ctx.stats.increment(stats.requests(self.category))
        ctx.stats.increment(stats.request_queue(self.category))
        yield Acquire(pool)
        yield Hold(ctx.config.ride_intake_time)
        ctx.stats.decrement(stats.request_queue(self.category))
        yield Release(pool)
        # drawn even when escalation is closed
        if ctx.dist.chance(ctx.config.escalation_probability) and ctx.can_escalate():
            ctx.escalation_count += 1
            ctx.stats.increment(stats.ESCALATIONS)
            logger.debug(f"[t={ctx.now}] {self} escalated ({ctx.escalation_count}/{ctx.config.escalation_cap})")
            ctx.runtime.spawn(NetworkDeployment(ctx))
        else:
            ctx.runtime.spawn(Ride(ctx))


class DiagnosticsRequest(DeskTask):
    category = stats.DIAGNOSTICS
    priority = PRIORITY_INTAKE

    def behavior(self):
        ctx = self.ctx
        pool = ctx.office_pool()
        ctx.stats.increment(stats.requests(self.category))
        ctx.stats.increment(stats.request_queue(self.category))
        yield Acquire(pool)
        yield Hold(ctx.config.diagnostics_intake_time)
        yield Release(pool)
        ctx.stats.decrement(stats.request_queue(self.category))
        ctx.runtime.spawn(Diagnostics(ctx))


class InstallRequest(DeskTask):
    category = stats.INSTALL
    priority = PRIORITY_INTAKE

    def behavior(self):
        ctx = self.ctx
        pool = ctx.office_pool()
        ctx.stats.increment(stats.requests(self.category))
        ctx.stats.increment(stats.request_queue(self.category))
        yield Acquire(pool)
        yield Hold(ctx.config.install_intake_time)
        ctx.stats.decrement(stats.request_queue(self.category))
        yield Release(pool)
        ctx.runtime.spawn(SoftwareInstall(ctx))
