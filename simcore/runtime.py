import logging
from typing import Set

from simcore.event_queue import EventQueue
from simcore.process import Acquire, Actor, Hold, Release, SampledHold
from simcore.resource import ResourcePool
from simcore.sampling import draw_positive

logger = logging.getLogger(__name__)


class ActorRuntime:
    """Drives actors on top of an event queue.

    Each activation runs one actor from its current suspend point to the
    next one; nothing else executes in between.
    """

    def __init__(self, queue: EventQueue):
        self.queue = queue
        self.live: Set[Actor] = set()
        self.spawned = 0
        self.finished = 0

    @property
    def now(self) -> float:
        return self.queue.now

    # actor creation
    def spawn(self, actor: Actor, delay: float = 0.0) -> Actor:
        if actor.state != 'NEW':
            raise ValueError(f"{actor} was already started")
        actor._steps = actor.behavior()
        actor.state = 'READY'
        self.live.add(actor)
        self.spawned += 1
        self._schedule_resume(actor, self.now + delay)
        return actor

    def _schedule_resume(self, actor: Actor, time: float) -> None:
        self.queue.schedule(time, actor.priority, lambda: self._resume(actor), label=f"{actor.name}#{actor.pid}")

    def _book(self, actor: Actor, pool: ResourcePool, units: int) -> None:
        actor.held[pool] = actor.held.get(pool, 0) + units

    def _granted(self, actor: Actor, pool: ResourcePool, units: int) -> None:
        self._book(actor, pool, units)
        self._schedule_resume(actor, self.now)

    # stepping
    def _resume(self, actor: Actor) -> None:
        actor.state = 'RUNNING'
        while True:
            try:
                command = next(actor._steps)
            except StopIteration:
                self._terminate(actor)
                return

            if isinstance(command, Hold):
                actor.state = 'BLOCKED'
                self._schedule_resume(actor, self.now + command.duration)
                return
            elif isinstance(command, SampledHold):
                duration = draw_positive(self.now, command.draw, *command.args)
                actor.state = 'BLOCKED'
                self._schedule_resume(actor, self.now + duration)
                return
            elif isinstance(command, Acquire):
                pool = command.pool
                units = command.units
                if pool.acquire(actor, units, actor.priority, lambda: self._granted(actor, pool, units)):
                    self._book(actor, pool, units)
                else:
                    actor.state = 'BLOCKED'
                    return
            elif isinstance(command, Release):
                pool = command.pool
                pool.release(actor, command.units)
                left = actor.held.get(pool, 0) - command.units
                if left > 0:
                    actor.held[pool] = left
                else:
                    actor.held.pop(pool, None)
            else:
                raise TypeError(f"{actor} yielded unknown command {command!r}")

    def _terminate(self, actor: Actor) -> None:
        for pool in list(actor.held):
            released = pool.release_all(actor)
            if released:
                logger.debug(f"  {actor} exited holding {released} unit(s) of {pool.name}")
        actor.held.clear()
        actor.state = 'EXIT'
        actor._steps = None
        self.live.discard(actor)
        self.finished += 1
