from typing import Any, Callable, Optional

import numpy as np


def draw_positive(now: float, draw: Callable[..., float], *args: Any) -> float:
    """Draw a duration until it is large enough to advance ``now``.

    Non-positive draws, and draws too small to change ``now`` in floating
    point, are discarded silently.
    """
    while True:
        duration = float(draw(*args))
        if now + duration > now:
            return duration


class Distributions:
    """Random variates used by the workload, backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        return float(self.rng.uniform(low, high))

    def exponential(self, mean: float) -> float:
        return float(self.rng.exponential(mean))

    def normal(self, mean: float, std: float) -> float:
        return float(self.rng.normal(mean, std))

    def chance(self, probability: float) -> bool:
        return self.uniform(0.0, 1.0) < probability
