class SimulationError(Exception):
    """Base class for every fatal condition raised by the simulator."""


class ConfigurationError(SimulationError):
    """Startup parameters are missing, malformed or out of range."""


class InvalidScheduleError(SimulationError):
    """An event was scheduled before the current simulated time."""

    def __init__(self, time: float, now: float, label: str = None):
        self.time = time
        self.now = now
        self.label = label
        what = f" ({label})" if label else ""
        super().__init__(f"cannot schedule event{what} at t={time} before now t={now}")


class UnsatisfiableRequestError(SimulationError):
    """An acquisition asks for more units than the pool could ever hold."""

    def __init__(self, pool_name: str, requested: int, capacity: int):
        self.pool_name = pool_name
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"request for {requested} unit(s) of '{pool_name}' exceeds its capacity of {capacity}"
        )
