from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass(order=True)
class Event:
    time: float
    priority: int
    order: int
    behavior: Callable[[], None] = field(compare=False)
    label: Optional[str] = field(compare=False, default=None)

    def __repr__(self):
        return f"Event(time={self.time}, priority={self.priority}, order={self.order}, label={self.label})"
