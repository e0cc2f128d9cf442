# Startup parameter parser
import re
from dataclasses import dataclass
from typing import Sequence

from simcore.errors import ConfigurationError

PARAMETER_NAMES = (
    'ride_target',
    'diagnostics_target',
    'install_target',
    'office_workers',
    'ride_workers',
    'universal_mode',
)

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class DeskParameters:
    ride_target: int
    diagnostics_target: int
    install_target: int
    office_workers: int
    ride_workers: int
    universal_mode: bool


def parse_count(name: str, raw: str) -> int:
    text = str(raw).strip()
    if not re.fullmatch(r'[+]?\d+', text):
        raise ConfigurationError(f"{name} must be a non-negative integer, got {raw!r}")
    return int(text)


def parse_switch(name: str, raw: str) -> bool:
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be 0 or 1, got {raw!r}")


def parse_parameters(values: Sequence[str]) -> DeskParameters:
    if len(values) != len(PARAMETER_NAMES):
        raise ConfigurationError(
            f"expected {len(PARAMETER_NAMES)} parameters ({' '.join(PARAMETER_NAMES)}), got {len(values)}"
        )
    counts = [parse_count(name, raw) for name, raw in zip(PARAMETER_NAMES[:5], values[:5])]
    universal = parse_switch(PARAMETER_NAMES[5], values[5])
    return DeskParameters(*counts, universal_mode=universal)
