"""
Plain data types shared by the monitor, the provider and the notifier.
"""

import enum
import math
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


class Urgency(enum.Enum):
    NORMAL = "normal"
    CRITICAL = "critical"


class Alert(enum.Enum):
    CRITICAL = "critical"
    WARNING = "warning"


def fraction_to_percent(fraction: float) -> int:
    """Convert a state-of-charge fraction (0.0-1.0) to a whole percentage."""
    fraction = max(0.0, min(1.0, fraction))
    return int(math.floor(fraction * 100.0))


@dataclass(frozen=True)
class BatteryReading:
    percentage: int
    charging: bool = False

    @classmethod
    def from_fraction(cls, fraction: float, charging: bool = False) -> "BatteryReading":
        return cls(fraction_to_percent(fraction), charging)


@dataclass(frozen=True)
class Thresholds:
    """
    Per-invocation notification thresholds.

    The critical threshold must not be above the warning threshold,
    otherwise the warning could never fire ahead of the critical one.
    """

    critical: int
    warn: Optional[int] = None

    def __post_init__(self):
        _check_percent("critical percentage", self.critical)
        if self.warn is not None:
            _check_percent("warn percentage", self.warn)
            if self.critical > self.warn:
                raise ConfigurationError(
                    f"critical percentage ({self.critical}) must not be above "
                    f"warn percentage ({self.warn})"
                )


def _check_percent(name: str, value: int):
    if not 0 <= value <= 100:
        raise ConfigurationError(f"{name} must be between 0 and 100, got {value}")


@dataclass(frozen=True)
class Notification:
    summary: str
    body: str
    urgency: Urgency = Urgency.NORMAL
    sound: Optional[str] = None
    timeout: Optional[float] = None  # seconds, None = server default
