"""
Battery provider reading the Linux power_supply class in sysfs.

Each battery directory exposes attributes such as type, serial_number,
manufacturer, energy_now/energy_full (or charge_now/charge_full, or just
capacity), status and time_to_full_now.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .errors import BatteryAccessError, ProviderError
from .models import BatteryReading

LOGGER = logging.getLogger(__name__)

SYSFS_POWER_SUPPLY = Path("/sys/class/power_supply")


def _read_attr(path: Path) -> Optional[str]:
    """Read a sysfs attribute, None if it does not exist or is blank."""
    try:
        value = path.read_text().strip()
    except FileNotFoundError:
        return None
    return value or None


class Battery:
    """Handle on a single battery directory. Attributes are read lazily."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.name = self.path.name

    def __repr__(self):
        return f"Battery({self.name!r})"

    def _attr(self, name: str) -> Optional[str]:
        try:
            return _read_attr(self.path / name)
        except OSError as e:
            raise BatteryAccessError(f"{self.name}: cannot read {name}: {e}") from e

    def _number(self, name: str) -> Optional[float]:
        value = self._attr(name)
        if value is None:
            return None
        try:
            return float(value)
        except ValueError:
            raise BatteryAccessError(f"{self.name}: malformed {name} value {value!r}")

    @property
    def serial(self) -> Optional[str]:
        try:
            return self._attr("serial_number")
        except BatteryAccessError:
            return None

    @property
    def vendor(self) -> Optional[str]:
        try:
            return self._attr("manufacturer")
        except BatteryAccessError:
            return None

    def state_of_charge(self) -> float:
        """State of charge as a fraction between 0.0 and 1.0."""
        for now_attr, full_attr in (("energy_now", "energy_full"), ("charge_now", "charge_full")):
            now = self._number(now_attr)
            full = self._number(full_attr)
            if now is not None and full:
                return max(0.0, min(1.0, now / full))

        capacity = self._number("capacity")
        if capacity is not None:
            return max(0.0, min(1.0, capacity / 100.0))

        raise BatteryAccessError(f"{self.name}: no charge information available")

    def time_to_full(self) -> Optional[float]:
        """Seconds until full, or None when no estimate is available."""
        try:
            reported = self._number("time_to_full_now")
        except BatteryAccessError as e:
            LOGGER.debug("No time to full estimate: %s", e)
            return None
        if reported is not None and reported > 0:
            return reported
        return None

    def read(self) -> BatteryReading:
        fraction = self.state_of_charge()
        charging = self.time_to_full() is not None
        return BatteryReading.from_fraction(fraction, charging)


class SysfsBatteryProvider:
    """Enumerates batteries under /sys/class/power_supply."""

    def __init__(self, root=SYSFS_POWER_SUPPLY):
        self.root = Path(root)
        if not self.root.is_dir():
            raise ProviderError(f"Unable to start battery manager: {self.root} is not a directory")

    def batteries(self) -> List[Battery]:
        try:
            entries = sorted(self.root.iterdir())
        except OSError as e:
            raise ProviderError(f"Unable to read batteries from {self.root}: {e}") from e

        batteries = []
        for entry in entries:
            try:
                kind = _read_attr(entry / "type")
            except OSError as e:
                LOGGER.warning("Skipping power supply %s: %s", entry.name, e)
                continue
            if kind == "Battery":
                batteries.append(Battery(entry))
        return batteries

    def find(self, serial: str) -> Optional[Battery]:
        for battery in self.batteries():
            if battery.serial == serial:
                return battery
        return None
