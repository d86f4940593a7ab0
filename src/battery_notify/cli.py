#!/usr/bin/env python3
"""
bn - simple application to notify when the battery drops too low.

Meant to be run periodically (cron, systemd timer, ...). Without a serial
number it lists the batteries it can see.
"""

import argparse
import logging
import sys

from . import __version__
from .errors import (
    BatteryAccessError,
    BatteryNotFound,
    BatteryNotifyError,
    ConfigurationError,
    NotificationError,
)
from .models import Thresholds
from .monitor import ThresholdMonitor
from .provider import SysfsBatteryProvider
from .state import FileStateStore

LOGGER = logging.getLogger(__name__)


def percentage(value: str) -> int:
    """argparse type for a 0-100 integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid percentage: {value!r}")
    if not 0 <= number <= 100:
        raise argparse.ArgumentTypeError(f"percentage must be between 0 and 100, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bn",
        description="Simple application to notify when the battery drops too low.",
    )
    parser.add_argument(
        "-w",
        "--warn-percentage",
        type=percentage,
        help="When the battery drops below this level, send a warning notification.",
    )
    parser.add_argument(
        "-c",
        "--critical-percentage",
        type=percentage,
        help="When the battery drops below this level, send an urgent critical notification.",
    )
    parser.add_argument(
        "-s",
        "--serial",
        help="The serial number of the battery to check. "
        "If not provided, this command will list all batteries.",
    )
    parser.add_argument(
        "--state-file",
        help="Where to keep the last seen percentage (default: <tmpdir>/bn_state).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    args.thresholds = None
    if args.serial is not None:
        if args.critical_percentage is None:
            parser.error("the following arguments are required with --serial: -c/--critical-percentage")
        try:
            args.thresholds = Thresholds(args.critical_percentage, args.warn_percentage)
        except ConfigurationError as e:
            parser.error(str(e))
    return args


def list_batteries(provider):
    print("No serial given, listing possible batteries")
    for battery in provider.batteries():
        serial = battery.serial or "no id"
        vendor = battery.vendor or "no vendor"
        print(f' - "{serial}" (vendor: "{vendor}")')


def libnotify_notifier():
    """Create the libnotify notifier, turning a missing backend into NotificationError."""
    try:
        from .notifier import LibnotifyNotifier
    except (ImportError, ValueError) as e:
        raise NotificationError(f"libnotify is unavailable: {e}") from e
    return LibnotifyNotifier()


class DeferredNotifier:
    """Creates the real notifier the first time something has to be shown."""

    def __init__(self, factory=None):
        self.factory = factory or libnotify_notifier
        self._notifier = None

    def show(self, notification):
        if self._notifier is None:
            self._notifier = self.factory()
        self._notifier.show(notification)


def run(args, provider=None, notifier=None, store=None) -> int:
    """Run one invocation. Returns the process exit status."""
    try:
        if provider is None:
            provider = SysfsBatteryProvider()

        if args.serial is None:
            list_batteries(provider)
            return 0

        if store is None:
            store = FileStateStore(args.state_file)
        if notifier is None:
            notifier = DeferredNotifier()

        monitor = ThresholdMonitor(provider, notifier, store, args.thresholds)
        monitor.check(args.serial)

    except BatteryNotFound as e:
        print(str(e), file=sys.stderr)
    except BatteryAccessError as e:
        print(f"Unable to access battery information: {e}", file=sys.stderr)
    except BatteryNotifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv=None):
    """Entry point for the bn command."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
