"""
Last seen battery percentage, kept between invocations.

The value is stored as a 4 byte little-endian unsigned integer in a file
under the system temporary directory.
"""

import logging
import os
import struct
import tempfile
from pathlib import Path

from .errors import StateWriteError

LOGGER = logging.getLogger(__name__)

STATE_FILE_NAME = "bn_state"
DEFAULT_PERCENTAGE = 100

_FORMAT = struct.Struct("<I")


def default_state_path() -> Path:
    return Path(tempfile.gettempdir()) / STATE_FILE_NAME


def encode_percentage(percentage: int) -> bytes:
    if not 0 <= percentage <= 100:
        raise ValueError(f"percentage must be between 0 and 100, got {percentage}")
    return _FORMAT.pack(percentage)


class FileStateStore:
    """State store backed by a small binary file."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_state_path()

    def load(self) -> int:
        """
        Return the last stored percentage.

        Any failure (missing file, read error, short file, value above 100)
        yields DEFAULT_PERCENTAGE, so a first run never notifies spuriously.
        """
        try:
            with open(self.path, "rb") as f:
                data = f.read(_FORMAT.size)
        except OSError as e:
            LOGGER.debug("No usable state in %s (%s), assuming %d%%", self.path, e, DEFAULT_PERCENTAGE)
            return DEFAULT_PERCENTAGE

        if len(data) < _FORMAT.size:
            LOGGER.debug("Truncated state in %s, assuming %d%%", self.path, DEFAULT_PERCENTAGE)
            return DEFAULT_PERCENTAGE

        (value,) = _FORMAT.unpack(data)
        if value > 100:
            LOGGER.debug("Out of range state %d in %s, assuming %d%%", value, self.path, DEFAULT_PERCENTAGE)
            return DEFAULT_PERCENTAGE
        return value

    def save(self, percentage: int):
        data = encode_percentage(percentage)
        tmp_file = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_file, "wb") as f:
                f.write(data)
            os.replace(tmp_file, self.path)
        except OSError as e:
            try:
                tmp_file.unlink()
            except OSError:
                pass
            raise StateWriteError(f"Failed to write power value to {self.path}: {e}") from e
        LOGGER.debug("Stored %d%% in %s", percentage, self.path)


class MemoryStateStore:
    """In-memory state store, mainly for tests."""

    def __init__(self, percentage=None):
        self.percentage = percentage

    def load(self) -> int:
        if self.percentage is None:
            return DEFAULT_PERCENTAGE
        return self.percentage

    def save(self, percentage: int):
        encode_percentage(percentage)
        self.percentage = percentage
