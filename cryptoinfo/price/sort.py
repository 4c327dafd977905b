"""Sort keys and directions for the price list."""

from __future__ import annotations

from enum import Enum, IntEnum


class SortDir(Enum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def default(cls) -> SortDir:
        return cls.DOWN

    def toggled(self) -> SortDir:
        return SortDir.DOWN if self is SortDir.UP else SortDir.UP


class SortKey(IntEnum):
    MARKED = 1
    INDEX = 2
    SYMBOL = 3
    PRICE = 4
    PER_24H = 5
    PER_7D = 6
    VOLUME_24H = 7
    FLOOR = 8


def parse_sort_key(value: int) -> SortKey:
    """The key numbered ``value``; unknown numbers mean :attr:`SortKey.MARKED`."""
    try:
        return SortKey(value)
    except ValueError:
        return SortKey.MARKED