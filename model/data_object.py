# model/data_object.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Per-object read/write timestamp state and the registry that owns it

"""Data object state for Basic Timestamp Ordering.

Every declared object carries two logical timestamps: RTS, the highest
timestamp of a transaction allowed to read it, and WTS, the highest
timestamp of a transaction allowed to write it. Both start at zero for
every schedule and only ever grow while that schedule is evaluated.

The registry is created once per run and reset, not recreated, between
schedules.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import UnknownObject
from utils.logger import get_logger


@dataclass(slots=True)
class DataObjectState:
    """Mutable RTS/WTS pair for one named data object."""

    name: str
    read_timestamp: int = 0
    write_timestamp: int = 0

    def reset(self) -> None:
        self.read_timestamp = 0
        self.write_timestamp = 0

    def __str__(self) -> str:
        return f"{self.name}(RTS={self.read_timestamp}, WTS={self.write_timestamp})"


class DataObjectRegistry:
    """Mapping from object name to its current timestamp state.

    Names are fixed by the first call to :meth:`reset`; later resets only
    zero the existing states. Mutation goes through the two setters, which
    refuse to move a timestamp backwards.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._objects: Dict[str, DataObjectState] = {}
        names = list(names)
        if names:
            self.reset(names)

    def reset(self, names: Optional[Iterable[str]] = None) -> None:
        """Zero every object's timestamps, declaring new names if given.

        Args:
            names: Object names to declare. Names already present are kept
                and zeroed; omitted entirely, only the existing set is reset.
        """
        if names is not None:
            for name in names:
                if name not in self._objects:
                    self._objects[name] = DataObjectState(name)

        for state in self._objects.values():
            state.reset()

        get_logger().debug(f"Registry reset: {len(self._objects)} objects at RTS=WTS=0")

    def get(self, name: str) -> DataObjectState:
        """Return the state for ``name``.

        Raises:
            UnknownObject: ``name`` was never declared
        """
        try:
            return self._objects[name]
        except KeyError:
            raise UnknownObject(name) from None

    def set_read_timestamp(self, name: str, timestamp: int) -> None:
        state = self.get(name)
        if timestamp < state.read_timestamp:
            raise ValueError(
                f"RTS of '{name}' cannot decrease ({state.read_timestamp} -> {timestamp})"
            )
        state.read_timestamp = timestamp

    def set_write_timestamp(self, name: str, timestamp: int) -> None:
        state = self.get(name)
        if timestamp < state.write_timestamp:
            raise ValueError(
                f"WTS of '{name}' cannot decrease ({state.write_timestamp} -> {timestamp})"
            )
        state.write_timestamp = timestamp

    def snapshot(self) -> Dict[str, Tuple[int, int]]:
        """Return ``{name: (RTS, WTS)}`` for every declared object."""
        return {
            name: (state.read_timestamp, state.write_timestamp)
            for name, state in self._objects.items()
        }

    @property
    def names(self) -> List[str]:
        """Declared object names in declaration order."""
        return list(self._objects)

    def __contains__(self, name: object) -> bool:
        return name in self._objects

    def __iter__(self) -> Iterator[DataObjectState]:
        return iter(self._objects.values())

    def __len__(self) -> int:
        return len(self._objects)

    def __str__(self) -> str:
        return "{" + ", ".join(str(s) for s in self._objects.values()) + "}"
