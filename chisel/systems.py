"""Systems with start/update/tick hooks and groups that drive them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar


class System:
    """Base class for anything driven by start, update and tick."""

    def start(self) -> None:
        pass

    def update(self) -> None:
        pass

    def tick(self) -> None:
        pass


S = TypeVar("S", bound=System)


class SystemGroup(System):
    """Owns systems and forwards start/update/tick to them in insertion order.

    Systems added after the group has started are started immediately.
    """

    def __init__(self, *args: System) -> None:
        self._started = False
        self._systems: list[System] = []
        for system in args:
            self._register(system)

    @property
    def started(self) -> bool:
        return self._started

    def _register(self, system: System) -> None:
        if not isinstance(system, System):
            raise TypeError(f"{system!r} is not a System")
        self._systems.append(system)
        if self._started:
            system.start()

    def add_system(self, cls: type[S], *args: Any, **kwargs: Any) -> S:
        """Create a system of type ``cls``, add it and return it."""
        if not (isinstance(cls, type) and issubclass(cls, System)):
            raise TypeError(f"{cls!r} is not a System class")
        system = cls(*args, **kwargs)
        self._register(system)
        return system

    def get_systems(self, cls: type[S]) -> list[S]:
        """All systems whose exact type is ``cls``, in insertion order."""
        return [system for system in self._systems if type(system) is cls]

    def remove_systems(self, cls: type[System]) -> None:
        """Remove every system whose exact type is ``cls``."""
        self._systems = [system for system in self._systems if type(system) is not cls]

    def remove_system(self, system: System) -> bool:
        """Remove one system; return whether it was present."""
        for index, candidate in enumerate(self._systems):
            if candidate is system:
                del self._systems[index]
                return True
        return False

    def clear(self) -> None:
        self._systems.clear()

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[tuple[type[System], System]]:
        """Yield ``(type, system)`` pairs."""
        return ((type(system), system) for system in list(self._systems))

    def start(self) -> None:
        self._started = True
        for system in list(self._systems):
            system.start()

    def update(self) -> None:
        for system in list(self._systems):
            system.update()

    def tick(self) -> None:
        for system in list(self._systems):
            system.tick()