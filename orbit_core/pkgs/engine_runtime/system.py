"""
Registry of orbital objects.

``OrbitSystem`` owns the configurations it holds, hands out ids, resolves
parent links by id and refuses links that would make a parent chain cyclic.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from ..geometry import OrbitConfiguration, Position, IdGenerator, get_all_errors, next_id

logger = logging.getLogger(__name__)


class OrbitSystem:
    """Arena of orbit configurations keyed by id."""

    def __init__(self, ids: Optional[IdGenerator] = None):
        self._ids = ids
        self._objects: Dict[int, OrbitConfiguration] = {}
        self._names: Dict[str, int] = {}

    def _next_id(self) -> int:
        return self._ids.next() if self._ids is not None else next_id()

    def add(self, orbit: OrbitConfiguration, parent_id: Optional[int] = None) -> int:
        """Register ``orbit``, assigning an id when it has none."""
        if orbit.name is not None and orbit.name in self._names:
            raise ValueError(f"duplicate orbit name: {orbit.name}")
        if orbit.id is None:
            orbit.id = self._next_id()
        elif orbit.id in self._objects:
            raise ValueError(f"duplicate orbit id: {orbit.id}")

        self._objects[orbit.id] = orbit
        if orbit.name is not None:
            self._names[orbit.name] = orbit.id
        logger.debug(f"Added orbit {orbit.id} ({orbit.name})")

        if parent_id is not None:
            self.link(orbit.id, parent_id)
        return orbit.id

    def get(self, orbit_id: int) -> OrbitConfiguration:
        try:
            return self._objects[orbit_id]
        except KeyError:
            raise KeyError(f"unknown orbit id: {orbit_id}") from None

    def by_name(self, name: str) -> OrbitConfiguration:
        try:
            return self._objects[self._names[name]]
        except KeyError:
            raise KeyError(f"unknown orbit name: {name}") from None

    def remove(self, orbit_id: int) -> OrbitConfiguration:
        """Drop an orbit; children of it are detached from their parent."""
        orbit = self.get(orbit_id)
        for child in self.children(orbit_id):
            self.unlink(child.id)
        del self._objects[orbit_id]
        if orbit.name is not None:
            self._names.pop(orbit.name, None)
        return orbit

    def children(self, orbit_id: int) -> List[OrbitConfiguration]:
        return [o for o in self._objects.values() if o.parent_id == orbit_id]

    def ancestors(self, orbit_id: int) -> Iterator[OrbitConfiguration]:
        """Walk up the parent chain, nearest parent first."""
        current = self.get(orbit_id).parent
        while current is not None:
            yield current
            current = current.parent

    def link(self, child_id: int, parent_id: int):
        """Make ``parent_id`` the parent of ``child_id``."""
        child = self.get(child_id)
        parent = self.get(parent_id)
        if parent_id == child_id or any(a is child for a in self.ancestors(parent_id)):
            raise ValueError(f"linking {child_id} to {parent_id} would create a cycle")
        child.parent = parent
        child.parent_id = parent_id
        logger.debug(f"Linked orbit {child_id} to parent {parent_id}")

    def unlink(self, child_id: int):
        child = self.get(child_id)
        child.parent = None
        child.parent_id = None

    def errors(self) -> Dict[int, Dict[str, List[str]]]:
        """Geometry and name errors of every invalid orbit, keyed by id."""
        report = {}
        for orbit_id, orbit in self._objects.items():
            errs = get_all_errors(orbit)
            if errs:
                report[orbit_id] = errs
        return report

    def positions_at_turn(self, turn: int, ids: Optional[Iterable[int]] = None) -> Dict[int, Position]:
        selected = self._objects.keys() if ids is None else ids
        return {i: self.get(i).position_at_turn(turn) for i in selected}

    def track(self, orbit_id: int, start: int, stop: int) -> List[Position]:
        """Positions of one orbit for turns ``start`` up to but excluding ``stop``."""
        orbit = self.get(orbit_id)
        return [orbit.position_at_turn(turn) for turn in range(start, stop)]

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[OrbitConfiguration]:
        return iter(list(self._objects.values()))

    def __contains__(self, orbit_id) -> bool:
        return orbit_id in self._objects
