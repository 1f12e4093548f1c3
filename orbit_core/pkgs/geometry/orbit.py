"""
Mutable orbit configuration with a lazily rebuilt step table.

Every write to a geometry field bumps ``generation`` and marks the cached
step table dirty; the next call to ``steps`` or ``position_at_turn`` rebuilds
it. Identity and display fields (``id``, ``parent_id``, ``name``, ``color``)
do not affect the table.
"""
import logging
from typing import Dict, List, Optional, Tuple

from .color import BLACK, Color
from .engine import generate_steps, position_at_turn
from .position import Position
from .validation import get_errors, is_valid

logger = logging.getLogger(__name__)


class _GeometryField:
    """Attribute that invalidates the owner's step table when written."""

    def __init__(self, cast, default):
        self.cast = cast
        self.default = default

    def __set_name__(self, owner, name):
        self.name = name
        self.slot = "_" + name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return getattr(obj, self.slot, self.default)

    def __set__(self, obj, value):
        setattr(obj, self.slot, self.cast(value))
        obj.invalidate()


class OrbitConfiguration:
    """
    One object travelling along an elliptical or fixed point orbit.

    ``major_width``/``minor_width`` are the semi-axis widths, ``step_count``
    the number of discrete positions per cycle and ``step_offset`` the phase
    into that cycle. ``rotation`` is in radians. ``offset_x``/``offset_y``
    move the orbit origin relative to the parent's current position (or to
    (0, 0) without a parent).

    The parent is referenced, not owned; its lifetime is managed by whoever
    created it (usually an ``OrbitSystem``). Parent chains must not be cyclic.
    """

    major_width = _GeometryField(float, 0.0)
    minor_width = _GeometryField(float, 0.0)
    step_count = _GeometryField(int, 0)
    step_offset = _GeometryField(int, 0)
    rotation = _GeometryField(float, 0.0)
    offset_x = _GeometryField(float, 0.0)
    offset_y = _GeometryField(float, 0.0)
    clockwise = _GeometryField(bool, False)

    GEOMETRY_FIELDS = ("major_width", "minor_width", "step_count", "step_offset",
                       "rotation", "offset_x", "offset_y", "clockwise")

    def __init__(self, parent: Optional["OrbitConfiguration"] = None,
                 name: Optional[str] = None, color: Color = BLACK, **geometry):
        self.id: Optional[int] = None
        self.parent_id: Optional[int] = None
        self.parent = parent
        self.name = name
        self.color = color
        self._steps: Optional[Tuple[Position, ...]] = None
        self.generation = 0
        self.computed_generation: Optional[int] = None
        for field, value in geometry.items():
            if field not in self.GEOMETRY_FIELDS:
                raise TypeError(f"unknown orbit field: {field}")
            setattr(self, field, value)

    def invalidate(self):
        """Mark the step table stale."""
        self._steps = None
        self.generation += 1

    @property
    def dirty(self) -> bool:
        return self._steps is None

    def recompute(self) -> Tuple[Position, ...]:
        """Rebuild the step table now."""
        self._steps = generate_steps(self)
        self.computed_generation = self.generation
        logger.debug("Rebuilt step table for %r (generation %d, %d steps)",
                     self, self.generation, len(self._steps))
        return self._steps

    @property
    def steps(self) -> Tuple[Position, ...]:
        if self._steps is None:
            return self.recompute()
        return self._steps

    def is_valid(self) -> bool:
        return is_valid(self)

    def get_errors(self) -> Dict[str, List[str]]:
        return get_errors(self)

    def position_at_turn(self, turn: int) -> Position:
        return position_at_turn(self, turn)

    def __repr__(self) -> str:
        label = self.name if self.name is not None else self.id
        return (f"OrbitConfiguration({label!r}, major={self.major_width}, "
                f"minor={self.minor_width}, steps={self.step_count})")
