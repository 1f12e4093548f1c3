"""
Step table generation and turn-to-position lookup.

A step table holds one position per discrete step of a full orbit cycle,
relative to the orbit origin. Elliptical tables exclude the origin offset,
fixed point tables bake it in; ``position_at_turn`` adds the offset in both
cases.
"""
import logging
from typing import Tuple

import numpy as np

from .position import ORIGIN, Position
from .validation import is_valid

logger = logging.getLogger(__name__)


def generate_steps(config) -> Tuple[Position, ...]:
    """Build the step table for ``config``; empty when it is invalid."""
    if not is_valid(config):
        logger.debug("Skipping step table for invalid orbit %r", config)
        return ()

    # fixed point.
    if config.major_width == 0:
        return (Position(config.offset_x, config.offset_y),)

    direction = -1.0 if config.clockwise else 1.0
    per_step = direction * (2 * np.pi) / config.step_count
    angles = per_step * config.step_offset + per_step * np.arange(config.step_count)

    x = np.cos(angles) * config.major_width
    y = np.sin(angles) * config.minor_width

    cos_r, sin_r = np.cos(config.rotation), np.sin(config.rotation)
    xr = x * cos_r - y * sin_r
    yr = x * sin_r + y * cos_r

    return tuple(Position(float(px), float(py)) for px, py in zip(xr, yr))


def position_at_turn(config, turn: int) -> Position:
    """
    Position of ``config`` at ``turn``, including every parent's contribution.

    Negative turns are treated as turn 0. Invalid configurations report the
    origin, which callers should read as "no position" rather than a location.
    The parent chain is followed without a cycle check.
    """
    turn = max(int(turn), 0)

    steps = config.steps
    if not steps or len(steps) != config.step_count:
        return ORIGIN

    parent = config.parent
    offset = parent.position_at_turn(turn) if parent is not None else ORIGIN
    origin = Position(offset.x + config.offset_x, offset.y + config.offset_y)

    local = steps[0] if config.step_count == 1 else steps[turn % config.step_count]
    return origin + local
