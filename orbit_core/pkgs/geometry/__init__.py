"""
Orbital geometry: positions, orbit configurations, validation and the step
table engine, plus the identity and colour value types attached to orbital
objects.
"""

# Value types
from .position import Position, ORIGIN, degrees_to_radians
from .color import Color
from .identity import IdGenerator, next_id

# Validation
from .validation import (OrbitError, validate, validate_identity, is_valid, get_errors,
                         get_all_errors, MAXIMUM_STEP_COUNT, GENERAL_KEY)

# Engine
from .engine import generate_steps, position_at_turn
from .orbit import OrbitConfiguration

__all__ = [
    # Value types
    'Position', 'ORIGIN', 'degrees_to_radians', 'Color', 'IdGenerator', 'next_id',
    # Validation
    'OrbitError', 'validate', 'validate_identity', 'is_valid', 'get_errors', 'get_all_errors',
    'MAXIMUM_STEP_COUNT', 'GENERAL_KEY',
    # Engine
    'generate_steps', 'position_at_turn', 'OrbitConfiguration',
]
