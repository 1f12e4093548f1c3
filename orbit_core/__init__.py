"""Orbit Core - discrete orbital positions and orbit validation."""

__version__ = "0.1.0"

# Geometry core
from .pkgs.geometry import (
    Position, ORIGIN, degrees_to_radians,
    Color, IdGenerator, next_id,
    OrbitError, validate, is_valid, get_errors, MAXIMUM_STEP_COUNT,
    OrbitConfiguration, position_at_turn, generate_steps
)

# Runtime
from .pkgs.engine_runtime import (
    OrbitSystem, OrbitSpec, SystemSpec, ConfigError,
    load_config, build_system, TrackRecorder
)

# Observability
from .pkgs.observability import setup_logging

__all__ = [
    # Geometry
    'Position', 'ORIGIN', 'degrees_to_radians',
    'Color', 'IdGenerator', 'next_id',
    'OrbitError', 'validate', 'is_valid', 'get_errors', 'MAXIMUM_STEP_COUNT',
    'OrbitConfiguration', 'position_at_turn', 'generate_steps',

    # Runtime
    'OrbitSystem', 'OrbitSpec', 'SystemSpec', 'ConfigError',
    'load_config', 'build_system', 'TrackRecorder',

    # Observability
    'setup_logging',
]
