"""
Runtime components around the geometry core: the orbit registry, YAML
configuration loading and track recording.
"""

from .system import OrbitSystem
from .schemas import OrbitSpec, SystemSpec
from .config import ConfigError, load_config, parse_config, build_system
from .recorder import TrackRecorder

__all__ = ['OrbitSystem', 'OrbitSpec', 'SystemSpec', 'ConfigError',
           'load_config', 'parse_config', 'build_system', 'TrackRecorder']
