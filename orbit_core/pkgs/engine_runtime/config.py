"""
Loading orbit systems from YAML.

Parsing problems (bad YAML, wrong types, unknown parents, cyclic parents) are
raised as ``ConfigError``. Orbit geometry is not validated here; invalid
orbits load fine and report their problems through ``OrbitSystem.errors``.
"""
import logging
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from ..geometry import Color, OrbitConfiguration, degrees_to_radians
from .schemas import OrbitSpec, SystemSpec
from .system import OrbitSystem

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a system configuration cannot be loaded."""


def load_config(path: str) -> SystemSpec:
    """Read and parse a YAML system description."""
    try:
        with open(path, 'r') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file {path}: {e}") from e

    spec = parse_config(raw or {})
    logger.info(f"Loaded {len(spec.orbits)} orbits from {path}")
    return spec


def parse_config(raw: Union[Dict[str, Any], SystemSpec]) -> SystemSpec:
    if isinstance(raw, SystemSpec):
        return raw
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at top level, got {type(raw).__name__}")
    try:
        return SystemSpec(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid system configuration: {e}") from e


def orbit_from_spec(spec: OrbitSpec) -> OrbitConfiguration:
    if spec.rotation is not None and spec.rotation_degrees is not None:
        raise ConfigError(f"{spec.name}: give either rotation or rotation_degrees, not both")
    if spec.rotation_degrees is not None:
        rotation = degrees_to_radians(spec.rotation_degrees)
    else:
        rotation = spec.rotation or 0.0

    try:
        color = Color.parse(spec.color) if spec.color else Color()
    except ValueError as e:
        raise ConfigError(f"{spec.name}: {e}") from e

    return OrbitConfiguration(
        name=spec.name,
        color=color,
        major_width=spec.major_width,
        minor_width=spec.minor_width,
        step_count=spec.step_count,
        step_offset=spec.step_offset,
        rotation=rotation,
        offset_x=spec.offset_x,
        offset_y=spec.offset_y,
        clockwise=spec.clockwise,
    )


def build_system(raw: Union[Dict[str, Any], SystemSpec]) -> OrbitSystem:
    """Create an ``OrbitSystem`` from a parsed or raw configuration."""
    spec = parse_config(raw)
    system = OrbitSystem()

    try:
        for orbit_spec in spec.orbits:
            system.add(orbit_from_spec(orbit_spec))
        for orbit_spec in spec.orbits:
            if orbit_spec.parent is not None:
                child = system.by_name(orbit_spec.name)
                parent = system.by_name(orbit_spec.parent)
                system.link(child.id, parent.id)
    except KeyError as e:
        raise ConfigError(f"Unknown parent orbit: {e}") from e
    except ValueError as e:
        raise ConfigError(str(e)) from e

    logger.debug(f"Built system with {len(system)} orbits")
    return system
