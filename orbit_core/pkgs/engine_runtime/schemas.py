"""Pydantic schemas for orbit system configuration files."""

from pydantic import BaseModel
from typing import List, Optional


class OrbitSpec(BaseModel):
    """One orbital object as written in a configuration file."""
    name: str
    parent: Optional[str] = None
    major_width: float = 0.0
    minor_width: float = 0.0
    step_count: int = 0
    step_offset: int = 0
    rotation: Optional[float] = None          # radians
    rotation_degrees: Optional[float] = None
    offset_x: float = 0.0
    offset_y: float = 0.0
    clockwise: bool = False
    color: Optional[str] = None


class SystemSpec(BaseModel):
    """A whole system of orbits; parents are referenced by name."""
    orbits: List[OrbitSpec] = []
