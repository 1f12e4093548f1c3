"""
RGBA colour value used by callers that render orbital objects.

The value is packed into a single 32-bit integer as 0xRRGGBBAA.
"""
from typing import Dict, Optional, Tuple


def _clamp_byte(value: float) -> int:
    return int(min(max(float(value), 0.0), 1.0) * 255)


class Color:
    """Immutable RGBA colour."""

    __slots__ = ("_value", "_name")

    def __init__(self, rgba: int = 0x000000FF, name: Optional[str] = None):
        self._value = int(rgba) & 0xFFFFFFFF
        self._name = name

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = 0xFF) -> "Color":
        for channel in (red, green, blue, alpha):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"channel out of range: {channel}")
        return cls((red << 24) | (green << 16) | (blue << 8) | alpha)

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "Color":
        """Build from 0..1 channels; out of range values are clamped."""
        return cls.from_bytes(_clamp_byte(red), _clamp_byte(green),
                              _clamp_byte(blue), _clamp_byte(alpha))

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a known colour name, ``RRGGBB`` or ``RRGGBBAA`` (optional ``#``)."""
        known = cls.known().get(text.strip().lower())
        if known is not None:
            return known
        digits = text.strip().lstrip("#")
        if len(digits) == 6:
            digits += "FF"
        if len(digits) != 8:
            raise ValueError(f"not a colour: {text!r}")
        return cls(int(digits, 16))

    @property
    def red(self) -> int:
        return (self._value >> 24) & 0xFF

    @property
    def green(self) -> int:
        return (self._value >> 16) & 0xFF

    @property
    def blue(self) -> int:
        return (self._value >> 8) & 0xFF

    @property
    def alpha(self) -> int:
        return self._value & 0xFF

    def as_floats(self) -> Tuple[float, float, float, float]:
        return (self.red / 255.0, self.green / 255.0,
                self.blue / 255.0, self.alpha / 255.0)

    def to_int(self) -> int:
        return self._value

    def __str__(self) -> str:
        if self._name is not None:
            return self._name
        for known in _KNOWN.values():
            if known._value == self._value:
                return known._name
        return f"{self._value:08X}"

    def __repr__(self) -> str:
        return f"Color({str(self)})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @staticmethod
    def known() -> Dict[str, "Color"]:
        return dict(_KNOWN)


_KNOWN: Dict[str, Color] = {
    name.lower(): Color(value, name) for name, value in (
        ("Black", 0x000000FF),
        ("White", 0xFFFFFFFF),
        ("Gray", 0xC0C0C0FF),
        ("Brown", 0x804000FF),
        ("Red", 0xFF0000FF),
        ("Orange", 0xFF8000FF),
        ("Yellow", 0xFFFF00FF),
        ("Green", 0x008000FF),
        ("Blue", 0x0000FFFF),
        ("Purple", 0x8000FFFF),
    )
}

BLACK = _KNOWN["black"]
