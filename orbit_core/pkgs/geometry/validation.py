"""
Validation rules for orbit configurations.

All rules are evaluated on every call; a configuration may report several
problems at once. Errors are yielded as (field, message) pairs so callers can
show them next to the offending input.
"""
from itertools import chain
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional

MAXIMUM_STEP_COUNT = 2000
MAXIMUM_RATIO = 2.0
MAXIMUM_NAME_LENGTH = 120

# Key used by get_errors() for errors not tied to a field.
GENERAL_KEY = "@"


class OrbitError(NamedTuple):
    field: Optional[str]
    message: str


def validate(config) -> Iterator[OrbitError]:
    """Yield every rule violation found on ``config``, in rule order."""
    major = config.major_width
    minor = config.minor_width
    fixed_point = major == 0 and minor == 0

    if fixed_point:
        if config.step_count != 1:
            yield OrbitError("step_count", "must be one for a fixed point orbit")
    elif major == 0:
        yield OrbitError("major_width", "cannot be zero if minor width is not zero")
    elif minor == 0:
        yield OrbitError("minor_width", "cannot be zero if major width is not zero")

    if major < 0:
        yield OrbitError("major_width", "cannot be negative")
    if minor < 0:
        yield OrbitError("minor_width", "cannot be negative")

    if major < minor:
        yield OrbitError("major_width", "must be greater than or equal to minor width")
        yield OrbitError("minor_width", "must be less than or equal to major width")

    if major > 0 and minor > 0 and major >= minor:
        if major / minor > MAXIMUM_RATIO:
            message = "must have a ratio less than or equal to 2:1"
            yield OrbitError("major_width", message)
            yield OrbitError("minor_width", message)

    if not fixed_point:
        if config.step_count < 1:
            yield OrbitError("step_count", "must be at least one for any orbit")
        if config.step_count > MAXIMUM_STEP_COUNT:
            yield OrbitError(
                "step_count",
                f"must be less than or equal to {MAXIMUM_STEP_COUNT} for any orbit")


def validate_identity(config) -> Iterator[OrbitError]:
    """Checks on display fields; these never affect the step table."""
    name = getattr(config, "name", None)
    if name is not None and len(name) > MAXIMUM_NAME_LENGTH:
        yield OrbitError("name", f"must be at most {MAXIMUM_NAME_LENGTH} characters")


def is_valid(config) -> bool:
    """True when ``validate`` finds nothing."""
    return next(validate(config), None) is None


def group_errors(results: Iterable[OrbitError]) -> Dict[str, List[str]]:
    """Group messages by field name, preserving order."""
    errors: Dict[str, List[str]] = {}
    for err in results:
        errors.setdefault(err.field or GENERAL_KEY, []).append(err.message)
    return errors


def get_errors(config) -> Dict[str, List[str]]:
    """Geometry errors of ``config`` grouped by field."""
    return group_errors(validate(config))


def get_all_errors(config) -> Dict[str, List[str]]:
    """Geometry errors followed by display field errors."""
    return group_errors(chain(validate(config), validate_identity(config)))
