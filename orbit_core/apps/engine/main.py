"""CLI entrypoint: load an orbit system and export positions per turn."""

import argparse
import logging
import sys
from typing import List, Optional

from ...pkgs.engine_runtime import ConfigError, OrbitSystem, TrackRecorder, build_system, load_config
from ...pkgs.observability import FORMATS, setup_logging

logger = logging.getLogger(__name__)

EXIT_INVALID = 1
EXIT_CONFIG = 2


def report_errors(system: OrbitSystem) -> bool:
    """Log validation problems; returns True when every orbit is valid."""
    errors = system.errors()
    for orbit_id, fields in errors.items():
        orbit = system.get(orbit_id)
        for field, messages in fields.items():
            for message in messages:
                logger.error(f"{orbit.name or orbit_id}: {field} {message}")
    return not errors


def record_tracks(system: OrbitSystem, start: int, stop: int,
                  names: Optional[List[str]] = None) -> TrackRecorder:
    if names:
        orbits = [system.by_name(name) for name in names]
    else:
        orbits = list(system)

    recorder = TrackRecorder()
    recorder.set_metadata(turns=[start, stop], objects=[o.name for o in orbits])
    for turn in range(start, stop):
        for orbit in orbits:
            recorder.log(turn, orbit.id, orbit.position_at_turn(turn), orbit.name)
    return recorder


def run(args: argparse.Namespace) -> int:
    try:
        spec = load_config(args.config)
        system = build_system(spec)
    except ConfigError as e:
        logger.error(str(e))
        return EXIT_CONFIG

    valid = report_errors(system)
    if args.validate_only:
        if valid:
            logger.info(f"All {len(system)} orbits are valid")
        return 0 if valid else EXIT_INVALID
    if any(not orbit.is_valid() for orbit in system):
        logger.warning("Invalid orbits report position (0, 0)")

    start, stop = args.turns
    if start >= stop:
        logger.error(f"Empty turn range {start}..{stop}: STOP must be greater than START")
        return EXIT_CONFIG
    try:
        recorder = record_tracks(system, start, stop, args.object)
    except KeyError as e:
        logger.error(str(e))
        return EXIT_CONFIG

    path = recorder.dump(args.output, args.format)
    logger.info(f"Recorded {recorder.get_summary()} to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export orbit positions per turn",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        required=True,
        help='Path to the YAML system description'
    )
    parser.add_argument(
        '--turns', '-t',
        type=int,
        nargs=2,
        default=[0, 100],
        metavar=('START', 'STOP'),
        help='Half-open range of turns to export'
    )
    parser.add_argument(
        '--object',
        action='append',
        help='Only export the named object (repeatable)'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        default='orbit_positions',
        help='Output file path prefix'
    )
    parser.add_argument(
        '--format', '-f',
        type=str,
        default='csv',
        choices=['csv', 'jsonl'],
        help='Output format'
    )
    parser.add_argument(
        '--validate-only',
        action='store_true',
        help='Only report validation errors'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )
    parser.add_argument(
        '--log-format',
        type=str,
        default='structured',
        choices=sorted(FORMATS),
        help='Log line layout'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)
    return run(args)


if __name__ == '__main__':
    sys.exit(main())
