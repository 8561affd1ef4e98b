"""CLI entry point: geoclip clip|boundary subcommands."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, NoReturn, TextIO, cast

from geoclip.arrays import boundary
from geoclip.config import get_log_level
from geoclip.geojson import clip_geojson

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or GEOCLIP_LOG)."""
    logging.basicConfig(
        level=get_log_level(verbose),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _read_json(path: str) -> Any:
    if path == '-':
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def _write_json(obj: Any, path: str | None, indent: int | None) -> None:
    if path is None:
        out: TextIO = sys.stdout
        json.dump(obj, out, indent=indent)
        out.write('\n')
        return
    with open(path, 'w') as f:
        json.dump(obj, f, indent=indent)
        f.write('\n')


def _clip_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Clip the line geometries of a GeoJSON file (clip subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; input, output, indent.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        obj = _read_json(args.input)
        if not isinstance(obj, dict):
            raise ValueError('GeoJSON input must be a JSON object')
        clipped = clip_geojson(obj)
        _write_json(clipped, args.output, args.indent)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    logger.info('Wrote clipped GeoJSON to %s', args.output or '<stdout>')
    return 0


def _boundary_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Write the full clip boundary trace as a GeoJSON LineString (boundary subcommand)."""
    try:
        points = boundary(args.direction, degrees=not args.radians)
        _write_json(
            {'type': 'LineString', 'coordinates': points.tolist()}, args.output, args.indent
        )
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def main() -> int:
    """Entry point for geoclip CLI (clip | boundary).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='geoclip',
        description='Split geographic lines at the antimeridian and across the poles.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    clip_parser = subparsers.add_parser('clip', help='Clip GeoJSON line geometries')
    clip_parser.add_argument('input', type=str, help='GeoJSON file (degrees); - for stdin')
    clip_parser.add_argument(
        '-o', '--output', type=str, default=None, help='Output GeoJSON file (default: stdout)'
    )
    clip_parser.add_argument('--indent', type=int, default=None, help='JSON indentation')
    clip_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    clip_parser.set_defaults(func=_clip_cmd)

    bound_parser = subparsers.add_parser('boundary', help='Write the clip boundary trace')
    bound_parser.add_argument(
        '--direction', type=int, default=1, choices=[1, -1], help='Ring winding direction'
    )
    bound_parser.add_argument(
        '--radians', action='store_true', help='Write radians instead of degrees'
    )
    bound_parser.add_argument(
        '-o', '--output', type=str, default=None, help='Output GeoJSON file (default: stdout)'
    )
    bound_parser.add_argument('--indent', type=int, default=None, help='JSON indentation')
    bound_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    bound_parser.set_defaults(func=_boundary_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
