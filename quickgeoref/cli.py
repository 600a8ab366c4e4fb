# -*- coding: utf-8 -*-
"""
quickgeoref Command Line - Georeference an image as a full-globe raster.

Usage:
  quickgeoref FILE
  quickgeoref FILE --worldfile
  quickgeoref FILE -a "3396.19 km" -f 169.89 --prjfile
  quickgeoref FILE -a "1 R_E" -b "6356.752 km" --no-auxfile --worldfile
  quickgeoref --help

Exit status is 0 on success, 1 if the arguments or the image are
unusable or any sidecar file could not be written, and 2 for command
line syntax errors.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-04

Modified
--------
2026-03-05
"""

# Standard library
import argparse
import logging
from typing import List, Optional, Sequence

# quickgeoref internal
from quickgeoref.ellipsoid import Ellipsoid
from quickgeoref.exceptions import MissingArgumentError, QuickGeorefError
from quickgeoref.georef import GeoreferenceResult, georeference
from quickgeoref.options import OutputOptions
from quickgeoref.units import parse_length
from quickgeoref.vocabulary import WriteStatus

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Returns
    -------
    argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="quickgeoref",
        description=(
            "Georeference an image as an equirectangular (plate carree) "
            "raster covering the whole globe by writing sidecar files."
        ),
    )
    parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="Image to georeference.",
    )
    parser.add_argument(
        "-a", "--semi-major",
        metavar="DISTANCE",
        help=(
            "Semi-major axis (Equatorial radius). "
            "Defaults to Earth's radius of 6378137.0 m."
        ),
    )
    parser.add_argument(
        "-b", "--semi-minor",
        metavar="DISTANCE",
        help=(
            "Semi-minor axis (Polar radius). Defaults to being calculated "
            "from semi-major axis and flattening."
        ),
    )
    parser.add_argument(
        "-f", "--flattening",
        metavar="N",
        type=float,
        help=(
            "Inverse flattening. Defaults to Earth's value of 298.257223563 "
            "or is calculated from the semi-major and semi-minor axes."
        ),
    )
    parser.add_argument(
        "--auxfile",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create .aux.xml. On by default.",
    )
    parser.add_argument(
        "--worldfile",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            "Create worldfile (replace last letter of extension with w). "
            "Off by default unless prjfile is on."
        ),
    )
    parser.add_argument(
        "--prjfile",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create .prj. Off by default unless worldfile is on.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debugging detail.",
    )
    return parser


def format_summary(ellipsoid: Ellipsoid) -> List[str]:
    """Console summary of the resolved ellipsoid."""
    a = ellipsoid.semi_major
    b = ellipsoid.semi_minor
    return [
        f"Equatorial radius: {a.to('m').format('%0.2f')} ({a.to('R_E')})",
        f"Polar radius: {b.to('m').format('%0.2f')} ({b.to('R_E_P')})",
        f"Flattening: 1:{float(ellipsoid.inverse_flattening)!r}",
    ]


def run(args: argparse.Namespace) -> GeoreferenceResult:
    """Georeference the image named by parsed arguments.

    Raises
    ------
    QuickGeorefError
        For a missing FILE, bad distances, inconsistent ellipsoid
        parameters, or an unreadable image.
    """
    if args.file is None:
        raise MissingArgumentError("FILE")

    semi_major = semi_minor = None
    if args.semi_major is not None:
        semi_major = parse_length(args.semi_major)
    if args.semi_minor is not None:
        semi_minor = parse_length(args.semi_minor)
    options = OutputOptions.resolve(args.auxfile, args.worldfile, args.prjfile)

    return georeference(
        args.file,
        semi_major=semi_major,
        semi_minor=semi_minor,
        inverse_flattening=args.flattening,
        options=options,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point.

    Parameters
    ----------
    argv : Sequence[str], optional
        Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    try:
        result = run(args)
    except QuickGeorefError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    for r in result.results:
        if r.status is not WriteStatus.FAILED:
            print(r.message)
    for line in format_summary(result.ellipsoid):
        print(line)

    if result.failures:
        for r in result.failures:
            logger.error("%s", r.message)
        logger.error("%d of %d sidecar files could not be written",
                     len(result.failures), len(result.results))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
