# -*- coding: utf-8 -*-
"""
Ellipsoid - Reference ellipsoid parameters and their reconciliation.

Provides the immutable ``Ellipsoid`` value type and
``resolve_ellipsoid()``, which turns any allowed combination of
semi-major axis, semi-minor axis, and inverse flattening into a
complete, consistent triple.

Resolution rules, in priority order:

1. Inverse flattening given -> semi-minor derived from the semi-major
   axis (Earth's by default). Giving a semi-minor axis too is a conflict.
2. Semi-minor axis given -> requires the semi-major axis; inverse
   flattening derived as ``a / (a - b)``.
3. Semi-major axis alone -> Earth's inverse flattening, semi-minor
   derived.
4. Nothing given -> Earth defaults, used as literals.

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
2026-03-02

Modified
--------
2026-03-04
"""

# Standard library
import logging
from dataclasses import dataclass
from typing import Optional

# quickgeoref internal
from quickgeoref.exceptions import (
    ConflictingArgumentsError,
    InvalidArgumentError,
    MissingArgumentError,
)
from quickgeoref.units import Length

logger = logging.getLogger(__name__)

# Earth defaults. The three literals agree only to ~5e-5 m under
# b = a * (1 - 1/f); they are used as given, never re-derived.
EARTH_SEMI_MAJOR = Length(6378137.0, 'm')
EARTH_SEMI_MINOR = Length(6356752.3142, 'm')
EARTH_INVERSE_FLATTENING = 298.257223563


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid described by its axes and inverse flattening.

    Parameters
    ----------
    semi_major : Length
        Equatorial radius.
    semi_minor : Length
        Polar radius.
    inverse_flattening : float
        ``a / (a - b)``.
    """

    semi_major: Length
    semi_minor: Length
    inverse_flattening: float

    @property
    def flattening(self) -> float:
        """Flattening ``f = (a - b) / a``."""
        return 1.0 / self.inverse_flattening

    def __str__(self) -> str:
        return (
            f"Ellipsoid(a={self.semi_major}, b={self.semi_minor}, "
            f"1/f={self.inverse_flattening!r})"
        )


def _semi_minor_from(semi_major: Length, inverse_flattening: float) -> Length:
    if inverse_flattening == 0:
        raise InvalidArgumentError("Inverse flattening must be non-zero")
    return semi_major * (1.0 - 1.0 / inverse_flattening)


def resolve_ellipsoid(
    semi_major: Optional[Length] = None,
    semi_minor: Optional[Length] = None,
    inverse_flattening: Optional[float] = None,
) -> Ellipsoid:
    """Reconcile user-supplied ellipsoid parameters into a full ``Ellipsoid``.

    Parameters
    ----------
    semi_major : Length, optional
        Equatorial radius. Defaults to Earth's 6378137.0 m where a rule
        needs it.
    semi_minor : Length, optional
        Polar radius. Requires *semi_major*; excludes
        *inverse_flattening*.
    inverse_flattening : float, optional
        Inverse flattening ``1/f``.

    Returns
    -------
    Ellipsoid
        Fully resolved parameters.

    Raises
    ------
    ConflictingArgumentsError
        If both *semi_minor* and *inverse_flattening* are given.
    MissingArgumentError
        If *semi_minor* is given without *semi_major*.
    InvalidArgumentError
        If the semi-minor axis is not smaller than the semi-major axis,
        or the result is not a valid oblate ellipsoid.

    Examples
    --------
    >>> from quickgeoref.ellipsoid import resolve_ellipsoid
    >>> from quickgeoref.units import Length
    >>> e = resolve_ellipsoid(Length(3396.19, 'km'), inverse_flattening=169.89)
    >>> round(e.semi_minor.magnitude, 1)
    3376.2
    """
    if inverse_flattening is not None:
        if semi_minor is not None:
            raise ConflictingArgumentsError(
                "Can not specify both semi-minor axis and flattening"
            )
        if semi_major is None:
            semi_major = EARTH_SEMI_MAJOR
        logger.debug("Deriving semi-minor axis from inverse flattening %r",
                     inverse_flattening)
        semi_minor = _semi_minor_from(semi_major, inverse_flattening)
    elif semi_minor is not None:
        if semi_major is None:
            raise MissingArgumentError(
                "Can not specify semi-minor axis without semi-major axis"
            )
        if not semi_major > semi_minor:
            raise InvalidArgumentError(
                "Semi-minor axis must be less than semi-major axis"
            )
        logger.debug("Deriving inverse flattening from both axes")
        inverse_flattening = float(semi_major / (semi_major - semi_minor))
    elif semi_major is not None:
        logger.debug("Using Earth inverse flattening with semi-major axis %s",
                     semi_major)
        inverse_flattening = EARTH_INVERSE_FLATTENING
        semi_minor = _semi_minor_from(semi_major, inverse_flattening)
    else:
        logger.debug("No ellipsoid parameters given, using Earth defaults")
        return Ellipsoid(
            EARTH_SEMI_MAJOR, EARTH_SEMI_MINOR, EARTH_INVERSE_FLATTENING,
        )

    if not semi_major.meters > semi_minor.meters > 0:
        raise InvalidArgumentError(
            f"Degenerate ellipsoid: semi-major {semi_major}, "
            f"semi-minor {semi_minor}, inverse flattening "
            f"{inverse_flattening!r}"
        )
    return Ellipsoid(semi_major, semi_minor, float(inverse_flattening))
