# -*- coding: utf-8 -*-
"""
Units - Immutable length quantities with explicit unit conversion.

Provides ``Length``, a frozen magnitude-plus-unit value type, the fixed
table of length units it understands, and ``parse_length()`` for turning
command-line strings such as ``"6378137.0 m"`` or ``"1 R_E"`` into
``Length`` instances.

Besides the usual metric and imperial units, two Earth-radius units are
defined so ellipsoid axes can be given and reported relative to the
Earth:

- ``earth_radius`` (``R_E``, ``R⊕``, ``a_E`` ...) = 6378137.0 m
- ``earth_polar_radius`` (``R_E_P``, ``R⊕P``, ``b_E`` ...) = 6356752.3142 m

The unit table is a module constant; nothing registers units at runtime.

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
import functools
import re
from dataclasses import dataclass
from typing import Dict, Tuple, Union

# quickgeoref internal
from quickgeoref.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class LengthUnit:
    """A named length unit.

    Parameters
    ----------
    name : str
        Canonical unit name.
    display_name : str
        Symbol used when formatting quantities.
    meters : float
        Size of one unit in meters.
    aliases : Tuple[str, ...]
        Additional spellings accepted by ``parse_length()``.
    """

    name: str
    display_name: str
    meters: float
    aliases: Tuple[str, ...] = ()


LENGTH_UNITS: Tuple[LengthUnit, ...] = (
    LengthUnit('m', 'm', 1.0, ('meter', 'meters', 'metre', 'metres')),
    LengthUnit('km', 'km', 1000.0,
               ('kilometer', 'kilometers', 'kilometre', 'kilometres')),
    LengthUnit('cm', 'cm', 0.01,
               ('centimeter', 'centimeters', 'centimetre', 'centimetres')),
    LengthUnit('mm', 'mm', 0.001,
               ('millimeter', 'millimeters', 'millimetre', 'millimetres')),
    LengthUnit('mi', 'mi', 1609.344, ('mile', 'miles')),
    LengthUnit('nmi', 'nmi', 1852.0, ('nautical_mile', 'nautical_miles')),
    LengthUnit('yd', 'yd', 0.9144, ('yard', 'yards')),
    LengthUnit('ft', 'ft', 0.3048, ('foot', 'feet')),
    LengthUnit('in', 'in', 0.0254, ('inch', 'inches')),
    LengthUnit('earth_radius', 'R⊕', 6378137.0,
               ('R_E', 'R_⊕', 'R⊕', 'a_E', 'a_⊕', 'a⊕')),
    LengthUnit('earth_polar_radius', 'R⊕P', 6356752.3142,
               ('R_E_P', 'R_⊕_P', 'R⊕P', 'b_E', 'b_⊕', 'b⊕')),
)

_UNIT_LOOKUP: Dict[str, LengthUnit] = {}
for _unit in LENGTH_UNITS:
    _UNIT_LOOKUP[_unit.name] = _unit
    for _alias in _unit.aliases:
        _UNIT_LOOKUP[_alias] = _unit
del _unit, _alias

_QUANTITY_RE = re.compile(
    r'^\s*(?P<magnitude>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)?'
    r'\s*(?P<unit>\S+)?\s*$'
)


def get_unit(name: str) -> LengthUnit:
    """Look up a length unit by canonical name or alias.

    Raises
    ------
    InvalidArgumentError
        If *name* is not a known length unit.
    """
    try:
        return _UNIT_LOOKUP[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Must be a distance: unknown length unit {name!r}"
        ) from None


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Length:
    """A length quantity: a magnitude in a named unit.

    Instances are immutable. Arithmetic returns new instances in the
    unit of the left operand, and comparisons use the magnitude in
    meters, so ``Length(1, 'km') == Length(1000, 'm')``.

    Parameters
    ----------
    magnitude : float
        Numeric value in *unit*.
    unit : str
        Unit name or alias; stored in canonical form.

    Examples
    --------
    >>> from quickgeoref.units import Length
    >>> Length(6378.137, 'km').meters
    6378137.0
    >>> Length(6378137.0, 'm').to('R_E').magnitude
    1.0
    """

    magnitude: float
    unit: str = 'm'

    def __post_init__(self) -> None:
        object.__setattr__(self, 'magnitude', float(self.magnitude))
        object.__setattr__(self, 'unit', get_unit(self.unit).name)

    @property
    def meters(self) -> float:
        """Magnitude expressed in the base unit (meters)."""
        return self.magnitude * _UNIT_LOOKUP[self.unit].meters

    def to(self, unit: str) -> 'Length':
        """Convert to another length unit.

        Parameters
        ----------
        unit : str
            Target unit name or alias.

        Returns
        -------
        Length
            Equivalent quantity in *unit*.
        """
        target = get_unit(unit)
        if target.name == self.unit:
            return self
        return Length(self.meters / target.meters, target.name)

    def format(self, spec: str = '%.2f') -> str:
        """Format the magnitude with a printf-style *spec*, plus the unit symbol."""
        return f"{spec % self.magnitude} {_UNIT_LOOKUP[self.unit].display_name}"

    def __str__(self) -> str:
        return f"{self.magnitude:.10g} {_UNIT_LOOKUP[self.unit].display_name}"

    def __mul__(self, factor: Union[int, float]) -> 'Length':
        if isinstance(factor, Length):
            return NotImplemented
        return Length(self.magnitude * float(factor), self.unit)

    __rmul__ = __mul__

    def __sub__(self, other: 'Length') -> 'Length':
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self.magnitude - other.to(self.unit).magnitude, self.unit)

    def __truediv__(self, other: 'Length') -> float:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters / other.meters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters == other.meters

    def __lt__(self, other: 'Length') -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters < other.meters

    def __hash__(self) -> int:
        return hash(self.meters)


def parse_length(text: str) -> Length:
    """Parse a distance string such as ``"6378137.0 m"`` into a ``Length``.

    The magnitude may be omitted (``"R_E"`` means one Earth radius), but
    the unit may not: a bare number is not a distance.

    Parameters
    ----------
    text : str
        Magnitude and unit, optionally separated by whitespace.

    Returns
    -------
    Length

    Raises
    ------
    InvalidArgumentError
        If *text* is malformed, has no unit, or its unit is not a length.
    """
    match = _QUANTITY_RE.match(text)
    if match is None or not (match.group('magnitude') or match.group('unit')):
        raise InvalidArgumentError(f"Must be a distance: cannot parse {text!r}")

    unit = match.group('unit')
    if unit is None:
        raise InvalidArgumentError(
            f"Must be a distance: {text!r} has no length unit"
        )
    magnitude = match.group('magnitude')
    return Length(float(magnitude) if magnitude else 1.0, unit)
