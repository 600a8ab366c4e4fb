# -*- coding: utf-8 -*-
"""
Georeference - Assign a full-globe georeference to an image.

Runs the whole pipeline for one image: resolve the ellipsoid, probe the
image size, compute the plate carrée transform, and write the enabled
sidecar files. Argument and image errors are raised before any file is
written; sidecar write failures are reported in the result instead.

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
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

# quickgeoref internal
from quickgeoref.ellipsoid import Ellipsoid, resolve_ellipsoid
from quickgeoref.IO import read_image_dimensions, write_sidecars
from quickgeoref.IO.base import WriteResult
from quickgeoref.options import OutputOptions
from quickgeoref.transform import GlobalTransform, ImageExtent, compute_transform
from quickgeoref.units import Length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoreferenceResult:
    """Everything computed and written for one image.

    Parameters
    ----------
    filepath : Path
        Image that was georeferenced.
    ellipsoid : Ellipsoid
        Resolved reference ellipsoid.
    extent : ImageExtent
        Image size in pixels.
    transform : GlobalTransform
        Full-globe transform derived from *extent*.
    results : List[WriteResult]
        One entry per sidecar attempted.
    """

    filepath: Path
    ellipsoid: Ellipsoid
    extent: ImageExtent
    transform: GlobalTransform
    results: List[WriteResult] = field(default_factory=list)

    @property
    def failures(self) -> List[WriteResult]:
        """Sidecar writes that failed."""
        return [r for r in self.results if not r.ok]


def georeference(
    filepath: Union[str, Path],
    semi_major: Optional[Length] = None,
    semi_minor: Optional[Length] = None,
    inverse_flattening: Optional[float] = None,
    options: Optional[OutputOptions] = None,
) -> GeoreferenceResult:
    """Georeference an image as covering the whole globe.

    Parameters
    ----------
    filepath : str or Path
        Image to georeference. Sidecars are written next to it.
    semi_major, semi_minor : Length, optional
        Ellipsoid axes; see ``resolve_ellipsoid()``.
    inverse_flattening : float, optional
        Ellipsoid inverse flattening.
    options : OutputOptions, optional
        Sidecars to write. Defaults to the aux file only.

    Returns
    -------
    GeoreferenceResult

    Raises
    ------
    QuickGeorefError
        If the ellipsoid arguments are inconsistent or the image cannot
        be read. Nothing is written in that case.

    Examples
    --------
    >>> from quickgeoref import georeference, OutputOptions
    >>> result = georeference('grid.png', options=OutputOptions.resolve(prj=True))
    >>> [r.path.name for r in result.results]
    ['grid.png.aux.xml', 'grid.pnw', 'grid.prj']
    """
    filepath = Path(filepath)
    if options is None:
        options = OutputOptions()

    ellipsoid = resolve_ellipsoid(semi_major, semi_minor, inverse_flattening)
    extent = read_image_dimensions(filepath)
    transform = compute_transform(extent)
    logger.debug("Georeferencing %s with %s", filepath, ellipsoid)

    results = write_sidecars(filepath, options.formats, ellipsoid, transform)
    return GeoreferenceResult(filepath, ellipsoid, extent, transform, results)
