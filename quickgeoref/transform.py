# -*- coding: utf-8 -*-
"""
Global Transform - Pixel-to-degree mapping for full-globe rasters.

Provides ``ImageExtent`` (pixel dimensions), ``GlobalTransform`` (the
plate carrée affine transform of an image assumed to span -180..180
longitude and -90..90 latitude), and ``compute_transform()``.

The affine transform maps pixel ``(col, row)`` to ``(lon, lat)`` as::

    lon = origin_lon + col * pixel_size_x
    lat = origin_lat + row * pixel_size_y

with ``pixel_size_x = 360 / width`` and ``pixel_size_y = -180 / height``.
Coordinates refer to pixel corners, as in a GDAL GeoTransform.

Dependencies
------------
numpy

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
2026-03-02
"""

# Standard library
from dataclasses import dataclass
from typing import Tuple, Union

# Third-party
import numpy as np

# quickgeoref internal
from quickgeoref.exceptions import InvalidArgumentError

ORIGIN_LON = -180.0
ORIGIN_LAT = 90.0
LON_SPAN = 360.0
LAT_SPAN = 180.0


@dataclass(frozen=True)
class ImageExtent:
    """Image size in pixels.

    Parameters
    ----------
    width : int
        Number of columns. Must be positive.
    height : int
        Number of rows. Must be positive.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"Image dimensions must be positive, got "
                f"{self.width}x{self.height}"
            )


@dataclass(frozen=True)
class GlobalTransform:
    """Affine transform of a full-globe equirectangular raster.

    Parameters
    ----------
    pixel_size_x : float
        Degrees of longitude per column (positive).
    pixel_size_y : float
        Degrees of latitude per row (negative, north-up).
    origin_lon : float
        Longitude of the upper-left pixel corner.
    origin_lat : float
        Latitude of the upper-left pixel corner.
    """

    pixel_size_x: float
    pixel_size_y: float
    origin_lon: float = ORIGIN_LON
    origin_lat: float = ORIGIN_LAT

    def to_gdal(self) -> Tuple[float, float, float, float, float, float]:
        """GDAL GeoTransform ``(x0, dx, rot_x, y0, rot_y, dy)``."""
        return (
            self.origin_lon, self.pixel_size_x, 0.0,
            self.origin_lat, 0.0, self.pixel_size_y,
        )

    def to_worldfile(self) -> Tuple[float, float, float, float, float, float]:
        """Worldfile parameters ``(A, D, B, E, C, F)``.

        Worldfiles reference the centre of the upper-left pixel, so the
        origin is shifted by half a pixel in each direction.
        """
        return (
            self.pixel_size_x, 0.0, 0.0, self.pixel_size_y,
            self.origin_lon + self.pixel_size_x / 2,
            self.origin_lat + self.pixel_size_y / 2,
        )

    def pixel_to_lonlat(
        self,
        col: Union[float, np.ndarray],
        row: Union[float, np.ndarray],
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Map pixel corner coordinates to longitude/latitude.

        Parameters
        ----------
        col : float or np.ndarray
            Column coordinate(s).
        row : float or np.ndarray
            Row coordinate(s).

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            ``(lons, lats)`` in degrees, broadcast to a common shape.
        """
        cols = np.asarray(col, dtype=np.float64)
        rows = np.asarray(row, dtype=np.float64)
        lons = self.origin_lon + cols * self.pixel_size_x
        lats = self.origin_lat + rows * self.pixel_size_y
        lons, lats = np.broadcast_arrays(lons, lats)
        return lons, lats


def compute_transform(extent: ImageExtent) -> GlobalTransform:
    """Derive the full-globe transform for an image of the given size.

    Parameters
    ----------
    extent : ImageExtent
        Image dimensions in pixels.

    Returns
    -------
    GlobalTransform
    """
    return GlobalTransform(
        pixel_size_x=LON_SPAN / extent.width,
        pixel_size_y=-LAT_SPAN / extent.height,
    )
