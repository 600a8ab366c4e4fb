# -*- coding: utf-8 -*-
"""
Global Transform Tests - Unit tests for compute_transform().

Tests pixel sizes, the GDAL and worldfile parameter orderings, and the
vectorized pixel-to-lon/lat mapping.

Dependencies
------------
pytest
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

import numpy as np
import pytest

from quickgeoref.exceptions import InvalidArgumentError
from quickgeoref.transform import GlobalTransform, ImageExtent, compute_transform


def test_tenth_degree_grid():
    """3600x1800 image has 0.1 degree pixels."""
    t = compute_transform(ImageExtent(3600, 1800))
    assert t.pixel_size_x == pytest.approx(0.1)
    assert t.pixel_size_y == pytest.approx(-0.1)


def test_origin_is_upper_left_of_globe():
    """Origin is fixed at (-180, 90)."""
    t = compute_transform(ImageExtent(7, 3))
    assert t.origin_lon == -180.0
    assert t.origin_lat == 90.0


def test_non_square_pixels():
    """Pixel sizes are independent in x and y."""
    t = compute_transform(ImageExtent(1000, 1000))
    assert t.pixel_size_x == pytest.approx(0.36)
    assert t.pixel_size_y == pytest.approx(-0.18)


def test_to_gdal_order():
    """GDAL order is (x0, dx, 0, y0, 0, dy)."""
    t = compute_transform(ImageExtent(360, 180))
    assert t.to_gdal() == (-180.0, 1.0, 0.0, 90.0, 0.0, -1.0)


def test_to_worldfile_uses_pixel_centre():
    """Worldfile origin is the centre of the upper-left pixel."""
    t = compute_transform(ImageExtent(360, 180))
    assert t.to_worldfile() == (1.0, 0.0, 0.0, -1.0, -179.5, 89.5)


def test_pixel_to_lonlat_corners():
    """Image corners map to the corners of the globe."""
    t = compute_transform(ImageExtent(720, 360))
    lons, lats = t.pixel_to_lonlat(np.array([0, 720]), np.array([0, 360]))
    np.testing.assert_allclose(lons, [-180.0, 180.0])
    np.testing.assert_allclose(lats, [90.0, -90.0])


def test_pixel_to_lonlat_broadcasts_scalar():
    """A scalar row broadcasts against an array of columns."""
    t = GlobalTransform(1.0, -1.0)
    lons, lats = t.pixel_to_lonlat(np.arange(3), 10)
    assert lons.shape == (3,)
    np.testing.assert_allclose(lats, [80.0, 80.0, 80.0])


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
def test_extent_rejects_non_positive(width, height):
    """Zero or negative dimensions are rejected."""
    with pytest.raises(InvalidArgumentError):
        ImageExtent(width, height)
