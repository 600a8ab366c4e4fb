# -*- coding: utf-8 -*-
"""
Georeference Tests - Integration tests for georeference().

Runs the full pipeline on generated images and checks the files it
produces, and that argument and image errors leave nothing behind.

Dependencies
------------
pytest
Pillow

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

import pytest
from PIL import Image

from quickgeoref import (
    ConflictingArgumentsError,
    OutputOptions,
    UnreadableFileError,
    georeference,
)
from quickgeoref.transform import ImageExtent
from quickgeoref.units import Length
from quickgeoref.vocabulary import SidecarFormat, WriteStatus


@pytest.fixture
def grid_tif(tmp_path):
    """A 360x180 TIFF."""
    path = tmp_path / "grid.tif"
    Image.new("L", (360, 180)).save(path, format="TIFF")
    return path


def test_default_writes_aux_only(grid_tif):
    """Default options produce the aux file only."""
    result = georeference(grid_tif)

    assert result.extent == ImageExtent(360, 180)
    assert [r.format for r in result.results] == [SidecarFormat.AUX]
    assert result.failures == []
    assert sorted(p.name for p in grid_tif.parent.iterdir()) == [
        "grid.tif", "grid.tif.aux.xml",
    ]


def test_aux_geotransform_end_to_end(grid_tif):
    """aux.xml GeoTransform for a one-degree global grid."""
    georeference(grid_tif)

    text = (grid_tif.parent / "grid.tif.aux.xml").read_text(encoding="utf-8")
    assert (
        "<GeoTransform> -1.8000000000000000e+02,  1.0,  "
        "0.0000000000000000e+00,  9.0000000000000000e+01,  "
        "0.0000000000000000e+00, -1.0000000</GeoTransform>"
    ) in text
    assert 'SPHEROID["unnamed",6378137.0,298.257223563]' in text


def test_all_sidecars(grid_tif):
    """Worldfile option brings the prj file with it."""
    result = georeference(grid_tif, options=OutputOptions.resolve(worldfile=True))

    assert [r.path.name for r in result.results] == [
        "grid.tif.aux.xml", "grid.tiw", "grid.prj",
    ]
    assert all(r.status is WriteStatus.WRITTEN for r in result.results)


def test_custom_ellipsoid(grid_tif):
    """A Mars-like ellipsoid reaches the sidecars in meters."""
    result = georeference(
        grid_tif,
        semi_major=Length(3396.19, 'km'),
        inverse_flattening=169.894447224,
        options=OutputOptions.resolve(aux=False, prj=True, worldfile=False),
    )

    assert result.ellipsoid.semi_major.unit == 'km'
    text = (grid_tif.parent / "grid.prj").read_text()
    assert 'SPHEROID["unnamed",3396190.0,169.894447224]' in text


def test_worldfile_collision_is_not_fatal(tmp_path):
    """An image named ...w skips the worldfile but writes the rest."""
    image = tmp_path / "map.tiw"
    Image.new("L", (36, 18)).save(image, format="PNG")

    result = georeference(image, options=OutputOptions.resolve(prj=True))

    statuses = {r.format: r.status for r in result.results}
    assert statuses == {
        SidecarFormat.AUX: WriteStatus.WRITTEN,
        SidecarFormat.WORLDFILE: WriteStatus.SKIPPED,
        SidecarFormat.PRJ: WriteStatus.WRITTEN,
    }
    assert result.failures == []
    assert (tmp_path / "map.prj").is_file()


def test_bad_arguments_write_nothing(grid_tif):
    """Ellipsoid errors are raised before any sidecar is written."""
    with pytest.raises(ConflictingArgumentsError):
        georeference(
            grid_tif,
            semi_minor=Length(6356752.0, 'm'),
            inverse_flattening=298.0,
        )
    assert [p.name for p in grid_tif.parent.iterdir()] == ["grid.tif"]


def test_unreadable_image_writes_nothing(tmp_path):
    """Image errors are raised before any sidecar is written."""
    with pytest.raises(UnreadableFileError):
        georeference(tmp_path / "missing.tif")
    assert list(tmp_path.iterdir()) == []
