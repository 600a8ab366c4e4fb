# -*- coding: utf-8 -*-
"""
Aux File Writer - GDAL PAM ``.aux.xml`` sidecar.

Writes ``<FILE>.aux.xml``, the Persistent Auxiliary Metadata document
GDAL reads alongside an image. It carries the GEOGCS spatial reference
and the six-parameter GeoTransform.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-03

Modified
--------
2026-03-03
"""

# Standard library
from pathlib import Path
from typing import List

# quickgeoref internal
from quickgeoref.ellipsoid import Ellipsoid
from quickgeoref.IO.base import SidecarWriter, geogcs_wkt
from quickgeoref.transform import GlobalTransform
from quickgeoref.vocabulary import SidecarFormat


def format_geotransform(transform: GlobalTransform) -> str:
    """Format a GeoTransform the way GDAL writes it in PAM files.

    Origin and rotation terms use 16-digit scientific notation; the
    pixel sizes are written as plain decimals, the y size rounded to
    seven places.

    Examples
    --------
    >>> from quickgeoref.transform import GlobalTransform
    >>> format_geotransform(GlobalTransform(1.0, -1.0))
    ' -1.8000000000000000e+02,  1.0,  0.0000000000000000e+00,  9.0000000000000000e+01,  0.0000000000000000e+00, -1.0000000'
    """
    x0, dx, rot_x, y0, rot_y, dy = transform.to_gdal()
    return (
        f" {x0:.16e},  {dx!r},  {rot_x:.16e},  {y0:.16e},  {rot_y:.16e}, "
        f"{dy:.7f}"
    )


class AuxFileWriter(SidecarWriter):
    """Write a GDAL PAM ``.aux.xml`` sidecar.

    Parameters
    ----------
    filepath : str or Path
        Path of the image; the sidecar is ``<filepath>.aux.xml``.

    Examples
    --------
    >>> from quickgeoref.IO.auxfile import AuxFileWriter
    >>> writer = AuxFileWriter('grid.tif')
    >>> writer.sidecar_path
    PosixPath('grid.tif.aux.xml')
    """

    format = SidecarFormat.AUX

    @property
    def sidecar_path(self) -> Path:
        return self.filepath.with_name(self.filepath.name + '.aux.xml')

    def render(
        self,
        ellipsoid: Ellipsoid,
        transform: GlobalTransform,
    ) -> List[str]:
        return [
            '<PAMDataset>',
            f'  <SRS>{geogcs_wkt(ellipsoid)}</SRS>',
            f'  <GeoTransform>{format_geotransform(transform)}</GeoTransform>',
            '</PAMDataset>',
        ]
