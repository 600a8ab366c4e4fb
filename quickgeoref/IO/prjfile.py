# -*- coding: utf-8 -*-
"""
Projection File Writer - ESRI ``.prj`` sidecar.

Writes a one-line GEOGCS WKT definition to ``<basename>.prj``, where the
basename is the image file name truncated at its last dot. Only the file
name is searched, never the directory part of the path.

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


class PrjFileWriter(SidecarWriter):
    """Write an ESRI ``.prj`` projection file.

    Parameters
    ----------
    filepath : str or Path
        Path of the image. ``grid.tif`` gives ``grid.prj``,
        ``archive.tar.gz`` gives ``archive.tar.prj``, and ``grid`` gives
        ``grid.prj``.
    """

    format = SidecarFormat.PRJ

    @property
    def sidecar_path(self) -> Path:
        name = self.filepath.name
        i = name.rfind('.')
        if i >= 0:
            return self.filepath.with_name(name[:i] + '.prj')
        return self.filepath.with_name(name + '.prj')

    def render(
        self,
        ellipsoid: Ellipsoid,
        transform: GlobalTransform,
    ) -> List[str]:
        return [geogcs_wkt(ellipsoid)]

    def written_message(self, path: Path) -> str:
        return f"Wrote projection sidecar file {path}"
