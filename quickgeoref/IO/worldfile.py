# -*- coding: utf-8 -*-
"""
Worldfile Writer - ESRI worldfile sidecar.

Writes the six-line worldfile next to the image. The worldfile name is
the image path with its last character replaced by ``w``, so
``map.tif`` becomes ``map.tiw`` and ``map.png`` becomes ``map.pnw``.
An image whose name already ends in ``w`` would be overwritten by its
own worldfile; in that case nothing is written.

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
2026-03-05
"""

# Standard library
import logging
from pathlib import Path
from typing import List

# quickgeoref internal
from quickgeoref.ellipsoid import Ellipsoid
from quickgeoref.IO.base import SidecarWriter, WriteResult
from quickgeoref.transform import GlobalTransform
from quickgeoref.vocabulary import SidecarFormat, WriteStatus

logger = logging.getLogger(__name__)


class WorldFileWriter(SidecarWriter):
    """Write an ESRI worldfile.

    Lines are, in order: pixel size x, row rotation, column rotation,
    pixel size y, and the longitude and latitude of the centre of the
    upper-left pixel.

    Parameters
    ----------
    filepath : str or Path
        Path of the image.
    """

    format = SidecarFormat.WORLDFILE

    @property
    def collides(self) -> bool:
        """True if the worldfile name would be the image name itself."""
        return str(self.filepath).endswith('w')

    @property
    def sidecar_path(self) -> Path:
        return Path(str(self.filepath)[:-1] + 'w')

    def render(
        self,
        ellipsoid: Ellipsoid,
        transform: GlobalTransform,
    ) -> List[str]:
        return [repr(float(v)) for v in transform.to_worldfile()]

    def write(
        self,
        ellipsoid: Ellipsoid,
        transform: GlobalTransform,
    ) -> WriteResult:
        """Write the worldfile, unless it would overwrite the image.

        Returns
        -------
        WriteResult
            ``SKIPPED`` with a notice when the image name ends in ``w``.
        """
        if self.collides:
            message = (
                f"Could not write worldfile as {self.filepath} already ends "
                f"in 'w' and would be overwritten"
            )
            logger.info("%s", message)
            return WriteResult(
                self.format, self.sidecar_path, WriteStatus.SKIPPED, message,
            )
        return super().write(ellipsoid, transform)

    def written_message(self, path: Path) -> str:
        return f"Wrote sidecar worldfile {path}"
