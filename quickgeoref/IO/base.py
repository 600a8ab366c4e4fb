# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interface for sidecar georeference writers.

Defines ``SidecarWriter``, the base class every sidecar format inherits
from, and ``WriteResult``, the record each write attempt returns.

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
2026-03-03

Modified
--------
2026-03-05
"""

# Standard library
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

# quickgeoref internal
from quickgeoref.ellipsoid import Ellipsoid
from quickgeoref.transform import GlobalTransform
from quickgeoref.vocabulary import SidecarFormat, WriteStatus

logger = logging.getLogger(__name__)

GEOGCS_TEMPLATE = (
    'GEOGCS["unnamed ellipse",DATUM["unknown",SPHEROID["unnamed",{a},{f}]],'
    'PRIMEM["Greenwich",0],UNIT["degree",0.0174532925199433]]'
)


def geogcs_wkt(ellipsoid: Ellipsoid) -> str:
    """GEOGCS WKT for a geographic CRS on *ellipsoid*.

    The semi-major axis is written in meters at full precision.
    """
    return GEOGCS_TEMPLATE.format(
        a=repr(ellipsoid.semi_major.meters),
        f=repr(ellipsoid.inverse_flattening),
    )


@dataclass(frozen=True)
class WriteResult:
    """Outcome of one sidecar write.

    Parameters
    ----------
    format : SidecarFormat
        Sidecar format that was attempted.
    path : Path
        Sidecar file path.
    status : WriteStatus
        Whether the file was written, skipped, or failed.
    message : str
        Human-readable report line.
    """

    format: SidecarFormat
    path: Path
    status: WriteStatus
    message: str

    @property
    def ok(self) -> bool:
        """True unless the write failed."""
        return self.status is not WriteStatus.FAILED


class SidecarWriter(ABC):
    """
    Abstract base class for sidecar georeference writers.

    A sidecar writer derives its output path from the path of the image
    it describes and serializes an ``Ellipsoid`` and ``GlobalTransform``
    into one text file. The image itself is never touched.

    Attributes
    ----------
    filepath : Path
        Path of the image being georeferenced.
    format : SidecarFormat
        Format produced by the writer (class attribute).
    """

    format: SidecarFormat

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the sidecar writer.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path of the image the sidecar describes. The image does not
            need to be readable by the writer.
        """
        self.filepath = Path(filepath)

    @property
    @abstractmethod
    def sidecar_path(self) -> Path:
        """Path of the sidecar file this writer produces."""
        pass

    @abstractmethod
    def render(
        self,
        ellipsoid: Ellipsoid,
        transform: GlobalTransform,
    ) -> Iterable[str]:
        """
        Produce the sidecar file content.

        Parameters
        ----------
        ellipsoid : Ellipsoid
            Resolved reference ellipsoid.
        transform : GlobalTransform
            Full-globe pixel-to-degree transform.

        Returns
        -------
        Iterable[str]
            Lines of the file, without trailing newlines.
        """
        pass

    def write(
        self,
        ellipsoid: Ellipsoid,
        transform: GlobalTransform,
    ) -> WriteResult:
        """
        Write the sidecar file.

        Parameters
        ----------
        ellipsoid : Ellipsoid
            Resolved reference ellipsoid.
        transform : GlobalTransform
            Full-globe pixel-to-degree transform.

        Returns
        -------
        WriteResult
            Record of the written file.

        Raises
        ------
        OSError
            If the sidecar file cannot be written.
        """
        path = self.sidecar_path
        with open(path, 'w', encoding='utf-8') as f:
            for line in self.render(ellipsoid, transform):
                f.write(line + '\n')
        logger.debug("Wrote %s sidecar %s", self.format.value, path)
        return WriteResult(
            self.format, path, WriteStatus.WRITTEN, self.written_message(path),
        )

    def written_message(self, path: Path) -> str:
        """Report line for a successful write."""
        return f"Wrote sidecar file {path}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.filepath)!r})"
