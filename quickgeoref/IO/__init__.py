# -*- coding: utf-8 -*-
"""
IO Module - Image probing and sidecar georeference output.

Reads image dimensions and writes the sidecar files GIS tools use to
georeference an image without modifying it: GDAL PAM ``.aux.xml``, ESRI
worldfiles, and ``.prj`` projection files.

Dependencies
------------
Pillow
rasterio (optional)

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
import importlib
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

# quickgeoref internal
from quickgeoref.ellipsoid import Ellipsoid
from quickgeoref.IO.base import SidecarWriter, WriteResult, geogcs_wkt
from quickgeoref.IO.dimensions import read_image_dimensions
from quickgeoref.transform import GlobalTransform
from quickgeoref.vocabulary import SidecarFormat, WriteStatus

logger = logging.getLogger(__name__)


# Writer registry: maps sidecar formats to (module_path, class_name)
_WRITER_REGISTRY: Dict[SidecarFormat, tuple] = {
    SidecarFormat.AUX: ('quickgeoref.IO.auxfile', 'AuxFileWriter'),
    SidecarFormat.WORLDFILE: ('quickgeoref.IO.worldfile', 'WorldFileWriter'),
    SidecarFormat.PRJ: ('quickgeoref.IO.prjfile', 'PrjFileWriter'),
}


def get_writer(
    format: Union[str, SidecarFormat],
    filepath: Union[str, Path],
) -> SidecarWriter:
    """Create a SidecarWriter for the given format.

    Parameters
    ----------
    format : str or SidecarFormat
        Sidecar format. One of ``'aux'``, ``'worldfile'``, ``'prj'``.
    filepath : str or Path
        Path of the image being georeferenced.

    Returns
    -------
    SidecarWriter
        Concrete writer instance for the requested format.

    Raises
    ------
    ValueError
        If *format* is not a recognized format string.

    Examples
    --------
    >>> from quickgeoref.IO import get_writer
    >>> writer = get_writer('prj', 'grid.tif')
    >>> writer.sidecar_path
    PosixPath('grid.prj')
    """
    if not isinstance(format, SidecarFormat):
        try:
            format = SidecarFormat(format.lower())
        except ValueError:
            raise ValueError(
                f"Unknown sidecar format: {format!r}. Supported formats: "
                f"{sorted(f.value for f in SidecarFormat)}"
            ) from None
    module_path, class_name = _WRITER_REGISTRY[format]
    module = importlib.import_module(module_path)
    writer_cls = getattr(module, class_name)
    return writer_cls(filepath)


def write_sidecars(
    filepath: Union[str, Path],
    formats: Iterable[Union[str, SidecarFormat]],
    ellipsoid: Ellipsoid,
    transform: GlobalTransform,
) -> List[WriteResult]:
    """Write every requested sidecar for an image.

    Writers run in the order given. A writer that fails with an
    ``OSError`` is recorded as ``FAILED`` and the remaining writers
    still run.

    Parameters
    ----------
    filepath : str or Path
        Path of the image being georeferenced.
    formats : Iterable[str or SidecarFormat]
        Sidecar formats to write.
    ellipsoid : Ellipsoid
        Resolved reference ellipsoid.
    transform : GlobalTransform
        Full-globe pixel-to-degree transform.

    Returns
    -------
    List[WriteResult]
        One result per requested format.
    """
    results: List[WriteResult] = []
    for fmt in formats:
        writer = get_writer(fmt, filepath)
        try:
            result = writer.write(ellipsoid, transform)
        except OSError as e:
            logger.debug("%r failed: %s", writer, e)
            result = WriteResult(
                writer.format, writer.sidecar_path, WriteStatus.FAILED,
                f"Could not write {writer.sidecar_path}: {e}",
            )
        results.append(result)
    return results


__all__ = [
    'SidecarWriter',
    'WriteResult',
    'geogcs_wkt',
    'get_writer',
    'read_image_dimensions',
    'write_sidecars',
]
