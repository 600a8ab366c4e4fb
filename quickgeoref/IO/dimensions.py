# -*- coding: utf-8 -*-
"""
Image Dimensions - Probe the pixel size of a raster image.

Reads only the image header. Pillow handles the common formats (PNG,
JPEG, GIF, TIFF, BMP, WebP ...). If Pillow cannot identify the file and
rasterio is installed, GDAL is tried next, which covers formats such as
JPEG2000, NITF, and BigTIFF.

Dependencies
------------
Pillow
rasterio (optional)

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
import struct
from pathlib import Path
from typing import Optional, Tuple, Union

# Third-party
from PIL import Image, UnidentifiedImageError

try:
    import rasterio
    from rasterio.errors import RasterioIOError
    _HAS_RASTERIO = True
except ImportError:
    _HAS_RASTERIO = False

# quickgeoref internal
from quickgeoref.exceptions import UnreadableFileError
from quickgeoref.transform import ImageExtent

logger = logging.getLogger(__name__)


def _pillow_size(filepath: Path) -> Optional[Tuple[int, int]]:
    """Header-only size via Pillow, or None if Pillow cannot identify the file."""
    # Full-globe rasters routinely exceed Pillow's decompression bomb
    # limit; only the header is read here, so the limit is lifted.
    # MAX_IMAGE_PIXELS is module-global: concurrent Image.open calls in
    # other threads see the lifted limit until it is restored.
    max_pixels = Image.MAX_IMAGE_PIXELS
    Image.MAX_IMAGE_PIXELS = None
    try:
        with Image.open(filepath) as img:
            return img.size
    except UnidentifiedImageError:
        return None
    finally:
        Image.MAX_IMAGE_PIXELS = max_pixels


def _rasterio_size(filepath: Path) -> Optional[Tuple[int, int]]:
    """Size via rasterio (GDAL), or None if unavailable or unreadable."""
    if not _HAS_RASTERIO:
        return None
    try:
        with rasterio.open(str(filepath)) as ds:
            return ds.width, ds.height
    except RasterioIOError:
        return None


def read_image_dimensions(filepath: Union[str, Path]) -> ImageExtent:
    """Return the width and height of an image in pixels.

    Parameters
    ----------
    filepath : str or Path
        Path to the image file.

    Returns
    -------
    ImageExtent
        ``(width, height)`` in pixels.

    Raises
    ------
    UnreadableFileError
        If the file does not exist, cannot be opened, is in a format no
        available backend recognizes, or has a zero dimension.

    Examples
    --------
    >>> from quickgeoref.IO.dimensions import read_image_dimensions
    >>> extent = read_image_dimensions('blue_marble.png')
    >>> extent.width, extent.height
    (5400, 2700)
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise UnreadableFileError(f"Could not read {filepath}: file not found")

    # Truncated headers surface from Pillow's plugins as ValueError,
    # SyntaxError or struct.error rather than OSError.
    try:
        size = _pillow_size(filepath)
        if size is None:
            logger.debug("Pillow cannot identify %s, trying rasterio", filepath)
            size = _rasterio_size(filepath)
    except (OSError, ValueError, SyntaxError, struct.error) as e:
        raise UnreadableFileError(f"Could not read {filepath}: {e}") from e

    if size is None:
        hint = "" if _HAS_RASTERIO else (
            " (install rasterio for GDAL-supported formats)"
        )
        raise UnreadableFileError(
            f"Could not read {filepath}: unrecognized image format{hint}"
        )

    width, height = int(size[0]), int(size[1])
    if width <= 0 or height <= 0:
        raise UnreadableFileError(
            f"Could not read {filepath}: image is {width}x{height} pixels"
        )
    logger.debug("Image %s is %dx%d pixels", filepath, width, height)
    return ImageExtent(width, height)
