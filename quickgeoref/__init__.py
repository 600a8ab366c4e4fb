# -*- coding: utf-8 -*-
"""
quickgeoref - Quick full-globe georeferencing for raster images.

Assigns an equirectangular (plate carree) georeference spanning
-180..180 longitude and -90..90 latitude to an image of unknown extent
by writing GDAL ``.aux.xml``, worldfile, and ``.prj`` sidecar files.
The ellipsoid can be Earth's or any body's, given by its axes and/or
inverse flattening.

Dependencies
------------
numpy
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
2026-03-02

Modified
--------
2026-03-05
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from quickgeoref.exceptions import (
    QuickGeorefError,
    MissingArgumentError,
    ConflictingArgumentsError,
    InvalidArgumentError,
    UnreadableFileError,
)
from quickgeoref.vocabulary import SidecarFormat, WriteStatus
from quickgeoref.units import Length, parse_length
from quickgeoref.ellipsoid import Ellipsoid, resolve_ellipsoid
from quickgeoref.transform import GlobalTransform, ImageExtent, compute_transform
from quickgeoref.options import OutputOptions
from quickgeoref.georef import GeoreferenceResult, georeference

__all__ = [
    'QuickGeorefError',
    'MissingArgumentError',
    'ConflictingArgumentsError',
    'InvalidArgumentError',
    'UnreadableFileError',
    'SidecarFormat',
    'WriteStatus',
    'Length',
    'parse_length',
    'Ellipsoid',
    'resolve_ellipsoid',
    'GlobalTransform',
    'ImageExtent',
    'compute_transform',
    'OutputOptions',
    'GeoreferenceResult',
    'georeference',
]
