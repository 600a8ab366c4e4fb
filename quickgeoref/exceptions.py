# -*- coding: utf-8 -*-
"""
quickgeoref Exception Hierarchy - Domain-specific exceptions.

Lets callers catch quickgeoref errors distinctly from Python built-in
exceptions. Every exception subclasses both ``QuickGeorefError`` and the
appropriate built-in exception, so ``except ValueError`` keeps working for
argument problems and ``except OSError`` for unreadable images.

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
2026-03-02

Modified
--------
2026-03-02
"""


class QuickGeorefError(Exception):
    """Base exception for all quickgeoref errors."""


class MissingArgumentError(QuickGeorefError, ValueError):
    """A required argument was not supplied.

    Raised when no image file is given, or when a semi-minor axis is
    given without the semi-major axis it must be compared against.
    """


class ConflictingArgumentsError(QuickGeorefError, ValueError):
    """Two arguments were supplied that cannot be used together.

    Raised when both the inverse flattening and the semi-minor axis are
    specified, since either one fully determines the other.
    """


class InvalidArgumentError(QuickGeorefError, ValueError):
    """An argument has an unusable value.

    Raised for distances that do not parse or are not lengths, and for
    ellipsoids whose semi-minor axis is not smaller than the semi-major
    axis.
    """


class UnreadableFileError(QuickGeorefError, OSError):
    """The image dimensions could not be determined.

    Raised when the image file does not exist, is not in a format any
    backend can read, or reports a zero width or height.
    """
