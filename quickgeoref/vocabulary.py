# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for quickgeoref.

Single source of truth for the controlled vocabularies shared by the
sidecar writers, the writer registry, and the command line: which
sidecar formats exist and how a write attempt ended.

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

from enum import Enum


class SidecarFormat(Enum):
    """Supported sidecar georeference formats.

    Used by the writer registry to select the appropriate
    ``SidecarWriter`` implementation.
    """

    AUX = "aux"
    WORLDFILE = "worldfile"
    PRJ = "prj"


class WriteStatus(Enum):
    """Outcome of a single sidecar write attempt."""

    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"
