# -*- coding: utf-8 -*-
"""
Output Options - Which sidecar files to produce.

Sidecar switches arrive three-valued (``None`` when the user did not
mention them). ``OutputOptions.resolve()`` turns them into plain booleans
in a single pass:

- the aux file defaults to on;
- the worldfile and the .prj file default to off, but asking for either
  one turns the other on too, unless the other was set explicitly.

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
from dataclasses import dataclass
from typing import List, Optional

# quickgeoref internal
from quickgeoref.vocabulary import SidecarFormat


@dataclass(frozen=True)
class OutputOptions:
    """Resolved sidecar output switches.

    Parameters
    ----------
    write_aux : bool
        Write ``<FILE>.aux.xml``.
    write_worldfile : bool
        Write the worldfile (last character of FILE replaced by ``w``).
    write_prj : bool
        Write ``<basename>.prj``.
    """

    write_aux: bool = True
    write_worldfile: bool = False
    write_prj: bool = False

    @classmethod
    def resolve(
        cls,
        aux: Optional[bool] = None,
        worldfile: Optional[bool] = None,
        prj: Optional[bool] = None,
    ) -> 'OutputOptions':
        """Build options from unset/true/false switches.

        Parameters
        ----------
        aux : bool, optional
            Aux file switch; ``None`` means on.
        worldfile : bool, optional
            Worldfile switch; ``None`` follows *prj*.
        prj : bool, optional
            Projection file switch; ``None`` follows *worldfile*.

        Returns
        -------
        OutputOptions
        """
        if worldfile is None and prj:
            worldfile = True
        if prj is None and worldfile:
            prj = True
        return cls(
            write_aux=True if aux is None else aux,
            write_worldfile=bool(worldfile),
            write_prj=bool(prj),
        )

    @property
    def formats(self) -> List[SidecarFormat]:
        """Enabled sidecar formats, in write order."""
        enabled = []
        if self.write_aux:
            enabled.append(SidecarFormat.AUX)
        if self.write_worldfile:
            enabled.append(SidecarFormat.WORLDFILE)
        if self.write_prj:
            enabled.append(SidecarFormat.PRJ)
        return enabled
