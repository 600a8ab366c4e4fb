# -*- coding: utf-8 -*-
"""
Command Line Tests - Tests for quickgeoref.cli.main().

Tests option parsing, the console report and summary, exit codes for
fatal errors, and help output.

Dependencies
------------
pytest
Pillow

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
2026-03-04

Modified
--------
2026-03-05
"""

import pytest
from PIL import Image

from quickgeoref.cli import build_parser, format_summary, main
from quickgeoref.ellipsoid import resolve_ellipsoid
from quickgeoref.units import Length


@pytest.fixture
def image(tmp_path):
    """A 720x360 PNG."""
    path = tmp_path / "world.png"
    Image.new("RGB", (720, 360)).save(path)
    return path


class TestParser:
    """Parsed switches before resolution."""

    def test_switches_unset_by_default(self):
        """Sidecar switches are three-valued and start unset."""
        args = build_parser().parse_args(["x.png"])
        assert (args.auxfile, args.worldfile, args.prjfile) == (None, None, None)

    def test_negated_switches(self):
        """--no- forms set False explicitly."""
        args = build_parser().parse_args(["x.png", "--no-auxfile", "--no-prjfile"])
        assert args.auxfile is False
        assert args.prjfile is False
        assert args.worldfile is None

    def test_short_options(self):
        """-a, -b and -f are accepted."""
        args = build_parser().parse_args(
            ["x.png", "-a", "6378137.0 m", "-b", "6356752 m"]
        )
        assert args.semi_major == "6378137.0 m"
        assert args.semi_minor == "6356752 m"
        args = build_parser().parse_args(["x.png", "-f", "298.25"])
        assert args.flattening == 298.25


class TestMain:
    """End-to-end runs of main()."""

    def test_default_run(self, image, capsys):
        """Default run writes the aux file and prints the summary."""
        assert main([str(image)]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"Wrote sidecar file {image}.aux.xml",
            "Equatorial radius: 6378137.00 m (1 R⊕)",
            "Polar radius: 6356752.31 m (1 R⊕P)",
            "Flattening: 1:298.257223563",
        ]
        assert (image.parent / "world.png.aux.xml").is_file()
        assert not (image.parent / "world.pnw").exists()
        assert not (image.parent / "world.prj").exists()

    def test_worldfile_enables_prj(self, image, capsys):
        """--worldfile alone also writes the prj file."""
        assert main([str(image), "--worldfile"]) == 0

        out = capsys.readouterr().out
        assert f"Wrote sidecar worldfile {image.parent / 'world.pnw'}" in out
        assert f"Wrote projection sidecar file {image.parent / 'world.prj'}" in out

    def test_prjfile_only(self, image):
        """--prjfile with --no-worldfile writes no worldfile."""
        assert main([str(image), "--prjfile", "--no-worldfile", "--no-auxfile"]) == 0
        assert sorted(p.name for p in image.parent.iterdir()) == [
            "world.png", "world.prj",
        ]

    def test_semi_major_with_unit(self, image, capsys):
        """Distances accept units; summary is reported in meters."""
        assert main([str(image), "-a", "6378.137 km"]) == 0

        out = capsys.readouterr().out
        assert "Equatorial radius: 6378137.00 m (1 R⊕)" in out
        assert "Polar radius: 6356752.31 m" in out
        assert "Flattening: 1:298.257223563" in out

    def test_worldfile_collision_notice(self, tmp_path, capsys):
        """A ...w image name is reported, not fatal."""
        image = tmp_path / "map.tiw"
        Image.new("L", (36, 18)).save(image, format="PNG")

        assert main([str(image), "--worldfile"]) == 0
        out = capsys.readouterr().out
        assert "Could not write worldfile" in out
        assert (tmp_path / "map.prj").is_file()

    def test_missing_file_argument(self, caplog):
        """No FILE is a fatal missing argument."""
        assert main([]) == 1
        assert "MissingArgumentError" in caplog.text

    def test_unreadable_image(self, tmp_path):
        """A missing image is fatal and writes nothing."""
        assert main([str(tmp_path / "missing.png")]) == 1
        assert list(tmp_path.iterdir()) == []

    def test_conflicting_arguments(self, image):
        """-b with -f is fatal."""
        assert main([str(image), "-a", "6378137 m", "-b", "6356752 m", "-f", "298"]) == 1
        assert not (image.parent / "world.png.aux.xml").exists()

    def test_semi_minor_without_semi_major(self, image):
        """-b alone is fatal."""
        assert main([str(image), "-b", "6356752 m"]) == 1

    def test_non_length_unit(self, image, caplog):
        """A non-length distance is fatal."""
        assert main([str(image), "-a", "5 kg"]) == 1
        assert "Must be a distance" in caplog.text

    def test_invalid_flattening_is_usage_error(self, image):
        """A non-numeric -f is an argparse usage error."""
        with pytest.raises(SystemExit) as exc:
            main([str(image), "-f", "flat"])
        assert exc.value.code == 2

    def test_writer_failure_exit_status(self, image, capsys, caplog):
        """A failed sidecar gives exit 1 after the others are written."""
        (image.parent / "world.png.aux.xml").mkdir()

        assert main([str(image), "--worldfile"]) == 1
        assert "Wrote sidecar worldfile" in capsys.readouterr().out
        assert "1 of 3 sidecar files could not be written" in caplog.text
        assert (image.parent / "world.prj").is_file()

    def test_help(self, capsys):
        """-h prints help and exits cleanly."""
        with pytest.raises(SystemExit) as exc:
            main(["-h"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "--semi-major" in out
        assert "--no-worldfile" in out


def test_format_summary_custom_units():
    """Summary converts any unit to meters and Earth radii."""
    e = resolve_ellipsoid(semi_major=Length(0.5, "R_E"))
    lines = format_summary(e)
    assert lines[0] == "Equatorial radius: 3189068.50 m (0.5 R⊕)"
