"""
Tests for the command-line interface.
"""

from pathlib import Path

import pytest
import numpy as np

from panorig.cli import format_degrees, main

EXAMPLE_RIG = Path(__file__).resolve().parents[2] / "rigs" / "example_rig.yaml"


class TestFormatDegrees:
    """Tests for degree formatting in the shot summary."""

    @pytest.mark.parametrize("radians, expected", [
        (0.0, "0"),
        (np.pi / 3, "60"),
        (np.pi / 30, "6"),
        (-0.3 * np.pi, "-54"),
        (np.deg2rad(12.34), "12.3"),
        (-1e-12, "0"),
    ])
    def test_format(self, radians, expected):
        assert format_degrees(radians) == expected


class TestMain:
    """Tests for the panorig-plan entry point."""

    def test_default_rig(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Sensor width:           35.6mm" in out
        assert "Sensor height:          23.8mm" in out
        assert "SHOTS (12 exposures, 3 rows)" in out
        assert "Row 0 (-54°): 3 exposures" in out
        assert "Row 1 (6°): 6 exposures" in out
        assert "Row 2 (66°): 3 exposures" in out
        assert "pan: 0, 60, 120, 180, 240, 300" in out
        assert "Frustum plane:          5.933 x 3.967" in out

    def test_example_rig_file(self, capsys):
        assert main([str(EXAMPLE_RIG)]) == 0

        out = capsys.readouterr().out
        assert "Row 0 (-60°): 6 exposures" in out
        assert "Row 1 (0°): 6 exposures" in out
        assert "Row 2 (60°): 6 exposures" in out

    def test_base_scale_override(self, capsys):
        assert main(["--base-scale", "6"]) == 0

        out = capsys.readouterr().out
        assert "Frustum plane:          11.867 x 7.933" in out

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.yaml")]) == 1

    def test_invalid_rig(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "camera: {sensor_width: 36, sensor_height: 24}\n"
            "lens: {focal_length: 24}\n"
            "rows: [4, 0]\n"
        )

        assert main([str(path)]) == 1

    def test_invalid_base_scale(self):
        assert main(["--base-scale", "0"]) == 1

    @pytest.mark.parametrize("content", [
        "camera: [35.6, 23.8]\nlens: {focal_length: 18}\nrows: [3, 6, 3]\n",
        "camera: {sensor_width: 35.6, sensor_height: 23.8}\n"
        "lens: {focal_length: 18}\nrows: [3, 6, 3]\nfrustum: 3\n",
        "camera: {sensor_width: 35.6, sensor_height: 23.8\nrows: [3]\n",
    ])
    def test_malformed_rig_file(self, tmp_path, content):
        """Structurally broken rig files are reported, not raised."""
        path = tmp_path / "broken.yaml"
        path.write_text(content)

        assert main([str(path)]) == 1

    def test_unexpected_error(self, monkeypatch):
        """Errors outside the planning taxonomy still give exit code 1."""
        def explode(self):
            raise RuntimeError("boom")

        monkeypatch.setattr("panorig.config.RigConfig.build", explode)

        assert main([]) == 1
