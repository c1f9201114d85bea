"""
Configuration module for panorama rig planning.

Handles loading and saving of rig parameters from YAML files.
"""

import yaml
import numpy as np
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .exceptions import EmptyConfig, InvalidLensGeometry, InvalidRowSpec
from .frustum import DEFAULT_BASE_SCALE, FrustumScale, check_geometry, frustum_scale
from .generator import check_row_spec, generate
from .models import (
    AutoRow,
    CameraConfig,
    CameraInfo,
    ExplicitRow,
    LensInfo,
    RowSpec,
)

logger = logging.getLogger(__name__)

# Rig used by the 3D preview when no parameter file is given
DEFAULT_SENSOR_WIDTH = 35.6
DEFAULT_SENSOR_HEIGHT = 23.8
DEFAULT_FOCAL_LENGTH = 18.0
DEFAULT_EXPOSURES = (3, 6, 3)


def _parse_row(index: int, entry) -> RowSpec:
    """
    Parse a single YAML row entry.

    An integer is an exposure count with auto tilt. A mapping needs
    ``exposures`` and may carry ``tilt`` in degrees.
    """
    if isinstance(entry, dict):
        if 'exposures' not in entry:
            raise InvalidRowSpec(f"Row {index}: missing 'exposures'")
        exposures = entry['exposures']
        tilt_deg = entry.get('tilt')
        if tilt_deg is None:
            spec = AutoRow(exposure_count=exposures)
        else:
            if isinstance(tilt_deg, bool) or not isinstance(tilt_deg, (int, float)):
                raise InvalidRowSpec(f"Row {index}: tilt must be a number, got {tilt_deg!r}")
            spec = ExplicitRow(tilt=float(np.deg2rad(tilt_deg)), exposure_count=exposures)
    elif isinstance(entry, int) and not isinstance(entry, bool):
        spec = AutoRow(exposure_count=entry)
    else:
        raise InvalidRowSpec(
            f"Row {index}: expected an exposure count or a mapping, got {entry!r}"
        )

    check_row_spec(index, spec)
    return spec


def _section(data: dict, name: str) -> dict:
    """Return a top-level mapping section, empty when absent."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidLensGeometry(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _dump_row(spec: RowSpec):
    if isinstance(spec, ExplicitRow):
        return {
            'tilt': float(np.rad2deg(spec.tilt)),
            'exposures': spec.exposure_count,
        }
    return spec.exposure_count


@dataclass
class RigConfig:
    """
    Rig parameters for a planning run.

    Attributes:
        camera: Sensor dimensions (mm)
        lens: Lens parameters (mm)
        rows: One RowSpec per row, index = row
        base_scale: Depth at which frustum planes are drawn in the preview
    """
    camera: CameraInfo
    lens: LensInfo
    rows: List[RowSpec] = field(default_factory=list)
    base_scale: float = DEFAULT_BASE_SCALE

    @classmethod
    def default(cls) -> "RigConfig":
        """Full-frame-ish sensor, 18 mm lens, rows of 3/6/3 exposures."""
        return cls(
            camera=CameraInfo(sensor_width=DEFAULT_SENSOR_WIDTH, sensor_height=DEFAULT_SENSOR_HEIGHT),
            lens=LensInfo(focal_length=DEFAULT_FOCAL_LENGTH),
            rows=[AutoRow(exposure_count=n) for n in DEFAULT_EXPOSURES],
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "RigConfig":
        """
        Load rig parameters from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            RigConfig object with loaded parameters

        Example YAML structure:
            camera:
              sensor_width: 35.6
              sensor_height: 23.8
            lens:
              focal_length: 18.0
            rows:
              - 3
              - {tilt: 0.0, exposures: 6}   # tilt in degrees
              - 3
            frustum:
              base_scale: 3.0
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Malformed YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top of {config_path}")

        logger.info(f"Loading rig configuration from {config_path}")

        cam_data = _section(data, 'camera')
        lens_data = _section(data, 'lens')
        try:
            camera = CameraInfo(
                sensor_width=cam_data['sensor_width'],
                sensor_height=cam_data['sensor_height'],
            )
            lens = LensInfo(focal_length=lens_data['focal_length'])
        except KeyError as e:
            raise InvalidLensGeometry(f"Missing camera/lens parameter: {e.args[0]}") from e
        check_geometry(camera, lens)

        row_data = data.get('rows') or []
        if not isinstance(row_data, list):
            raise InvalidRowSpec(f"'rows' must be a list, got {type(row_data).__name__}")
        if not row_data:
            raise EmptyConfig(f"No rows defined in {config_path}")
        rows = [_parse_row(i, entry) for i, entry in enumerate(row_data)]

        frustum_data = _section(data, 'frustum')
        base_scale = frustum_data.get('base_scale', DEFAULT_BASE_SCALE)

        config = cls(camera=camera, lens=lens, rows=rows, base_scale=base_scale)
        config.frustum()  # raises on a bad base_scale
        return config

    def to_yaml(self, config_path: str) -> None:
        """Save rig parameters to a YAML file. Explicit tilts are written in degrees."""
        data = {
            'camera': {
                'sensor_width': self.camera.sensor_width,
                'sensor_height': self.camera.sensor_height,
            },
            'lens': {
                'focal_length': self.lens.focal_length,
            },
            'rows': [_dump_row(spec) for spec in self.rows],
            'frustum': {
                'base_scale': self.base_scale,
            },
        }

        with open(config_path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Rig configuration saved to {config_path}")

    def build(self) -> CameraConfig:
        """Generate the camera configuration for this rig."""
        return generate(self.camera, self.lens, self.rows)

    def frustum(self, base_scale: Optional[float] = None) -> FrustumScale:
        """Frustum footprint for this rig's sensor and lens."""
        if base_scale is None:
            base_scale = self.base_scale
        return frustum_scale(self.camera, self.lens, base_scale)
