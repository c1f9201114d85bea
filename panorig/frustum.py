"""
Frustum projector.

Derives the visualised field-of-view footprint of a camera from its sensor
and lens geometry. The footprint is the proxy plane drawn ``base_scale``
units in front of the camera:

    lens_scale = sensor_width / focal_length
    width      = base_scale * lens_scale
    height     = width * sensor_height / sensor_width

Longer lenses give narrower footprints and the sensor aspect ratio is kept.
This is a first-order pinhole model: no distortion, no vignetting.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .exceptions import InvalidLensGeometry
from .models import CameraInfo, CameraPosition, LensInfo
from .transforms import rotation_matrix

logger = logging.getLogger(__name__)

# Depth at which the preview draws the frustum plane
DEFAULT_BASE_SCALE = 3.0


@dataclass(frozen=True)
class FrustumScale:
    """Width and height of the frustum plane in scene units."""
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.height / self.width


def _require_positive(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) \
            or not np.isfinite(value) or value <= 0:
        raise InvalidLensGeometry(f"{name} must be a positive number, got {value!r}")


def check_geometry(camera_info: CameraInfo, lens_info: LensInfo) -> None:
    _require_positive("sensor_width", camera_info.sensor_width)
    _require_positive("sensor_height", camera_info.sensor_height)
    _require_positive("focal_length", lens_info.focal_length)


def lens_scale(camera_info: CameraInfo, lens_info: LensInfo) -> float:
    """Ratio of sensor width to focal length (horizontal extent at unit distance)."""
    check_geometry(camera_info, lens_info)
    return camera_info.sensor_width / lens_info.focal_length


def frustum_scale(
    camera_info: CameraInfo,
    lens_info: LensInfo,
    base_scale: float = DEFAULT_BASE_SCALE,
) -> FrustumScale:
    """
    Compute the frustum plane footprint for a camera.

    Args:
        camera_info: Sensor dimensions (mm)
        lens_info: Lens parameters (mm)
        base_scale: Distance at which the frustum plane is drawn

    Returns:
        FrustumScale with the plane's width and height

    Raises:
        InvalidLensGeometry: If a sensor dimension, the focal length or
            base_scale is not positive
    """
    check_geometry(camera_info, lens_info)
    _require_positive("base_scale", base_scale)

    width = base_scale * lens_scale(camera_info, lens_info)
    height = width * (camera_info.sensor_height / camera_info.sensor_width)

    logger.debug(f"Frustum scale: {width:.4f} x {height:.4f} at depth {base_scale}")
    return FrustumScale(width=float(width), height=float(height))


def field_of_view(camera_info: CameraInfo, lens_info: LensInfo) -> Tuple[float, float]:
    """
    Angular field of view of a pinhole camera.

    Returns:
        Tuple of (horizontal, vertical) angles in radians
    """
    check_geometry(camera_info, lens_info)
    f = lens_info.focal_length
    horizontal = 2 * np.arctan(camera_info.sensor_width / (2 * f))
    vertical = 2 * np.arctan(camera_info.sensor_height / (2 * f))
    return float(horizontal), float(vertical)


def frustum_corners(
    position: CameraPosition,
    camera_info: CameraInfo,
    lens_info: LensInfo,
    base_scale: float = DEFAULT_BASE_SCALE,
) -> np.ndarray:
    """
    World-space corners of the frustum plane for one camera position.

    The plane is centred ``base_scale`` along the position's optical axis,
    with the camera at the origin.

    Returns:
        4x3 array ordered top-left, top-right, bottom-right, bottom-left
    """
    scale = frustum_scale(camera_info, lens_info, base_scale)
    half_w = scale.width / 2
    half_h = scale.height / 2

    corners_local = np.array([
        [-half_w, half_h, -base_scale],
        [half_w, half_h, -base_scale],
        [half_w, -half_h, -base_scale],
        [-half_w, -half_h, -base_scale],
    ])

    R = rotation_matrix(position.rotation)
    return corners_local @ R.T
