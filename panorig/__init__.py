"""
Panoramic Rig Planning Package

Plans camera orientations for a multi-row panoramic photography rig and
derives the field-of-view frustum used to preview each shot.

Workflow:
    sensor + lens + row plan -> CameraConfig (one CameraPosition per (row, column))
    sensor + lens            -> FrustumScale (proxy plane size per position)

Conventions:
    - Lengths in millimetres, angles in radians
    - pan in [0, 2*pi), tilt in (-pi/2, pi/2), roll always 0
    - Positions are ordered row-major, columns ascending
"""

from .exceptions import PanoramaError, InvalidRowSpec, EmptyConfig, InvalidLensGeometry
from .models import (
    CameraInfo,
    LensInfo,
    Rotation,
    Coordinate,
    CameraPosition,
    AutoRow,
    ExplicitRow,
    RowSpec,
    RowGroup,
    CameraConfig,
    as_row_spec,
)
from .generator import generate, auto_tilt, pan_angles
from .frustum import (
    DEFAULT_BASE_SCALE,
    FrustumScale,
    frustum_scale,
    frustum_corners,
    field_of_view,
    lens_scale,
)
from .transforms import to_euler, rotation_matrix, optical_axis
from .config import RigConfig

__version__ = "0.1.0"
__all__ = [
    "PanoramaError",
    "InvalidRowSpec",
    "EmptyConfig",
    "InvalidLensGeometry",
    "CameraInfo",
    "LensInfo",
    "Rotation",
    "Coordinate",
    "CameraPosition",
    "AutoRow",
    "ExplicitRow",
    "RowSpec",
    "RowGroup",
    "CameraConfig",
    "as_row_spec",
    "generate",
    "auto_tilt",
    "pan_angles",
    "DEFAULT_BASE_SCALE",
    "FrustumScale",
    "frustum_scale",
    "frustum_corners",
    "field_of_view",
    "lens_scale",
    "to_euler",
    "rotation_matrix",
    "optical_axis",
    "RigConfig",
]
