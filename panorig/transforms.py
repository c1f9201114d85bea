"""
Rotation helpers for camera positions.

The preview scene uses a Y-up, right-handed frame and the camera looks along
its local -Z axis. A (pan, tilt, roll) rotation maps to intrinsic Euler
angles in "YXZ" order:

    R = Ry(pan) @ Rx(tilt) @ Rz(roll)

so pan turns about the vertical axis, tilt raises the optical axis and roll
spins about it.
"""

from typing import Tuple

import numpy as np
from scipy.spatial.transform import Rotation as R_scipy

from .models import Rotation

EULER_ORDER = "YXZ"

# Optical axis in the camera's local frame
CAMERA_FORWARD = np.array([0.0, 0.0, -1.0])


def to_euler(rotation: Rotation) -> Tuple[float, float, float, str]:
    """
    Express a rotation as (x, y, z, order) Euler angles for a Y-up scene graph.

    Returns:
        Tuple of (tilt, pan, roll, "YXZ")
    """
    return (rotation.tilt, rotation.pan, rotation.roll, EULER_ORDER)


def rotation_matrix(rotation: Rotation) -> np.ndarray:
    """
    Compute the 3x3 matrix rotating camera-local vectors into the scene frame.

    Args:
        rotation: Camera orientation

    Returns:
        3x3 rotation matrix equal to Ry(pan) @ Rx(tilt) @ Rz(roll)
    """
    # Uppercase axes select intrinsic rotations in scipy
    r = R_scipy.from_euler(EULER_ORDER, [rotation.pan, rotation.tilt, rotation.roll])
    return r.as_matrix()


def optical_axis(rotation: Rotation) -> np.ndarray:
    """Unit vector along which the camera looks, in the scene frame."""
    return rotation_matrix(rotation) @ CAMERA_FORWARD

