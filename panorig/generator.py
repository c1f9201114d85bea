"""
Camera configuration generator.

Turns sensor/lens parameters and a per-row exposure plan into the full set
of oriented camera positions, addressed by (row, column).

Tilt Policies:
    - Auto: the interval (-pi/2, pi/2) is divided into rows + 2 steps and
      row r gets  -pi/2 + pi/(rows + 2) + r*pi/rows
    - Explicit: the row supplies its own tilt, used verbatim

Pan within a row is evenly spaced: pan_k = 2*pi*k / exposure_count.
"""

import logging
import numbers
from typing import Iterable, List, Tuple

import numpy as np

from .exceptions import EmptyConfig, InvalidRowSpec
from .models import (
    AutoRow,
    CameraConfig,
    CameraInfo,
    CameraPosition,
    Coordinate,
    ExplicitRow,
    LensInfo,
    Rotation,
    RowSpec,
    is_integral,
    as_row_spec,
)

logger = logging.getLogger(__name__)


def auto_tilt(row: int, rows: int) -> float:
    """
    Derive the tilt of ``row`` out of ``rows`` evenly distributed bands.

    The row term divides by ``rows`` rather than ``rows + 2``; preview layouts
    depend on this exact spacing.

    Args:
        row: Zero-based row index
        rows: Total number of rows

    Returns:
        Tilt in radians, strictly inside (-pi/2, pi/2)
    """
    if rows < 1:
        raise ValueError(f"rows must be >= 1, got {rows}")
    if not 0 <= row < rows:
        raise ValueError(f"row {row} out of range for {rows} rows")
    tilt_step = np.pi / (rows + 2)
    tilt_start = -np.pi / 2 + tilt_step
    return float(tilt_start + np.pi * row / rows)


def pan_angles(exposure_count: int) -> Tuple[float, ...]:
    """Evenly spaced pan angles covering one full turn."""
    if not is_integral(exposure_count) or exposure_count < 1:
        raise InvalidRowSpec(f"Exposure count must be a positive integer, got {exposure_count!r}")
    return tuple(float(2 * np.pi * column / exposure_count) for column in range(exposure_count))


def check_row_spec(row: int, spec: RowSpec) -> None:
    """Raise InvalidRowSpec if row `row` cannot be generated."""
    count = spec.exposure_count
    if not is_integral(count) or count < 1:
        raise InvalidRowSpec(
            f"Row {row}: exposure count must be a positive integer, got {count!r}"
        )
    if isinstance(spec, ExplicitRow):
        tilt = spec.tilt
        if isinstance(tilt, bool) or not isinstance(tilt, numbers.Real):
            raise InvalidRowSpec(f"Row {row}: tilt must be a number, got {tilt!r}")
        if not np.isfinite(tilt) or abs(tilt) >= np.pi / 2:
            raise InvalidRowSpec(
                f"Row {row}: tilt {spec.tilt!r} rad is outside (-pi/2, pi/2)"
            )


def _row_tilt(row: int, rows: int, spec: RowSpec) -> float:
    if isinstance(spec, AutoRow):
        return auto_tilt(row, rows)
    return float(spec.tilt)


def generate(
    camera_info: CameraInfo,
    lens_info: LensInfo,
    row_specs: Iterable,
) -> CameraConfig:
    """
    Generate every camera position needed to cover the sphere.

    Args:
        camera_info: Sensor dimensions
        lens_info: Lens parameters
        row_specs: One entry per row, index = row. Each entry is an exposure
            count (auto tilt), a (tilt, exposure_count) pair (explicit tilt),
            or an AutoRow/ExplicitRow. Rows may mix both policies.

    Returns:
        CameraConfig with positions in row-major, column-ascending order

    Raises:
        EmptyConfig: If no rows are supplied
        InvalidRowSpec: If an exposure count is < 1 or an explicit tilt is
            outside (-pi/2, pi/2)
    """
    specs = [as_row_spec(spec) for spec in row_specs]
    if not specs:
        raise EmptyConfig("At least one row is required")

    # Validate everything up front: generation is all-or-nothing
    for row, spec in enumerate(specs):
        check_row_spec(row, spec)

    rows = len(specs)
    angles: List[CameraPosition] = []
    for row, spec in enumerate(specs):
        tilt = _row_tilt(row, rows, spec)
        for column, pan in enumerate(pan_angles(spec.exposure_count)):
            angles.append(
                CameraPosition(
                    coordinate=Coordinate(row, column),
                    rotation=Rotation(pan=pan, tilt=tilt, roll=0.0),
                )
            )
        logger.debug(
            f"Row {row}: {spec.exposure_count} exposures at tilt "
            f"{np.rad2deg(tilt):.2f} deg ({type(spec).__name__})"
        )

    logger.debug(f"Generated {len(angles)} camera positions over {rows} rows")

    return CameraConfig(
        rows=rows,
        camera_info=camera_info,
        lens_info=lens_info,
        angles=tuple(angles),
    )
