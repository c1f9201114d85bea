"""
Data model for panorama rig planning.

All lengths are in millimetres and all angles in radians unless a name says
otherwise (``*_deg``).

Rotation Conventions:
    - pan: azimuth about the vertical axis, in [0, 2*pi)
    - tilt: elevation above the horizontal plane, in (-pi/2, pi/2)
    - roll: rotation about the optical axis, always 0 for now
"""

import numbers
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

import numpy as np

from .exceptions import InvalidRowSpec


@dataclass(frozen=True)
class CameraInfo:
    """Camera sensor dimensions."""
    sensor_width: float  # mm
    sensor_height: float  # mm


@dataclass(frozen=True)
class LensInfo:
    """Lens parameters."""
    focal_length: float  # mm


@dataclass(frozen=True)
class Rotation:
    """
    Camera orientation for a single exposure.

    Attributes:
        pan: Azimuth in radians
        tilt: Elevation in radians (positive is up)
        roll: Rotation about the optical axis in radians (unused, always 0)
    """
    pan: float
    tilt: float
    roll: float = 0.0

    @property
    def pan_deg(self) -> float:
        return float(np.rad2deg(self.pan))

    @property
    def tilt_deg(self) -> float:
        return float(np.rad2deg(self.tilt))


@dataclass(frozen=True, order=True)
class Coordinate:
    """Address of a camera position within a configuration (row-major order)."""
    row: int
    column: int

    def __post_init__(self):
        for name in ("row", "column"):
            value = getattr(self, name)
            if not is_integral(value):
                raise ValueError(f"Coordinate {name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Coordinate {name} must be >= 0, got {value}")

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.column)


@dataclass(frozen=True)
class CameraPosition:
    """One planned exposure: where it sits in the grid and how the camera points."""
    coordinate: Coordinate
    rotation: Rotation


@dataclass(frozen=True)
class AutoRow:
    """Row whose tilt is derived from its index and the total row count."""
    exposure_count: int


@dataclass(frozen=True)
class ExplicitRow:
    """Row with a caller-supplied tilt (radians)."""
    tilt: float
    exposure_count: int


RowSpec = Union[AutoRow, ExplicitRow]


def is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def as_row_spec(value) -> RowSpec:
    """
    Normalize a loosely written row description to a RowSpec.

    Accepts:
        - an AutoRow or ExplicitRow (returned unchanged)
        - a bare integer exposure count (auto tilt)
        - a ``(tilt, exposure_count)`` pair (explicit tilt, radians)

    Raises:
        InvalidRowSpec: If the value has none of these shapes
    """
    if isinstance(value, (AutoRow, ExplicitRow)):
        return value
    if is_integral(value):
        return AutoRow(exposure_count=int(value))
    if isinstance(value, (tuple, list)) and len(value) == 2:
        tilt, exposure_count = value
        if isinstance(tilt, numbers.Real) and not isinstance(tilt, bool):
            return ExplicitRow(tilt=float(tilt), exposure_count=exposure_count)
    raise InvalidRowSpec(
        f"Row spec must be an exposure count or a (tilt, exposure_count) pair, got {value!r}"
    )


@dataclass(frozen=True)
class RowGroup:
    """Positions of one row together with the tilt they share."""
    row: int
    tilt: float
    positions: Tuple[CameraPosition, ...]


@dataclass(frozen=True)
class CameraConfig:
    """
    Complete set of planned camera positions for a rig.

    ``angles`` is flattened row-major with columns ascending inside each row.
    Instances are read-only snapshots produced by ``generate``.
    """
    rows: int
    camera_info: CameraInfo
    lens_info: LensInfo
    angles: Tuple[CameraPosition, ...]

    def __len__(self) -> int:
        return len(self.angles)

    def __iter__(self) -> Iterator[CameraPosition]:
        return iter(self.angles)

    def _grouped(self) -> List[Tuple[CameraPosition, ...]]:
        # Single pass over the row-major angles
        groups: List[List[CameraPosition]] = [[] for _ in range(self.rows)]
        for position in self.angles:
            groups[position.coordinate.row].append(position)
        return [tuple(g) for g in groups]

    def row(self, row: int) -> Tuple[CameraPosition, ...]:
        """Positions of ``row`` ordered by column."""
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} out of range for config with {self.rows} rows")
        return tuple(p for p in self.angles if p.coordinate.row == row)

    def row_tilt(self, row: int) -> float:
        return self.row(row)[0].rotation.tilt

    def exposure_counts(self) -> Tuple[int, ...]:
        return tuple(len(positions) for positions in self._grouped())

    def by_row(self) -> List[RowGroup]:
        return [
            RowGroup(row=r, tilt=positions[0].rotation.tilt, positions=positions)
            for r, positions in enumerate(self._grouped())
        ]

    def position(self, coordinate: Union[Coordinate, Tuple[int, int]]) -> CameraPosition:
        """
        Look up the position at a coordinate.

        Args:
            coordinate: Coordinate or (row, column) tuple

        Raises:
            KeyError: If no position has that coordinate
        """
        if not isinstance(coordinate, Coordinate):
            if not isinstance(coordinate, (tuple, list)) or len(coordinate) != 2:
                raise KeyError(coordinate)
            row, column = coordinate
            if not (is_integral(row) and is_integral(column)) or row < 0 or column < 0:
                raise KeyError(coordinate)
            coordinate = Coordinate(row, column)
        for position in self.angles:
            if position.coordinate == coordinate:
                return position
        raise KeyError(coordinate.as_tuple())
