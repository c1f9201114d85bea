"""
Command-line interface for panorama rig planning.

Usage:
    panorig-plan [rig.yaml] [--base-scale SCALE] [-v]
"""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .config import RigConfig
from .exceptions import PanoramaError
from .frustum import field_of_view


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def format_degrees(radians: float) -> str:
    """Degrees with at most one decimal, e.g. 6 or -54.5."""
    text = f"{np.rad2deg(radians):.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description='Plan camera positions for a multi-row panoramic rig',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
    # Plan the built-in 3/6/3 rig
    panorig-plan

    # Plan a rig from a parameter file
    panorig-plan rigs/example_rig.yaml

    # Verbose output
    panorig-plan rigs/example_rig.yaml -v
'''
    )

    parser.add_argument(
        'config',
        type=str,
        nargs='?',
        default=None,
        help='Path to YAML rig file (default: built-in 3/6/3 rig)'
    )

    parser.add_argument(
        '--base-scale', '-s',
        type=float,
        default=None,
        help='Depth at which the frustum plane is drawn (default: from rig file)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        if args.config:
            rig = RigConfig.from_yaml(args.config)
        else:
            logger.info("No rig file given, using the default rig")
            rig = RigConfig.default()

        config = rig.build()
        scale = rig.frustum(args.base_scale)
        h_fov, v_fov = field_of_view(rig.camera, rig.lens)

        print("\n" + "=" * 60)
        print("PARAMETERS")
        print("=" * 60)
        print(f"Sensor width:           {rig.camera.sensor_width}mm")
        print(f"Sensor height:          {rig.camera.sensor_height}mm")
        print(f"Focal length:           {rig.lens.focal_length}mm")
        print(f"Field of view:          {format_degrees(h_fov)}° x {format_degrees(v_fov)}°")
        print(f"Frustum plane:          {scale.width:.3f} x {scale.height:.3f}")

        print("\n" + "=" * 60)
        print(f"SHOTS ({len(config)} exposures, {config.rows} rows)")
        print("=" * 60)
        for group in config.by_row():
            print(f"Row {group.row} ({format_degrees(group.tilt)}°): {len(group.positions)} exposures")
            pans = ", ".join(format_degrees(p.rotation.pan) for p in group.positions)
            print(f"  pan: {pans}")
        print("=" * 60)

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except PanoramaError as e:
        logger.error(f"Invalid rig: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
