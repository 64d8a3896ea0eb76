#!/usr/bin/env python
"""
Run hydraulic cylinder design check: forces, wall thickness, buckling, mass

Usage:
    python scripts/run_design.py --project data/projects/press_80_45.json
    python scripts/run_design.py --pressure 20 --bore 80 --rod 45 --stroke 500 --closed-length 700 \
        --mounting frontFlange --mount flangeDiameter=160 --mount boltCircleDiameter=130 --mount boltCount=6

Output:
    Summary table and design advisories on stdout.
    Optional stroke sweep as CSV (--sweep START STOP STEP --csv FILE).
"""

import sys
import argparse
import logging
from pathlib import Path

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hydrocyl.analysis.advisories import blocking
from hydrocyl.analysis.sweep import max_safe_stroke, stroke_sweep
from hydrocyl.core.errors import CylinderDesignError
from hydrocyl.design.cylinder import HydraulicCylinder
from hydrocyl.design.mounting import MountingCategory, field_schema_for, mounting_from_record
from hydrocyl.project import DesignProject, load_project, save_project


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Check a double-acting hydraulic cylinder design",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Saved project
  python scripts/run_design.py --project my_cylinder.json

  # Raw parameters, rear clevis, stroke sweep 100..1500 mm
  python scripts/run_design.py --pressure 16 --bore 63 --rod 36 --stroke 400 --closed-length 560 \\
      --mounting rearClevis --mount pinDiameter=25 --mount clevisWidth=32 --mount axisDistance=40 \\
      --sweep 100 1500 100 --csv sweep.csv
        """
    )

    parser.add_argument("--project", type=str, default=None, help="Project JSON file (cylinder + mounting)")

    parser.add_argument("--name", type=str, default="", help="Project name (raw-parameter mode)")
    parser.add_argument("--pressure", type=float, help="Working pressure, MPa")
    parser.add_argument("--bore", type=float, help="Bore diameter, mm")
    parser.add_argument("--rod", type=float, help="Rod diameter, mm")
    parser.add_argument("--stroke", type=float, help="Stroke, mm")
    parser.add_argument("--closed-length", type=float, help="Closed (retracted) length, mm")
    parser.add_argument(
        "--extra-margin",
        type=float,
        default=HydraulicCylinder.DEFAULT_EXTRA_MARGIN,
        help=f"Closed length margin, mm (default: {HydraulicCylinder.DEFAULT_EXTRA_MARGIN})"
    )

    parser.add_argument(
        "--mounting",
        type=str,
        default=MountingCategory.FRONT_FLANGE.value,
        choices=[c.value for c in MountingCategory],
        help="Mounting category (default: frontFlange)"
    )
    parser.add_argument(
        "--mount",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Mounting field, repeatable (e.g. --mount boltCount=6)"
    )

    parser.add_argument(
        "--sweep",
        nargs=3,
        type=float,
        default=None,
        metavar=("START", "STOP", "STEP"),
        help="Stroke sweep range, mm (STOP inclusive)"
    )
    parser.add_argument("--csv", type=str, default=None, help="Write stroke sweep to CSV")
    parser.add_argument("--save", type=str, default=None, help="Save the project to JSON")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    return parser.parse_args(argv)


def _parse_mount_fields(category, pairs):
    record = {"category": category}
    integer_keys = {f.key for f in field_schema_for(category) if f.is_integer}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"--mount expects KEY=VALUE, got {pair!r}")
        record[key.strip()] = int(value) if key.strip() in integer_keys else float(value)
    return record


def build_project(args):
    if args.project:
        return load_project(args.project)

    missing = [
        opt for opt, value in (
            ("--pressure", args.pressure),
            ("--bore", args.bore),
            ("--rod", args.rod),
            ("--stroke", args.stroke),
            ("--closed-length", args.closed_length),
        )
        if value is None
    ]
    if missing:
        raise ValueError(f"missing required options: {', '.join(missing)}")

    cylinder = HydraulicCylinder(
        pressure=args.pressure,
        bore_diameter=args.bore,
        rod_diameter=args.rod,
        stroke=args.stroke,
        closed_length=args.closed_length,
        extra_margin=args.extra_margin,
    )
    mounting = mounting_from_record(_parse_mount_fields(args.mounting, args.mount))
    return DesignProject(cylinder=cylinder, mounting=mounting, name=args.name)


def _fmt(value):
    if value is None:
        return "n/a"
    if isinstance(value, bool):
        return "yes" if value else "NO"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.csv and not args.sweep:
        print("Error: --csv requires --sweep")
        return 1

    try:
        project = build_project(args)
        project.mounting.validate()
        summary = project.summary()
        advisories = project.advisories()

        print(f"\n{'='*70}")
        print(f"Hydraulic Cylinder Design Check{' - ' + project.name if project.name else ''}")
        print(f"{'='*70}")
        for key, value in summary.items():
            print(f"  {key:<24} {_fmt(value)}")
        print(f"{'='*70}")

        if advisories:
            print("Advisories:")
            for advisory in advisories:
                print(f"  [{advisory.severity.value.upper()}] {advisory.code}: {advisory.message}")
        else:
            print("✓ No design advisories")

        if args.sweep:
            start, stop, step = args.sweep
            if step <= 0:
                print("Error: sweep STEP must be > 0")
                return 1
            strokes = np.arange(start, stop + 0.5 * step, step)
            df = stroke_sweep(project.cylinder, project.mounting, strokes)
            best = max_safe_stroke(project.cylinder, project.mounting, strokes)
            print(f"\nStroke sweep: {len(df)} points, max safe stroke: {_fmt(best)} mm")
            if args.csv:
                csv_path = Path(args.csv)
                csv_path.parent.mkdir(parents=True, exist_ok=True)
                df.to_csv(csv_path, index=False)
                print(f"✓ Saved sweep: {csv_path}")

        if args.save:
            print(f"✓ Saved project: {save_project(project, args.save)}")

    except CylinderDesignError as e:
        print(f"\nDesign error: {e}")
        return 1
    except (OSError, ValueError) as e:
        print(f"\nError: {e}")
        return 1

    return 2 if blocking(advisories) else 0


if __name__ == "__main__":
    sys.exit(main())
