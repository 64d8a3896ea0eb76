"""Pytest configuration.

Goal: make `import hydrocyl` work reliably when running tests without installing
package (editable install).

This repo uses a flat layout (hydrocyl/ at repo root). Some environments run
pytest with a working directory where repo root isn't on sys.path, leading to
`ModuleNotFoundError: hydrocyl`.

This conftest ensures repo root is on sys.path and provides the reference
cylinder used across the test-suite (D=80, d=45, P=20 MPa, stroke 500, closed 700).
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from hydrocyl.design.cylinder import HydraulicCylinder  # noqa: E402
from hydrocyl.design.mounting import FrontFlange, RearClevis, SphericalBearing, Trunnion  # noqa: E402


@pytest.fixture()
def cylinder() -> HydraulicCylinder:
    return HydraulicCylinder(pressure=20.0, bore_diameter=80.0, rod_diameter=45.0, stroke=500.0, closed_length=700.0)


@pytest.fixture()
def front_flange() -> FrontFlange:
    return FrontFlange(flange_diameter=160.0, bolt_circle_diameter=130.0, bolt_count=6)


@pytest.fixture()
def rear_clevis() -> RearClevis:
    return RearClevis(pin_diameter=25.0, clevis_width=32.0, axis_distance=40.0)


@pytest.fixture()
def trunnion() -> Trunnion:
    return Trunnion(head_distance=170.0, trunnion_diameter=30.0)


@pytest.fixture()
def spherical_bearing() -> SphericalBearing:
    return SphericalBearing(sphere_diameter=30.0, bore_diameter=20.0)


@pytest.fixture()
def all_mountings(front_flange, rear_clevis, trunnion, spherical_bearing):
    return [front_flange, rear_clevis, trunnion, spherical_bearing]
