import math

import numpy as np
import pandas as pd
import pytest

from hydrocyl.analysis.sweep import SWEEP_COLUMNS, max_safe_stroke, stroke_sweep
from hydrocyl.core.errors import InvalidStrokeError
from hydrocyl.design.cylinder import HydraulicCylinder

STROKES = np.arange(100.0, 1501.0, 100.0)


class TestStrokeSweep:
    def test_frame_shape(self, cylinder: HydraulicCylinder, front_flange) -> None:
        df = stroke_sweep(cylinder, front_flange, STROKES)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == SWEEP_COLUMNS
        assert len(df) == 15
        assert df["is_safe"].dtype == bool

    def test_body_length_preserved(self, cylinder: HydraulicCylinder, front_flange) -> None:
        df = stroke_sweep(cylinder, front_flange, STROKES)
        np.testing.assert_allclose(df["open_length_mm"] - 2.0 * df["stroke_mm"], 200.0)

    def test_matches_single_check(self, cylinder: HydraulicCylinder, front_flange) -> None:
        df = stroke_sweep(cylinder, front_flange, [cylinder.stroke])
        row = df.iloc[0]
        result = cylinder.check_buckling(front_flange)
        assert row["open_length_mm"] == pytest.approx(cylinder.open_length)
        assert row["critical_load_n"] == pytest.approx(result.critical_load)
        assert row["buckling_factor"] == pytest.approx(result.buckling_factor)
        assert bool(row["is_safe"]) is result.is_safe

    def test_scalar_stroke(self, cylinder: HydraulicCylinder, rear_clevis) -> None:
        assert len(stroke_sweep(cylinder, rear_clevis, 500.0)) == 1

    def test_factor_decreases_with_stroke(self, cylinder: HydraulicCylinder, trunnion) -> None:
        factors = stroke_sweep(cylinder, trunnion, STROKES)["buckling_factor"].to_numpy()
        assert np.all(np.diff(factors) < 0)

    def test_critical_load_follows_fixity(self, cylinder: HydraulicCylinder, front_flange, spherical_bearing) -> None:
        flange = stroke_sweep(cylinder, front_flange, STROKES)["critical_load_n"]
        sphere = stroke_sweep(cylinder, spherical_bearing, STROKES)["critical_load_n"]
        np.testing.assert_allclose(flange / sphere, 8.0)

    def test_empty(self, cylinder: HydraulicCylinder, front_flange) -> None:
        df = stroke_sweep(cylinder, front_flange, [])
        assert df.empty
        assert list(df.columns) == SWEEP_COLUMNS

    @pytest.mark.parametrize("bad", [[100.0, 0.0], [-50.0], [math.nan], [math.inf]])
    def test_invalid_strokes(self, cylinder: HydraulicCylinder, front_flange, bad) -> None:
        with pytest.raises(InvalidStrokeError) as exc:
            stroke_sweep(cylinder, front_flange, bad)
        assert exc.value.parameter_name == "stroke"

    def test_cylinder_untouched(self, cylinder: HydraulicCylinder, front_flange) -> None:
        stroke_sweep(cylinder, front_flange, STROKES)
        assert cylinder.stroke == 500.0
        assert cylinder.closed_length == 700.0


class TestMaxSafeStroke:
    def test_front_flange(self, cylinder: HydraulicCylinder, front_flange) -> None:
        assert max_safe_stroke(cylinder, front_flange, STROKES) == pytest.approx(800.0)

    def test_none_when_nothing_safe(self, cylinder: HydraulicCylinder, spherical_bearing) -> None:
        assert max_safe_stroke(cylinder, spherical_bearing, [500.0, 1000.0]) is None

    def test_order_independent(self, cylinder: HydraulicCylinder, front_flange) -> None:
        assert max_safe_stroke(cylinder, front_flange, STROKES[::-1]) == pytest.approx(800.0)

    def test_returns_float(self, cylinder: HydraulicCylinder, rear_clevis) -> None:
        assert isinstance(max_safe_stroke(cylinder, rear_clevis, STROKES), float)
