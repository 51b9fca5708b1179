"""Test titration curve generation across the four reaction classes."""

import logging
import math

import numpy as np
import pytest

from phcurve.chemistry import TitrationParameters, residual_for
from phcurve.curve import (
    TitrationCurve,
    equivalence_volume_ml,
    generate_curve,
    initial_log_h_guess,
    initial_ph,
)

ALL_CLASSES = [
    ("acid", "weak", 4.76),
    ("base", "weak", 4.75),
    ("acid", "strong", math.nan),
    ("base", "strong", math.nan),
]


class TestCurveShape:
    """Properties that hold for every valid set of parameters."""

    @pytest.mark.parametrize("kind,strength,pk", ALL_CLASSES)
    @pytest.mark.parametrize("x_unit", ["equivalents", "ml"])
    def test_point_count_order_and_range(self, kind, strength, pk, x_unit):
        params = TitrationParameters(kind, strength, 0.10, 25.00, 0.10, pk)
        curve = generate_curve(params, x_unit=x_unit)

        assert len(curve) == 401
        assert len(curve.points) == 401
        assert np.all(np.diff(curve.x) > 0)
        assert np.all(np.isfinite(curve.ph))
        assert np.all((curve.ph >= 0.0) & (curve.ph <= 14.0))
        assert curve.all_converged

    @pytest.mark.parametrize("point_count", [2, 3, 50, 1001])
    def test_custom_point_count(self, weak_acid, point_count):
        curve = generate_curve(weak_acid, point_count=point_count)
        assert len(curve) == point_count
        assert curve.x[0] == 0.0
        assert math.isclose(curve.x[-1], 2.0)

    def test_volume_axis_spans_twice_equivalence(self, weak_acid):
        curve = generate_curve(weak_acid, x_unit="ml")
        assert curve.x[0] == 0.0
        assert math.isclose(curve.x[-1], 50.0)
        assert curve.x[curve.equivalence_index] == 25.0

    def test_equivalents_axis(self, weak_acid):
        curve = generate_curve(weak_acid)
        assert curve.equivalence_index == 200
        assert curve.x[curve.equivalence_index] == 1.0

    def test_curve_is_read_only(self, weak_acid):
        curve = generate_curve(weak_acid, point_count=5)
        with pytest.raises(ValueError):
            curve.ph[0] = 3.0

    def test_caller_arrays_stay_writeable(self):
        x = np.linspace(0.0, 2.0, 3)
        ph = np.array([3.0, 8.7, 12.0])
        converged = np.ones(3, dtype=bool)
        curve = TitrationCurve(x, ph, converged, 2.88, 25.0, "equivalents", 1)
        assert x.flags.writeable and ph.flags.writeable and converged.flags.writeable
        ph[0] = 1.0
        assert curve.ph[0] == 3.0
        assert not curve.ph.flags.writeable

    def test_dataframe_columns(self, weak_acid):
        df = generate_curve(weak_acid, point_count=11, x_unit="ml").to_dataframe()
        assert list(df.columns) == ["Titrant added (mL)", "pH", "Converged"]
        assert len(df) == 11

    def test_invalid_arguments(self, weak_acid):
        with pytest.raises(ValueError, match="point_count"):
            generate_curve(weak_acid, point_count=1)
        with pytest.raises(ValueError, match="x_unit"):
            generate_curve(weak_acid, x_unit="litres")


class TestScenarios:
    """Reference titrations with textbook values."""

    def test_weak_acid_strong_base(self, weak_acid):
        curve = generate_curve(weak_acid, x_unit="ml")
        assert math.isclose(curve.equivalence_volume_ml, 25.0)
        assert math.isclose(curve.initial_ph, 2.88, abs_tol=0.01)
        assert curve.x[100] == 12.5
        assert math.isclose(curve.ph[100], 4.76, abs_tol=0.01)
        assert math.isclose(curve.ph[200], 8.72, abs_tol=0.02)

    def test_strong_acid_strong_base(self, strong_acid):
        curve = generate_curve(strong_acid, x_unit="ml")
        assert math.isclose(curve.initial_ph, 1.0, abs_tol=1e-9)
        assert curve.ph[200] == 7.0
        expected = 14.0 + math.log10(0.0025 / 0.075)
        assert math.isclose(curve.ph[-1], expected, abs_tol=1e-9)

    def test_weak_base_strong_acid(self, weak_base):
        curve = generate_curve(weak_base)
        assert math.isclose(curve.initial_ph, 11.12, abs_tol=0.01)
        assert math.isclose(curve.ph[200], 5.28, abs_tol=0.02)
        assert curve.ph[0] > curve.ph[-1]

    def test_strong_base_strong_acid(self, strong_base):
        curve = generate_curve(strong_base)
        assert math.isclose(curve.initial_ph, 13.0, abs_tol=1e-9)
        assert curve.ph[200] == 7.0

    def test_curve_residuals_vanish(self, weak_acid):
        curve = generate_curve(weak_acid, point_count=41, x_unit="ml")
        for added_ml, ph in zip(curve.x, curve.ph):
            residual = residual_for(weak_acid, float(added_ml))
            assert abs(residual(10.0 ** (-ph))) < 1e-6


class TestWarmStart:
    """Warm starts change search order, not results."""

    @pytest.mark.parametrize("kind,strength,pk", ALL_CLASSES)
    def test_warm_and_cold_agree(self, kind, strength, pk):
        params = TitrationParameters(kind, strength, 0.10, 25.00, 0.10, pk)
        warm = generate_curve(params, warm_start=True)
        cold = generate_curve(params, warm_start=False)
        np.testing.assert_allclose(warm.ph, cold.ph, rtol=0, atol=1e-6)

    def test_initial_guess_heuristic(self):
        acid = TitrationParameters("acid", "weak", 0.1, 25.0, 0.1, 4.76)
        base = TitrationParameters("base", "weak", 0.1, 25.0, 0.1, 4.75)
        assert math.isclose(initial_log_h_guess(acid), -2.24)
        assert initial_log_h_guess(base) == 0.0
        assert initial_log_h_guess(TitrationParameters(pk=9.0)) == 0.0

    def test_idempotent(self, weak_base):
        first = generate_curve(weak_base)
        second = generate_curve(weak_base)
        assert np.array_equal(first.x, second.x)
        assert np.array_equal(first.ph, second.ph)
        assert first.initial_ph == second.initial_ph
        assert first.equivalence_volume_ml == second.equivalence_volume_ml


class TestDegenerateInputs:
    """Edge inputs degrade gracefully instead of raising."""

    def test_zero_titrant_concentration_is_floored(self):
        params = TitrationParameters("acid", "weak", 0.10, 25.0, 0.0, 4.76)
        assert math.isclose(equivalence_volume_ml(params), 2.5e12)
        curve = generate_curve(params, point_count=21)
        assert np.all(np.isfinite(curve.ph))
        assert np.all(np.diff(curve.x) > 0)

    def test_zero_analyte_concentration(self):
        params = TitrationParameters("acid", "strong", 0.0, 25.0, 0.10, math.nan)
        curve = generate_curve(params, point_count=11)
        assert curve.equivalence_volume_ml == 0.0
        assert np.all(curve.ph == 7.0)
        assert initial_ph(params) == 7.0

    def test_extreme_excess_is_clamped(self):
        params = TitrationParameters("acid", "strong", 10.0, 25.0, 20.0, math.nan)
        curve = generate_curve(params, point_count=11)
        assert initial_ph(params) < 0.0
        assert curve.ph[0] == 0.0
        assert curve.ph[-1] == 14.0

    def test_fallback_points_are_flagged(self, caplog):
        # 16.7 M Na⁺ against 8.3 M total acid: no root below pH 14.
        params = TitrationParameters("acid", "weak", 10.0, 25.0, 100.0, 4.76)
        with caplog.at_level(logging.WARNING, logger="phcurve.curve"):
            curve = generate_curve(params, point_count=11)
        assert not curve.all_converged
        assert curve.converged[0]
        assert not curve.converged[-1]
        assert curve.ph[-1] == 14.0
        assert np.all(np.isfinite(curve.ph))
        assert "fallback" in caplog.text
