"""Test the closed-form strong acid/strong base solver."""

import math

import pytest

from phcurve.chemistry import (
    TitrationParameters,
    excess_ph,
    strong_acid_strong_base_ph,
    strong_base_strong_acid_ph,
    strong_ph,
)


def quadratic_ph(delta):
    """Reference pH from the charge-balance quadratic."""
    if delta > 0:
        oh = (delta + math.sqrt(delta**2 + 4e-14)) / 2
        return 14.0 + math.log10(oh)
    excess = -delta
    h = (excess + math.sqrt(excess**2 + 4e-14)) / 2
    return -math.log10(h)


class TestExcessPH:
    """pH as a function of strong base excess."""

    def test_zero_excess_is_exactly_neutral(self):
        assert excess_ph(0.0) == 7.0

    def test_acid_excess(self):
        assert math.isclose(excess_ph(-0.01), 2.0, abs_tol=1e-9)

    def test_base_excess(self):
        assert math.isclose(excess_ph(0.01), 12.0, abs_tol=1e-9)

    def test_tiny_excess_approaches_neutral(self):
        # Water autoionization dominates a 1e-10 M excess.
        assert math.isclose(excess_ph(1e-10), 7.0, abs_tol=1e-3)
        assert math.isclose(excess_ph(-1e-10), 7.0, abs_tol=1e-3)

    def test_concentrated_excess_is_not_clamped(self):
        assert excess_ph(-10.0) < 0.0
        assert excess_ph(10.0) > 14.0


class TestStrongAcidStrongBase:
    """0.10 M HCl (25.00 cm^3) titrated with 0.10 M NaOH."""

    def test_initial_ph(self, strong_acid):
        assert math.isclose(strong_acid_strong_base_ph(strong_acid, 0.0), 1.0, abs_tol=1e-9)

    def test_equivalence_is_exactly_seven(self, strong_acid):
        assert strong_acid_strong_base_ph(strong_acid, 25.0) == 7.0

    def test_double_equivalence_matches_quadratic(self, strong_acid):
        # 2.5 mmol excess NaOH in 75 cm^3 -> 0.0333 M.
        ph = strong_acid_strong_base_ph(strong_acid, 50.0)
        assert math.isclose(ph, quadratic_ph(0.0025 / 0.075), abs_tol=1e-9)
        assert math.isclose(ph, 12.52, abs_tol=0.01)

    @pytest.mark.parametrize("added_ml", [5.0, 10.0, 24.0, 26.0, 40.0])
    def test_matches_quadratic_along_curve(self, strong_acid, added_ml):
        v_total = 0.025 + added_ml / 1000
        delta = (0.10 * added_ml / 1000 - 0.10 * 0.025) / v_total
        assert math.isclose(
            strong_acid_strong_base_ph(strong_acid, added_ml),
            quadratic_ph(delta),
            abs_tol=1e-9,
        )


class TestStrongBaseStrongAcid:
    """0.10 M NaOH (25.00 cm^3) titrated with 0.10 M HCl."""

    def test_initial_ph(self, strong_base):
        assert math.isclose(strong_base_strong_acid_ph(strong_base, 0.0), 13.0, abs_tol=1e-9)

    def test_equivalence_is_exactly_seven(self, strong_base):
        assert strong_base_strong_acid_ph(strong_base, 25.0) == 7.0

    def test_excess_acid_is_acidic(self, strong_base):
        assert math.isclose(
            strong_base_strong_acid_ph(strong_base, 50.0),
            quadratic_ph(-0.0025 / 0.075),
            abs_tol=1e-9,
        )

    def test_dispatch(self, strong_acid, strong_base):
        assert strong_ph(strong_acid, 10.0) == strong_acid_strong_base_ph(strong_acid, 10.0)
        assert strong_ph(strong_base, 10.0) == strong_base_strong_acid_ph(strong_base, 10.0)

    def test_empty_flask_is_neutral(self):
        params = TitrationParameters("base", "strong", 0.10, 0.0, 0.10, math.nan)
        assert strong_ph(params, 0.0) == 7.0
