"""Tests for Ohno's cascading multi-resolution estimator."""
import numpy as np
import pytest

from cct_models import CctDuv, Ohno2014CascadeEstimator
from locus_planckian import uv_from_cct_duv

from test_ohno import REFERENCE_GRID


class TestCascadeAccuracy:
    """Test recovery of synthetic (T, Duv) points."""

    def test_end_to_end(self, cascade):
        tds = CctDuv([[13000.0, -0.001], [6500.0, 0.01], [3000.0, -0.01], [1500.0, 0.04]])
        result = cascade.estimate(tds)
        assert result.approx_eq(tds, 5e-3, 1e-8)

    @pytest.mark.parametrize("cct, duv", REFERENCE_GRID)
    def test_reference_grid(self, cascade, cct, duv):
        t, d = cascade.estimate(CctDuv([[cct, duv]]))[0]
        assert t == pytest.approx(cct, abs=5e-3)
        assert d == pytest.approx(duv, abs=1e-6)

    @pytest.mark.parametrize("cct", np.geomspace(1700.0, 20000.0, 25))
    def test_sweep(self, cascade, cct):
        duvs = np.linspace(-0.045, 0.045, 11)
        tds = CctDuv(np.column_stack((np.full(duvs.shape, cct), duvs)))
        result = cascade.estimate(tds)
        np.testing.assert_allclose(result.cct, cct, atol=1e-2)
        np.testing.assert_allclose(result.duv, duvs, atol=1e-8)

    def test_no_correction(self, cascade):
        """The finest table is fine enough to be used uncorrected."""
        t, _ = cascade.estimate(CctDuv([[2700.0, 0.0]]))[0]
        assert t == pytest.approx(2700.0, abs=5e-3)

    def test_refine_matches_estimate(self, cascade):
        u, v = uv_from_cct_duv(5000.0, 0.02)[0]
        t, d = cascade.refine(u, v)
        np.testing.assert_array_equal(cascade.estimate(np.array([[u, v]])).values[0], [t, d])


class TestCascadeBounds:
    """Test points outside the coarse table."""

    @pytest.mark.parametrize("cct", [900.0, 40000.0])
    def test_out_of_range(self, cascade, cct):
        t, d = cascade.estimate(CctDuv([[cct, 0.0]]))[0]
        assert np.isnan(t)
        assert np.isnan(d)

    def test_above_20000(self, cascade):
        """The coarse ladder reaches further than the 1% table."""
        t, d = cascade.estimate(CctDuv([[25000.0, 0.0]]))[0]
        assert t == pytest.approx(25000.0, abs=0.05)

    @pytest.mark.parametrize("u, v", [(np.nan, 0.3), (0.2, np.inf)])
    def test_non_finite_input(self, cascade, u, v):
        t, d = cascade.refine(u, v)
        assert np.isnan(t) and np.isnan(d)

    def test_duv_limit(self, cascade):
        t, d = cascade.estimate(CctDuv([[6500.0, -0.06]]))[0]
        assert np.isfinite(t)
        assert np.isnan(d)


class TestCascadeParams:
    """Test configuration of the cascade."""

    def test_coarse_table(self, cascade):
        assert len(cascade.coarse_table) == 25
        assert cascade.coarse_table.temperatures[0] == 1000.0

    def test_coarse_table_is_shared(self, cascade):
        assert Ohno2014CascadeEstimator().coarse_table is cascade.coarse_table

    def test_zoom_muls(self, cascade):
        assert cascade.get_params()["zoom_muls"] == (1.015, 1.0015, 1.00015)

    def test_custom_zoom(self):
        est = Ohno2014CascadeEstimator(zoom_muls=[1.015, 1.0015])
        t, _ = est.estimate(CctDuv([[6500.0, 0.01]]))[0]
        assert t == pytest.approx(6500.0, abs=0.5)

    def test_invalid_zoom(self):
        with pytest.raises(ValueError):
            Ohno2014CascadeEstimator(zoom_muls=(1.015, 1.0))
