"""Tests for Ohno's single-resolution estimator."""
import numpy as np
import pytest
from structlog.testing import capture_logs

from cct_models import (
    OHNO_CORR_1PCT_STEP,
    CctDuv,
    InvalidRangeError,
    Ohno2014Estimator,
    PlanckianTable,
)
from locus_colorengine import Spectrum
from locus_planckian import planck, planckian_xyz, uv_from_cct_duv

REFERENCE_GRID = [
    (3000.0, 0.045),
    (3000.0, -0.045),
    (3000.0, 0.001),
    (3000.0, -0.001),
    (6500.0, 0.045),
    (6500.0, -0.045),
    (6500.0, 0.001),
    (6500.0, -0.001),
]


class TestOhnoRoundTrip:
    """Test recovery of synthetic (T, Duv) points."""

    @pytest.mark.parametrize("cct, duv", REFERENCE_GRID)
    def test_reference_grid(self, ohno, cct, duv):
        t, d = ohno.estimate(CctDuv([[cct, duv]]))[0]
        assert t == pytest.approx(cct, abs=0.15)
        assert d == pytest.approx(duv, abs=1e-5)

    def test_batch_order(self, ohno):
        """One output row per input row, in input order."""
        tds = CctDuv(REFERENCE_GRID)
        result = ohno.estimate(tds)
        assert len(result) == len(tds)
        assert result.approx_eq(tds, 0.15, 1e-5)

    def test_correction_applied(self, ohno, default_table):
        u, v = uv_from_cct_duv(4500.0, 0.003)[0]
        raw_t, raw_d = default_table.ohno2014(u, v)
        t, d = ohno.estimate(np.array([[u, v]]))[0]
        assert t == pytest.approx(raw_t * OHNO_CORR_1PCT_STEP, rel=1e-15)
        assert d == raw_d


    @pytest.mark.parametrize("cct", np.geomspace(1700.0, 20000.0, 15))
    def test_sweep(self, ohno, cct):
        # The 0.99991 correction only removes the mean bias of the 1% ladder;
        # the residual error grows towards the ends of the range (~1 K).
        duvs = np.linspace(-0.04, 0.04, 9)
        tds = CctDuv(np.column_stack((np.full(duvs.shape, cct), duvs)))
        result = ohno.estimate(tds)
        np.testing.assert_allclose(result.cct, cct, atol=1.2)
        np.testing.assert_allclose(result.duv, duvs, atol=1e-4)


class TestOhnoBounds:
    """Test points the 1% table cannot bracket."""

    @pytest.mark.parametrize("cct", [900.0, 1001.0, 20186.0, 22000.0])
    def test_out_of_range(self, ohno, cct):
        t, d = ohno.estimate(CctDuv([[cct, 0.0]]))[0]
        assert np.isnan(t)
        assert np.isnan(d)

    def test_duv_limit(self, ohno):
        """Too far from the locus: T is kept, Duv is NaN."""
        t, d = ohno.estimate(CctDuv([[6500.0, 0.06]]))[0]
        assert np.isfinite(t)
        assert np.isnan(d)

    def test_custom_duv_limit(self):
        est = Ohno2014Estimator(duv_limit=0.02)
        result = est.estimate(CctDuv([[6500.0, 0.03], [6500.0, 0.01]]))
        assert np.isnan(result.duv[0])
        assert result.duv[1] == pytest.approx(0.01, abs=1e-5)

    def test_partial_batch(self, ohno):
        """A failing row does not affect its neighbours."""
        result = ohno.estimate(CctDuv([[6500.0, 0.0], [900.0, 0.0], [3000.0, 0.0]]))
        assert np.isfinite(result.cct[0])
        assert np.isnan(result.cct[1]) and np.isnan(result.duv[1])
        assert np.isfinite(result.cct[2])


class TestOhnoSources:
    """Test the accepted input kinds."""

    def test_xyz(self, ohno, default_table):
        xyz = planckian_xyz([4000.0])
        from_xyz = ohno.estimate(xyz)
        assert len(from_xyz) == 1
        assert from_xyz.cct[0] == pytest.approx(4000.0, abs=2.0)
        assert abs(from_xyz.duv[0]) < 1e-5

    def test_single_xyz_row(self, ohno):
        """A flat XYZ triplet is one sample."""
        assert len(ohno.estimate(planckian_xyz(4000.0)[0])) == 1

    def test_spectrum(self, ohno):
        """A blackbody spectrum on the observer grid matches its XYZ."""
        wl = np.arange(380.0, 781.0, 1.0)
        spd = planck(wl * 1e-9, 4000.0)
        from_spectrum = ohno.estimate(Spectrum(wl, spd))
        from_xyz = ohno.estimate(planckian_xyz([4000.0]))
        assert from_spectrum.approx_eq(from_xyz, 1e-6, 1e-9)

    def test_black(self, ohno):
        result = ohno.estimate(np.array([[0.0, 0.0, 0.0], [0.95047, 1.0, 1.08883]]))
        assert np.isnan(result.cct[0]) and np.isnan(result.duv[0])
        assert result.cct[1] == pytest.approx(6504.0, abs=5.0)

    def test_empty(self, ohno):
        assert len(ohno.estimate(CctDuv([]))) == 0

    @pytest.mark.parametrize("source", ["6500K", 6500.0, np.zeros((2, 4))])
    def test_unsupported_source(self, ohno, source):
        with pytest.raises(TypeError):
            ohno.estimate(source)


class TestOhnoParams:
    """Test the hybrid parameter API."""

    def test_defaults(self, ohno):
        params = ohno.get_params()
        assert params["duv_limit"] == 0.05
        assert params["correction"] == OHNO_CORR_1PCT_STEP
        assert params["triangular_limit"] == 0.002
        assert (params["cct_min"], params["cct_mul"], params["imax"]) == (1000.0, 1.01, 303.0)

    def test_default_table_is_shared(self, ohno):
        assert ohno.table is PlanckianTable.cached()
        assert Ohno2014Estimator().table is ohno.table

    def test_kwargs_override_params(self):
        est = Ohno2014Estimator(params={"duv_limit": 0.02, "correction": 1.0}, duv_limit=0.03)
        assert est.get_params()["duv_limit"] == 0.03
        assert est.get_params()["correction"] == 1.0

    def test_unknown_param(self):
        with pytest.raises(ValueError):
            Ohno2014Estimator(duv_limt=0.02)

    def test_invalid_ladder(self):
        with pytest.raises(InvalidRangeError):
            Ohno2014Estimator(cct_mul=1.0)

    def test_set_param(self):
        est = Ohno2014Estimator()
        est.set_param("correction", 1.0)
        u, v = uv_from_cct_duv(4500.0, 0.003)[0]
        raw_t, _ = est.table.ohno2014(u, v)
        assert est.estimate(np.array([u, v]))[0][0] == raw_t

    def test_set_param_rebuilds_table(self):
        est = Ohno2014Estimator()
        est.set_param("imax", 200)
        assert len(est.table) == 200

    @pytest.mark.parametrize("name, value, error", [
        ("cct_mul", 1.0, InvalidRangeError),
        ("imax", 200.5, ValueError),
        ("correction", 0.0, ValueError),
        ("duv_limit", -0.01, ValueError),
    ])
    def test_set_param_rejected_keeps_state(self, name, value, error):
        est = Ohno2014Estimator()
        params = est.get_params()
        table = est.table
        with pytest.raises(error):
            est.set_param(name, value)
        assert est.get_params() == params
        assert est.table is table
        t, d = est.estimate(CctDuv([[6500.0, 0.0]]))[0]
        assert t == pytest.approx(6500.0, abs=1.0)

    def test_set_param_type(self):
        est = Ohno2014Estimator()
        with pytest.raises(TypeError):
            est.set_param("correction", "1.0")
        with pytest.raises(ValueError):
            est.set_param("corection", 1.0)

    def test_observer(self):
        est = Ohno2014Estimator(observer="cie1964_classic")
        assert est.table.observer.name == "cie1964_classic"
        with pytest.raises(ValueError):
            Ohno2014Estimator(observer="cie2049")


class TestOhnoLogging:
    """Test structured log events."""

    def test_estimate_event(self, ohno):
        with capture_logs() as logs:
            ohno.estimate(CctDuv([[6500.0, 0.0], [900.0, 0.0]]))
        events = [entry for entry in logs if entry["event"] == "cct_estimated"]
        assert len(events) == 1
        assert events[0]["method"] == "Ohno2014Estimator"
        assert events[0]["count"] == 2
        assert events[0]["nan_cct"] == 1
