"""Tests for the tabulated Planckian locus and Ohno's interpolations."""
import numpy as np
import pytest

from cct_models import CctLadder, PlanckianTable
from cct_models.table import _nearest_index_kernel
from locus_planckian import planckian_uv, uv_from_cct_duv


class TestPlanckianTableConstruction:
    """Test table layout."""

    def test_default_shape(self, default_table):
        assert len(default_table) == 303
        assert default_table.temperatures.shape == (303,)
        assert default_table.uv.shape == (303, 2)
        assert default_table.luminance.shape == (303,)

    def test_matches_locus(self, default_table):
        """Rows are the locus points of the ladder temperatures."""
        expected = planckian_uv(default_table.temperatures[[0, 150, 302]])
        np.testing.assert_allclose(default_table.uv[[0, 150, 302]], expected[:, :2], rtol=1e-12)

    def test_read_only(self, default_table):
        with pytest.raises(ValueError):
            default_table.uv[0, 0] = 0.0
        with pytest.raises(ValueError):
            default_table.temperatures[0] = 0.0

    def test_empty_ladder(self):
        with pytest.raises(ValueError):
            PlanckianTable(CctLadder(imax=0))

    def test_unknown_observer(self):
        with pytest.raises(ValueError):
            PlanckianTable(observer="cie2049")

    def test_cached_is_shared(self):
        ladder = CctLadder.new(1000.0, 32000.0, 1.15)
        assert PlanckianTable.cached(ladder) is PlanckianTable.cached(ladder)
        assert PlanckianTable.cached(ladder) is not PlanckianTable.cached(ladder, "cie1931_classic")


class TestNearestIndex:
    """Test nearest point search."""

    def test_first_occurrence_on_ties(self):
        assert _nearest_index_kernel(np.array([3.0, 1.0, 1.0, 2.0])) == 1

    def test_all_nan(self):
        assert _nearest_index_kernel(np.array([np.nan, np.nan])) == -1

    @pytest.mark.parametrize("i", [0, 1, 150, 301, 302])
    def test_on_table_point(self, default_table, i):
        u, v = default_table.uv[i]
        assert default_table.nearest_index(u, v) == i

    def test_sq_distances(self, default_table):
        u, v = default_table.uv[10]
        d2 = default_table.sq_distances(u, v)
        assert d2.shape == (303,)
        assert d2[10] == 0.0
        assert np.all(d2 >= 0.0)


class TestZoom:
    """Test refinement ladders around the nearest point."""

    def test_interior(self, default_table):
        u, v = default_table.uv[100]
        ladder = default_table.zoom(u, v, 1.001)
        t = default_table.temperatures
        assert ladder.cct_min == t[99]
        assert ladder.cct_mul == 1.001
        assert list(ladder)[-1] == pytest.approx(t[101], rel=1.001 - 1.0)

    @pytest.mark.parametrize("i", [0, 302])
    def test_edge(self, default_table, i):
        u, v = default_table.uv[i]
        with pytest.raises(IndexError):
            default_table.zoom(u, v, 1.001)

    def test_ladder_around_edge(self, default_table):
        with pytest.raises(IndexError):
            default_table.ladder_around(0, 1.001)
        assert not default_table.is_interior(302)
        assert default_table.is_interior(1)


class TestInterpolation:
    """Test the triangular and parabolic solutions."""

    def test_triangular_on_locus(self, default_table):
        u, v = default_table.uv[100]
        t, d = default_table.triangular(u, v, 100)
        assert t == pytest.approx(default_table.temperatures[100], rel=1e-3)
        assert 0.0 <= d < 1e-4

    def test_parabolic_on_locus(self, default_table):
        u, v = default_table.uv[100]
        t, d = default_table.parabolic(u, v, 100)
        assert t == pytest.approx(default_table.temperatures[100], rel=1e-3)
        assert abs(d) < 1e-4

    def test_parabolic_off_locus(self, default_table):
        """Far from the locus the vertex distance approaches |Duv|."""
        u, v = uv_from_cct_duv(5000.0, 0.02)[0]
        i = default_table.nearest_index(u, v)
        t, d = default_table.parabolic(u, v, i)
        assert t == pytest.approx(5000.0, abs=5.0)
        assert d == pytest.approx(0.02, abs=1e-4)

    def test_edge_index(self, default_table):
        u, v = default_table.uv[0]
        with pytest.raises(IndexError):
            default_table.triangular(u, v, 0)
        with pytest.raises(IndexError):
            default_table.parabolic(u, v, 302)


class TestOhno2014Table:
    """Test the signed, uncorrected table lookup."""

    def test_sign(self, default_table):
        above = uv_from_cct_duv(4000.0, 0.01)[0]
        below = uv_from_cct_duv(4000.0, -0.01)[0]
        assert default_table.ohno2014(*above)[1] > 0.0
        assert default_table.ohno2014(*below)[1] < 0.0

    @pytest.mark.parametrize("cct", [900.0, 1001.0, 20186.0, 22000.0])
    def test_out_of_range(self, default_table, cct):
        u, v = uv_from_cct_duv(cct, 0.0)[0]
        t, d = default_table.ohno2014(u, v)
        assert np.isnan(t)
        assert np.isnan(d)

    def test_nan_input(self, default_table):
        t, d = default_table.ohno2014(np.nan, 0.3)
        assert np.isnan(t) and np.isnan(d)

    def test_batch_matches_single(self, default_table):
        uv = uv_from_cct_duv([3000.0, 6500.0, 900.0], [0.01, -0.002, 0.0])
        batch = default_table.ohno2014_batch(uv)
        assert batch.shape == (3, 2)
        for row, (u, v) in zip(batch, uv):
            np.testing.assert_array_equal(row, default_table.ohno2014(u, v))

    def test_batch_bad_shape(self, default_table):
        with pytest.raises(ValueError):
            default_table.ohno2014_batch(np.zeros((2, 3)))
