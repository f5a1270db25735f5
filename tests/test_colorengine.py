"""Tests for chromaticity conversions and spectral integration."""
import numpy as np
import pytest

from locus_colorengine import ColorSpaceEngine, SpectralPipeline, Spectrum

D65_XYZ = np.array([0.95047, 1.0, 1.08883])


class TestColorSpaceEngine:
    """Test XYZ, xy and uv conversions."""

    def test_xyz_to_uv(self):
        u, v = ColorSpaceEngine.xyz_to_uv1960(D65_XYZ)
        assert u == pytest.approx(0.19784, abs=1e-5)
        assert v == pytest.approx(0.31223, abs=1e-5)

    def test_batch_shape(self):
        assert ColorSpaceEngine.xyz_to_uv1960(np.tile(D65_XYZ, (4, 1))).shape == (4, 2)
        assert ColorSpaceEngine.xyz_to_uv1960(D65_XYZ).shape == (2,)

    def test_black(self):
        uv = ColorSpaceEngine.xyz_to_uv1960(np.zeros(3))
        assert np.all(np.isnan(uv))
        xy = ColorSpaceEngine.xyz_to_xy(np.zeros((1, 3)))
        assert np.all(np.isnan(xy))

    def test_xy_uv_inverse(self):
        xy = ColorSpaceEngine.xyz_to_xy(D65_XYZ)
        np.testing.assert_allclose(xy, [0.31270, 0.32900], atol=1e-4)
        uv = ColorSpaceEngine.xy_to_uv1960(xy)
        np.testing.assert_allclose(ColorSpaceEngine.uv1960_to_xy(uv), xy, rtol=1e-12)
        np.testing.assert_allclose(uv, ColorSpaceEngine.xyz_to_uv1960(D65_XYZ), rtol=1e-12)

    def test_wrong_width(self):
        with pytest.raises(ValueError):
            ColorSpaceEngine.xyz_to_uv1960(np.zeros((2, 2)))
        with pytest.raises(ValueError):
            ColorSpaceEngine.uv1960_to_xy(np.zeros(3))


class TestSpectrum:
    """Test spectral containers and integration."""

    def test_count(self):
        wl = np.linspace(380.0, 780.0, 81)
        assert Spectrum(wl, np.ones(81)).count == 1
        assert Spectrum(wl, np.ones((3, 81))).count == 3

    def test_decreasing_grid(self):
        with pytest.raises(ValueError):
            Spectrum(np.array([500.0, 400.0]), np.ones(2))

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            Spectrum(np.linspace(380.0, 780.0, 81), np.ones(80))

    def test_equal_energy(self):
        """An equal-energy spectrum sits near the E white point."""
        wl = np.arange(360.0, 831.0, 5.0)
        xyz = SpectralPipeline.spectrum_to_xyz(Spectrum(wl, np.ones_like(wl)), "cie1931_classic")
        assert xyz.shape == (1, 3)
        x, y = ColorSpaceEngine.xyz_to_xy(xyz)[0]
        assert x == pytest.approx(1.0 / 3.0, abs=2e-3)
        assert y == pytest.approx(1.0 / 3.0, abs=2e-3)

    def test_batch(self):
        wl = np.arange(380.0, 781.0, 1.0)
        values = np.vstack([np.ones_like(wl), 2.0 * np.ones_like(wl)])
        xyz = SpectralPipeline.spectrum_to_xyz(Spectrum(wl, values))
        assert xyz.shape == (2, 3)
        np.testing.assert_allclose(xyz[1], 2.0 * xyz[0], rtol=1e-12)
