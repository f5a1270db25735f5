# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Chromaticity Engine
===================
JIT-compiled conversions between CIE XYZ, CIE 1931 (x, y) and the CIE 1960
UCS (u, v) chromaticity diagram, the coordinate system in which correlated
colour temperature and Duv are defined.

Conventions:
1. Batches are (N, 3) for tristimulus values and (N, 2) for chromaticities.
   Single samples of shape (3,) or (2,) are accepted and returned unbatched.
2. A sample without chromaticity (X + 15Y + 3Z == 0, i.e. black) maps to
   (NaN, NaN).  Downstream estimators turn NaN inputs into NaN results, so a
   black sample never aborts a batch.
3. Kernels are compiled without ``fastmath``: NaN propagation is part of the
   result contract.

Formulas (CIE 15:2004):
    u = 4X / (X + 15Y + 3Z)         u = 4x / (-2x + 12y + 3)
    v = 6Y / (X + 15Y + 3Z)         v = 6y / (-2x + 12y + 3)
    x = 3u / (2u - 8v + 4)          y = 2v / (2u - 8v + 4)

References:
    - CIE 15:2004 "Colorimetry"
    - Ohno, Y. (2014). "Practical Use and Calculation of CCT and Duv",
      LEUKOS 10:1, 47-55.
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, Final, TypeAlias

import numpy as np
from numba import njit

from locus_observers import InterpolationKind, ObserverLike, get_observer

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "UV_EPSILON",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "Spectrum",
    "ColorSpaceEngine",
    "SpectralPipeline",
]

# --- Type Aliases ---
# NOTE: Internal kernels compile to float64. float32 inputs are cast (copied)
# before entering the Numba kernels.
ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]

# Denominators below this are treated as "no chromaticity".
UV_EPSILON: Final[float] = 1e-12


# =============================================================================
# 1. SHAPE HANDLING
# =============================================================================

def handle_shapes(width: int) -> Callable[[Callable[..., ArrayFloat]], Callable[..., ArrayFloat]]:
    """
    Decorator factory normalising inputs to contiguous (N, width) float64.

    1D inputs (single samples) are treated as one-row batches internally and
    the single row is returned, which keeps the kernels 2D-only.

    Args:
        width: Required size of the last dimension (3 for XYZ, 2 for uv/xy).
    """
    def decorator(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
        @functools.wraps(func)
        def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
            arr = np.asarray(arr, dtype=np.float64)
            arr_in = np.ascontiguousarray(np.atleast_2d(arr))

            if arr_in.ndim != 2 or arr_in.shape[-1] != width:
                raise ValueError(
                    f"Expected shape (N, {width}) or ({width},), got {arr.shape}"
                )

            res = func(arr_in, *args, **kwargs)

            if arr.ndim == 1:
                return res[0]
            return res
        return wrapper
    return decorator


# =============================================================================
# 2. LOW-LEVEL KERNELS (Numba)
# =============================================================================

@njit(cache=True)
def _xyz_to_uv_1960_kernel(xyz: ArrayFloat) -> ArrayFloat:
    """
    Kernel for CIE XYZ -> CIE 1960 (u, v).
    Input: (N, 3), Output: (N, 2)
    """
    n = xyz.shape[0]
    uv = np.empty((n, 2), dtype=np.float64)

    for i in range(n):
        denom = xyz[i, 0] + 15.0 * xyz[i, 1] + 3.0 * xyz[i, 2]
        if abs(denom) < UV_EPSILON:
            uv[i, 0] = np.nan
            uv[i, 1] = np.nan
        else:
            inv_d = 1.0 / denom
            uv[i, 0] = 4.0 * xyz[i, 0] * inv_d
            uv[i, 1] = 6.0 * xyz[i, 1] * inv_d
    return uv


@njit(cache=True)
def _uv_1960_to_xy_kernel(uv: ArrayFloat) -> ArrayFloat:
    """
    Kernel for CIE 1960 (u, v) -> CIE 1931 (x, y).
    Input: (N, 2), Output: (N, 2)
    """
    n = uv.shape[0]
    xy = np.empty_like(uv)

    for i in range(n):
        u = uv[i, 0]
        v = uv[i, 1]

        # Denominator: 2u - 8v + 4
        denom = 2.0 * u - 8.0 * v + 4.0

        if abs(denom) < UV_EPSILON:
            xy[i, 0] = np.nan
            xy[i, 1] = np.nan
        else:
            inv_d = 1.0 / denom
            xy[i, 0] = 3.0 * u * inv_d
            xy[i, 1] = 2.0 * v * inv_d

    return xy


@njit(cache=True)
def _xy_to_uv_1960_kernel(xy: ArrayFloat) -> ArrayFloat:
    """
    Kernel for CIE 1931 (x, y) -> CIE 1960 (u, v).
    Input: (N, 2), Output: (N, 2)
    """
    n = xy.shape[0]
    uv = np.empty_like(xy)

    for i in range(n):
        x = xy[i, 0]
        y = xy[i, 1]

        # Denominator: -2x + 12y + 3
        denom = -2.0 * x + 12.0 * y + 3.0

        if abs(denom) < UV_EPSILON:
            uv[i, 0] = np.nan
            uv[i, 1] = np.nan
        else:
            inv_d = 1.0 / denom
            uv[i, 0] = 4.0 * x * inv_d
            uv[i, 1] = 6.0 * y * inv_d

    return uv


# =============================================================================
# 3. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for chromaticity transformations."""

    @staticmethod
    @handle_shapes(3)
    def xyz_to_uv1960(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ to CIE 1960 chromaticity coordinates (u, v).

        Args:
            xyz_array: Input data, shape (N, 3) or (3,).

        Returns:
            uv coordinates, shape (N, 2) or (2,).
        """
        return _xyz_to_uv_1960_kernel(xyz_array)

    @staticmethod
    @handle_shapes(2)
    def uv1960_to_xy(uv_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIE 1960 (u, v) to CIE 1931 (x, y).

        Args:
            uv_array: Input data, shape (N, 2) or (2,).

        Returns:
            xy coordinates, shape (N, 2) or (2,).
        """
        return _uv_1960_to_xy_kernel(uv_array)

    @staticmethod
    @handle_shapes(2)
    def xy_to_uv1960(xy_array: ArrayFloat) -> ArrayFloat:
        """Converts CIE 1931 (x, y) to CIE 1960 (u, v)."""
        return _xy_to_uv_1960_kernel(xy_array)

    @staticmethod
    @handle_shapes(3)
    def xyz_to_xy(xyz_array: ArrayFloat) -> ArrayFloat:
        """Converts XYZ to CIE 1931 (x, y); black maps to (NaN, NaN)."""
        total = np.sum(xyz_array, axis=-1)
        xy = np.full((xyz_array.shape[0], 2), np.nan, dtype=np.float64)
        mask = np.abs(total) > UV_EPSILON
        xy[mask] = xyz_array[mask, :2] / total[mask, np.newaxis]
        return xy


# =============================================================================
# 4. SPECTRAL PIPELINE
# =============================================================================

@dataclass(slots=True, frozen=True)
class Spectrum:
    """
    Emissive spectral data on an arbitrary, increasing wavelength grid.

    Attributes:
        wavelengths: Wavelengths in nm, shape (W,).
        values: Spectral power, shape (W,) for one source or (N, W) for a batch.
    """
    wavelengths: np.ndarray
    values: np.ndarray

    def __post_init__(self) -> None:
        wl = np.asarray(self.wavelengths, dtype=np.float64)
        vals = np.asarray(self.values, dtype=np.float64)
        if wl.ndim != 1 or wl.size < 2:
            raise ValueError(f"Spectrum needs a 1D grid of at least 2 wavelengths, got {wl.shape}")
        if np.any(np.diff(wl) <= 0.0):
            raise ValueError("Spectrum wavelengths must be strictly increasing")
        if vals.shape[-1] != wl.shape[0]:
            raise ValueError(
                f"Spectrum value length {vals.shape[-1]} != wavelength length {wl.shape[0]}"
            )
        object.__setattr__(self, "wavelengths", wl)
        object.__setattr__(self, "values", vals)

    @property
    def count(self) -> int:
        return 1 if self.values.ndim == 1 else self.values.shape[0]


class SpectralPipeline:
    @staticmethod
    def spectrum_to_xyz(
        spectrum: Spectrum,
        observer: ObserverLike = None,
        kind: InterpolationKind = "linear",
    ) -> ArrayFloat:
        """
        Integrates emissive spectra against an observer's colour matching
        functions.

        The observer's functions are interpolated onto the spectrum's grid and
        each sample is weighted by its local interval (``np.gradient``), so
        non-uniform grids integrate correctly.  The result is relative XYZ;
        only its chromaticity is used by the CCT estimators.

        Args:
            spectrum: Spectral data.
            observer: Observer name or instance (default ``cie1931``).
            kind: Interpolation used to resample the colour matching functions.

        Returns:
            XYZ, shape (N, 3) (always batched).
        """
        obs = get_observer(observer)
        cmfs = obs.cmf_values(spectrum.wavelengths, kind=kind)
        weights = cmfs * np.gradient(spectrum.wavelengths)[:, np.newaxis]
        # (N, W) dot (W, 3) -> (N, 3)
        return np.atleast_2d(np.dot(spectrum.values, weights))
