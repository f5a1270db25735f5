# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Planckian Radiator
==================
Blackbody spectral exitance (Planck's law) and its chromaticity in the CIE
1960 UCS diagram for a given standard observer.  This is the single source of
locus coordinates for every CCT method in ``cct_models``.

Temperatures are absolute (K), wavelengths in this module's public API are
metres for ``planck`` and nm everywhere an observer grid is involved.

The second radiation constant c2 has changed with the temperature scales in
use over the years.  Historical tables (Robertson 1968, CIE illuminant D)
were computed with older values; ``RadiantConstant`` makes that choice
explicit.  ``EXACT`` is derived from the SI-exact CODATA values of h, c, k.

References:
    - CIE 15:2004 "Colorimetry"
    - Ohno, Y. (2014). "Practical Use and Calculation of CCT and Duv",
      LEUKOS 10:1, 47-55.
"""

from enum import Enum
from typing import Final, Union

import numpy as np
from scipy.constants import c, h, k, pi, sigma

from locus_colorengine import ArrayFloat, ColorSpaceEngine
from locus_observers import ObserverLike, get_observer

__all__ = [
    "C1",
    "C2",
    "K_M",
    "RadiantConstant",
    "planck",
    "planckian_xyz",
    "planckian_uv",
    "planckian_slope",
    "uv_from_cct_duv",
    "duv_from_uv_cct",
]

# --- Radiation Constants ---
# First radiation constant (W m²)
C1: Final[float] = 2.0 * pi * h * c * c
# Second radiation constant (m K)
C2: Final[float] = h * c / k
# Maximum luminous efficacy for photopic vision (lm/W)
K_M: Final[float] = 683.002

# Temperature step used to estimate the locus tangent (Ohno 2014).
TANGENT_DELTA_T: Final[float] = 0.01
# Mired step used for isotemperature slopes.
SLOPE_DELTA_MIRED: Final[float] = 0.01


class RadiantConstant(Enum):
    """Second radiation constant c2 (m K) of successive temperature scales."""
    EXACT = C2
    NBS_1931 = 1.435e-2     # CIE illuminant A
    IPTS_1948 = 1.4380e-2   # CIE illuminant D series, Robertson (1968)
    ITS_1990 = 1.4388e-2


RadiantConstantLike = Union[RadiantConstant, float]


def _c2_value(radiant_constant: RadiantConstantLike) -> float:
    if isinstance(radiant_constant, RadiantConstant):
        return radiant_constant.value
    value = float(radiant_constant)
    if value <= 0.0:
        raise ValueError(f"Second radiation constant must be positive, got {value}")
    return value


def _as_temperatures(temperatures: ArrayFloat) -> ArrayFloat:
    t = np.atleast_1d(np.asarray(temperatures, dtype=np.float64))
    if t.ndim != 1:
        raise ValueError(f"Temperatures must be a scalar or 1D, got shape {t.shape}")
    if np.any(t <= 0.0):
        raise ValueError(f"Absolute temperatures must be > 0 K, got min {np.min(t)}")
    return t


def planck(
    wavelength: ArrayFloat,
    temperature: ArrayFloat,
    power: float = 1.0,
    c2: RadiantConstantLike = RadiantConstant.EXACT,
) -> ArrayFloat:
    """
    Spectral radiant exitance of a blackbody (W m⁻² m⁻¹).

    The spectrum is scaled so that, integrated over all wavelengths, it yields
    a radiant exitance of ``power`` (W m⁻²) instead of σT⁴.

    Args:
        wavelength: Wavelength(s) in metres; broadcast against ``temperature``.
        temperature: Absolute temperature(s) in K.
        power: Radiant exitance scale (W m⁻²).
        c2: Second radiation constant.

    Returns:
        Spectral exitance with the broadcast shape of the inputs.
    """
    wl = np.asarray(wavelength, dtype=np.float64)
    t = np.asarray(temperature, dtype=np.float64)
    return power / (sigma * t**4) * C1 / wl**5 / np.expm1(_c2_value(c2) / (wl * t))


def planckian_xyz(
    temperatures: ArrayFloat,
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    power: float = 1.0,
) -> ArrayFloat:
    """
    Tristimulus values of blackbody radiators on the observer's own grid.

    Returns:
        XYZ, shape (N, 3), with Y in lm m⁻².
    """
    obs = get_observer(observer)
    t = _as_temperatures(temperatures)
    wl = obs.cmf_domain() * 1e-9
    # (N, W) spectral matrix against (W, 3) colour matching functions
    spectral = planck(wl[np.newaxis, :], t[:, np.newaxis], power, radiant_constant)
    return K_M * np.dot(spectral, obs.cmf_values()) * (obs.wl_step * 1e-9)


def planckian_uv(
    temperatures: ArrayFloat,
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    power: float = 1.0,
) -> ArrayFloat:
    """
    CIE 1960 UCS chromaticity of blackbody radiators.

    Args:
        temperatures: Absolute temperatures (K), scalar or 1D.
        observer: Observer name or instance.
        radiant_constant: Second radiation constant.
        power: Radiant exitance (irrelevant to chromaticity).

    Returns:
        Array of shape (N, 3) holding (u, v, Y) per temperature, in input order.
    """
    xyz = planckian_xyz(temperatures, observer, radiant_constant, power)
    uv = ColorSpaceEngine.xyz_to_uv1960(xyz)
    return np.column_stack((uv, xyz[:, 1]))


def planckian_slope(
    temperatures: ArrayFloat,
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    delta_mired: float = SLOPE_DELTA_MIRED,
) -> ArrayFloat:
    """
    Slope ``-du/dv`` of the isotemperature line at each temperature.

    The isotemperature line is the normal to the locus; its slope follows from
    the locus tangent, estimated with a central difference of ``delta_mired``
    on the reciprocal temperature scale.
    """
    t = _as_temperatures(temperatures)
    mired = 1e6 / t
    if np.any(mired <= delta_mired):
        raise ValueError(f"Mired step {delta_mired} too large for temperatures up to {np.max(t)} K")
    lo = planckian_uv(1e6 / (mired - delta_mired), observer, radiant_constant)
    hi = planckian_uv(1e6 / (mired + delta_mired), observer, radiant_constant)
    du = hi[:, 0] - lo[:, 0]
    dv = hi[:, 1] - lo[:, 1]
    return -du / dv


def uv_from_cct_duv(
    cct: ArrayFloat,
    duv: ArrayFloat,
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    delta_t: float = TANGENT_DELTA_T,
) -> ArrayFloat:
    """
    Synthetic chromaticity at signed distance ``duv`` from the locus point of
    temperature ``cct``, along the locus normal (Ohno 2014).

    The tangent is estimated from the locus points at ``cct`` and
    ``cct + delta_t``.  Positive ``duv`` lies above the locus.

    Returns:
        (u, v), shape (N, 2).
    """
    t = _as_temperatures(cct)
    d = np.broadcast_to(np.asarray(duv, dtype=np.float64), t.shape)

    uv0 = planckian_uv(t, observer, radiant_constant)
    uv1 = planckian_uv(t + delta_t, observer, radiant_constant)
    du = uv0[:, 0] - uv1[:, 0]
    dv = uv0[:, 1] - uv1[:, 1]
    hyp = np.hypot(du, dv)

    return np.column_stack((uv0[:, 0] - dv * d / hyp, uv0[:, 1] + du * d / hyp))


def duv_from_uv_cct(
    uv: ArrayFloat,
    cct: ArrayFloat,
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    delta_t: float = TANGENT_DELTA_T,
) -> ArrayFloat:
    """
    Signed distance of chromaticities from the locus points at ``cct``,
    measured along the locus normal.  Inverse of ``uv_from_cct_duv``.

    NaN temperatures give NaN distances.

    Returns:
        Duv, shape (N,).
    """
    uv = np.atleast_2d(np.asarray(uv, dtype=np.float64))
    t = np.atleast_1d(np.asarray(cct, dtype=np.float64))
    duv = np.full(t.shape, np.nan, dtype=np.float64)
    ok = np.isfinite(t)
    if not np.any(ok):
        return duv

    uv0 = planckian_uv(t[ok], observer, radiant_constant)
    uv1 = planckian_uv(t[ok] + delta_t, observer, radiant_constant)
    du = uv0[:, 0] - uv1[:, 0]
    dv = uv0[:, 1] - uv1[:, 1]
    hyp = np.hypot(du, dv)

    duv[ok] = ((uv[ok, 0] - uv0[:, 0]) * -dv + (uv[ok, 1] - uv0[:, 1]) * du) / hyp
    return duv
