# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: robertson.py — Robertson's isotemperature-line method.

Thirty-one isotemperature lines, normals to the locus at fixed reciprocal
temperatures, partition the UCS diagram.  A query is located between the two
lines on either side of it by the sign of its distance to each line; the
temperature follows from linear interpolation of those distances on the mired
scale.

Robertson's published table (CIE 1931 observer, 5 nm, c2 of 1948) is
reproduced by ``robertson_lines("cie1931_classic", RadiantConstant.IPTS_1948)``;
by default the lines are computed for the estimator's own observer so that
they are consistent with the locus used for Duv.

Valid from 1 to 600 mired (about 1667 K up to 10^6 K).  A query is only
rejected when no pair of adjacent lines brackets it, so 1667 K itself
(599.88 mired, between the 575 and 600 mired lines) still gets a finite
temperature; 1666 K and below give NaN.

Duv is not the Euclidean distance to the locus point at the estimated
temperature.  It is the signed distance along the locus normal at that
point (``duv_from_uv_cct``), so the small temperature error of the
interpolation does not leak into Duv as a tangential offset.

References:
    - Robertson, A. R. (1968). "Computation of Correlated Color Temperature
      and Distribution Temperature", JOSA 58:11, 1528-1535.
"""

import functools
from typing import Final

import numpy as np
import structlog
from numba import njit

from locus_colorengine import ArrayFloat
from locus_observers import ObserverLike, StandardObserver, get_observer
from locus_planckian import (
    RadiantConstant,
    RadiantConstantLike,
    duv_from_uv_cct,
    planckian_slope,
    planckian_uv,
)

from .estimator import CctEstimator

__all__ = ["ROBERTSON_MIREDS", "robertson_lines", "RobertsonEstimator"]

logger = structlog.get_logger(__name__)

# Reciprocal temperatures (10^6 / K) of Robertson's isotemperature lines.
ROBERTSON_MIREDS: Final[tuple] = (
    (1.0,)
    + tuple(float(m) for m in range(10, 101, 10))
    + tuple(float(m) for m in range(125, 601, 25))
)


def robertson_lines(
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
) -> ArrayFloat:
    """
    Isotemperature line table.

    Returns:
        Read-only array of shape (31, 4): mired, u, v and slope ``-du/dv``
        per line, in increasing mired order.
    """
    return _robertson_lines(get_observer(observer), radiant_constant)


@functools.lru_cache(maxsize=8)
def _robertson_lines(
    observer: StandardObserver, radiant_constant: RadiantConstantLike
) -> ArrayFloat:
    mireds = np.array(ROBERTSON_MIREDS, dtype=np.float64)
    temperatures = 1e6 / mireds
    uv = planckian_uv(temperatures, observer, radiant_constant)
    slopes = planckian_slope(temperatures, observer, radiant_constant)

    lines = np.ascontiguousarray(np.column_stack((mireds, uv[:, 0], uv[:, 1], slopes)))
    lines.setflags(write=False)
    logger.debug("robertson_table_built", observer=observer.name, lines=lines.shape[0])
    return lines


@njit(cache=True)
def _robertson_kernel(uv: ArrayFloat, lines: ArrayFloat) -> ArrayFloat:
    """
    Kernel for CIE 1960 (u, v) -> CCT by isotemperature-line bracketing.
    Input: (N, 2), Output: (N,) of T (NaN when not bracketed)
    """
    n = uv.shape[0]
    m = lines.shape[0]
    out = np.full(n, np.nan, dtype=np.float64)

    for k in range(n):
        u = uv[k, 0]
        v = uv[k, 1]
        if np.isnan(u) or np.isnan(v):
            continue

        d_prev = 0.0
        for i in range(m):
            slope = lines[i, 3]
            d = ((v - lines[i, 2]) - slope * (u - lines[i, 1])) / np.sqrt(1.0 + slope * slope)
            if i > 0 and d_prev * d <= 0.0:
                denom = d_prev - d
                p = d_prev / denom if denom != 0.0 else 0.0
                mired = lines[i - 1, 0] + p * (lines[i, 0] - lines[i - 1, 0])
                out[k] = 1e6 / mired
                break
            d_prev = d

    return out


class RobertsonEstimator(CctEstimator):
    """
    CCT by Robertson's method, Duv from the locus at that temperature.

    Parameters:
        duv_limit: Largest |Duv| reported (default 0.05).

    Examples:
        RobertsonEstimator().estimate(CctDuv([[6500.0, 0.0]]))
        RobertsonEstimator(observer="cie1931_classic",
                           radiant_constant=RadiantConstant.IPTS_1948)
    """

    def _build_tables(self) -> ArrayFloat:
        return robertson_lines(self.observer, self.radiant_constant)

    @property
    def lines(self) -> ArrayFloat:
        return self._tables

    def estimate_uv(self, uv: ArrayFloat) -> ArrayFloat:
        uv = np.ascontiguousarray(uv, dtype=np.float64)
        t = _robertson_kernel(uv, self.lines)
        duv = duv_from_uv_cct(uv, t, self.observer, self.radiant_constant)
        return np.column_stack((t, duv))
