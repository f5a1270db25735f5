# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: table.py — Tabulated Planckian locus and Ohno's interpolation.

A ``PlanckianTable`` samples the locus at every temperature of a
``CctLadder``.  The nearest table point to a query chromaticity, together
with its two neighbours, is then refined by one of two interpolations
(Ohno 2014):

* triangular, when the query lies very close to the locus, solving the
  triangle spanned by the two neighbours and the query;
* parabolic otherwise, fitting a quadratic through the three
  (T, distance) pairs and taking its vertex.

The query must be bracketed: if the nearest point is the first or the last
table entry the result is (NaN, NaN).

References:
    - Ohno, Y. (2014). "Practical Use and Calculation of CCT and Duv",
      LEUKOS 10:1, 47-55.
"""

import functools
from typing import Final, Optional, Tuple

import numpy as np
import structlog
from numba import njit

from locus_colorengine import ArrayFloat
from locus_observers import ObserverLike, StandardObserver, get_observer
from locus_planckian import RadiantConstant, RadiantConstantLike, planckian_uv

from .ladder import CctLadder

__all__ = [
    "TRIANGULAR_LIMIT",
    "PlanckianTable",
]

logger = structlog.get_logger(__name__)

# Distance to the nearest table point below which triangular interpolation is used.
TRIANGULAR_LIMIT: Final[float] = 0.002


# =============================================================================
# 1. LOW-LEVEL KERNELS (Numba)
# =============================================================================

@njit(cache=True)
def _sq_distances_kernel(u: float, v: float, uv: ArrayFloat) -> ArrayFloat:
    n = uv.shape[0]
    d2 = np.empty(n, dtype=np.float64)
    for i in range(n):
        du = u - uv[i, 0]
        dv = v - uv[i, 1]
        d2[i] = du * du + dv * dv
    return d2


@njit(cache=True)
def _nearest_index_kernel(d2: ArrayFloat) -> int:
    """Index of the smallest value; the first one wins on ties. -1 if all NaN."""
    imin = -1
    best = np.inf
    for i in range(d2.shape[0]):
        if d2[i] < best:
            best = d2[i]
            imin = i
    return imin


@njit(cache=True)
def _triangular_kernel(
    tp: float, tn: float, dp2: float, dn2: float, l2: float
) -> Tuple[float, float]:
    """
    Triangular solution from the neighbours ``p`` (i-1) and ``n`` (i+1).

    Args:
        tp, tn: Neighbour temperatures.
        dp2, dn2: Squared query distances to the neighbours.
        l2: Squared distance between the two neighbours.

    Returns:
        (T, |Duv|)
    """
    l = np.sqrt(l2)
    x = (dp2 - dn2 + l2) / (2.0 * l)
    t = tp + (tn - tp) * x / l
    # Rounding can push dp2 - x^2 slightly below zero for on-locus queries.
    h2 = dp2 - x * x
    if h2 < 0.0:
        h2 = 0.0
    return t, np.sqrt(h2)


@njit(cache=True)
def _parabolic_kernel(
    tp: float, t: float, tn: float, dp: float, d: float, dn: float
) -> Tuple[float, float]:
    """
    Vertex of the parabola through (tp, dp), (t, d), (tn, dn).

    Returns:
        (T, |Duv|)
    """
    x = (tn - t) * (tp - tn) * (t - tp)
    a = (tp * (dn - d) + t * (dp - dn) + tn * (d - dp)) / x
    b = -(tp * tp * (dn - d) + t * t * (dp - dn) + tn * tn * (d - dp)) / x
    c = -(dp * (tn - t) * t * tn + d * (tp - tn) * tp * tn + dn * (t - tp) * tp * t) / x
    tv = -b / (2.0 * a)
    return tv, a * tv * tv + b * tv + c


@njit(cache=True)
def _ohno_kernel(
    u: float,
    v: float,
    temperatures: ArrayFloat,
    uv: ArrayFloat,
    triangular_limit: float,
) -> Tuple[float, float]:
    if np.isnan(u) or np.isnan(v):
        return np.nan, np.nan

    d2 = _sq_distances_kernel(u, v, uv)
    i = _nearest_index_kernel(d2)
    if i < 1 or i > temperatures.shape[0] - 2:
        return np.nan, np.nan

    if np.sqrt(d2[i]) < triangular_limit:
        du = uv[i + 1, 0] - uv[i - 1, 0]
        dv = uv[i + 1, 1] - uv[i - 1, 1]
        t, d = _triangular_kernel(
            temperatures[i - 1], temperatures[i + 1], d2[i - 1], d2[i + 1], du * du + dv * dv
        )
    else:
        t, d = _parabolic_kernel(
            temperatures[i - 1], temperatures[i], temperatures[i + 1],
            np.sqrt(d2[i - 1]), np.sqrt(d2[i]), np.sqrt(d2[i + 1]),
        )

    if v < uv[i, 1]:
        d = -d
    return t, d


@njit(cache=True)
def _ohno_batch_kernel(
    uv_query: ArrayFloat,
    temperatures: ArrayFloat,
    uv: ArrayFloat,
    triangular_limit: float,
) -> ArrayFloat:
    """
    Kernel for a batch of queries.
    Input: (N, 2), Output: (N, 2) of (T, Duv)
    """
    n = uv_query.shape[0]
    out = np.empty((n, 2), dtype=np.float64)
    for k in range(n):
        t, d = _ohno_kernel(uv_query[k, 0], uv_query[k, 1], temperatures, uv, triangular_limit)
        out[k, 0] = t
        out[k, 1] = d
    return out


# =============================================================================
# 2. PLANCKIAN TABLE
# =============================================================================

class PlanckianTable:
    """
    Locus chromaticities sampled at the temperatures of a ladder.

    Attributes are exposed read-only; a table never changes after
    construction and can be shared freely.

    Examples:
        table = PlanckianTable()                       # 1% ladder, CIE 1931
        table = PlanckianTable(CctLadder.new(1000, 32000, 1.15), "cie1964_classic")
        t, duv = table.ohno2014(0.1978, 0.3122)
    """

    __slots__ = ("_ladder", "_observer", "_radiant_constant", "_temperatures", "_uv", "_luminance")

    def __init__(
        self,
        ladder: Optional[CctLadder] = None,
        observer: ObserverLike = None,
        radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    ) -> None:
        self._ladder = ladder if ladder is not None else CctLadder()
        if len(self._ladder) == 0:
            raise ValueError(f"PlanckianTable needs a non-empty ladder, got {self._ladder}")
        self._observer = get_observer(observer)
        self._radiant_constant = radiant_constant

        self._temperatures = self._ladder.temperatures()
        uvy = planckian_uv(self._temperatures, self._observer, radiant_constant)
        self._uv = np.ascontiguousarray(uvy[:, :2])
        self._luminance = np.ascontiguousarray(uvy[:, 2])
        for arr in (self._temperatures, self._uv, self._luminance):
            arr.setflags(write=False)

    @classmethod
    def cached(
        cls,
        ladder: Optional[CctLadder] = None,
        observer: ObserverLike = None,
        radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
    ) -> "PlanckianTable":
        """Shared table instance, built once per (ladder, observer, radiation constant)."""
        return _cached_table(
            ladder if ladder is not None else CctLadder(),
            get_observer(observer),
            radiant_constant,
        )

    # --- Accessors ---

    @property
    def ladder(self) -> CctLadder:
        return self._ladder

    @property
    def observer(self) -> StandardObserver:
        return self._observer

    @property
    def temperatures(self) -> ArrayFloat:
        return self._temperatures

    @property
    def uv(self) -> ArrayFloat:
        """(N, 2) locus chromaticities, parallel to ``temperatures``."""
        return self._uv

    @property
    def luminance(self) -> ArrayFloat:
        """Y of a unit-exitance blackbody at each temperature."""
        return self._luminance

    def __len__(self) -> int:
        return self._temperatures.shape[0]

    def __repr__(self) -> str:
        return (
            f"PlanckianTable(ladder={self._ladder!r}, observer={self._observer.name!r}, "
            f"radiant_constant={self._radiant_constant!r})"
        )

    # --- Queries ---

    def sq_distances(self, u: float, v: float) -> ArrayFloat:
        """Squared distance from (u, v) to every table point."""
        return _sq_distances_kernel(float(u), float(v), self._uv)

    def nearest_index(self, u: float, v: float) -> int:
        """Index of the table point closest to (u, v); the first one wins on ties."""
        i = int(_nearest_index_kernel(self.sq_distances(u, v)))
        if i < 0:
            raise ValueError(f"No nearest table point for (u, v) = ({u}, {v})")
        return i

    def is_interior(self, i: int) -> bool:
        """True if ``i`` has a neighbour on both sides."""
        return 1 <= i <= len(self) - 2

    def ladder_around(self, i: int, mul: float) -> CctLadder:
        """
        Finer ladder spanning the neighbours of entry ``i``.

        Raises:
            IndexError: If ``i`` is the first or last entry.
        """
        self._require_interior(i)
        return CctLadder.new(self._temperatures[i - 1], self._temperatures[i + 1], mul)

    def zoom(self, u: float, v: float, mul: float) -> CctLadder:
        """
        Ladder around the table point closest to (u, v), stepping by ``mul``.

        Raises:
            IndexError: If the closest point is the first or last entry.
        """
        return self.ladder_around(self.nearest_index(u, v), mul)

    def triangular(self, u: float, v: float, i: int) -> Tuple[float, float]:
        """Triangular (T, |Duv|) around entry ``i`` (unsigned)."""
        self._require_interior(i)
        d2 = self.sq_distances(u, v)
        uv = self.uv
        l2 = float(np.sum((uv[i + 1] - uv[i - 1]) ** 2))
        t, d = _triangular_kernel(
            self._temperatures[i - 1], self._temperatures[i + 1], d2[i - 1], d2[i + 1], l2
        )
        return float(t), float(d)

    def parabolic(self, u: float, v: float, i: int) -> Tuple[float, float]:
        """Parabolic (T, |Duv|) around entry ``i`` (unsigned)."""
        self._require_interior(i)
        d = np.sqrt(self.sq_distances(u, v))
        t = self._temperatures
        tv, dv = _parabolic_kernel(t[i - 1], t[i], t[i + 1], d[i - 1], d[i], d[i + 1])
        return float(tv), float(dv)

    def ohno2014(
        self, u: float, v: float, triangular_limit: float = TRIANGULAR_LIMIT
    ) -> Tuple[float, float]:
        """
        Signed (T, Duv) for one chromaticity, without any temperature
        correction.  (NaN, NaN) when the query is not bracketed by the table.
        """
        t, d = _ohno_kernel(
            float(u), float(v), self._temperatures, self._uv,
            triangular_limit,
        )
        return float(t), float(d)

    def ohno2014_batch(
        self, uv: ArrayFloat, triangular_limit: float = TRIANGULAR_LIMIT
    ) -> ArrayFloat:
        """Vectorised ``ohno2014``: (N, 2) chromaticities to (N, 2) (T, Duv)."""
        uv_query = np.ascontiguousarray(np.atleast_2d(np.asarray(uv, dtype=np.float64)))
        if uv_query.ndim != 2 or uv_query.shape[1] != 2:
            raise ValueError(f"Expected shape (N, 2) or (2,), got {np.shape(uv)}")
        return _ohno_batch_kernel(
            uv_query, self._temperatures, self._uv, triangular_limit
        )

    def _require_interior(self, i: int) -> None:
        if not self.is_interior(i):
            raise IndexError(
                f"Table index {i} has no neighbours on both sides (table size: {len(self)})"
            )


@functools.lru_cache(maxsize=32)
def _cached_table(
    ladder: CctLadder,
    observer: StandardObserver,
    radiant_constant: RadiantConstantLike,
) -> PlanckianTable:
    table = PlanckianTable(ladder, observer, radiant_constant)
    logger.debug(
        "planckian_table_built",
        observer=observer.name,
        cct_min=ladder.cct_min,
        cct_mul=ladder.cct_mul,
        imax=ladder.imax,
    )
    return table
