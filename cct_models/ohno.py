# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: ohno.py — Ohno (2014) CCT estimators.

Two variants of the combined triangular/parabolic method:

* ``Ohno2014Estimator``: a single 1% table from 1000 K to about 20186 K.
  The parabolic solution is biased by the table spacing; Ohno's
  correction factor 0.99991 removes most of it for a 1% step.
* ``Ohno2014CascadeEstimator``: a coarse 15% table from 1000 K up to
  32000 K, refined three times around the nearest point (1.5%, 0.15%,
  0.015%).  The final spacing is fine enough that no correction is applied.

References:
    - Ohno, Y. (2014). "Practical Use and Calculation of CCT and Duv",
      LEUKOS 10:1, 47-55.
"""

import math
from typing import Final, Tuple

import numpy as np

from locus_colorengine import ArrayFloat

from .estimator import CctEstimator
from .ladder import DEFAULT_CCT_MIN, DEFAULT_CCT_MUL, DEFAULT_IMAX, CctLadder
from .table import TRIANGULAR_LIMIT, PlanckianTable

__all__ = [
    "OHNO_CORR_1PCT_STEP",
    "CASCADE_COARSE",
    "CASCADE_ZOOM_MULS",
    "Ohno2014Estimator",
    "Ohno2014CascadeEstimator",
]

# Temperature correction for the parabolic solution on a 1% ladder.
OHNO_CORR_1PCT_STEP: Final[float] = 0.99991

# Coarse ladder of the cascade: (start, end, multiplier).
CASCADE_COARSE: Final[Tuple[float, float, float]] = (1000.0, 32000.0, 1.15)
# Successive refinement multipliers of the cascade.
CASCADE_ZOOM_MULS: Final[Tuple[float, ...]] = (1.015, 1.0015, 1.00015)


class Ohno2014Estimator(CctEstimator):
    """
    Ohno's method on a single multiplicative table.

    Parameters:
        cct_min, cct_mul, imax: Table ladder (default 1000 K, 1.01, 303).
        correction: Factor applied to every temperature (default 0.99991,
            calibrated for the 1% ladder only).
        triangular_limit: Distance below which the triangular solution is
            used (default 0.002).
        duv_limit: Largest |Duv| reported (default 0.05).

    Temperatures outside the table (below about 1010 K or above about
    20000 K with the default ladder) give (NaN, NaN).
    """

    def _setup_params(self) -> None:
        super()._setup_params()
        self._validate_params(optional={
            "cct_min": DEFAULT_CCT_MIN,
            "cct_mul": DEFAULT_CCT_MUL,
            "imax": float(DEFAULT_IMAX),
            "correction": OHNO_CORR_1PCT_STEP,
            "triangular_limit": TRIANGULAR_LIMIT,
        })

    def _check_known_params(self) -> None:
        super()._check_known_params()
        imax = self.params["imax"]
        if imax != math.floor(imax):
            raise ValueError(f"imax must be an integer, got {imax}")
        if not self.params["correction"] > 0.0:
            raise ValueError(f"correction must be > 0, got {self.params['correction']}")

    @property
    def ladder(self) -> CctLadder:
        return CctLadder(
            self.params["cct_min"], self.params["cct_mul"], int(self.params["imax"])
        )

    def _build_tables(self) -> PlanckianTable:
        return PlanckianTable.cached(self.ladder, self.observer, self.radiant_constant)

    @property
    def table(self) -> PlanckianTable:
        return self._tables

    def estimate_uv(self, uv: ArrayFloat) -> ArrayFloat:
        raw = self.table.ohno2014_batch(uv, self.params["triangular_limit"])
        raw[:, 0] *= self.params["correction"]
        return raw


class Ohno2014CascadeEstimator(CctEstimator):
    """
    Ohno's method with multi-resolution refinement.

    Each query zooms from the shared coarse table into successively finer
    tables spanning the two neighbours of the nearest point; Ohno's
    interpolation is applied on the finest one.  Fine tables are built per
    query and discarded.

    Parameters:
        coarse_min, coarse_max, coarse_mul: Coarse ladder (default 1000 K,
            32000 K, 1.15).
        zoom_muls: Refinement multipliers (default 1.015, 1.0015, 1.00015).
        triangular_limit: Distance below which the triangular solution is
            used (default 0.002).
        duv_limit: Largest |Duv| reported (default 0.05).

    A query whose nearest point lies on the edge of any table in the cascade
    gives (NaN, NaN).
    """

    def _setup_params(self) -> None:
        super()._setup_params()
        start, end, mul = CASCADE_COARSE
        self._validate_params(optional={
            "coarse_min": start,
            "coarse_max": end,
            "coarse_mul": mul,
            "zoom_muls": CASCADE_ZOOM_MULS,
            "triangular_limit": TRIANGULAR_LIMIT,
        })
        self.params["zoom_muls"] = tuple(float(m) for m in self.params["zoom_muls"])

    def _check_known_params(self) -> None:
        super()._check_known_params()
        for mul in self.params["zoom_muls"]:
            if not mul > 1.0:
                raise ValueError(f"Zoom multipliers must be > 1.0, got {self.params['zoom_muls']}")

    @property
    def coarse_ladder(self) -> CctLadder:
        return CctLadder.new(
            self.params["coarse_min"], self.params["coarse_max"], self.params["coarse_mul"]
        )

    def _build_tables(self) -> PlanckianTable:
        return PlanckianTable.cached(self.coarse_ladder, self.observer, self.radiant_constant)

    @property
    def coarse_table(self) -> PlanckianTable:
        return self._tables

    def refine(self, u: float, v: float) -> Tuple[float, float]:
        """(T, Duv) for a single chromaticity; (NaN, NaN) on a table edge."""
        if not (np.isfinite(u) and np.isfinite(v)):
            return np.nan, np.nan

        table = self.coarse_table
        for mul in self.params["zoom_muls"]:
            i = table.nearest_index(u, v)
            if not table.is_interior(i):
                return np.nan, np.nan
            table = PlanckianTable(table.ladder_around(i, mul), self.observer, self.radiant_constant)
        return table.ohno2014(u, v, self.params["triangular_limit"])

    def estimate_uv(self, uv: ArrayFloat) -> ArrayFloat:
        return np.array([self.refine(u, v) for u, v in uv], dtype=np.float64).reshape(-1, 2)
