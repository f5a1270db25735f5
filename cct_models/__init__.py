# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Correlated colour temperature (CCT) and Duv estimators.

    from cct_models import CctDuv, Ohno2014CascadeEstimator

    est = Ohno2014CascadeEstimator()
    est.estimate(CctDuv([[6500.0, 0.01]]))
"""

from .__about__ import __version__
from .cctduv import CctDuv
from .estimator import DUV_LIMIT, CctEstimator, to_uv
from .ladder import CctLadder, InvalidRangeError
from .ohno import (
    CASCADE_ZOOM_MULS,
    OHNO_CORR_1PCT_STEP,
    Ohno2014CascadeEstimator,
    Ohno2014Estimator,
)
from .robertson import ROBERTSON_MIREDS, RobertsonEstimator, robertson_lines
from .table import TRIANGULAR_LIMIT, PlanckianTable

__all__ = [
    "__version__",
    "CctDuv",
    "CctLadder",
    "InvalidRangeError",
    "PlanckianTable",
    "CctEstimator",
    "RobertsonEstimator",
    "Ohno2014Estimator",
    "Ohno2014CascadeEstimator",
    "to_uv",
    "robertson_lines",
    "DUV_LIMIT",
    "TRIANGULAR_LIMIT",
    "OHNO_CORR_1PCT_STEP",
    "CASCADE_ZOOM_MULS",
    "ROBERTSON_MIREDS",
]
