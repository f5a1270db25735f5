# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: estimator.py — Base class for CCT / Duv estimators.

Estimators share:
  - Hybrid parameter API: dict-based and keyword parameters, with
    self.params as the single source of truth
  - Centralised cache invalidation through set_param()
  - One input normalisation step (``to_uv``) for every supported source
  - Common post-processing: the Duv validity limit and NaN propagation
"""

from typing import Any, Dict, Final, List, Optional, Set, Union

import numpy as np
import structlog

from locus_colorengine import ArrayFloat, ColorSpaceEngine, SpectralPipeline, Spectrum
from locus_observers import ObserverLike, StandardObserver, get_observer
from locus_planckian import RadiantConstant, RadiantConstantLike, uv_from_cct_duv

from .cctduv import CctDuv

__all__ = ["DUV_LIMIT", "CctSource", "to_uv", "CctEstimator"]

logger = structlog.get_logger(__name__)

# Largest |Duv| for which CCT is considered meaningful (CIE 015).
DUV_LIMIT: Final[float] = 0.05

CctSource = Union[CctDuv, Spectrum, np.ndarray]


def to_uv(
    source: Any,
    observer: ObserverLike = None,
    radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
) -> ArrayFloat:
    """
    Normalise an estimator input to CIE 1960 chromaticities.

    Accepted sources:
        - ``CctDuv``: synthetic points at the given (T, Duv)
        - ``Spectrum``: integrated against the observer
        - array-like with last dimension 3: XYZ tristimulus values
        - array-like with last dimension 2: (u, v) chromaticities

    Returns:
        (N, 2) float64 array, one row per input point, in input order.

    Raises:
        TypeError: For any other kind of source.
    """
    if isinstance(source, CctDuv):
        if len(source) == 0:
            return np.empty((0, 2), dtype=np.float64)
        return uv_from_cct_duv(source.cct, source.duv, observer, radiant_constant)

    if isinstance(source, Spectrum):
        return ColorSpaceEngine.xyz_to_uv1960(SpectralPipeline.spectrum_to_xyz(source, observer))

    if isinstance(source, (np.ndarray, list, tuple)):
        arr = np.asarray(source, dtype=np.float64)
        if arr.ndim in (1, 2) and arr.shape[-1] == 3:
            return np.atleast_2d(ColorSpaceEngine.xyz_to_uv1960(arr))
        if arr.ndim in (1, 2) and arr.shape[-1] == 2:
            return np.atleast_2d(arr)
        raise TypeError(
            f"Array sources must have shape (N, 3) for XYZ or (N, 2) for uv, got {arr.shape}"
        )

    raise TypeError(f"Unsupported source type for CCT estimation: {type(source).__name__}")


class CctEstimator:
    """
    Base class for correlated colour temperature estimators.

    Subclasses declare their parameters in ``_setup_params()`` (via
    ``_validate_params``) and implement ``estimate_uv()``, which maps an
    (N, 2) array of chromaticities to an (N, 2) array of raw (T, Duv).
    Derived tables live in ``self._tables`` and are rebuilt whenever a
    parameter changes.

    Examples:
        # Dict-based (good for config files)
        Ohno2014Estimator(params={'duv_limit': 0.02})

        # Keyword-based
        Ohno2014Estimator(duv_limit=0.02, observer="cie1964_classic")
    """

    def __init__(
        self,
        params: Optional[Dict[str, Any]] = None,
        observer: ObserverLike = None,
        radiant_constant: RadiantConstantLike = RadiantConstant.EXACT,
        **kwargs: Any,
    ):
        initial_params = params or {}
        merged = {**initial_params, **kwargs}
        self.params: Dict[str, Any] = {}
        for k, v in merged.items():
            if isinstance(v, (int, float, np.number)):
                self.params[k] = float(v)
            else:
                self.params[k] = v

        self.observer: StandardObserver = get_observer(observer)
        self.radiant_constant: RadiantConstantLike = radiant_constant
        self._tables: Optional[Any] = None
        self._known: Set[str] = set()

        self._setup_params()
        self._check_known_params()
        self._tables = self._build_tables()

    # --- Parameter handling ---

    def _setup_params(self) -> None:
        self._validate_params(optional={"duv_limit": DUV_LIMIT})

    def _validate_params(
        self,
        required: Optional[List[str]] = None,
        optional: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Validate and set defaults for parameters.

        Args:
            required: List of required parameter names.
            optional: Dict of {param_name: default_value} for optional params.

        Raises:
            ValueError: If a required parameter is missing.
        """
        if required:
            for param in required:
                if param not in self.params:
                    raise ValueError(
                        f"Parameter '{param}' is required for {self.__class__.__name__}."
                    )

        if optional:
            for param, default in optional.items():
                self.params.setdefault(param, default)
                self._known.add(param)

    def _check_known_params(self) -> None:
        unknown = sorted(set(self.params) - self._known)
        if unknown:
            raise ValueError(
                f"Unknown parameter(s) {unknown} for {self.__class__.__name__}; "
                f"expected one of {sorted(self._known)}"
            )
        if not self.params["duv_limit"] > 0.0:
            raise ValueError(f"duv_limit must be > 0, got {self.params['duv_limit']}")

    def get_params(self) -> Dict[str, Any]:
        """Return a copy of estimator parameters."""
        return self.params.copy()

    def set_param(self, param_name: str, value: Union[float, int]) -> None:
        """
        Set an estimator parameter by name with cache invalidation.

        The previous value and tables are kept when the new value is
        rejected or its tables cannot be built.

        Raises:
            ValueError: If the parameter is unknown or its value invalid.
            TypeError: If value is not numeric.
        """
        if param_name not in self._known:
            raise ValueError(
                f"Unknown parameter '{param_name}' for {self.__class__.__name__}"
            )
        if not isinstance(value, (int, float, np.number)):
            raise TypeError(
                f"Parameter '{param_name}' must be numeric, got {type(value).__name__}"
            )

        previous = self.params[param_name]
        self.params[param_name] = float(value)
        try:
            self._check_known_params()
            # Rebuild derived tables when parameters change
            tables = self._build_tables()
        except Exception:
            self.params[param_name] = previous
            raise
        self._tables = tables

    def _build_tables(self) -> Optional[Any]:
        """Override in subclass: derived tables for the current parameters."""
        return None

    # --- Estimation ---

    def estimate_uv(self, uv: ArrayFloat) -> ArrayFloat:
        """Override in subclass: (N, 2) chromaticities -> (N, 2) raw (T, Duv)."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement estimate_uv()"
        )

    def estimate(self, source: CctSource) -> CctDuv:
        """
        Correlated colour temperature and Duv for every point of ``source``.

        Query-time failures never raise: a point outside the method's range,
        or too far from the locus, gets NaN in its row.

        Args:
            source: ``CctDuv``, ``Spectrum``, XYZ (N, 3) or uv (N, 2).

        Returns:
            ``CctDuv`` with one row per input point, in input order.
        """
        uv = to_uv(source, self.observer, self.radiant_constant)
        if uv.shape[0] == 0:
            return CctDuv(np.empty((0, 2), dtype=np.float64))

        raw = np.array(self.estimate_uv(uv), dtype=np.float64)
        t = raw[:, 0]
        d = raw[:, 1]
        d[np.isnan(t) | ~(np.abs(d) <= self.params["duv_limit"])] = np.nan

        logger.debug(
            "cct_estimated",
            method=self.__class__.__name__,
            observer=self.observer.name,
            count=int(raw.shape[0]),
            nan_cct=int(np.count_nonzero(np.isnan(t))),
            nan_duv=int(np.count_nonzero(np.isnan(d))),
        )
        return CctDuv(raw)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(observer={self.observer.name!r}, "
            f"params={self.params!r})"
        )
