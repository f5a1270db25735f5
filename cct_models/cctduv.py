# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cctduv.py — Ordered (CCT, Duv) result collection.
"""

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

__all__ = ["CctDuv"]


class CctDuv:
    """
    Correlated colour temperatures (K) and distances to the Planckian locus.

    Stored as an immutable (N, 2) float64 array, one ``(T, Duv)`` row per
    sample, in insertion order.  Duv is positive above the locus (toward
    green) and negative below (toward magenta).  NaN marks an undefined value.

    Examples:
        tds = CctDuv([[6500.0, 0.01], [3000.0, -0.01]])
        for t, duv in tds:
            ...
    """

    __slots__ = ("_data",)

    def __init__(self, pairs: Union["CctDuv", np.ndarray, Sequence[Sequence[float]]]) -> None:
        if isinstance(pairs, CctDuv):
            data = pairs.values
        else:
            data = np.array(pairs, dtype=np.float64)
            if data.size == 0:
                data = np.empty((0, 2), dtype=np.float64)
            data = np.atleast_2d(data)
            if data.ndim != 2 or data.shape[1] != 2:
                raise ValueError(f"CctDuv expects (T, Duv) pairs, got shape {data.shape}")
            data.setflags(write=False)
        self._data: np.ndarray = data

    @property
    def values(self) -> np.ndarray:
        """The (N, 2) array of (T, Duv) rows (read-only)."""
        return self._data

    @property
    def cct(self) -> np.ndarray:
        return self._data[:, 0]

    @property
    def duv(self) -> np.ndarray:
        return self._data[:, 1]

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for t, d in self._data:
            yield float(t), float(d)

    def __getitem__(self, index: int) -> Tuple[float, float]:
        t, d = self._data[index]
        return float(t), float(d)

    def __repr__(self) -> str:
        rows = ", ".join(f"[{t:.3f}, {d:.6f}]" for t, d in self)
        return f"CctDuv([{rows}])"

    def approx_eq(
        self,
        other: Union["CctDuv", Sequence[Sequence[float]]],
        eps_t: float,
        eps_duv: float,
    ) -> bool:
        """
        Element-wise comparison with separate absolute tolerances for T and Duv.

        NaN only matches NaN.  Collections of different length never match.
        """
        other = other if isinstance(other, CctDuv) else CctDuv(other)
        if len(self) != len(other):
            return False
        ok_t = np.isclose(self.cct, other.cct, rtol=0.0, atol=eps_t, equal_nan=True)
        ok_d = np.isclose(self.duv, other.duv, rtol=0.0, atol=eps_duv, equal_nan=True)
        return bool(np.all(ok_t) and np.all(ok_d))
