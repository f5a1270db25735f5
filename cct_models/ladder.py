# -*- coding: utf-8 -*-
"""
Locus: Tracing correlated colour temperature along the Planckian locus
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: ladder.py — Multiplicative temperature scales.

A ladder is the geometric sequence ``cct_min * cct_mul**i`` for
``i in [0, imax)``.  The default ladder is Ohno's 1% table: 303 steps from
1000 K up to 20186.21 K.
"""

import math
from dataclasses import dataclass
from typing import Final, Iterator

import numpy as np

__all__ = ["InvalidRangeError", "CctLadder"]

DEFAULT_CCT_MIN: Final[float] = 1000.0
DEFAULT_CCT_MUL: Final[float] = 1.01
DEFAULT_IMAX: Final[int] = 303


class InvalidRangeError(ValueError):
    """Raised for a ladder that cannot describe an increasing temperature scale."""


@dataclass(frozen=True, slots=True)
class CctLadder:
    """
    Multiplicative, increasing temperature scale.

    Iterating yields exactly ``imax`` temperatures, each obtained from the
    previous one by multiplication.  Every ``iter()`` restarts at ``cct_min``;
    the ladder itself is an immutable, hashable value.

    Examples:
        CctLadder()                          # 1000 K, 1%, 303 steps
        CctLadder.new(1000.0, 32000.0, 1.15) # 25 steps, up to 28625 K
    """
    cct_min: float = DEFAULT_CCT_MIN
    cct_mul: float = DEFAULT_CCT_MUL
    imax: int = DEFAULT_IMAX

    def __post_init__(self) -> None:
        if not self.cct_min > 0.0:
            raise InvalidRangeError(f"cct_min must be > 0 K, got {self.cct_min}")
        if not self.cct_mul > 1.0:
            raise InvalidRangeError(f"cct_mul must be > 1.0, got {self.cct_mul}")
        if self.imax < 0:
            raise InvalidRangeError(f"imax must be >= 0, got {self.imax}")

    @classmethod
    def new(cls, start: float, end: float, mul: float) -> "CctLadder":
        """
        Ladder from ``start`` reaching up to about ``end`` in steps of ``mul``.

        ``imax = ceil(log(end / start) / log(mul))``.

        Raises:
            InvalidRangeError: If ``start <= 0``, ``end < start`` or ``mul <= 1``.
        """
        if not start > 0.0 or not end >= start or not mul > 1.0:
            raise InvalidRangeError(
                f"Invalid ladder range: start={start}, end={end}, mul={mul}; "
                "expected 0 < start <= end and mul > 1.0"
            )
        imax = math.ceil(math.log10(end / start) / math.log10(mul))
        return cls(float(start), float(mul), int(imax))

    def cct(self, i: int) -> float:
        """Temperature of step ``i``; raises ``IndexError`` outside ``[0, imax)``."""
        if 0 <= i < self.imax:
            return self.cct_min * self.cct_mul**i
        raise IndexError(f"Ladder index {i} out of range (imax: {self.imax})")

    def __len__(self) -> int:
        return self.imax

    def __iter__(self) -> Iterator[float]:
        t = self.cct_min
        for _ in range(self.imax):
            yield t
            t *= self.cct_mul

    def temperatures(self) -> np.ndarray:
        """All ladder temperatures as a float64 array."""
        return np.fromiter(self, dtype=np.float64, count=self.imax)
