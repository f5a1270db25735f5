"""Tests for multiplicative temperature ladders."""
import dataclasses

import numpy as np
import pytest

from cct_models import CctLadder, InvalidRangeError


class TestDefaultLadder:
    """Test the default 1% ladder."""

    def test_length(self):
        """Iterating yields exactly imax values."""
        ladder = CctLadder()
        assert len(ladder) == 303
        assert len(list(ladder)) == 303

    def test_first_and_last(self):
        """First step is 1000 K, last is about 20186.21 K."""
        ladder = CctLadder()
        assert ladder.cct(0) == pytest.approx(1000.0, abs=1e-3)
        assert ladder.cct(302) == pytest.approx(20186.21, abs=5e-3)
        assert list(ladder)[-1] == pytest.approx(20186.21, abs=5e-3)

    def test_strictly_increasing(self):
        values = np.array(list(CctLadder()))
        assert np.all(np.diff(values) > 0.0)

    def test_iteration_matches_indexing(self):
        """Successive multiplication agrees with cct(i)."""
        ladder = CctLadder()
        for i, t in enumerate(ladder):
            assert t == pytest.approx(ladder.cct(i), rel=1e-12)

    def test_iteration_restarts(self):
        """Each iteration starts again at cct_min."""
        ladder = CctLadder()
        assert list(ladder) == list(ladder)

    def test_temperatures_array(self):
        ladder = CctLadder()
        np.testing.assert_array_equal(ladder.temperatures(), np.array(list(ladder)))

    def test_value_semantics(self):
        """Ladders are immutable, comparable and hashable."""
        assert CctLadder() == CctLadder(1000.0, 1.01, 303)
        assert hash(CctLadder()) == hash(CctLadder(1000.0, 1.01, 303))
        with pytest.raises(dataclasses.FrozenInstanceError):
            CctLadder().imax = 10


class TestLadderNew:
    """Test ladder construction from a temperature range."""

    @pytest.mark.parametrize(
        "start, end, mul, imax",
        [
            (1000.0, 1000.01, 1.01, 1),
            (1000.0, 20186.22, 1.01, 303),
            (1000.0, 32000.0, 1.15, 25),
        ],
    )
    def test_imax(self, start, end, mul, imax):
        assert CctLadder.new(start, end, mul).imax == imax

    def test_empty_range(self):
        """start == end gives an empty ladder."""
        ladder = CctLadder.new(1000.0, 1000.0, 1.01)
        assert len(ladder) == 0
        assert list(ladder) == []

    @pytest.mark.parametrize(
        "start, end, mul",
        [
            (0.0, 1000.0, 1.01),
            (-5.0, 1000.0, 1.01),
            (2000.0, 1000.0, 1.01),
            (1000.0, 2000.0, 1.0),
            (1000.0, 2000.0, 0.5),
        ],
    )
    def test_invalid_range(self, start, end, mul):
        with pytest.raises(InvalidRangeError):
            CctLadder.new(start, end, mul)

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            CctLadder.new(1000.0, 2000.0, 1.0)

    def test_invalid_fields(self):
        with pytest.raises(InvalidRangeError):
            CctLadder(cct_min=0.0)
        with pytest.raises(InvalidRangeError):
            CctLadder(cct_mul=1.0)
        with pytest.raises(InvalidRangeError):
            CctLadder(imax=-1)


class TestLadderIndexing:
    """Test index bounds."""

    @pytest.mark.parametrize("i", [-1, 303, 1000])
    def test_out_of_range(self, i):
        with pytest.raises(IndexError):
            CctLadder().cct(i)
