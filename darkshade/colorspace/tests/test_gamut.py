"""Tests for gamut checks and the max chroma search."""

import math

import numpy as np
import pytest

from darkshade import defaults
from darkshade.colorspace import (
    is_in_gamut,
    is_out_of_gamut,
    gamut_clip,
    max_chroma_for_lh,
    max_chroma,
    relative_chroma,
)
from darkshade.types import Color


class TestGamut:
    """Test gamut checking."""

    def test_in_gamut_grays(self):
        """Neutral grays should always be in gamut."""
        L = np.linspace(0, 1, 10)
        assert is_in_gamut(L, np.zeros(10), np.zeros(10)).all()

    def test_out_of_gamut_high_chroma(self):
        assert not is_in_gamut(0.5, 0.4, 0.0)

    def test_oracle_on_color(self):
        assert is_out_of_gamut(Color(0.5, 0.4, 0.0))
        assert not is_out_of_gamut(Color(0.6, 0.05, 200.0))

    def test_negative_lightness_is_out(self):
        assert is_out_of_gamut(Color(-0.2, 0.0, 0.0))

    def test_gamut_clip_stays_valid(self):
        rgb = gamut_clip(np.array([0.5, 0.9, 0.1]), np.array([0.4, 0.3, 0.3]), np.array([0, 120, 240]))
        assert (rgb >= 0).all()
        assert (rgb <= 1).all()


class TestMaxChroma:
    """Test the binary search for the gamut boundary."""

    def test_max_chroma_black_white(self):
        """At L=0 and L=1 there is almost no chroma headroom."""
        max_c = max_chroma_for_lh(np.array([0.0, 1.0]), np.array([0.0, 180.0]))
        assert max_c[0] < 0.05
        assert max_c[1] < 0.01

    def test_max_chroma_mid_lightness(self):
        assert max_chroma(0.6, 180.0) > 0.1

    def test_returns_float(self):
        assert isinstance(max_chroma(0.5, 30.0), float)

    def test_within_search_range(self):
        L = np.linspace(0, 1, 21)
        H = np.linspace(0, 359, 21)
        max_c = max_chroma_for_lh(L, H)
        assert (max_c >= 0).all()
        assert (max_c < defaults.MAX_SEARCH_CHROMA).all()

    @pytest.mark.parametrize("L", [0.05, 0.2, 0.45, 0.7, 0.9, 0.98])
    @pytest.mark.parametrize("H", [0.0, 29.0, 95.0, 142.0, 210.0, 265.0, 330.0])
    def test_boundary_accuracy(self, L, H):
        """Result is in gamut and one epsilon more is not."""
        c = max_chroma(L, H)
        assert not is_out_of_gamut(Color(L, c, H))
        assert is_out_of_gamut(Color(L, c + defaults.CHROMA_SEARCH_EPSILON, H))

    def test_bracket_within_epsilon(self):
        """A finer search lands within epsilon of the default one."""
        coarse = max_chroma(0.55, 250.0)
        fine = max_chroma(0.55, 250.0, epsilon=1e-6)
        assert 0.0 <= fine - coarse <= defaults.CHROMA_SEARCH_EPSILON

    def test_step_count_is_bounded(self, monkeypatch):
        """The search runs ceil(log2(0.4 / 0.001)) = 9 oracle calls."""
        from darkshade.colorspace import gamut

        calls = []
        original = gamut.is_in_gamut

        def counting(*args, **kwargs):
            calls.append(args)
            return original(*args, **kwargs)

        monkeypatch.setattr(gamut, "is_in_gamut", counting)
        gamut.max_chroma_for_lh(0.5, 120.0)
        expected = math.ceil(math.log2(defaults.MAX_SEARCH_CHROMA / defaults.CHROMA_SEARCH_EPSILON))
        assert len(calls) == expected == 9

    def test_rejects_non_positive_epsilon(self):
        with pytest.raises(ValueError, match="epsilon"):
            max_chroma_for_lh(0.5, 0.0, epsilon=0.0)

    def test_array_matches_scalar(self):
        L = np.array([0.3, 0.5, 0.7, 0.9])
        H = np.array([0.0, 90.0, 180.0, 270.0])
        max_c = max_chroma_for_lh(L, H)
        for i in range(4):
            assert max_c[i] == pytest.approx(max_chroma(L[i], H[i]), abs=defaults.CHROMA_SEARCH_EPSILON)


class TestRelativeChroma:
    """Chroma as a fraction of the boundary."""

    def test_zero_chroma(self):
        assert relative_chroma(0.6, 0.0, 100.0) == 0.0

    def test_half_boundary(self):
        c_max = max_chroma(0.6, 250.0)
        assert relative_chroma(0.6, c_max / 2, 250.0) == pytest.approx(0.5)

    def test_beyond_boundary_is_one(self):
        assert relative_chroma(0.6, 0.39, 250.0) == 1.0

    def test_no_headroom_is_one(self):
        """With no in-gamut chroma at all the result is 1, not a division error."""
        assert max_chroma(-0.3, 40.0) == 0.0
        assert relative_chroma(-0.3, 0.0, 40.0) == 1.0

    def test_in_unit_range(self):
        for L in (0.1, 0.4, 0.8):
            for C in (0.0, 0.01, 0.1, 0.3):
                assert 0.0 <= relative_chroma(L, C, 60.0) <= 1.0
