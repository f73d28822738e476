"""Tests for preset mask generators."""

import math

import numpy as np
import pytest
from engines.presets import (
    reset_mask, low_pass, high_pass, band_pass, notch,
    remove_vertical_stripes, remove_horizontal_stripes,
)


def _distance_from_center(size=512):
    y, x = np.mgrid[0:size, 0:size]
    return np.sqrt((x - size / 2) ** 2 + (y - size / 2) ** 2)


def test_low_pass_passband_and_falloff():
    """Inside radius exactly 1.0; at distance 120 exp(-1)."""
    mask = low_pass(radius=100)
    dist = _distance_from_center()
    assert np.all(mask[dist <= 100] == 1.0)
    assert mask[256, 376] == pytest.approx(math.exp(-1), rel=1e-9)
    assert mask[256, 376] == pytest.approx(0.3679, abs=1e-4)


def test_high_pass_blocks_center():
    mask = high_pass(radius=50)
    dist = _distance_from_center()
    assert np.all(mask[dist >= 50] == 1.0)
    assert mask[256, 256] == pytest.approx(math.exp(-(50 / 20) ** 2))


def test_band_pass_ring():
    mask = band_pass(inner=50, outer=150)
    dist = _distance_from_center()
    ring = (dist >= 50) & (dist <= 150)
    assert np.all(mask[ring] == 1.0)
    assert mask[256, 256] == pytest.approx(math.exp(-(50 / 15) ** 2))
    assert mask[256, 256 + 170] == pytest.approx(math.exp(-(20 / 15) ** 2))


def test_band_pass_rejects_inverted_radii():
    with pytest.raises(ValueError):
        band_pass(inner=150, outer=50)


def test_notch_zeroes_points_and_keeps_far_cells():
    """Vertical stripe notch at default center leaves (256, 256) untouched."""
    prior = np.full((512, 512), 0.5)
    mask = notch(prior, 256, 226, 256, 286, 20)
    assert mask[226, 256] == 0.0
    assert mask[286, 256] == 0.0
    assert mask[256, 256] == 0.5
    assert mask[0, 0] == 0.5


def test_notch_feather_multiplies_existing_value():
    prior = np.full((512, 512), 2.0)
    mask = notch(prior, 256, 226, 256, 286, 20)
    # 25 units right of the first point: inside the feather ring only
    expected = 2.0 * math.exp(-((30 - 25) / 5) ** 2)
    assert mask[226, 281] == pytest.approx(expected)


def test_notch_returns_new_buffer():
    prior = reset_mask()
    mask = notch(prior, 256, 226, 256, 286, 20)
    assert mask is not prior
    assert np.all(prior == 1.0)


def test_stripe_presets_are_symmetric_notches():
    base = reset_mask()
    assert np.array_equal(remove_vertical_stripes(base), notch(base, 256, 226, 256, 286, 20))
    assert np.array_equal(remove_horizontal_stripes(base), notch(base, 226, 256, 286, 256, 20))


def test_reset_is_idempotent():
    first = reset_mask()
    second = reset_mask()
    assert first is not second
    assert np.array_equal(first, second)
    assert np.all(first == 1.0)
    assert first.shape == (512, 512)


def test_presets_are_finite():
    for mask in (low_pass(10), high_pass(200), band_pass(0, 256),
                 remove_vertical_stripes(reset_mask())):
        assert np.all(np.isfinite(mask))
