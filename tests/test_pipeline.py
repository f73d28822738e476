"""Tests for the load and recompute pipelines."""

import numpy as np
import pytest
from engines.fft_engine import GridConfigurationError, inverse_2d
from engines.grayscale import rgba_to_luminance
from engines.pipeline import active_percentage, load_spectrum, reconstruct, recompute
from engines.presets import low_pass, remove_vertical_stripes, reset_mask
from engines.spectrum_shift import ifft_shift
from utils.test_images import generate_stripes


@pytest.fixture(scope='module')
def random_image():
    rng = np.random.default_rng(5)
    return rng.integers(0, 256, (512, 512, 4), dtype=np.uint8)


@pytest.fixture(scope='module')
def spectrum(random_image):
    return load_spectrum(random_image)


def test_luminance_weights():
    pixel = np.array([[[100, 50, 200, 7]]], dtype=np.uint8)
    expected = 0.299 * 100 + 0.587 * 50 + 0.114 * 200
    assert rgba_to_luminance(pixel)[0, 0] == pytest.approx(expected)


def test_spectrum_is_centered_and_read_only(random_image, spectrum):
    gray = rgba_to_luminance(random_image)
    assert spectrum.real[256, 256] == pytest.approx(gray.sum())
    assert spectrum.shape == (512, 512)
    with pytest.raises(ValueError):
        spectrum.real[0, 0] = 1.0


def test_all_pass_roundtrip(random_image, spectrum):
    """All-1.0 mask reconstructs the source luminance."""
    gray = rgba_to_luminance(random_image)
    view = reconstruct(spectrum, reset_mask())
    assert np.allclose(view.magnitude, gray, rtol=1e-3, atol=1e-6)


def test_all_pass_mask_is_identity(spectrum):
    unmasked = inverse_2d(*ifft_shift(spectrum.real, spectrum.imag))
    masked = reconstruct(spectrum, reset_mask()).magnitude
    assert np.array_equal(masked, unmasked)


def test_full_mask_activity_is_100_percent(spectrum):
    result = recompute(spectrum, reset_mask())
    assert result.stats.active_percentage == 100.0
    assert result.stats.max_magnitude == result.spectrum_view.max_value
    assert result.spectrum_view.rgba.shape == (512, 512, 4)
    assert result.reconstruction.rgba.shape == (512, 512, 4)


def test_low_pass_activity_fraction():
    # exp(-((d-100)/20)^2) > 0.1 out to d ~ 130
    pct = active_percentage(low_pass(100))
    assert 15.0 < pct < 25.0


def test_reconstruction_normalized_to_max(spectrum):
    view = reconstruct(spectrum, reset_mask())
    assert view.intensity.max() == pytest.approx(255.0)
    assert view.intensity.min() >= 0.0


def test_zero_mask_reconstruction_is_black(spectrum):
    view = reconstruct(spectrum, np.zeros((512, 512)))
    assert view.max_value == 0.0
    assert np.all(view.intensity == 0)
    assert np.all(np.isfinite(view.intensity))


def test_vertical_stripe_notch_removes_row_pattern():
    image = generate_stripes(512, cycles=30, axis='horizontal')
    spectrum = load_spectrum(image)
    before = reconstruct(spectrum, reset_mask()).magnitude
    after = reconstruct(spectrum, remove_vertical_stripes(reset_mask())).magnitude
    assert before.std() > 30.0
    assert after.std() < 2.0
    assert after.mean() == pytest.approx(before.mean(), rel=1e-2)


def test_vertical_stripe_notch_keeps_column_pattern():
    image = generate_stripes(512, cycles=30, axis='vertical')
    spectrum = load_spectrum(image)
    after = reconstruct(spectrum, remove_vertical_stripes(reset_mask())).magnitude
    assert after.std() > 30.0


def test_wrong_buffer_shape_rejected():
    with pytest.raises(GridConfigurationError):
        load_spectrum(np.zeros((256, 256, 4), dtype=np.uint8))
    with pytest.raises(GridConfigurationError):
        load_spectrum(np.zeros((512, 512), dtype=np.uint8))


def test_non_power_of_two_grid_rejected():
    with pytest.raises(GridConfigurationError):
        load_spectrum(np.zeros((100, 100, 4), dtype=np.uint8), size=100)


def test_mask_shape_mismatch_rejected(spectrum):
    with pytest.raises(GridConfigurationError):
        recompute(spectrum, np.ones((256, 256)))
