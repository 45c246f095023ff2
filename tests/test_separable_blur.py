import numpy as np
import pytest

from core.kernel import gaussian_kernel
from core.separable_blur import convolve_separable, separable_gaussian_blur


@pytest.mark.parametrize("shape,radius", [((7, 5, 4), 15), ((1, 1, 4), 3), ((64, 33, 4), 34), ((20, 20), 8)])
def test_uniform_field_is_unchanged(shape, radius):
    img = np.full(shape, 37, dtype=np.uint8)
    if len(shape) == 3:
        img[..., 0] = 200
        img[..., 3] = 255
    out = separable_gaussian_blur(img, radius)
    assert out.dtype == np.uint8
    assert out.shape == img.shape
    assert np.array_equal(out, img)


def test_source_buffer_is_not_mutated():
    rng = np.random.default_rng(1)
    img = rng.integers(0, 256, size=(16, 12, 4), dtype=np.uint8)
    before = img.copy()
    out = separable_gaussian_blur(img, 6)
    assert np.array_equal(img, before)
    assert out is not img


def test_impulse_spreads_symmetrically_and_keeps_energy():
    field = np.zeros((41, 41))
    field[20, 20] = 255.0
    out = convolve_separable(field, gaussian_kernel(5))
    assert out.sum() == pytest.approx(255.0, rel=1e-9)
    assert np.allclose(out, out[::-1, :])
    assert np.allclose(out, out[:, ::-1])
    assert np.allclose(out, out.T)
    assert out.argmax() == 20 * 41 + 20


def test_interior_matches_full_2d_convolution():
    rng = np.random.default_rng(7)
    img = rng.integers(0, 256, size=(30, 30)).astype(np.float64)
    k = gaussian_kernel(2.5)
    half = len(k) // 2
    out = convolve_separable(img, k)
    full = np.outer(k, k)
    for row, col in [(10, 10), (15, 20), (half, half)]:
        window = img[row - half : row + half + 1, col - half : col + half + 1]
        assert out[row, col] == pytest.approx((window * full).sum())


def test_edges_replicate_border_samples():
    buf = np.array([[100.0, 0.0, 0.0, 0.0, 0.0]])
    k = gaussian_kernel(0)
    out = convolve_separable(buf, k)
    # columns -3..3 around col 0 clamp to 0,0,0,0,1,2,3
    assert out[0, 0] == pytest.approx(100.0 * k[:4].sum())
    assert out[0, 4] == pytest.approx(0.0)


def test_channels_are_filtered_independently():
    img = np.zeros((9, 9, 4), dtype=np.uint8)
    img[4, 4, 3] = 255
    out = separable_gaussian_blur(img, 2.5)
    assert not out[..., :3].any()
    assert out[4, 4, 3] > 0


def test_rejects_one_dimensional_input():
    with pytest.raises(ValueError):
        convolve_separable(np.zeros(10), gaussian_kernel(3))


def _clamped_reference(buf, k):
    """Direct clamp-to-edge convolution, rows then columns."""
    half = len(k) // 2
    h, w = buf.shape[:2]
    tmp = np.zeros(buf.shape)
    for i, weight in enumerate(k):
        cols = np.clip(np.arange(w) + i - half, 0, w - 1)
        tmp += weight * buf[:, cols]
    out = np.zeros(buf.shape)
    for i, weight in enumerate(k):
        rows = np.clip(np.arange(h) + i - half, 0, h - 1)
        out += weight * tmp[rows]
    return out


@pytest.mark.parametrize("shape,radius", [((12, 9, 4), 15), ((5, 30), 34), ((3, 4, 1), 2.5), ((6, 7, 6), 4)])
def test_matches_clamped_reference_everywhere(shape, radius):
    rng = np.random.default_rng(11)
    img = rng.integers(0, 256, size=shape).astype(np.float64)
    k = gaussian_kernel(radius)
    out = convolve_separable(img, k)
    assert out.shape == img.shape
    assert np.allclose(out, _clamped_reference(img, k))


def test_fractional_radius_is_accepted():
    img = np.full((10, 10, 4), 99, dtype=np.uint8)
    assert np.array_equal(separable_gaussian_blur(img, 7.5), img)
