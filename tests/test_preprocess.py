import numpy as np
from PIL import Image

from phrase_capture.preprocess import preprocess_pil


def test_small_screenshot_is_upscaled_to_min_width():
    out = preprocess_pil(Image.new("RGB", (200, 50), "white"), min_width=1000)
    assert out.size == (1000, 250)
    assert out.mode == "L"


def test_large_photo_is_downscaled_to_max_width():
    out = preprocess_pil(Image.new("RGB", (4000, 400), "white"), max_width=2000)
    assert out.size == (2000, 200)


def test_dark_mode_image_is_inverted():
    dark = Image.new("RGB", (1200, 100), (10, 10, 10))
    out = preprocess_pil(dark)
    assert np.array(out).mean() > 200

    kept = preprocess_pil(dark, invert_dark=False)
    assert np.array(kept).mean() < 50


def test_threshold_gives_binary_image():
    arr = np.tile(np.linspace(0, 255, 1200, dtype=np.uint8), (60, 1))
    out = preprocess_pil(Image.fromarray(arr).convert("RGB"), do_threshold=True, invert_dark=False)
    assert set(np.unique(np.array(out))) <= {0, 255}


def test_thin_strip_keeps_at_least_one_row():
    out = preprocess_pil(Image.new("RGB", (4000, 1), "white"), max_width=2000)
    assert out.size == (2000, 1)
