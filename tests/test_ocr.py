import pytest
import pytesseract
from PIL import Image

from phrase_capture.ocr import OCRError, run_tesseract


def _fake_data(*args, **kwargs):
    return {
        "text": ["", "1", "apple", "2", "banana", " "],
        "conf": ["-1", "95", "90", 80, "85", "-1"],
        "block_num": [1, 1, 1, 1, 1, 1],
        "par_num": [1, 1, 1, 1, 1, 1],
        "line_num": [0, 1, 1, 2, 2, 2],
    }


def test_run_tesseract_keeps_lines_and_confidence(monkeypatch):
    monkeypatch.setattr(pytesseract, "image_to_data", _fake_data)
    res = run_tesseract(Image.new("L", (20, 20), 255))
    assert res.full_text == "1 apple\n2 banana"
    assert [w.text for w in res.words] == ["1", "apple", "2", "banana"]
    assert res.avg_conf == pytest.approx((0.95 + 0.90 + 0.80 + 0.85) / 4)


def test_run_tesseract_empty_page(monkeypatch):
    monkeypatch.setattr(
        pytesseract,
        "image_to_data",
        lambda *a, **k: {"text": [], "conf": [], "block_num": [], "par_num": [], "line_num": []},
    )
    res = run_tesseract(Image.new("L", (20, 20), 255))
    assert res.full_text == ""
    assert res.avg_conf == 0.0


def test_missing_tesseract_becomes_ocr_error(monkeypatch):
    def boom(*args, **kwargs):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, "image_to_data", boom)
    with pytest.raises(OCRError):
        run_tesseract(Image.new("L", (20, 20), 255))
