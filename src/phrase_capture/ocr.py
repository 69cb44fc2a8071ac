from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import pytesseract
from pytesseract import Output
from PIL import Image
from .utils import normalize_whitespace

class OCRError(RuntimeError):
    """Tesseract is missing or could not read the image."""

@dataclass
class OCRWord:
    text: str
    conf: float  # 0..1
    line_key: tuple[int, int, int]  # block, paragraph, line

@dataclass
class OCRResult:
    full_text: str
    words: list[OCRWord]
    avg_conf: float

def run_tesseract(img: Image.Image, lang: str = "eng") -> OCRResult:
    try:
        data: dict[str, Any] = pytesseract.image_to_data(img, lang=lang, output_type=Output.DICT)
    except (pytesseract.TesseractNotFoundError, pytesseract.TesseractError) as exc:
        raise OCRError(f"tesseract failed: {exc}") from exc

    words: list[OCRWord] = []
    n = len(data.get("text", []))
    for i in range(n):
        txt = (data["text"][i] or "").strip()
        if not txt:
            continue

        # conf may come back as a string; -1 marks non-word boxes
        try:
            c = float(data["conf"][i])
        except (TypeError, ValueError):
            c = -1.0
        if c < 0:
            continue
        c01 = max(0.0, min(1.0, c / 100.0))

        key = (int(data["block_num"][i]), int(data["par_num"][i]), int(data["line_num"][i]))
        words.append(OCRWord(text=txt, conf=c01, line_key=key))

    # keep tesseract's reading order, one output line per detected line
    lines: list[list[str]] = []
    last_key: tuple[int, int, int] | None = None
    for w in words:
        if w.line_key != last_key:
            lines.append([])
            last_key = w.line_key
        lines[-1].append(w.text)

    full_text = "\n".join(normalize_whitespace(" ".join(ln)) for ln in lines)
    avg_conf = sum(w.conf for w in words) / len(words) if words else 0.0
    return OCRResult(full_text=full_text, words=words, avg_conf=avg_conf)
