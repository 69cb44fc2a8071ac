from __future__ import annotations
from dataclasses import dataclass
import os

PHRASE_LENGTH = 12
MIN_SUPPORT = 10

NO_PHRASE_REASON = "no 12-word sequence found"

@dataclass(frozen=True)
class Settings:
    output_path: str = "outputs/phrases.jsonl"
    debug_dir: str = ""  # empty: no OCR text dumps
    log_level: str = "INFO"

    # OCR / preprocess
    ocr_lang: str = "eng"
    min_width: int = 1000
    max_width: int = 2000
    do_threshold: bool = False
    invert_dark: bool = True

    # Extraction
    strict_length: bool = False

    # Confidence priors
    prior_numbered: float = 0.85
    prior_fallback: float = 0.40

    # Review thresholds
    thr_review: float = 0.75
    ocr_quality_thr: float = 0.55

    # QR rendering
    qr_box_size: int = 8
    qr_border: int = 2

def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} env var must be an integer, got {raw!r}") from exc

def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} env var must be a number, got {raw!r}") from exc

def load_settings() -> Settings:
    return Settings(
        output_path=os.getenv("OUTPUT_PATH", "outputs/phrases.jsonl").strip(),
        debug_dir=os.getenv("DEBUG_DIR", "").strip(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        ocr_lang=os.getenv("OCR_LANG", "eng").strip(),
        min_width=_env_int("MIN_WIDTH", 1000),
        max_width=_env_int("MAX_WIDTH", 2000),
        do_threshold=os.getenv("DO_THRESHOLD", "0").strip() == "1",
        invert_dark=os.getenv("INVERT_DARK", "1").strip() == "1",
        strict_length=os.getenv("STRICT_LENGTH", "0").strip() == "1",
        thr_review=_env_float("REVIEW_THRESHOLD", 0.75),
        ocr_quality_thr=_env_float("OCR_QUALITY_THR", 0.55),
        qr_box_size=max(1, _env_int("QR_BOX_SIZE", 8)),
        qr_border=max(0, _env_int("QR_BORDER", 2)),
    )
