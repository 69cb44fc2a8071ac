from __future__ import annotations
from dataclasses import dataclass
from .config import PHRASE_LENGTH, Settings
from .phrase import PhraseResult

@dataclass
class ReviewDecision:
    needs_review: bool
    reasons: list[str]

def review_phrase(settings: Settings, result: PhraseResult, conf: float, ocr_avg_conf: float) -> ReviewDecision:
    reasons: list[str] = []

    if result.failed:
        reasons.append("missing_phrase")
        return ReviewDecision(needs_review=True, reasons=reasons)

    if result.method == "fallback":
        reasons.append("unnumbered_fallback")

    words = result.words
    if len(words) < PHRASE_LENGTH:
        reasons.append(f"short_sequence_{len(words)}")

    # legal in a seed phrase, but far more often an OCR duplicate
    if len(set(words)) < len(words):
        reasons.append("repeated_words")

    if ocr_avg_conf < settings.ocr_quality_thr:
        reasons.append("low_ocr_quality")

    if conf < settings.thr_review:
        reasons.append(f"below_threshold_{settings.thr_review:.2f}")

    return ReviewDecision(needs_review=(len(reasons) > 0), reasons=reasons)
