from __future__ import annotations

from dataclasses import dataclass
from .config import PHRASE_LENGTH, Settings
from .extractors import Method
from .utils import clamp01


@dataclass
class ConfidenceResult:
    conf: float
    reasons: list[str]


def phrase_confidence(
    settings: Settings,
    method: Method,
    support: int,
    ocr_avg_conf: float,
) -> ConfidenceResult:
    """
    Combines weak signals into a single [0,1] confidence for one phrase.

    - OCR confidence is the largest term but not the only one.
    - The extraction method sets the prior: a numbered list we could line up
      is far more trustworthy than "first twelve words on the page".
    - Coverage is the share of positions the numbered pass recovered. It only
      counts for numbered results; the fallback ignores positions entirely.
    """

    reasons: list[str] = []

    if method == "missing":
        return ConfidenceResult(conf=0.0, reasons=["phrase_missing"])

    # --- Prior by extraction method ---
    if method == "numbered":
        prior = settings.prior_numbered
        reasons.append("prior_numbered")
        coverage = min(support, PHRASE_LENGTH) / float(PHRASE_LENGTH)
        if support < PHRASE_LENGTH:
            reasons.append(f"partial_coverage_{support}_of_{PHRASE_LENGTH}")
    else:
        prior = settings.prior_fallback
        reasons.append("prior_fallback")
        coverage = 0.0

    conf = (
        0.50 * ocr_avg_conf +
        0.35 * prior +
        0.15 * coverage
    )

    return ConfidenceResult(conf=clamp01(conf), reasons=reasons)
