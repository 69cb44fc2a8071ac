from __future__ import annotations

from .base import CandidateSet
from ..config import MIN_SUPPORT, PHRASE_LENGTH

def support_count(candidates: CandidateSet) -> int:
    return len(candidates)

def assemble(
    candidates: CandidateSet,
    min_support: int = MIN_SUPPORT,
    length: int = PHRASE_LENGTH,
    strict_length: bool = False,
) -> list[str] | None:
    """
    Order candidates by position and accept them when at least `min_support`
    positions were recovered.

    Missing positions are not filled in: with 10 or 11 positions the result is
    shorter than `length`. `strict_length=True` rejects those instead.
    """
    ordered = sorted(candidates.items())[:length]
    if len(ordered) < min_support:
        return None
    if strict_length and len(ordered) < length:
        return None
    return [word for _, word in ordered]
