from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .config import NO_PHRASE_REASON
from .extractors import CandidateSet, Method, assemble, collect_with_strategy, fallback_extract, support_count
from .logging import get_logger

logger = get_logger(__name__)


class NoSequenceFound(Exception):
    """Neither the numbered list nor the plain-word fallback gave a phrase."""


@dataclass
class PhraseResult:
    phrase: str | None
    method: Method
    support: int
    strategy: str | None = None
    candidates: CandidateSet = field(default_factory=dict)
    reason: str | None = None

    @property
    def failed(self) -> bool:
        return self.phrase is None

    @property
    def words(self) -> list[str]:
        return self.phrase.split(" ") if self.phrase else []

    def unwrap(self) -> str:
        if self.phrase is None:
            raise NoSequenceFound(self.reason or NO_PHRASE_REASON)
        return self.phrase

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any]
        if self.phrase is None:
            out = {"failed": True, "reason": self.reason}
        else:
            out = {"phrase": self.phrase}
        out.update({
            "method": self.method,
            "support": self.support,
            "strategy": self.strategy,
        })
        return out


def extract_phrase(raw_text: str, strict_length: bool = False) -> PhraseResult:
    """
    Recover the ordered word list from OCR text.

    Numbered matching runs first; if it does not recover enough positions the
    first twelve plain words of the text are used instead. Never raises for
    string input; failure is reported on the result.
    """
    strategy, candidates = collect_with_strategy(raw_text)
    support = support_count(candidates)

    words = assemble(candidates, strict_length=strict_length)
    if words is not None:
        logger.debug("phrase_numbered", strategy=strategy, support=support, words=len(words))
        return PhraseResult(" ".join(words), "numbered", support, strategy, candidates)

    words = fallback_extract(raw_text)
    if words is not None:
        logger.debug("phrase_fallback", strategy=strategy, support=support)
        return PhraseResult(" ".join(words), "fallback", support, strategy, candidates)

    logger.debug("phrase_not_found", strategy=strategy, support=support)
    return PhraseResult(None, "missing", support, strategy, candidates, reason=NO_PHRASE_REASON)
