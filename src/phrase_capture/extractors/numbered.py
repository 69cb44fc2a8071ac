from __future__ import annotations

import re
from .base import CandidateSet, NumberedStrategy
from ..config import PHRASE_LENGTH
from ..utils import is_plain_word

# Tried in this order. Each one scans the text on its own; results are never
# merged, so a dot-numbered list cannot leak into a space-numbered one.
# ASCII letters only, spelled out: IGNORECASE on [a-z] also matches U+212A and U+017F.
STRATEGIES: tuple[NumberedStrategy, ...] = (
    # "1 apple 2 banana"
    NumberedStrategy("space", re.compile(r"([0-9]+)\s+([A-Za-z]+)")),
    # "1. apple 2.banana"
    NumberedStrategy("dot", re.compile(r"([0-9]+)\.\s*([A-Za-z]+)")),
    # "1) apple 2)banana"
    NumberedStrategy("paren", re.compile(r"([0-9]+)\)\s*([A-Za-z]+)")),
)

def scan_strategy(text: str, strategy: NumberedStrategy, max_position: int = PHRASE_LENGTH) -> CandidateSet:
    """
    Collect (position, word) candidates for one numbering style.

    Numerals outside [1, max_position] and words that are not plain a-z after
    lowercasing are dropped. The first word seen for a position wins.
    """
    max_digits = len(str(max_position))
    found: CandidateSet = {}
    for m in strategy.pattern.finditer(text):
        # long digit runs are out of range anyway; int() on them can raise
        digits = m.group(1).lstrip("0") or "0"
        if len(digits) > max_digits:
            continue
        position = int(digits)
        if position < 1 or position > max_position:
            continue
        word = m.group(2).strip().lower()
        if not is_plain_word(word):
            continue
        if position not in found:
            found[position] = word
    return found

def collect_with_strategy(text: str, max_position: int = PHRASE_LENGTH) -> tuple[str | None, CandidateSet]:
    """
    Run the strategies in priority order and stop at the first one that
    covers every position. When none does, the last strategy tried wins,
    even if an earlier one found more.
    """
    name: str | None = None
    found: CandidateSet = {}
    for strategy in STRATEGIES:
        name = strategy.name
        found = scan_strategy(text, strategy, max_position=max_position)
        if len(found) >= max_position:
            break
    return name, found

def collect(text: str) -> CandidateSet:
    return collect_with_strategy(text)[1]
