from __future__ import annotations

import re
from ..config import PHRASE_LENGTH
from ..utils import is_plain_word

# anything that is not [A-Za-z0-9_] or whitespace becomes a separator
PUNCT_RE = re.compile(r"[^\w\s]", re.ASCII)

def plain_words(text: str) -> list[str]:
    cleaned = PUNCT_RE.sub(" ", text.lower())
    return [w for w in cleaned.split() if is_plain_word(w)]

def fallback_extract(text: str, length: int = PHRASE_LENGTH) -> list[str] | None:
    # last resort for lists where OCR lost (or the image never had) numbering
    words = plain_words(text)
    if len(words) < length:
        return None
    return words[:length]
