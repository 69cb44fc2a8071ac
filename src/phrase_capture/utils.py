from __future__ import annotations
import json
import os
import re
from typing import Any, Iterable

ALPHA_RE = re.compile(r"[a-z]+")

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def write_jsonl(path: str, rows: Iterable[dict[str, Any]]) -> None:
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")

def normalize_whitespace(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()

def is_plain_word(s: str) -> bool:
    # lowercase ascii letters only, at least one
    return bool(ALPHA_RE.fullmatch(s))

def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))
