from __future__ import annotations
from dataclasses import dataclass
from rapidfuzz import fuzz

def _norm(s: str) -> str:
    return " ".join(s.lower().split())

def exact_match(pred: str, gt: str) -> bool:
    return _norm(pred) == _norm(gt)

def word_accuracy(pred: str, gt: str) -> float:
    # position-wise: a word in the wrong slot is wrong
    p = _norm(pred).split()
    g = _norm(gt).split()
    if not g:
        return 0.0
    hits = sum(1 for a, b in zip(p, g) if a == b)
    return hits / len(g)

def fuzzy_score(pred: str, gt: str) -> float:
    return fuzz.ratio(_norm(pred), _norm(gt)) / 100.0

@dataclass
class EvalRow:
    image_id: str
    ok: bool
    word_acc: float
    score: float

def evaluate_one(image_id: str, pred: str | None, gt: str) -> EvalRow:
    if pred is None:
        return EvalRow(image_id, False, 0.0, 0.0)
    ok = exact_match(pred, gt)
    return EvalRow(image_id, ok, word_accuracy(pred, gt), fuzzy_score(pred, gt))
