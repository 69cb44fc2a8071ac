from .base import CandidateSet, Method, NumberedStrategy
from .numbered import STRATEGIES, collect, collect_with_strategy, scan_strategy
from .sequence import assemble, support_count
from .fallback import fallback_extract, plain_words

__all__ = [
    "CandidateSet",
    "Method",
    "NumberedStrategy",
    "STRATEGIES",
    "collect",
    "collect_with_strategy",
    "scan_strategy",
    "assemble",
    "support_count",
    "fallback_extract",
    "plain_words",
]
