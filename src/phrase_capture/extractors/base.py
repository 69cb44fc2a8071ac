from __future__ import annotations
from dataclasses import dataclass
import re
from typing import Literal

Method = Literal["numbered", "fallback", "missing"]

# position -> token
CandidateSet = dict[int, str]

@dataclass(frozen=True)
class NumberedStrategy:
    name: str
    pattern: re.Pattern[str]  # group 1 = numeral, group 2 = word
