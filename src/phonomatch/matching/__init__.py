"""
比對層

- WordMatcher: 逐字比對語音轉錄與目標句
- is_complete: 目標句完成判定
"""

from .completion import is_complete, should_score, unmatched_indices
from .word_matcher import WordMatcher, match_words, split_target

__all__ = [
    "WordMatcher",
    "match_words",
    "split_target",
    "is_complete",
    "should_score",
    "unmatched_indices",
]
