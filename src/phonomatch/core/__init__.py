"""
核心抽象層

語言無關的正規化、相似度、自動顯示判斷與別名表。
"""

from .alias_tables import AliasTables
from .auto_reveal import DEFAULT_AUTO_REVEAL_PATTERNS, AutoRevealClassifier, should_auto_reveal
from .events import MatchEvent, MatchEventHandler
from .normalizer import PUNCTUATION, normalize, strip_whitespace, tokenize
from .records import MatchRecord, MatchRule, MatchStatus
from .similarity import clear_similarity_cache, get_similarity_cache_stats, similarity

__all__ = [
    "AliasTables",
    "AutoRevealClassifier",
    "DEFAULT_AUTO_REVEAL_PATTERNS",
    "should_auto_reveal",
    "MatchEvent",
    "MatchEventHandler",
    "PUNCTUATION",
    "normalize",
    "tokenize",
    "strip_whitespace",
    "MatchRecord",
    "MatchRule",
    "MatchStatus",
    "similarity",
    "clear_similarity_cache",
    "get_similarity_cache_stats",
]
