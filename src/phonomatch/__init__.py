"""
phonomatch - 口說練習答案比對引擎 (Speech Answer Matching Engine)

核心概念：
- 畫面顯示一個目標句，學習者開口說
- 語音辨識的最終結果持續累積成轉錄，每次更新都從頭比對
- 容忍發音誤差、縮寫、數字/時間的韓式發音拼寫
- 數字、時間、金額等 token 自動視為已說出

官方入口（穩定 API）：
- `phonomatch.DrillEngine`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from phonomatch.engine import DrillEngine

# =============================================================================
# 配置
# =============================================================================
from phonomatch.config import MatchThresholds, MatcherConfig

# =============================================================================
# 核心元件（進階用途）
# =============================================================================
from phonomatch.core import (
    AliasTables,
    AutoRevealClassifier,
    MatchEvent,
    MatchRecord,
    MatchRule,
    MatchStatus,
    normalize,
    should_auto_reveal,
    similarity,
)
from phonomatch.matching import WordMatcher, is_complete, match_words
from phonomatch.session import RoundOutcome, RoundState, TranscriptBuffer, WordState

# =============================================================================
# 日誌工具
# =============================================================================
from phonomatch.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Engine
    "DrillEngine",
    # Config
    "MatchThresholds",
    "MatcherConfig",
    # Core
    "AliasTables",
    "AutoRevealClassifier",
    "MatchEvent",
    "MatchRecord",
    "MatchRule",
    "MatchStatus",
    "normalize",
    "should_auto_reveal",
    "similarity",
    # Matching
    "WordMatcher",
    "match_words",
    "is_complete",
    # Session
    "TranscriptBuffer",
    "RoundState",
    "RoundOutcome",
    "WordState",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
