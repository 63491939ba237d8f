"""
回合層

外部協作者 (語音辨識介面、畫面) 使用的輔助物件:
- TranscriptBuffer: 只累積最終辨識結果
- RoundState: 預覽紀錄、顯示狀態與計分訊號
"""

from .round import ADVANCE_DELAY_SECONDS, RoundOutcome, RoundState, WordState
from .transcript import TranscriptBuffer

__all__ = [
    "TranscriptBuffer",
    "RoundState",
    "RoundOutcome",
    "WordState",
    "ADVANCE_DELAY_SECONDS",
]
