"""
比對結果結構

MatchRecord 是每次比對重新產生的不可變結果，一個目標 token 對應一筆。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MatchRule(Enum):
    """命中的比對規則 (依比對順序)"""
    AUTO_REVEAL = "auto_reveal"                  # 數字/時間/金額等自動顯示
    EXACT = "exact"                              # 完全相同
    CONTRACTION = "contraction"                  # 目標為縮寫，語音為其展開之一
    CONTRACTION_REVERSE = "contraction_reverse"  # 語音為縮寫，目標為其展開之一
    NUMBER_PHONETIC = "number_phonetic"          # 數字/時間發音表
    LETTER_PHONETIC = "letter_phonetic"          # 字母發音表
    LONG_SIMILARITY = "long_similarity"          # 3 字母以上相似度
    SHORT_SIMILARITY = "short_similarity"        # 1-2 字母相似度


class MatchStatus(Enum):
    MATCHED = "matched"
    AUTO_REVEALED = "auto_revealed"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class MatchRecord:
    """
    單一目標 token 的比對結果

    Attributes:
        original_index: 目標 token 在句中的位置
        original: 目標 token 原文 (含標點、大小寫)
        canonical: 正規化後的目標字
        matched_spoken: 命中的語音 token (正規化後)，未命中或自動顯示為 None
        spoken_index: 命中的語音 token 位置
        auto_revealed: 是否為自動顯示
        rule: 命中的規則
        score: 相似度分數 (僅相似度類規則有意義，其他為 1.0)
    """
    original_index: int
    original: str
    canonical: str
    matched_spoken: Optional[str] = None
    spoken_index: Optional[int] = None
    auto_revealed: bool = False
    rule: Optional[MatchRule] = None
    score: Optional[float] = None

    @property
    def is_matched(self) -> bool:
        """已滿足 (語音命中或自動顯示)"""
        return self.auto_revealed or self.matched_spoken is not None

    @property
    def status(self) -> MatchStatus:
        if self.auto_revealed:
            return MatchStatus.AUTO_REVEALED
        if self.matched_spoken is not None:
            return MatchStatus.MATCHED
        return MatchStatus.UNMATCHED
