"""
自動顯示判斷模組 (Auto-Reveal Classifier)

數字、時間、金額、百分比、度量單位這類 token 對語音辨識來說非常不穩定，
因此目標句中的這類單字一律視為已說出，不需要任何語音佐證。
"""

import re
from typing import Iterable, Sequence, Tuple, Union

from .normalizer import normalize

# 依序比對，任一命中即為 True
# \d 只接受 ASCII 數字；以 \Z 結尾，結尾換行不算命中
DEFAULT_AUTO_REVEAL_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^\d+\Z", re.ASCII),                        # 純數字 (9, 30, 100)
    re.compile(r"^\d+am\Z", re.IGNORECASE | re.ASCII),      # 9am
    re.compile(r"^\d+pm\Z", re.IGNORECASE | re.ASCII),      # 12pm
    re.compile(r"^\d+:\d+\Z", re.ASCII),                    # 5:30
    re.compile(r"^\d+:\d+am\Z", re.IGNORECASE | re.ASCII),
    re.compile(r"^\d+:\d+pm\Z", re.IGNORECASE | re.ASCII),
    re.compile(r"^\$\d+", re.ASCII),                        # $100, $9.99
    re.compile(r"^\d+\$\Z", re.ASCII),                      # 100$
    re.compile(r"^\d+%\Z", re.ASCII),                       # 50%
    re.compile(r"^\d+kg\Z", re.IGNORECASE | re.ASCII),
    re.compile(r"^\d+cm\Z", re.IGNORECASE | re.ASCII),
    re.compile(r"^\d+m\Z", re.IGNORECASE | re.ASCII),
)

PatternLike = Union[str, re.Pattern]


class AutoRevealClassifier:
    """
    自動顯示判斷器

    功能:
    - 先正規化單字，再依序測試編譯好的樣式
      (樣式看到的是 normalize() 後的字：已轉小寫、已去除 . , ! ? ; " ')
    - 樣式可注入，傳入空序列即停用自動顯示

    使用範例:
        >>> classifier = AutoRevealClassifier()
        >>> classifier.should_auto_reveal("5:30am")
        True
        >>> classifier.should_auto_reveal("happy")
        False
    """

    def __init__(self, patterns: Iterable[PatternLike] = DEFAULT_AUTO_REVEAL_PATTERNS):
        self._patterns: Tuple[re.Pattern, ...] = tuple(
            p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns
        )

    @property
    def patterns(self) -> Sequence[re.Pattern]:
        return self._patterns

    def should_auto_reveal(self, word: str) -> bool:
        clean_word = normalize(word)
        return any(pattern.search(clean_word) for pattern in self._patterns)

    __call__ = should_auto_reveal


_default_classifier = AutoRevealClassifier()


def should_auto_reveal(word: str) -> bool:
    """使用預設樣式判斷單字是否自動顯示"""
    return _default_classifier.should_auto_reveal(word)
