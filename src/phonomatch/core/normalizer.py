"""
文字正規化模組

比對前統一去除標點並轉小寫。目標句與語音轉錄都經過同一套規則，
因此 "Don't" 與 "dont" 會得到相同的 canonical 形式。
"""

import re
from typing import List

# 只移除這組標點；冒號、百分號、錢字號等保留給 auto-reveal 判斷
PUNCTUATION = ".,!?;\"'"

_PUNCTUATION_TABLE = str.maketrans("", "", PUNCTUATION)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(word: str) -> str:
    """
    去除標點並轉為小寫

    Args:
        word: 原始單字 (可含標點、大小寫)

    Returns:
        str: canonical 形式

    範例:
        >>> normalize("Don't!")
        'dont'
    """
    return word.translate(_PUNCTUATION_TABLE).lower()


def tokenize(text: str) -> List[str]:
    """以空白切分文本，忽略連續空白與首尾空白"""
    if not text:
        return []
    return text.split()


def strip_whitespace(text: str) -> str:
    """移除所有空白 ("nine am" -> "nineam")"""
    return _WHITESPACE_RE.sub("", text)
