"""
字串相似度模組

以 Levenshtein 編輯距離計算兩字串的正規化相似度：

    similarity = (max_len - distance) / max_len

兩個空字串視為完全相同 (1.0)。插入、刪除、替換的成本皆為 1，
結果對稱且落在 [0, 1]。
"""

from functools import lru_cache
from typing import Any, Dict

import Levenshtein

_CACHE_SIZE = 4096


@lru_cache(maxsize=_CACHE_SIZE)
def _cached_similarity(a: str, b: str) -> float:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    distance = Levenshtein.distance(a, b)
    return (max_len - distance) / max_len


def similarity(a: str, b: str) -> float:
    """
    計算兩字串的相似度

    Args:
        a: 字串 1
        b: 字串 2

    Returns:
        float: 0.0 ~ 1.0 (越高越相似)

    範例:
        >>> similarity("gu", "go")
        0.5
    """
    # 以排序後的 key 查快取，(a, b) 與 (b, a) 共用同一筆
    if b < a:
        a, b = b, a
    return _cached_similarity(a, b)


def clear_similarity_cache() -> None:
    """清除相似度快取"""
    _cached_similarity.cache_clear()


def get_similarity_cache_stats() -> Dict[str, Any]:
    """取得相似度快取統計 (hits/misses/currsize/maxsize)"""
    info = _cached_similarity.cache_info()
    return {
        "hits": info.hits,
        "misses": info.misses,
        "currsize": info.currsize,
        "maxsize": info.maxsize,
    }
