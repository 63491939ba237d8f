"""
完成判定模組 (Completion Evaluator)

判斷目標句是否已全部被滿足。計分與計時由外部協作者負責，
這裡只產生布林訊號。
"""

from typing import Iterable, Sequence

from phonomatch.core.records import MatchRecord


def is_complete(records: Iterable[MatchRecord], target_length: int) -> bool:
    """
    目標句是否完成

    Args:
        records: 本次比對結果
        target_length: 目標句 token 數

    Returns:
        bool: target_length > 0 且每個位置都有命中或自動顯示的紀錄
    """
    if target_length <= 0:
        return False
    satisfied = {r.original_index for r in records if r.is_matched}
    return all(index in satisfied for index in range(target_length))


def unmatched_indices(records: Sequence[MatchRecord]) -> list:
    """尚未滿足的目標位置 (依序)"""
    return [r.original_index for r in records if not r.is_matched]


def should_score(complete: bool, preview_used: bool) -> bool:
    """完成且未使用預覽才計分"""
    return complete and not preview_used
