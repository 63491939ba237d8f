"""
回合狀態模組

一個回合 = 一個目標句。回合狀態記錄學習者透過預覽看過哪些字、
是否已顯示答案，並把比對結果轉成畫面需要的顯示狀態與計分訊號。

計分規則:
- 目標句全部被滿足時完成
- 只有「完成且沒有使用預覽」才計分
- 完成 (或放棄) 後顯示完整句子，並在固定延遲後進入下一回合
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Set

from phonomatch.config import MatchThresholds
from phonomatch.core.events import MatchEventHandler
from phonomatch.core.records import MatchRecord
from phonomatch.matching.completion import is_complete, should_score
from phonomatch.matching.word_matcher import TargetInput, WordMatcher, split_target
from phonomatch.utils.logger import get_logger

ADVANCE_DELAY_SECONDS = 1.5


class WordState(Enum):
    """目標字的顯示狀態 (依優先順序)"""
    REVEALED = "revealed"            # 答案已顯示
    MATCHED = "matched"              # 已被語音滿足
    AUTO_REVEALED = "auto_revealed"  # 數字/時間等自動顯示
    PREVIEWED = "previewed"          # 透過預覽看過
    BLANK = "blank"                  # 尚未說出


@dataclass(frozen=True)
class RoundOutcome:
    """
    一次評估的結果

    Attributes:
        records: 比對結果
        complete: 目標句是否已完成
        scored: 本次是否應計分 (每回合最多一次)
        advance_after: 需排程進入下一回合時的延遲秒數，否則為 None
    """
    records: List[MatchRecord]
    complete: bool
    scored: bool = False
    advance_after: Optional[float] = None


class RoundState:
    """
    單一回合狀態

    建立方式:
        使用 DrillEngine.create_round() 建立實例，或直接傳入 WordMatcher
    """

    def __init__(
        self,
        target: TargetInput,
        matcher: WordMatcher,
        *,
        advance_delay: float = ADVANCE_DELAY_SECONDS,
        on_event: Optional[MatchEventHandler] = None,
    ):
        self._tokens: List[str] = split_target(target)
        self._matcher = matcher
        self._advance_delay = advance_delay
        self._on_event = on_event
        self._previewed: Set[int] = set()
        self._preview_used = False
        self._answer_shown = False
        self._completed = False
        self._logger = get_logger("session.round")

    @property
    def tokens(self) -> Sequence[str]:
        return tuple(self._tokens)

    @property
    def previewed(self) -> FrozenSet[int]:
        return frozenset(self._previewed)

    @property
    def preview_used(self) -> bool:
        return self._preview_used

    @property
    def answer_shown(self) -> bool:
        return self._answer_shown

    @property
    def completed(self) -> bool:
        return self._completed

    def reveal(self, index: int) -> str:
        """
        預覽單一目標字 (本回合將不計分)

        Raises:
            IndexError: index 超出目標句範圍
        """
        if not 0 <= index < len(self._tokens):
            raise IndexError(f"target index {index} out of range (0..{len(self._tokens) - 1})")
        self._previewed.add(index)
        self._preview_used = True
        self._logger.debug(f"[預覽] #{index} '{self._tokens[index]}'")
        return self._tokens[index]

    def give_up(self) -> RoundOutcome:
        """直接顯示答案，不計分"""
        if self._answer_shown:
            return RoundOutcome(records=[], complete=self._completed)
        self._answer_shown = True
        return RoundOutcome(records=[], complete=False, advance_after=self._advance_delay)

    def evaluate(self, transcript: str, thresholds: Optional[MatchThresholds] = None) -> RoundOutcome:
        """
        以目前的轉錄重新評估本回合

        只有第一次完成時回傳 scored/advance_after，之後的評估不會重複計分。
        """
        records = self._matcher.match(transcript, self._tokens, thresholds, silent=self._answer_shown)

        if self._answer_shown:
            return RoundOutcome(records=records, complete=self._completed)

        complete = is_complete(records, len(self._tokens))
        if not complete:
            return RoundOutcome(records=records, complete=False)

        self._completed = True
        self._answer_shown = True
        scored = should_score(complete, self._preview_used)
        self._logger.debug(f"[完成] {' '.join(self._tokens)} (scored={scored})")
        self._emit_complete(scored)
        return RoundOutcome(records=records, complete=True, scored=scored, advance_after=self._advance_delay)

    def word_states(self, records: Sequence[MatchRecord]) -> List[WordState]:
        """將比對結果轉成每個位置的顯示狀態"""
        if self._answer_shown:
            return [WordState.REVEALED] * len(self._tokens)

        by_index = {r.original_index: r for r in records}
        states: List[WordState] = []
        for index in range(len(self._tokens)):
            record = by_index.get(index)
            if record is not None and record.matched_spoken is not None:
                states.append(WordState.MATCHED)
            elif record is not None and record.auto_revealed:
                states.append(WordState.AUTO_REVEALED)
            elif index in self._previewed:
                states.append(WordState.PREVIEWED)
            else:
                states.append(WordState.BLANK)
        return states

    def _emit_complete(self, scored: bool) -> None:
        try:
            if self._on_event is not None:
                self._on_event({"type": "complete", "target_length": len(self._tokens), "scored": scored})
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
