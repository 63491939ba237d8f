"""
單字比對器模組 (Word Matcher)

將累積中的語音轉錄與固定目標句逐字比對，決定哪些目標字已被「說出」。

演算法 (每個目標字依序執行):
1. 正規化目標字；符合自動顯示樣式者直接視為命中，不消耗語音 token
2. 由左至右掃描尚未被消耗的語音 token，依序嘗試規則，第一條成功即停止:
   a. 完全相同
   b. 目標為縮寫，語音為其展開單字之一
   c. 語音為縮寫，目標為其展開單字之一
   d. 數字/時間發音表 (包含、被包含、相同或相似度 >= 0.7)
   e. 字母發音表 (相同或相似度 >= 0.8)
   f. 兩者長度皆 >= 3：相似度 >= long 門檻
   g. 目標長度 <= 2：相似度 >= short 門檻
3. 命中即標記該語音 token 已消耗，換下一個目標字

這是貪婪、保序、不回溯的比對。轉錄會持續變長並每次從頭重算，
所以比對本身不保留任何跨呼叫狀態。

使用方式:
    from phonomatch.matching import WordMatcher

    matcher = WordMatcher()
    records = matcher.match("i am happy", "I'm happy.")
"""

import logging
import uuid
from typing import Callable, List, Optional, Sequence, Set, Tuple, Union

from phonomatch.config import MatchThresholds
from phonomatch.core.alias_tables import AliasTables
from phonomatch.core.auto_reveal import AutoRevealClassifier
from phonomatch.core.events import MatchEvent, MatchEventHandler
from phonomatch.core.normalizer import normalize, strip_whitespace, tokenize
from phonomatch.core.records import MatchRecord, MatchRule
from phonomatch.core.similarity import similarity
from phonomatch.utils.logger import TimingContext, get_logger

TargetInput = Union[str, Sequence[str]]

RuleHit = Tuple[MatchRule, float]


def split_target(target: TargetInput) -> List[str]:
    """目標句可傳入整句字串或已切好的 token 列表"""
    if isinstance(target, str):
        return tokenize(target)
    return list(target)


class WordMatcher:
    """
    單字比對器

    功能:
    - 每次呼叫 match() 都是純函數：相同 (轉錄, 目標, 門檻) 必得相同結果
    - 同一次比對中，一個語音 token 最多滿足一個目標字
    - 自動顯示的目標字永遠視為命中

    建立方式:
        WordMatcher()                                   # 預設英文別名表
        WordMatcher(alias_tables=AliasTables.from_dict({...}))
    """

    def __init__(
        self,
        alias_tables: Optional[AliasTables] = None,
        classifier: Optional[AutoRevealClassifier] = None,
        thresholds: Optional[MatchThresholds] = None,
        on_event: Optional[MatchEventHandler] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self.alias_tables = alias_tables if alias_tables is not None else AliasTables.default()
        self.classifier = classifier if classifier is not None else AutoRevealClassifier()
        self.thresholds = thresholds if thresholds is not None else MatchThresholds()
        self._on_event = on_event
        self._on_timing = on_timing
        self._logger = get_logger("matcher.word")

    def match(
        self,
        transcript: str,
        target: TargetInput,
        thresholds: Optional[MatchThresholds] = None,
        *,
        silent: bool = False,
        trace_id: Optional[str] = None,
    ) -> List[MatchRecord]:
        """
        比對轉錄與目標句

        Args:
            transcript: 累積的語音轉錄 (僅含最終結果)
            target: 目標句字串或 token 列表
            thresholds: 本次使用的門檻，None 表示使用實例預設值
            silent: 是否靜默模式 (不輸出比對日誌、不觸發事件)
            trace_id: 事件追蹤 ID

        Returns:
            List[MatchRecord]: 每個目標 token 一筆，順序與目標句相同
        """
        with TimingContext("WordMatcher.match", self._logger, logging.DEBUG, self._on_timing):
            limits = thresholds if thresholds is not None else self.thresholds
            target_tokens = split_target(target)
            spoken_raw = tokenize(transcript or "")
            spoken_words = [normalize(w) for w in spoken_raw]

            used_spoken: Set[int] = set()
            records: List[MatchRecord] = []

            for original_index, original_word in enumerate(target_tokens):
                canonical = normalize(original_word)

                if self.classifier.should_auto_reveal(original_word):
                    records.append(
                        MatchRecord(
                            original_index=original_index,
                            original=original_word,
                            canonical=canonical,
                            auto_revealed=True,
                            rule=MatchRule.AUTO_REVEAL,
                        )
                    )
                    continue

                record = MatchRecord(original_index=original_index, original=original_word, canonical=canonical)
                for spoken_index, spoken in enumerate(spoken_words):
                    if spoken_index in used_spoken:
                        continue

                    hit = self._try_rules(original_word, canonical, spoken_raw[spoken_index], spoken, limits)
                    if hit is None:
                        continue

                    rule, score = hit
                    used_spoken.add(spoken_index)
                    record = MatchRecord(
                        original_index=original_index,
                        original=original_word,
                        canonical=canonical,
                        matched_spoken=spoken,
                        spoken_index=spoken_index,
                        rule=rule,
                        score=score,
                    )
                    break

                records.append(record)

            if not silent:
                self._report(records, trace_id or uuid.uuid4().hex)
            return records

    def _try_rules(
        self,
        target_raw: str,
        target: str,
        spoken_raw: str,
        spoken: str,
        thresholds: MatchThresholds,
    ) -> Optional[RuleHit]:
        """
        依序嘗試規則 a-g，回傳第一條命中的規則與分數

        縮寫查詢使用保留撇號的原字 (target_raw / spoken_raw)，其餘規則使用正規化字。
        """
        tables = self.alias_tables

        if spoken == target:
            return MatchRule.EXACT, 1.0

        expansion = tables.contraction_expansion(target_raw)
        if expansion and spoken in expansion:
            return MatchRule.CONTRACTION, 1.0

        expansion = tables.contraction_expansion(spoken_raw)
        if expansion and target in expansion:
            return MatchRule.CONTRACTION_REVERSE, 1.0

        pronunciations = tables.number_pronunciations(target)
        if pronunciations and self._matches_number(spoken, pronunciations, tables.number_threshold):
            return MatchRule.NUMBER_PHONETIC, 1.0

        pronunciations = tables.letter_pronunciations(target)
        if pronunciations and any(
            spoken == p or similarity(spoken, p) >= tables.letter_threshold for p in pronunciations
        ):
            return MatchRule.LETTER_PHONETIC, 1.0

        if len(target) >= 3 and len(spoken) >= 3:
            score = similarity(spoken, target)
            if score >= thresholds.long:
                return MatchRule.LONG_SIMILARITY, score

        if len(target) <= 2:
            score = similarity(spoken, target)
            if score >= thresholds.short:
                return MatchRule.SHORT_SIMILARITY, score

        return None

    @staticmethod
    def _matches_number(spoken: str, pronunciations: Sequence[str], threshold: float) -> bool:
        for pronunciation in pronunciations:
            compact = strip_whitespace(pronunciation)
            # 空字串是任何字串的子字串，不可靠包含關係命中
            if (
                spoken and (compact in spoken or spoken in compact)
                or spoken == pronunciation
                or similarity(spoken, compact) >= threshold
            ):
                return True
        return False

    def _report(self, records: List[MatchRecord], trace_id: str) -> None:
        for record in records:
            if record.auto_revealed:
                self._logger.debug(f"[自動顯示] #{record.original_index} '{record.original}'")
                self._emit(
                    {
                        "type": "auto_reveal",
                        "trace_id": trace_id,
                        "index": record.original_index,
                        "target": record.canonical,
                        "rule": MatchRule.AUTO_REVEAL.value,
                    }
                )
            elif record.matched_spoken is not None:
                self._logger.debug(
                    f"[{record.rule.value}] #{record.original_index} '{record.original}' <- "
                    f"'{record.matched_spoken}' (Score: {record.score:.3f})"
                )
                self._emit(
                    {
                        "type": "match",
                        "trace_id": trace_id,
                        "index": record.original_index,
                        "target": record.canonical,
                        "spoken": record.matched_spoken,
                        "rule": record.rule.value,
                        "score": record.score,
                    }
                )

    def _emit(self, event: MatchEvent) -> None:
        try:
            if self._on_event is not None:
                self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")


def match_words(
    transcript: str,
    target: TargetInput,
    alias_tables: Optional[AliasTables] = None,
    thresholds: Optional[MatchThresholds] = None,
    classifier: Optional[AutoRevealClassifier] = None,
) -> List[MatchRecord]:
    """函數式入口：以指定別名表與門檻比對一次"""
    matcher = WordMatcher(alias_tables=alias_tables, classifier=classifier, thresholds=thresholds)
    return matcher.match(transcript, target, silent=True)
