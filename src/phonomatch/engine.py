"""
口說練習比對引擎 (DrillEngine)

負責持有共享的別名表、自動顯示判斷器與相似度門檻，
並提供工廠方法建立每回合使用的 RoundState。

生命週期:
- Engine 應在應用程式啟動時建立一次
- 每當轉錄更新就呼叫 evaluate() 從頭重算 (引擎本身不保留跨呼叫狀態)
- 門檻可在兩次 evaluate 之間調整
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from phonomatch.config import MatchThresholds, MatcherConfig
from phonomatch.core.alias_tables import AliasTables
from phonomatch.core.auto_reveal import AutoRevealClassifier
from phonomatch.core.events import MatchEventHandler
from phonomatch.core.records import MatchRecord
from phonomatch.core.similarity import get_similarity_cache_stats
from phonomatch.matching.completion import is_complete
from phonomatch.matching.word_matcher import TargetInput, WordMatcher
from phonomatch.session.round import ADVANCE_DELAY_SECONDS, RoundState
from phonomatch.session.transcript import TranscriptBuffer
from phonomatch.utils.logger import TimingContext, get_logger, setup_logger


class DrillEngine:
    """
    比對引擎

    使用範例:
        >>> engine = DrillEngine()
        >>> records = engine.evaluate("i am happy", ["I'm", "happy."])
        >>> engine.is_complete(records, 2)
        True
    """

    _engine_name = "drill"

    def __init__(
        self,
        alias_tables: Optional[AliasTables] = None,
        *,
        classifier: Optional[AutoRevealClassifier] = None,
        thresholds: Optional[MatchThresholds] = None,
        config: Optional[MatcherConfig] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[MatchEventHandler] = None,
    ):
        if config is not None:
            verbose = verbose or config.verbose
            on_timing = on_timing or config.on_timing
            thresholds = thresholds or config.thresholds

        self._init_logger(verbose=verbose, on_timing=on_timing)

        with self._log_timing("DrillEngine.__init__"):
            self._alias_tables = alias_tables if alias_tables is not None else AliasTables.default()
            self._classifier = classifier if classifier is not None else AutoRevealClassifier()
            self._on_event = on_event
            self._matcher = WordMatcher(
                alias_tables=self._alias_tables,
                classifier=self._classifier,
                thresholds=thresholds or MatchThresholds(),
                on_event=on_event,
                on_timing=on_timing,
            )
            self._logger.info("DrillEngine initialized")
            self._logger.debug(
                f"  [Aliases] contractions={len(self._alias_tables.contractions)}, "
                f"numbers={len(self._alias_tables.number_phonetics)}, "
                f"letters={len(self._alias_tables.letter_phonetics)}"
            )

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @property
    def alias_tables(self) -> AliasTables:
        return self._alias_tables

    @property
    def classifier(self) -> AutoRevealClassifier:
        return self._classifier

    @property
    def matcher(self) -> WordMatcher:
        return self._matcher

    @property
    def thresholds(self) -> MatchThresholds:
        return self._matcher.thresholds

    @thresholds.setter
    def thresholds(self, value: MatchThresholds) -> None:
        self._logger.debug(f"Thresholds -> short={value.short}, long={value.long}")
        self._matcher.thresholds = value

    def evaluate(
        self,
        transcript: str,
        target_tokens: TargetInput,
        thresholds: Optional[MatchThresholds] = None,
        *,
        silent: bool = False,
    ) -> List[MatchRecord]:
        """
        比對轉錄與目標句

        Args:
            transcript: 累積的最終轉錄
            target_tokens: 目標句 token 列表 (或整句字串)
            thresholds: 本次使用的門檻，None 表示使用引擎目前的門檻

        Returns:
            List[MatchRecord]: 每個目標 token 一筆
        """
        return self._matcher.match(transcript, target_tokens, thresholds, silent=silent)

    @staticmethod
    def is_complete(records: Sequence[MatchRecord], target_length: int) -> bool:
        return is_complete(records, target_length)

    def create_round(self, target: TargetInput, *, advance_delay: float = ADVANCE_DELAY_SECONDS) -> RoundState:
        """建立新回合；每回合使用一個新的 RoundState"""
        round_state = RoundState(target, self._matcher, advance_delay=advance_delay, on_event=self._on_event)
        self._logger.debug(f"Creating round with {len(round_state.tokens)} tokens")
        return round_state

    @staticmethod
    def create_transcript_buffer() -> TranscriptBuffer:
        return TranscriptBuffer()

    def get_cache_stats(self) -> Dict[str, Any]:
        return get_similarity_cache_stats()
