"""
全域配置模組

提供相似度門檻與比對器配置，控制日誌、計時等行為。

使用方式:
    from phonomatch import DrillEngine, MatchThresholds

    # 簡單開啟 verbose 模式
    engine = DrillEngine(verbose=True)

    # 調整門檻 (下一次 evaluate 生效)
    engine.thresholds = MatchThresholds(short=0.5, long=0.7)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("phonomatch").setLevel(logging.DEBUG)
"""

import logging
import numbers
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from phonomatch.languages.english.config import EnglishAliasConfig

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass(frozen=True)
class MatchThresholds:
    """
    相似度門檻

    屬性:
        short: 目標字長度 <= 2 時使用
        long: 目標字與語音字長度皆 >= 3 時使用

    門檻不做範圍檢查：0 代表相似度規則一律通過，大於 1 代表一律不通過。
    """

    short: float = EnglishAliasConfig.DEFAULT_SHORT_WORD_THRESHOLD
    long: float = EnglishAliasConfig.DEFAULT_LONG_WORD_THRESHOLD

    def __post_init__(self):
        for name in ("short", "long"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(f"{name} threshold must be a number, got {value!r}")

    def with_short(self, value: float) -> "MatchThresholds":
        return replace(self, short=value)

    def with_long(self, value: float) -> "MatchThresholds":
        return replace(self, long=value)


@dataclass
class MatcherConfig:
    """
    比對器配置類別 (進階用途)

    一般使用者只需要使用 verbose=True 即可。

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        thresholds: 相似度門檻
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    thresholds: MatchThresholds = field(default_factory=MatchThresholds)

    def __post_init__(self):
        configure_logging(self.verbose)

