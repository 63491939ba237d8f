"""
日誌與計時工具

所有 logger 都掛在 `phonomatch` 命名空間之下，函式庫本身在 import 時
不會新增任何 handler，由使用者透過標準 logging 或下列工具決定輸出。

使用方式:
    from phonomatch import enable_debug_logging, get_logger

    enable_debug_logging()
    logger = get_logger("matcher.word")
    logger.debug("hello")

    # 計時
    with TimingContext("WordMatcher.match", logger):
        ...
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonomatch"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None
_timing_enabled = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonomatch 命名空間下的 logger

    Args:
        name: 子 logger 名稱 (例如 "engine"、"matcher.word")，None 表示根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為 phonomatch 根 logger 掛上 stream handler

    重複呼叫只會調整等級，不會重複掛 handler。
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(_handler)

    _handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌 (含比對過程)"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """開啟計時日誌；TimingContext 會改以 INFO 等級輸出"""
    global _timing_enabled
    _timing_enabled = True
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if logger.level == logging.NOTSET or logger.level > logging.INFO:
        return setup_logger(level=logging.INFO)
    return logger


class TimingContext:
    """
    計時 context manager

    Args:
        operation: 操作名稱 (出現在日誌中)
        logger: 輸出用 logger，預設為根 logger
        level: 日誌等級
        callback: 計時回呼 (operation, elapsed_seconds) -> None
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = logging.INFO if _timing_enabled else level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False

