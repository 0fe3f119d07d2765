"""
日誌工具

所有 logger 都位於 "pinyinkit" 命名空間下。套件本身只安裝 NullHandler，
是否輸出由使用者透過標準 logging 或 setup_logger() 決定。

使用方式:
    from pinyinkit.utils.logger import get_logger, TimingContext

    logger = get_logger("syllables.dispatcher")
    with TimingContext("decode", logger):
        ...
"""

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyinkit"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyinkit 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "lookup"），也接受 __name__

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為 pinyinkit 根 logger 安裝 StreamHandler（重複呼叫只會調整等級）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 根 logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, "_pinyinkit_stream", False):
            handler.setLevel(level)
            break
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        handler.setLevel(level)
        handler._pinyinkit_stream = True
        logger.addHandler(handler)

    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時資訊的輸出"""
    setup_logger(level=logging.WARNING)
    timing_logger = logging.getLogger(TIMING_LOGGER_NAME)
    timing_logger.setLevel(logging.DEBUG)
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        if getattr(handler, "_pinyinkit_stream", False):
            handler.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文

    離開時記錄耗時（毫秒），並呼叫 callback(operation, elapsed_seconds)。
    區塊內的例外照常往外拋。

    範例：
        >>> with TimingContext("readings", logger, logging.DEBUG):
        ...     do_work()
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, "%s took %.3f ms", self.operation, self.elapsed * 1000)
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """為函數加上 TimingContext 的裝飾器"""

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
