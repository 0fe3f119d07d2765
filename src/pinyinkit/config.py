"""
全域配置模組

提供統一的配置類別，控制日誌與解析的寬鬆程度。

使用方式:
    from pinyinkit import PinyinConfig, decode

    # 簡單開啟 verbose 模式
    syllable = decode("zhōng", config=PinyinConfig(verbose=True))

    # 只接受標準寫法
    decode("niou", config=PinyinConfig(strict=True))  # NonCanonicalSpellingError

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyinkit").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """verbose 時為 pinyinkit 安裝 DEBUG 輸出；否則保持靜默，交給標準 logging 控制"""
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass(frozen=True)
class PinyinConfig:
    """
    解析配置

    屬性:
        verbose: 是否開啟詳細日誌
        shortened_letters: 是否接受 ŋ 作為 ng 的縮寫
        empty_as_m: 舊資料相容：空字串視為 ḿ
        strict: 只接受標準寫法（輸入必須等於解析結果的輸出）
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
    """

    verbose: bool = False
    shortened_letters: bool = True
    empty_as_m: bool = False
    strict: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        """初始化後設定 logger"""
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = PinyinConfig()
