"""
延遲導入與依賴檢查

漢字讀音查詢需要 pypinyin，屬於選用依賴，只在第一次使用時載入。

安裝漢字支援:
    pip install "pinyinkit[ch]"
"""

import importlib.util
from typing import Any, Optional

from .logger import get_logger

logger = get_logger(__name__)

HANZI_INSTALL_HINT = (
    "缺少漢字讀音依賴。請執行:\n"
    "  pip install \"pinyinkit[ch]\""
)

_pypinyin: Optional[Any] = None


def is_hanzi_available() -> bool:
    """檢查 pypinyin 是否已安裝（不實際載入）"""
    return importlib.util.find_spec("pypinyin") is not None


def check_hanzi_dependencies() -> None:
    """
    確認漢字讀音依賴已安裝

    Raises:
        ImportError: 未安裝 pypinyin
    """
    if not is_hanzi_available():
        raise ImportError(HANZI_INSTALL_HINT)


def _get_pypinyin() -> Any:
    """延遲載入 pypinyin 模組"""
    global _pypinyin
    if _pypinyin is None:
        try:
            import pypinyin
        except ImportError as e:
            logger.error("無法載入 pypinyin，請確認是否已安裝 'pinyinkit[ch]'")
            raise ImportError(HANZI_INSTALL_HINT) from e
        _pypinyin = pypinyin
    return _pypinyin
