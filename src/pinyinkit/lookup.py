"""
漢字讀音查詢

以 pypinyin 作為字典，把每個漢字的所有讀音（多音字全部列出，不做消歧）
解析成結構化音節。

注意：此模組使用延遲導入 (Lazy Import) 機制，
僅在實際查詢時才會載入 pypinyin。

安裝漢字支援:
    pip install "pinyinkit[ch]"
"""

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.core.errors import PinyinError
from pinyinkit.syllables import Syllable, decode
from pinyinkit.utils.lazy_imports import _get_pypinyin
from pinyinkit.utils.logger import TimingContext, get_logger

logger = get_logger("lookup")
timing_logger = get_logger("timing")


# =============================================================================
# 拼音快取
# =============================================================================
# pypinyin 呼叫是效能瓶頸，使用 lru_cache

@lru_cache(maxsize=50000)
def cached_get_readings(char: str, heteronym: bool = True) -> Tuple[str, ...]:
    """快取版單字讀音（帶調號），非漢字回傳空 tuple"""
    pypinyin = _get_pypinyin()
    result = pypinyin.pinyin(char, style=pypinyin.TONE, heteronym=heteronym, errors="ignore")
    if not result:
        return ()
    return tuple(result[0])


def char_readings(
    char: str,
    heteronym: bool = True,
    config: Optional[PinyinConfig] = None,
) -> List[Syllable]:
    """
    單一漢字的讀音

    無法解析的讀音（例如 ńg 這類不在本套件音節表中的嘆詞）會記錄 warning 後略過。

    Args:
        char: 單一字元
        heteronym: 是否列出多音字的所有讀音
        config: 解析配置

    Returns:
        List[Syllable]: 讀音列表，非漢字為空列表

    範例：
        >>> [str(s) for s in char_readings("中")]
        ['zhōng', 'zhòng']
    """
    syllables = []
    for reading in cached_get_readings(char, heteronym):
        try:
            syllables.append(decode(reading, config))
        except PinyinError as e:
            logger.warning("Skipping reading %r of %r: %s", reading, char, e)
    return syllables


def readings(
    text: str,
    heteronym: bool = True,
    config: Optional[PinyinConfig] = None,
) -> List[List[Syllable]]:
    """
    逐字查詢讀音

    Args:
        text: 漢字字串
        heteronym: 是否列出多音字的所有讀音
        config: 解析配置

    Returns:
        List[List[Syllable]]: 每個字元一個讀音列表
    """
    config = config or DEFAULT_CONFIG
    with TimingContext("readings", timing_logger, logging.DEBUG, config.on_timing):
        return [char_readings(char, heteronym, config) for char in text]
