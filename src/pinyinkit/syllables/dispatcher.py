"""
音節解析分派

依固定順序嘗試四種音節：整體認讀 → 常規 → 自成 → 鼻音，回傳第一個成功的結果。
整體認讀音節必須最先嘗試，因為其中幾個（如 zhi、zi）也能被常規音節規則拆解。
"""

import logging
from typing import Dict, List, Optional, Union

from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.core.errors import NoMatchError, PinyinError
from pinyinkit.utils.logger import TimingContext, get_logger

from .nasal import NasalSyllable
from .normal import NormalSyllable
from .primitive import PrimitiveSyllable
from .rhyme_only import RhymeOnlySyllable

Syllable = Union[PrimitiveSyllable, NormalSyllable, RhymeOnlySyllable, NasalSyllable]

SYLLABLE_DIVIDING_MARK = "'"

PARSE_ORDER = (
    PrimitiveSyllable,
    NormalSyllable,
    RhymeOnlySyllable,
    NasalSyllable,
)

logger = get_logger("syllables.dispatcher")
timing_logger = get_logger("timing")


def decode(text: str, config: Optional[PinyinConfig] = None) -> Syllable:
    """
    解析單一音節

    Args:
        text: 一個音節的拼音（已與前後音節分開）
        config: 解析配置，預設為 DEFAULT_CONFIG

    Returns:
        Syllable: 四種音節之一

    Raises:
        NoMatchError: 四種音節都無法解析，failures 記錄各類型的失敗原因

    範例：
        >>> decode("yi").kind
        <SyllableKind.PRIMITIVE: 'primitive'>
        >>> str(decode("lüè"))
        'lüè'
    """
    config = config or DEFAULT_CONFIG
    failures: Dict[str, PinyinError] = {}

    with TimingContext("decode", timing_logger, logging.DEBUG, config.on_timing):
        for parser in PARSE_ORDER:
            try:
                return parser.from_text(text, config)
            except PinyinError as e:
                failures[parser.__name__] = e
                logger.debug("%s rejected %r: %s", parser.__name__, text, e)

    raise NoMatchError(text, failures)


def decode_many(
    text: str,
    separator: str = SYLLABLE_DIVIDING_MARK,
    config: Optional[PinyinConfig] = None,
) -> List[Syllable]:
    """
    以分隔符號切開後逐一解析（不做無分隔文字的斷詞）

    範例：
        >>> [str(s) for s in decode_many("xī'ān")]
        ['xī', 'ān']
    """
    return [decode(piece, config) for piece in text.split(separator)]
