"""
音節模組

四種音節類型與解析分派：
- PrimitiveSyllable: 整體認讀音節
- NormalSyllable: 聲母 + 韻母
- RhymeOnlySyllable: 自成音節
- NasalSyllable: 鼻音音節
"""

from .dispatcher import (
    PARSE_ORDER,
    SYLLABLE_DIVIDING_MARK,
    Syllable,
    decode,
    decode_many,
)
from .nasal import NasalSyllable
from .normal import NormalSyllable
from .primitive import PrimitiveSyllable
from .rhyme_only import RhymeOnlySyllable

__all__ = [
    "Syllable",
    "PrimitiveSyllable",
    "NormalSyllable",
    "RhymeOnlySyllable",
    "NasalSyllable",
    "decode",
    "decode_many",
    "PARSE_ORDER",
    "SYLLABLE_DIVIDING_MARK",
]
