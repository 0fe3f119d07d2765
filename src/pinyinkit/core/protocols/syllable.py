"""
Syllable Protocol

定義四種音節（整體認讀、常規、自成、鼻音）共同的最小介面。
各音節類型是獨立的不可變紀錄，不互相繼承。
"""

from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from ..initial import Initial
from ..rhyme import Rhyme
from ..tone import Tone, ToneFormat, ToneMark


class SyllableKind(Enum):
    """音節類型"""
    PRIMITIVE = "primitive"   # 整體認讀音節
    NORMAL = "normal"         # 聲母 + 韻母
    RHYME = "rhyme"           # 自成音節（零聲母）
    NASAL = "nasal"           # 鼻音音節（不屬於《漢語拼音方案》）


@runtime_checkable
class SyllableProtocol(Protocol):
    @property
    def kind(self) -> SyllableKind:
        ...

    @property
    def initial(self) -> Optional[Initial]:
        ...

    @property
    def rhyme(self) -> Optional[Rhyme]:
        ...

    @property
    def vowel(self) -> str:
        """書寫形式中承載調號的字母"""
        ...

    @property
    def tone(self) -> Tone:
        ...

    @property
    def tone_mark(self) -> ToneMark:
        ...

    @property
    def plain(self) -> str:
        """不帶調號的書寫形式"""
        ...

    def show(self, tone_format: ToneFormat = ToneFormat.SYMBOL, neutral_tone_with_five: bool = False) -> str:
        ...

    def __str__(self) -> str:
        ...
