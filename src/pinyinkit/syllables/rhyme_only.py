"""
自成音節（零聲母，只有韻母）

i、u、ü 三列韻母自成音節時依補寫規則改寫：
i 列加 y 或把 i 改成 y，u 列加 w 或把 u 改成 w，ü 列一律寫成 yu。
"""

from dataclasses import dataclass
from typing import Optional

from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.core.initial import Initial
from pinyinkit.core.protocols.syllable import SyllableKind
from pinyinkit.core.rhyme import Rhyme, tone_vowel
from pinyinkit.core.tone import Tone, ToneFormat, ToneMark

from ._common import check_canonical, normalize, render, split_tone

# (韻母, 書寫形式)
ZERO_INITIAL_SPELLINGS_I = (
    ("i", "yi"), ("ia", "ya"), ("ie", "ye"), ("iao", "yao"), ("iou", "you"),
    ("ian", "yan"), ("in", "yin"), ("iang", "yang"), ("ing", "ying"), ("iong", "yong"),
)
ZERO_INITIAL_SPELLINGS_U = (
    ("u", "wu"), ("ua", "wa"), ("uo", "wo"), ("uai", "wai"), ("uei", "wei"),
    ("uan", "wan"), ("uen", "wen"), ("uang", "wang"), ("ueng", "weng"),
)
ZERO_INITIAL_SPELLINGS_YU = (
    ("ü", "yu"), ("üe", "yue"), ("üan", "yuan"), ("ün", "yun"),
)

ZERO_INITIAL_SPELLINGS = (
    ZERO_INITIAL_SPELLINGS_I
    + ZERO_INITIAL_SPELLINGS_U
    + ZERO_INITIAL_SPELLINGS_YU
)

_PREFIX = dict(ZERO_INITIAL_SPELLINGS)
_UNPREFIX = {written: rhyme for rhyme, written in ZERO_INITIAL_SPELLINGS}


@dataclass(frozen=True)
class RhymeOnlySyllable:
    """
    自成音節

    範例：
        >>> str(RhymeOnlySyllable(Rhyme.from_text("i"), Tone.FIRST))
        'yī'
        >>> str(RhymeOnlySyllable.from_text("wang").rhyme)
        'uang'
    """
    rhyme: Rhyme
    tone: Tone = Tone.NEUTRAL

    @classmethod
    def from_text(cls, text: str, config: Optional[PinyinConfig] = None) -> "RhymeOnlySyllable":
        config = config or DEFAULT_CONFIG
        text = normalize(text)
        plain, tone = split_tone(text, config)
        rhyme = _UNPREFIX.get(plain, plain)
        return check_canonical(cls(Rhyme.from_text(rhyme), tone), text, config)

    @property
    def kind(self) -> SyllableKind:
        return SyllableKind.RHYME

    @property
    def initial(self) -> Optional[Initial]:
        return None

    @property
    def vowel(self) -> str:
        return tone_vowel(self.plain)

    @property
    def tone_mark(self) -> ToneMark:
        return ToneMark.new(self.vowel, self.tone)

    @property
    def plain(self) -> str:
        rhyme = str(self.rhyme)
        return _PREFIX.get(rhyme, rhyme)

    def show(self, tone_format: ToneFormat = ToneFormat.SYMBOL, neutral_tone_with_five: bool = False) -> str:
        return render(self.plain, self.vowel, self.tone, tone_format, neutral_tone_with_five)

    def __str__(self) -> str:
        return self.show()
