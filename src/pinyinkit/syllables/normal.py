"""
常規音節（聲母 + 韻母，含兩拼與三拼）

書寫規則：
- iou、uei、uen 前面有聲母時寫成 iu、ui、un（牛 niu、歸 gui、論 lun）
- ü 列韻母跟 j、q、x 相拼時省略兩點（居 ju、學 xue、全 quan、群 qun），
  跟 n、l 相拼時保留（女 nü、略 lüe）
"""

from dataclasses import dataclass
from typing import Optional

from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.core.errors import VariantMismatchError
from pinyinkit.core.initial import Initial, fold_digraph
from pinyinkit.core.protocols.syllable import SyllableKind
from pinyinkit.core.rhyme import Rhyme, RhymeColumn, tone_vowel
from pinyinkit.core.tone import Tone, ToneFormat, ToneMark

from ._common import check_canonical, normalize, render, split_tone

# (韻母, 書寫形式)
CONTRACTED_SPELLINGS = (
    ("iou", "iu"),
    ("uei", "ui"),
    ("uen", "un"),
)

UMLAUT_ELIDED_SPELLINGS = (
    ("ü", "u"),
    ("üe", "ue"),
    ("üan", "uan"),
    ("ün", "un"),
)

PALATAL_INITIALS = (Initial.J, Initial.Q, Initial.X)

_CONTRACT = dict(CONTRACTED_SPELLINGS)
_EXPAND = {written: rhyme for rhyme, written in CONTRACTED_SPELLINGS}
_ELIDE = dict(UMLAUT_ELIDED_SPELLINGS)
_RESTORE = {written: rhyme for rhyme, written in UMLAUT_ELIDED_SPELLINGS}


@dataclass(frozen=True)
class NormalSyllable:
    """
    常規音節

    j、q、x 不與 u 列韻母相拼，否則 juan 無法判斷是 uan 還是 üan。

    Raises:
        VariantMismatchError: j/q/x 搭配 u 列韻母

    範例：
        >>> str(NormalSyllable(Initial.G, Rhyme.from_text("uei"), Tone.FIRST))
        'guī'
        >>> NormalSyllable.from_text("jú").rhyme
        Rhyme(slots=('ü', ' ', ' ', ' '))
    """
    initial: Initial
    rhyme: Rhyme
    tone: Tone = Tone.NEUTRAL

    def __post_init__(self):
        if self.initial in PALATAL_INITIALS and self.rhyme.column is RhymeColumn.U:
            raise VariantMismatchError(
                f"Initial {self.initial} does not combine with rhyme {self.rhyme}"
            )

    @classmethod
    def from_text(cls, text: str, config: Optional[PinyinConfig] = None) -> "NormalSyllable":
        config = config or DEFAULT_CONFIG
        text = normalize(text)
        plain, tone = split_tone(text, config)

        if len(plain) < 2:
            raise VariantMismatchError(f"{text!r} is too short for initial + rhyme")

        folded = fold_digraph(plain)
        initial = Initial.new(folded[0])
        rest = folded[1:]

        if initial in PALATAL_INITIALS:
            rest = _RESTORE.get(rest, rest)
        rest = _EXPAND.get(rest, rest)

        syllable = cls(initial, Rhyme.from_text(rest), tone)
        return check_canonical(syllable, text, config)

    @property
    def kind(self) -> SyllableKind:
        return SyllableKind.NORMAL

    @property
    def written_rhyme(self) -> str:
        """韻母的書寫形式（縮寫、省略兩點後）"""
        rhyme = str(self.rhyme)
        if self.initial in PALATAL_INITIALS:
            rhyme = _ELIDE.get(rhyme, rhyme)
        return _CONTRACT.get(rhyme, rhyme)

    @property
    def vowel(self) -> str:
        return tone_vowel(self.written_rhyme)

    @property
    def tone_mark(self) -> ToneMark:
        return ToneMark.new(self.vowel, self.tone)

    @property
    def plain(self) -> str:
        return str(self.initial) + self.written_rhyme

    def show(self, tone_format: ToneFormat = ToneFormat.SYMBOL, neutral_tone_with_five: bool = False) -> str:
        initial = str(self.initial)
        return initial + render(self.written_rhyme, self.vowel, self.tone, tone_format, neutral_tone_with_five)

    def __str__(self) -> str:
        return self.show()
