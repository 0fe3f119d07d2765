"""
整體認讀音節

16 個不依聲母+韻母規則拆解的音節，各自有固定的標調字母。
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.core.errors import VariantMismatchError
from pinyinkit.core.initial import Initial
from pinyinkit.core.protocols.syllable import SyllableKind
from pinyinkit.core.rhyme import Rhyme, pad_slots, slots_to_text
from pinyinkit.core.tone import Tone, ToneFormat, ToneMark

from ._common import check_canonical, normalize, render, split_tone

# (字母, 標調字母)
PRIMITIVE_SYLLABLE_TABLE: Tuple[Tuple[Tuple[str, ...], str], ...] = tuple(
    (pad_slots(text), vowel)
    for text, vowel in (
        ("zhi", "i"), ("chi", "i"), ("shi", "i"), ("ri", "i"),
        ("zi", "i"), ("ci", "i"), ("si", "i"), ("yi", "i"),
        ("wu", "u"), ("yu", "u"), ("ye", "e"), ("yue", "e"),
        ("yuan", "a"), ("yin", "i"), ("yun", "u"), ("ying", "i"),
    )
)

_VOWELS = dict(PRIMITIVE_SYLLABLE_TABLE)


@dataclass(frozen=True)
class PrimitiveSyllable:
    """
    整體認讀音節

    只保存 4 格字母與聲調，沒有獨立的聲母/韻母。

    範例：
        >>> str(PrimitiveSyllable.from_text("zhi"))
        'zhi'
        >>> str(PrimitiveSyllable(("y", "u", "a", "n"), Tone.SECOND))
        'yuán'
    """
    literal: Tuple[str, ...]
    tone: Tone = Tone.NEUTRAL

    def __post_init__(self):
        literal = tuple(self.literal)
        if literal not in _VOWELS:
            raise VariantMismatchError(f"{slots_to_text(literal)!r} is not a whole syllable")
        object.__setattr__(self, "literal", literal)

    @classmethod
    def from_text(cls, text: str, config: Optional[PinyinConfig] = None) -> "PrimitiveSyllable":
        config = config or DEFAULT_CONFIG
        text = normalize(text)
        plain, tone = split_tone(text, config)
        return check_canonical(cls(pad_slots(plain), tone), text, config)

    @property
    def kind(self) -> SyllableKind:
        return SyllableKind.PRIMITIVE

    @property
    def initial(self) -> Optional[Initial]:
        return None

    @property
    def rhyme(self) -> Optional[Rhyme]:
        return None

    @property
    def vowel(self) -> str:
        return _VOWELS[self.literal]

    @property
    def tone_mark(self) -> ToneMark:
        return ToneMark.new(self.vowel, self.tone)

    @property
    def plain(self) -> str:
        return slots_to_text(self.literal)

    def show(self, tone_format: ToneFormat = ToneFormat.SYMBOL, neutral_tone_with_five: bool = False) -> str:
        return render(self.plain, self.vowel, self.tone, tone_format, neutral_tone_with_five)

    def __str__(self) -> str:
        return self.show()
