"""
鼻音音節（嘆詞 ń ň ǹ ḿ m̀）

不屬於《漢語拼音方案》，作為擴充支援。
"""

from dataclasses import dataclass
from typing import Optional

from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.core.errors import VariantMismatchError
from pinyinkit.core.initial import Initial
from pinyinkit.core.protocols.syllable import SyllableKind
from pinyinkit.core.rhyme import Rhyme
from pinyinkit.core.tone import Tone, ToneFormat, ToneMark

from ._common import check_canonical, normalize, render

LEGAL_NASAL_TONES = {
    Initial.M: (Tone.SECOND, Tone.FOURTH),
    Initial.N: (Tone.SECOND, Tone.THIRD, Tone.FOURTH),
}


@dataclass(frozen=True)
class NasalSyllable:
    """
    鼻音音節

    Raises:
        VariantMismatchError: 聲母不是 m/n，或該聲母沒有此聲調
    """
    initial: Initial
    tone: Tone

    def __post_init__(self):
        legal = LEGAL_NASAL_TONES.get(self.initial)
        if legal is None:
            raise VariantMismatchError(f"Nasal syllable needs m or n, got {self.initial}")
        if self.tone not in legal:
            raise VariantMismatchError(f"Nasal syllable {self.initial} has no tone {self.tone}")

    @classmethod
    def from_text(cls, text: str, config: Optional[PinyinConfig] = None) -> "NasalSyllable":
        config = config or DEFAULT_CONFIG
        text = normalize(text)

        if not text and config.empty_as_m:
            return cls(Initial.M, Tone.SECOND)

        plain, tone = ToneMark.strip(text)
        if plain not in ("m", "n"):
            raise VariantMismatchError(f"{text!r} is not a nasal syllable")

        return check_canonical(cls(Initial.new(plain), tone), text, config)

    @property
    def kind(self) -> SyllableKind:
        return SyllableKind.NASAL

    @property
    def rhyme(self) -> Optional[Rhyme]:
        return None

    @property
    def vowel(self) -> str:
        return self.initial.value

    @property
    def tone_mark(self) -> ToneMark:
        return ToneMark.new(self.vowel, self.tone)

    @property
    def plain(self) -> str:
        return self.initial.value

    def show(self, tone_format: ToneFormat = ToneFormat.SYMBOL, neutral_tone_with_five: bool = False) -> str:
        return render(self.plain, self.vowel, self.tone, tone_format, neutral_tone_with_five)

    def __str__(self) -> str:
        return self.show()
