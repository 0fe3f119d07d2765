"""
音節共用的解析/輸出步驟
"""

import unicodedata
from typing import Tuple

from pinyinkit.config import PinyinConfig
from pinyinkit.core.errors import NonCanonicalSpellingError
from pinyinkit.core.tone import Tone, ToneFormat, ToneMark

_SUPERSCRIPT_DIGITS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def normalize(text: str) -> str:
    """統一為預組字元 (NFC)，組合符號輸入也能比對聲調符號表"""
    return unicodedata.normalize("NFC", text)


def split_tone(text: str, config: PinyinConfig) -> Tuple[str, Tone]:
    """去除調號並套用縮寫字母還原（ŋ → ng）"""
    plain, tone = ToneMark.strip(text)
    if config.shortened_letters:
        plain = plain.replace("ŋ", "ng")
    return plain, tone


def mark_vowel(written: str, vowel: str, tone: Tone) -> str:
    """把書寫形式中第一個 vowel 換成帶調字母"""
    mark = ToneMark.new(vowel, tone)
    index = written.index(vowel)
    return written[:index] + str(mark) + written[index + 1:]


def render(
    written: str,
    vowel: str,
    tone: Tone,
    tone_format: ToneFormat = ToneFormat.SYMBOL,
    neutral_tone_with_five: bool = False,
) -> str:
    """
    依聲調標記方式輸出

    - SYMBOL: 調號標在 vowel 上 (zhōng)
    - INDEX: 結尾加聲序 (zhong1)，輕聲預設不加，neutral_tone_with_five 時加 5
    - DIGIT: 結尾加上標調值 (zhong⁵⁵)，輕聲不加
    """
    if tone_format is ToneFormat.SYMBOL:
        return mark_vowel(written, vowel, tone)
    if tone_format is ToneFormat.INDEX:
        if tone is Tone.NEUTRAL:
            return written + ("5" if neutral_tone_with_five else "")
        return written + str(tone.number)
    if tone_format is ToneFormat.DIGIT:
        if tone is Tone.NEUTRAL:
            return written
        return written + str(tone.value).translate(_SUPERSCRIPT_DIGITS)
    raise ValueError(f"Unknown tone format: {tone_format!r}")


def check_canonical(syllable, text: str, config: PinyinConfig):
    """嚴格模式下確認輸入即為標準寫法"""
    if config.strict:
        canonical = str(syllable)
        if canonical != text:
            raise NonCanonicalSpellingError(text, canonical)
    return syllable
