"""
聲調標記方式

除了標準的調號寫法 (SYMBOL: fān)，另外提供：
- INDEX: 聲序數字 (fan1)，輸入時接受 v 代替 ü (lv4 → lǜ)
- DIGIT: 調值上標 (fan⁵⁵)

輕聲在 INDEX/DIGIT 中不加後綴（INDEX 可選擇以 5 表示）。
"""

import dataclasses
import re
from typing import Optional

from pinyinkit.config import PinyinConfig
from pinyinkit.core.errors import PinyinError
from pinyinkit.core.initial import Initial
from pinyinkit.core.tone import Tone, ToneFormat
from pinyinkit.syllables import NasalSyllable, Syllable, decode

_INDEX_PATTERN = re.compile(r"^(.*?)([0-5]?)$")
_DIGIT_PATTERN = re.compile(r"^(.*?)([⁰¹²³⁴⁵⁶⁷⁸⁹]*)$")
_FROM_SUPERSCRIPT = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹", "0123456789")


def show(
    syllable: Syllable,
    tone_format: ToneFormat = ToneFormat.SYMBOL,
    neutral_tone_with_five: bool = False,
) -> str:
    """
    以指定的聲調標記方式輸出音節

    範例：
        >>> s = decode("lǜ")
        >>> show(s, ToneFormat.INDEX), show(s, ToneFormat.DIGIT)
        ('lü4', 'lü⁵¹')
    """
    return syllable.show(tone_format, neutral_tone_with_five)


def parse(
    text: str,
    tone_format: ToneFormat = ToneFormat.SYMBOL,
    config: Optional[PinyinConfig] = None,
) -> Syllable:
    """
    解析指定聲調標記方式的音節

    Raises:
        PinyinError: 無法解析，或同時帶有調號與數字
    """
    if tone_format is ToneFormat.SYMBOL:
        return decode(text, config)

    if tone_format is ToneFormat.INDEX:
        plain, number = _INDEX_PATTERN.match(text).groups()
        tone = Tone.from_number(int(number)) if number else Tone.NEUTRAL
        return _with_tone(plain.replace("v", "ü"), tone, text, config)

    if tone_format is ToneFormat.DIGIT:
        plain, digits = _DIGIT_PATTERN.match(text).groups()
        tone = Tone.NEUTRAL
        if digits:
            try:
                tone = Tone(int(digits.translate(_FROM_SUPERSCRIPT)))
            except ValueError:
                raise PinyinError(f"{digits!r} in {text!r} is not a tone contour") from None
        return _with_tone(plain, tone, text, config)

    raise ValueError(f"Unknown tone format: {tone_format!r}")


def _with_tone(plain: str, tone: Tone, text: str, config: Optional[PinyinConfig]) -> Syllable:
    # 鼻音音節沒有無調形式，不能先解析再換聲調
    if plain in ("m", "n") and tone is not Tone.NEUTRAL:
        return NasalSyllable(Initial.new(plain), tone)

    syllable = decode(plain, config)
    if syllable.tone is not Tone.NEUTRAL:
        raise PinyinError(f"{text!r} carries both a tone mark and a tone number")
    return dataclasses.replace(syllable, tone=tone)
