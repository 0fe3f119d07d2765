"""
聲調與聲調符號

- Tone: 五個聲調（含輕聲），列舉值即調值 (55/35/214/51)，輕聲為 None
- ToneMark: (基本字母, 聲調) 與帶調字母之間的對照
- ToneFormat: 聲調標記方式（符號、數字、序號）

聲調符號一律取自 TONE_MARK_TABLE，不做即時組合。
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .errors import AmbiguousToneMarkError, InvalidToneMarkError


class ToneFormat(Enum):
    """聲調標記方式"""
    SYMBOL = "symbol"   # 帶調號字母: fān
    DIGIT = "digit"     # 調值上標: fan⁵⁵
    INDEX = "index"     # 聲序數字: fan1


class Tone(Enum):
    """
    聲調

    列舉值為五度標記的調值，輕聲沒有調值 (None)。

    範例：
        >>> Tone.THIRD.value
        214
        >>> Tone.NEUTRAL.value is None
        True
        >>> Tone.from_number(2)
        <Tone.SECOND: 35>
    """
    FIRST = 55
    SECOND = 35
    THIRD = 214
    FOURTH = 51
    NEUTRAL = None

    @property
    def number(self) -> int:
        """聲序 (1-4)，輕聲為 0"""
        return _TONE_NUMBERS[self]

    @property
    def name_zh(self) -> Optional[str]:
        return _TONE_INFO[self][0]

    @property
    def traditional_name(self) -> Optional[str]:
        return _TONE_INFO[self][1]

    @property
    def description(self) -> Optional[str]:
        return _TONE_INFO[self][2]

    @property
    def glyph(self) -> Optional[str]:
        """獨立的調號字形 (不附著於字母)"""
        return _TONE_INFO[self][3]

    @classmethod
    def from_number(cls, number: int) -> "Tone":
        """
        由聲序取得聲調，0 與 5 皆視為輕聲

        Raises:
            ValueError: 聲序不在 0-5
        """
        if number == 5:
            return cls.NEUTRAL
        for tone, n in _TONE_NUMBERS.items():
            if n == number:
                return tone
        raise ValueError(f"Invalid tone number: {number}")


_TONE_NUMBERS = {
    Tone.NEUTRAL: 0,
    Tone.FIRST: 1,
    Tone.SECOND: 2,
    Tone.THIRD: 3,
    Tone.FOURTH: 4,
}

# (名稱, 傳統名稱, 描述, 調號)
_TONE_INFO = {
    Tone.FIRST: ("第一声", "阴平", "高平调", "¯"),
    Tone.SECOND: ("第二声", "阳平", "高升调", "ˊ"),
    Tone.THIRD: ("第三声", "上声", "降升调", "ˇ"),
    Tone.FOURTH: ("第四声", "去声", "高降调", "ˋ"),
    Tone.NEUTRAL: (None, None, None, None),
}


# =============================================================================
# 聲調符號表 (帶調字母, 基本字母, 聲調)
# =============================================================================
TONE_MARK_TABLE: Tuple[Tuple[str, str, Tone], ...] = (
    ("a", "a", Tone.NEUTRAL), ("ā", "a", Tone.FIRST), ("á", "a", Tone.SECOND), ("ǎ", "a", Tone.THIRD), ("à", "a", Tone.FOURTH),
    ("e", "e", Tone.NEUTRAL), ("ē", "e", Tone.FIRST), ("é", "e", Tone.SECOND), ("ě", "e", Tone.THIRD), ("è", "e", Tone.FOURTH),
    ("o", "o", Tone.NEUTRAL), ("ō", "o", Tone.FIRST), ("ó", "o", Tone.SECOND), ("ǒ", "o", Tone.THIRD), ("ò", "o", Tone.FOURTH),
    ("i", "i", Tone.NEUTRAL), ("ī", "i", Tone.FIRST), ("í", "i", Tone.SECOND), ("ǐ", "i", Tone.THIRD), ("ì", "i", Tone.FOURTH),
    ("u", "u", Tone.NEUTRAL), ("ū", "u", Tone.FIRST), ("ú", "u", Tone.SECOND), ("ǔ", "u", Tone.THIRD), ("ù", "u", Tone.FOURTH),
    ("ü", "ü", Tone.NEUTRAL), ("ǖ", "ü", Tone.FIRST), ("ǘ", "ü", Tone.SECOND), ("ǚ", "ü", Tone.THIRD), ("ǜ", "ü", Tone.FOURTH),
    # 鼻音音節專用
    ("ń", "n", Tone.SECOND), ("ň", "n", Tone.THIRD), ("ǹ", "n", Tone.FOURTH),
    ("ḿ", "m", Tone.SECOND), ("m̀", "m", Tone.FOURTH),
)

# 韻母 ê 的帶調字母。ê̄ 與 ê̌ 沒有預組字元，只能以組合符號表示。
E_CIRCUMFLEX_MARKS: Tuple[Tuple[str, str, Tone], ...] = (
    ("ê", "ê", Tone.NEUTRAL),
    ("ê̄", "ê", Tone.FIRST),
    ("ế", "ê", Tone.SECOND),
    ("ê̌", "ê", Tone.THIRD),
    ("ề", "ê", Tone.FOURTH),
)

_ALL_MARKS = TONE_MARK_TABLE + E_CIRCUMFLEX_MARKS


def _lookup(letter: str, tone: Tone) -> List[str]:
    return [s for s, c, t in _ALL_MARKS if c == letter and t is tone]


@dataclass(frozen=True)
class ToneMark:
    """
    帶調字母：基本字母 + 聲調

    只有出現在聲調符號表中的組合才能建立。

    Raises:
        InvalidToneMarkError: 組合不在表中
    """
    letter: str
    tone: Tone

    def __post_init__(self):
        found = _lookup(self.letter, self.tone)
        if not found:
            raise InvalidToneMarkError(self.letter, self.tone)
        if len(found) > 1:
            raise RuntimeError(f"Tone mark table has duplicate rows for {self.letter!r}/{self.tone}")

    @classmethod
    def new(cls, letter: str, tone: Tone) -> "ToneMark":
        return cls(letter, tone)

    @staticmethod
    def find(text: str) -> List["ToneMark"]:
        """
        找出文字中出現的所有帶調字母（依表格順序，含輕聲的基本字母）

        範例：
            >>> [str(m) for m in ToneMark.find("guó")]
            ['ó', 'u']
        """
        return [ToneMark(c, t) for s, c, t in _ALL_MARKS if s in text]

    @classmethod
    def strip(cls, text: str) -> Tuple[str, Tone]:
        """
        去除聲調符號，回傳 (無調文字, 聲調)

        沒有調號時聲調為輕聲。

        Raises:
            AmbiguousToneMarkError: 出現一個以上的調號
        """
        marks = [m for m in cls.find(text) if m.tone is not Tone.NEUTRAL]
        if len(marks) > 1:
            raise AmbiguousToneMarkError(text, marks)
        if not marks:
            return text, Tone.NEUTRAL
        mark = marks[0]
        return text.replace(str(mark), mark.letter), mark.tone

    def __str__(self) -> str:
        return _lookup(self.letter, self.tone)[0]
