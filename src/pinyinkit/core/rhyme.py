"""
韻母

韻母以 4 格字母序列表示，不足的格子以空白 BLANK 補齊。
韻母表共 37 個，依開頭介音分為四列：開口（無介音）、i 列、u 列、ü 列。

注意：
- 韻母 un 實際上是 uen，前面有聲母時才寫成 un；iu/ui 同理（iou/uei）
- -i（前）與 -i（後）只出現在整體認讀音節中，不列入本表
- 表格依《漢語拼音方案》的順序排列，未排序，查詢一律逐列比對
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import (
    InvalidRhymeError,
    NoVowelToMarkError,
    OAndEConflictError,
    UmlautConflictError,
)

BLANK = " "

Slots = Tuple[str, str, str, str]


def pad_slots(text: Iterable[str]) -> Tuple[str, ...]:
    """將字母序列補齊到 4 格；超過 4 個字母時原樣回傳（不會匹配任何表格列）"""
    letters = tuple(text)
    return letters + (BLANK,) * (4 - len(letters))


def slots_to_text(slots: Iterable[str]) -> str:
    text = []
    for letter in slots:
        if letter == BLANK:
            break
        text.append(letter)
    return "".join(text)


def _rows(*texts: str) -> Tuple[Slots, ...]:
    return tuple(pad_slots(t) for t in texts)


# =============================================================================
# 韻母表
# =============================================================================
RHYME_TABLE_COLUMN_A = _rows(
    "a", "o", "e", "ê", "er", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ong",
)
RHYME_TABLE_COLUMN_I = _rows(
    "i", "ia", "ie", "iao", "iou", "ian", "in", "iang", "ing", "iong",
)
RHYME_TABLE_COLUMN_U = _rows(
    "u", "ua", "uo", "uai", "uei", "uan", "uen", "uang", "ueng",
)
RHYME_TABLE_COLUMN_YU = _rows(
    "ü", "üe", "üan", "ün",
)

RHYME_TABLE = (
    RHYME_TABLE_COLUMN_A
    + RHYME_TABLE_COLUMN_I
    + RHYME_TABLE_COLUMN_U
    + RHYME_TABLE_COLUMN_YU
)

# 單元音韻母
SIMPLE_VOWEL_RHYME_TABLE = _rows(
    "a", "o", "e", "ê", "er", "i", "ia", "ie", "u", "ua", "uo", "ü", "üe",
)

# 複元音韻母
COMPOUND_VOWEL_RHYME_TABLE = _rows(
    "ai", "ao", "ei", "iao", "iou", "ou", "uai", "uei",
)


class RhymeColumn(Enum):
    """韻母表的四列（依開頭介音）"""
    A = "a"
    I = "i"
    U = "u"
    YU = "ü"


_COLUMNS = (
    (RhymeColumn.A, RHYME_TABLE_COLUMN_A),
    (RhymeColumn.I, RHYME_TABLE_COLUMN_I),
    (RhymeColumn.U, RHYME_TABLE_COLUMN_U),
    (RhymeColumn.YU, RHYME_TABLE_COLUMN_YU),
)


def tone_vowel(slots: Iterable[str]) -> str:
    """
    標調規則：決定調號標在哪個字母上

    依序判斷（先符合者優先，順序不可調換）：
    1. 有 a 標 a
    2. o 與 e 不會同時出現
    3. 有 o 標 o，否則有 e 標 e（ê 同 e）
    4. 有 ü 標 ü，此時不會再有 i 或 u
    5. i 與 u 同時出現時，標在位置較後者（ui 標 i，iu 標 u）
    6. 有 i 標 i，否則有 u 標 u

    可用於韻母表中的列，也可用於書寫形式（如 ui、iu、yu）。

    Args:
        slots: 字母序列

    Returns:
        str: 承載調號的字母

    Raises:
        OAndEConflictError: 同時含有 o 與 e
        UmlautConflictError: ü 與 i 或 u 同時出現
        NoVowelToMarkError: 沒有可標調的元音

    範例：
        >>> tone_vowel(("u", "i", " ", " "))
        'i'
        >>> tone_vowel(("i", "a", "o", " "))
        'a'
    """
    slots = tuple(slots)

    if "a" in slots:
        return "a"

    if "o" in slots and "e" in slots:
        raise OAndEConflictError(slots)

    if "o" in slots:
        return "o"
    if "e" in slots:
        return "e"
    if "ê" in slots:
        return "ê"

    if "ü" in slots:
        if "i" in slots or "u" in slots:
            raise UmlautConflictError(slots)
        return "ü"

    if "i" in slots and "u" in slots:
        if slots.index("u") > slots.index("i"):
            return "u"
        return "i"

    if "i" in slots:
        return "i"
    if "u" in slots:
        return "u"

    raise NoVowelToMarkError(slots)


@dataclass(frozen=True)
class Rhyme:
    """
    韻母（4 格字母序列）

    只有與韻母表中某一列完全相同的序列才能建立。

    Raises:
        InvalidRhymeError: 序列不在韻母表中

    範例：
        >>> Rhyme.from_text("uen").is_nasal
        True
        >>> str(Rhyme(("i", "a", "o", " ")))
        'iao'
    """
    slots: Slots

    def __post_init__(self):
        slots = tuple(self.slots)
        if slots not in RHYME_TABLE:
            raise InvalidRhymeError(slots)
        object.__setattr__(self, "slots", slots)

    @classmethod
    def new(cls, slots: Iterable[str]) -> "Rhyme":
        return cls(tuple(slots))

    @classmethod
    def from_text(cls, text: str) -> "Rhyme":
        return cls(pad_slots(text))

    @property
    def vowel(self) -> str:
        """韻母本身的標調字母"""
        return tone_vowel(self.slots)

    @property
    def column(self) -> RhymeColumn:
        for column, rows in _COLUMNS:
            if self.slots in rows:
                return column
        raise RuntimeError(f"Rhyme {self} is in no column of the rhyme table")

    @property
    def is_simple(self) -> bool:
        return self.slots in SIMPLE_VOWEL_RHYME_TABLE

    @property
    def is_compound(self) -> bool:
        return self.slots in COMPOUND_VOWEL_RHYME_TABLE

    @property
    def is_nasal(self) -> bool:
        last = slots_to_text(self.slots)[-1]
        return last in ("n", "g")

    def __str__(self) -> str:
        return slots_to_text(self.slots)
