"""
錯誤類型

所有可恢復的錯誤都繼承 PinyinError (ValueError 的子類)，
呼叫端可以只捕捉 PinyinError，也可以針對單一類型處理。

靜態表格本身有誤（程式缺陷，而非輸入錯誤）時一律拋出 RuntimeError。
"""

from typing import Dict, Optional


class PinyinError(ValueError):
    """拼音解析/建構錯誤的基底類別"""


class InvalidInitialError(PinyinError):
    """聲母不在 21 個聲母表中"""

    def __init__(self, symbol: str):
        super().__init__(f"Invalid initial: {symbol!r}")
        self.symbol = symbol


class InvalidRhymeError(PinyinError):
    """韻母不在 37 個韻母表中"""

    def __init__(self, slots):
        super().__init__(f"Invalid rhyme: {''.join(slots).strip()!r}")
        self.slots = tuple(slots)


class InvalidToneMarkError(PinyinError):
    """(字母, 聲調) 組合沒有對應的聲調符號"""

    def __init__(self, letter: str, tone):
        super().__init__(f"No tone mark for letter {letter!r} with tone {tone}")
        self.letter = letter
        self.tone = tone


class AmbiguousToneMarkError(PinyinError):
    """單一音節中出現多於一個聲調符號"""

    def __init__(self, text: str, marks):
        found = ", ".join(str(m) for m in marks)
        super().__init__(f"More than one tone mark in {text!r}: {found}")
        self.text = text
        self.marks = tuple(marks)


class ToneVowelError(PinyinError):
    """
    標調規則無法決定標調字母

    對於通過 Rhyme 驗證的韻母，這些錯誤不會發生；
    出現時代表傳入了不合規範的字母序列。
    """

    def __init__(self, slots, reason: str):
        super().__init__(f"Cannot place tone mark on {''.join(slots).strip()!r}: {reason}")
        self.slots = tuple(slots)


class OAndEConflictError(ToneVowelError):
    def __init__(self, slots):
        super().__init__(slots, "'o' and 'e' cannot appear together")


class UmlautConflictError(ToneVowelError):
    def __init__(self, slots):
        super().__init__(slots, "'ü' cannot appear together with 'i' or 'u'")


class NoVowelToMarkError(ToneVowelError):
    def __init__(self, slots):
        super().__init__(slots, "no vowel to carry the tone mark")


class VariantMismatchError(PinyinError):
    """各部分皆合法，但組合不符合該音節類型的規則"""


class NonCanonicalSpellingError(PinyinError):
    """嚴格模式下，輸入不是標準寫法"""

    def __init__(self, text: str, canonical: str):
        super().__init__(f"{text!r} is not canonical, expected {canonical!r}")
        self.text = text
        self.canonical = canonical


class NoMatchError(PinyinError):
    """所有音節類型都無法解析輸入"""

    def __init__(self, text: str, failures: Optional[Dict[str, PinyinError]] = None):
        super().__init__(f"Cannot decode {text!r} as a pinyin syllable")
        self.text = text
        self.failures = dict(failures or {})
