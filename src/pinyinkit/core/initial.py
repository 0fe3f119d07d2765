"""
聲母

聲母表共 21 個。zh/ch/sh 在內部以單一符號 ẑ/ĉ/ŝ 表示，顯示時再展開。
y 和 w 不屬於聲母，零聲母音節的 y/w 由補寫規則處理。
"""

from enum import Enum
from typing import Tuple

from .errors import InvalidInitialError


class Initial(Enum):
    B = "b"
    C = "c"
    CH = "ĉ"
    D = "d"
    F = "f"
    G = "g"
    H = "h"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    SH = "ŝ"
    T = "t"
    X = "x"
    Z = "z"
    ZH = "ẑ"

    @classmethod
    def new(cls, symbol: str) -> "Initial":
        """
        以內部符號建立聲母

        zh/ch/sh 必須由呼叫端先轉成 ẑ/ĉ/ŝ（見 fold_digraph）。

        Raises:
            InvalidInitialError: 符號不在聲母表中
        """
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidInitialError(symbol) from None

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return _DIGRAPH_DISPLAY.get(self.value, self.value)


INITIAL_TABLE: Tuple[str, ...] = tuple(initial.value for initial in Initial)

_DIGRAPH_DISPLAY = {
    "ẑ": "zh",
    "ĉ": "ch",
    "ŝ": "sh",
}

_DIGRAPH_FOLD = {v: k for k, v in _DIGRAPH_DISPLAY.items()}


def fold_digraph(text: str) -> str:
    """將開頭的 zh/ch/sh 轉成內部符號，其餘不變"""
    head = _DIGRAPH_FOLD.get(text[:2])
    if head is None:
        return text
    return head + text[2:]
