"""
核心層

聲調、聲母、韻母三種基本值類型與其靜態表格，以及音節共同介面。
"""

from .errors import (
    AmbiguousToneMarkError,
    InvalidInitialError,
    InvalidRhymeError,
    InvalidToneMarkError,
    NoMatchError,
    NonCanonicalSpellingError,
    NoVowelToMarkError,
    OAndEConflictError,
    PinyinError,
    ToneVowelError,
    UmlautConflictError,
    VariantMismatchError,
)
from .initial import INITIAL_TABLE, Initial, fold_digraph
from .protocols.syllable import SyllableKind, SyllableProtocol
from .rhyme import BLANK, RHYME_TABLE, Rhyme, RhymeColumn, tone_vowel
from .tone import TONE_MARK_TABLE, Tone, ToneFormat, ToneMark

__all__ = [
    "Tone",
    "ToneMark",
    "ToneFormat",
    "TONE_MARK_TABLE",
    "Initial",
    "INITIAL_TABLE",
    "fold_digraph",
    "Rhyme",
    "RhymeColumn",
    "RHYME_TABLE",
    "BLANK",
    "tone_vowel",
    "SyllableKind",
    "SyllableProtocol",
    "PinyinError",
    "InvalidInitialError",
    "InvalidRhymeError",
    "InvalidToneMarkError",
    "AmbiguousToneMarkError",
    "ToneVowelError",
    "OAndEConflictError",
    "UmlautConflictError",
    "NoVowelToMarkError",
    "VariantMismatchError",
    "NonCanonicalSpellingError",
    "NoMatchError",
]
