"""
pinyinkit - 漢語拼音音節結構化工具 (Structured Hanyu Pinyin Syllables)

核心概念：
- 音節由聲母、韻母、聲調三種值組成，各有固定的合法表格
- 拼音字串 ⇄ 結構化音節 雙向轉換，套用拼音方案的書寫規則
  （zh/ch/sh、iu/ui/un 縮寫、y/w 補寫、ü 省略兩點、標調位置）
- 任何標準寫法 s 都滿足 str(decode(s)) == s

官方入口（穩定 API）：
- `pinyinkit.decode`
- `pinyinkit.PrimitiveSyllable` / `NormalSyllable` / `RhymeOnlySyllable` / `NasalSyllable`
"""

# =============================================================================
# 核心值類型
# =============================================================================
from pinyinkit.core import (
    Initial,
    Rhyme,
    RhymeColumn,
    SyllableKind,
    SyllableProtocol,
    Tone,
    ToneFormat,
    ToneMark,
    tone_vowel,
)

# =============================================================================
# 錯誤類型
# =============================================================================
from pinyinkit.core.errors import (
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

# =============================================================================
# 音節與解析
# =============================================================================
from pinyinkit.syllables import (
    SYLLABLE_DIVIDING_MARK,
    NasalSyllable,
    NormalSyllable,
    PrimitiveSyllable,
    RhymeOnlySyllable,
    Syllable,
    decode,
    decode_many,
)
from pinyinkit.formatting import parse, show

# =============================================================================
# 配置與日誌
# =============================================================================
from pinyinkit.config import DEFAULT_CONFIG, PinyinConfig
from pinyinkit.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from pinyinkit.utils.lazy_imports import check_hanzi_dependencies, is_hanzi_available

__all__ = [
    # Values
    "Tone",
    "ToneMark",
    "ToneFormat",
    "Initial",
    "Rhyme",
    "RhymeColumn",
    "tone_vowel",
    # Syllables
    "Syllable",
    "SyllableKind",
    "SyllableProtocol",
    "PrimitiveSyllable",
    "NormalSyllable",
    "RhymeOnlySyllable",
    "NasalSyllable",
    "decode",
    "decode_many",
    "SYLLABLE_DIVIDING_MARK",
    "show",
    "parse",
    # Errors
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
    # Config / logging
    "PinyinConfig",
    "DEFAULT_CONFIG",
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_hanzi_available",
    "check_hanzi_dependencies",
]

__version__ = "0.1.0"
