"""
測試四種音節

驗證：
1. 整體認讀音節
2. 常規音節的縮寫、省略兩點與標調位置
3. 自成音節的 y/w 補寫
4. 鼻音音節的合法聲調
"""

import pytest

from pinyinkit import (
    Initial,
    NasalSyllable,
    NormalSyllable,
    PinyinError,
    PrimitiveSyllable,
    Rhyme,
    RhymeOnlySyllable,
    SyllableKind,
    SyllableProtocol,
    Tone,
    VariantMismatchError,
)
from pinyinkit.core.errors import InvalidInitialError, InvalidRhymeError
from pinyinkit.syllables.primitive import PRIMITIVE_SYLLABLE_TABLE


class TestPrimitiveSyllable:
    """測試整體認讀音節"""

    def test_table_size(self):
        assert len(PRIMITIVE_SYLLABLE_TABLE) == 16

    @pytest.mark.parametrize("text, expected", [
        ("zhī", Tone.FIRST),
        ("rì", Tone.FOURTH),
        ("yuán", Tone.SECOND),
        ("yǐng", Tone.THIRD),
        ("ye", Tone.NEUTRAL),
    ])
    def test_parse(self, text, expected):
        syllable = PrimitiveSyllable.from_text(text)
        assert syllable.tone is expected
        assert str(syllable) == text

    def test_no_parts(self):
        syllable = PrimitiveSyllable.from_text("shi")
        assert syllable.initial is None
        assert syllable.rhyme is None
        assert syllable.plain == "shi"
        assert syllable.kind is SyllableKind.PRIMITIVE

    def test_tone_vowel(self):
        assert PrimitiveSyllable.from_text("yue").vowel == "e"
        assert PrimitiveSyllable.from_text("yun").vowel == "u"
        assert str(PrimitiveSyllable(("y", "u", "e", " "), Tone.FOURTH)) == "yuè"

    @pytest.mark.parametrize("text", ["zha", "ya", "wo", "yuanx", ""])
    def test_rejected(self, text):
        with pytest.raises(VariantMismatchError):
            PrimitiveSyllable.from_text(text)


class TestNormalSyllable:
    """測試常規音節"""

    @pytest.mark.parametrize("initial, rhyme, tone, expected", [
        (Initial.ZH, "ong", Tone.FIRST, "zhōng"),
        (Initial.G, "uei", Tone.FIRST, "guī"),
        (Initial.L, "iou", Tone.SECOND, "liú"),
        (Initial.L, "uen", Tone.FOURTH, "lùn"),
        (Initial.N, "ü", Tone.THIRD, "nǚ"),
        (Initial.L, "üe", Tone.FOURTH, "lüè"),
        (Initial.J, "ü", Tone.SECOND, "jú"),
        (Initial.X, "üe", Tone.SECOND, "xué"),
        (Initial.Q, "üan", Tone.SECOND, "quán"),
        (Initial.Q, "ün", Tone.SECOND, "qún"),
        (Initial.J, "iou", Tone.THIRD, "jiǔ"),
        (Initial.H, "ao", Tone.THIRD, "hǎo"),
        (Initial.B, "a", Tone.NEUTRAL, "ba"),
    ])
    def test_render(self, initial, rhyme, tone, expected):
        syllable = NormalSyllable(initial, Rhyme.from_text(rhyme), tone)
        assert str(syllable) == expected

    @pytest.mark.parametrize("text, initial, rhyme", [
        ("zhōng", Initial.ZH, "ong"),
        ("guī", Initial.G, "uei"),
        ("liú", Initial.L, "iou"),
        ("lùn", Initial.L, "uen"),
        ("jú", Initial.J, "ü"),
        ("juan", Initial.J, "üan"),
        ("xun", Initial.X, "ün"),
        ("qu", Initial.Q, "ü"),
        ("nǚ", Initial.N, "ü"),
        ("chuáng", Initial.CH, "uang"),
    ])
    def test_parse(self, text, initial, rhyme):
        syllable = NormalSyllable.from_text(text)
        assert syllable.initial is initial
        assert syllable.rhyme == Rhyme.from_text(rhyme)
        assert str(syllable) == text

    def test_full_rhyme_accepted(self):
        """未縮寫的寫法也能解析，輸出為標準寫法"""
        assert str(NormalSyllable.from_text("niou")) == "niu"
        assert str(NormalSyllable.from_text("guēi")) == "guī"
        assert str(NormalSyllable.from_text("jǘ")) == "jú"

    def test_palatal_with_u_column_rejected(self):
        with pytest.raises(VariantMismatchError):
            NormalSyllable(Initial.J, Rhyme.from_text("u"))
        with pytest.raises(VariantMismatchError):
            NormalSyllable(Initial.X, Rhyme.from_text("uan"), Tone.FIRST)

    def test_shortened_ng(self):
        assert str(NormalSyllable.from_text("zhōŋ")) == "zhōng"

    def test_rejected(self):
        with pytest.raises(VariantMismatchError):
            NormalSyllable.from_text("b")
        with pytest.raises(InvalidInitialError):
            NormalSyllable.from_text("ai")
        with pytest.raises(InvalidRhymeError):
            NormalSyllable.from_text("bx")
        with pytest.raises(InvalidRhymeError):
            NormalSyllable.from_text("zhuangx")

    def test_attributes(self):
        syllable = NormalSyllable.from_text("guǐ")
        assert syllable.kind is SyllableKind.NORMAL
        assert syllable.written_rhyme == "ui"
        assert syllable.vowel == "i"
        assert syllable.plain == "gui"
        assert str(syllable.tone_mark) == "ǐ"

    def test_value_semantics(self):
        a = NormalSyllable.from_text("hǎo")
        b = NormalSyllable(Initial.H, Rhyme.from_text("ao"), Tone.THIRD)
        assert a == b
        assert len({a, b}) == 1


class TestRhymeOnlySyllable:
    """測試自成音節"""

    @pytest.mark.parametrize("rhyme, tone, expected", [
        ("i", Tone.FIRST, "yī"),
        ("u", Tone.FIRST, "wū"),
        ("ü", Tone.THIRD, "yǔ"),
        ("üe", Tone.FOURTH, "yuè"),
        ("iou", Tone.THIRD, "yǒu"),
        ("uei", Tone.FOURTH, "wèi"),
        ("ian", Tone.FOURTH, "yàn"),
        ("a", Tone.FIRST, "ā"),
        ("er", Tone.SECOND, "ér"),
        ("ê", Tone.SECOND, "ế"),
    ])
    def test_render(self, rhyme, tone, expected):
        assert str(RhymeOnlySyllable(Rhyme.from_text(rhyme), tone)) == expected

    @pytest.mark.parametrize("text, rhyme", [
        ("wang", "uang"),
        ("yǒng", "iong"),
        ("yuè", "üe"),
        ("wēng", "ueng"),
        ("ài", "ai"),
    ])
    def test_parse(self, text, rhyme):
        syllable = RhymeOnlySyllable.from_text(text)
        assert syllable.rhyme == Rhyme.from_text(rhyme)
        assert syllable.initial is None
        assert syllable.kind is SyllableKind.RHYME

    def test_rejected(self):
        with pytest.raises(InvalidRhymeError):
            RhymeOnlySyllable.from_text("yong4")
        with pytest.raises(InvalidRhymeError):
            RhymeOnlySyllable.from_text("wun")


class TestNasalSyllable:
    """測試鼻音音節"""

    def test_legal(self):
        assert str(NasalSyllable(Initial.M, Tone.SECOND)) == "ḿ"
        assert str(NasalSyllable(Initial.M, Tone.FOURTH)) == "m̀"
        assert str(NasalSyllable(Initial.N, Tone.SECOND)) == "ń"
        assert str(NasalSyllable(Initial.N, Tone.THIRD)) == "ň"
        assert str(NasalSyllable(Initial.N, Tone.FOURTH)) == "ǹ"

    def test_illegal_tone(self):
        with pytest.raises(VariantMismatchError):
            NasalSyllable(Initial.M, Tone.THIRD)
        with pytest.raises(VariantMismatchError):
            NasalSyllable(Initial.N, Tone.FIRST)
        with pytest.raises(VariantMismatchError):
            NasalSyllable(Initial.N, Tone.NEUTRAL)

    def test_illegal_initial(self):
        with pytest.raises(VariantMismatchError):
            NasalSyllable(Initial.B, Tone.SECOND)

    def test_parse(self):
        syllable = NasalSyllable.from_text("ň")
        assert syllable.initial is Initial.N
        assert syllable.tone is Tone.THIRD
        assert syllable.rhyme is None

    def test_combining_input(self):
        """組合符號輸入經 NFC 正規化後解析"""
        assert NasalSyllable.from_text("ń").tone is Tone.SECOND

    def test_rejected(self):
        with pytest.raises(VariantMismatchError):
            NasalSyllable.from_text("ng")
        with pytest.raises(PinyinError):
            NasalSyllable.from_text("n")
        with pytest.raises(VariantMismatchError):
            NasalSyllable.from_text("")


class TestSyllableProtocol:
    """四種音節都符合 SyllableProtocol"""

    def test_all_variants(self):
        syllables = [
            PrimitiveSyllable.from_text("zhi"),
            NormalSyllable.from_text("ma"),
            RhymeOnlySyllable.from_text("ān"),
            NasalSyllable(Initial.N, Tone.SECOND),
        ]
        for syllable in syllables:
            assert isinstance(syllable, SyllableProtocol)

    def test_frozen(self):
        syllable = NormalSyllable.from_text("ma")
        with pytest.raises(AttributeError):
            syllable.tone = Tone.FIRST
