"""
測試聲調與聲調符號

驗證：
1. Tone 的調值、聲序與名稱
2. 聲調符號表的完整性
3. ToneMark 建立、查找與去除
"""

import pytest

from pinyinkit.core.errors import AmbiguousToneMarkError, InvalidToneMarkError
from pinyinkit.core.tone import TONE_MARK_TABLE, Tone, ToneMark


class TestTone:
    """測試 Tone 列舉"""

    def test_contour_values(self):
        assert Tone.FIRST.value == 55
        assert Tone.SECOND.value == 35
        assert Tone.THIRD.value == 214
        assert Tone.FOURTH.value == 51
        assert Tone.NEUTRAL.value is None

    def test_numbers(self):
        assert [t.number for t in Tone] == [1, 2, 3, 4, 0]

    def test_from_number(self):
        assert Tone.from_number(1) is Tone.FIRST
        assert Tone.from_number(0) is Tone.NEUTRAL
        assert Tone.from_number(5) is Tone.NEUTRAL

        with pytest.raises(ValueError):
            Tone.from_number(6)

    def test_names(self):
        assert Tone.FIRST.name_zh == "第一声"
        assert Tone.SECOND.traditional_name == "阳平"
        assert Tone.THIRD.description == "降升调"
        assert Tone.FOURTH.glyph == "ˋ"

    def test_neutral_has_no_names(self):
        """輕聲沒有名稱、描述與調號"""
        assert Tone.NEUTRAL.name_zh is None
        assert Tone.NEUTRAL.traditional_name is None
        assert Tone.NEUTRAL.description is None
        assert Tone.NEUTRAL.glyph is None


class TestToneMarkTable:
    """測試聲調符號表"""

    def test_table_size(self):
        assert len(TONE_MARK_TABLE) == 35

    def test_every_row_constructs(self):
        for diacritic, letter, tone in TONE_MARK_TABLE:
            assert str(ToneMark(letter, tone)) == diacritic

    def test_vowels_have_all_tones(self):
        for letter in ("a", "e", "o", "i", "u", "ü"):
            for tone in Tone:
                ToneMark.new(letter, tone)

    def test_nasal_marks(self):
        assert str(ToneMark.new("n", Tone.SECOND)) == "ń"
        assert str(ToneMark.new("n", Tone.THIRD)) == "ň"
        assert str(ToneMark.new("n", Tone.FOURTH)) == "ǹ"
        assert str(ToneMark.new("m", Tone.SECOND)) == "ḿ"
        assert str(ToneMark.new("m", Tone.FOURTH)) == "m̀"

    def test_precomposed_output(self):
        """母音帶調字母都是單一預組字元"""
        for letter in ("a", "e", "o", "i", "u", "ü"):
            for tone in Tone:
                assert len(str(ToneMark.new(letter, tone))) == 1


class TestToneMark:
    """測試 ToneMark"""

    def test_invalid_pairs(self):
        with pytest.raises(InvalidToneMarkError):
            ToneMark.new("n", Tone.FIRST)
        with pytest.raises(InvalidToneMarkError):
            ToneMark.new("m", Tone.THIRD)
        with pytest.raises(InvalidToneMarkError):
            ToneMark("b", Tone.FIRST)

    def test_value_semantics(self):
        assert ToneMark("a", Tone.FIRST) == ToneMark.new("a", Tone.FIRST)
        assert len({ToneMark("a", Tone.FIRST), ToneMark("a", Tone.FIRST)}) == 1

    def test_circumflex_e(self):
        assert str(ToneMark.new("ê", Tone.SECOND)) == "ế"
        assert str(ToneMark.new("ê", Tone.FIRST)) == "ê̄"

    def test_find_in_table_order(self):
        assert [str(m) for m in ToneMark.find("guó")] == ["ó", "u"]

    def test_find_plain_text(self):
        marks = ToneMark.find("guo")
        assert marks == [ToneMark("o", Tone.NEUTRAL), ToneMark("u", Tone.NEUTRAL)]

    def test_find_nothing(self):
        assert ToneMark.find("zh") == []

    def test_strip(self):
        assert ToneMark.strip("hǎo") == ("hao", Tone.THIRD)
        assert ToneMark.strip("nǚ") == ("nü", Tone.THIRD)
        assert ToneMark.strip("ń") == ("n", Tone.SECOND)
        assert ToneMark.strip("m̀") == ("m", Tone.FOURTH)

    def test_strip_without_mark(self):
        assert ToneMark.strip("hao") == ("hao", Tone.NEUTRAL)

    def test_strip_two_marks(self):
        with pytest.raises(AmbiguousToneMarkError):
            ToneMark.strip("hǎó")
