# tests/core/test_casing.py
import pytest

from phrasekit.core.domain import casing
from phrasekit.core.domain.casing import (
    is_all_same_case,
    simple_lower,
    simple_upper,
    to_case,
    to_sentence_case,
    to_title_case,
)
from phrasekit.core.domain.exceptions import UnsupportedOperationError
from phrasekit.core.domain.models import CapitalizationStyle

REPRESENTATIVE_INPUTS = [
    "king of the north",
    "KING OF THE NORTH",
    "MacDonald's farm in the iPhone era",
    "hello. world; there: friend",
    "",
]


class TestToCase:
    @pytest.mark.parametrize("style", list(CapitalizationStyle))
    def test_empty_input_is_empty_for_every_style(self, style):
        assert to_case("", style) == ""
        assert to_case(None, style) == ""

    @pytest.mark.parametrize("style", list(CapitalizationStyle))
    @pytest.mark.parametrize("value", REPRESENTATIVE_INPUTS)
    def test_reapplying_a_style_is_idempotent(self, style, value):
        once = to_case(value, style)
        assert to_case(once, style) == once

    def test_lower_and_upper(self):
        assert to_case("Hello World", CapitalizationStyle.LOWERCASE) == "hello world"
        assert to_case("Hello World", CapitalizationStyle.UPPERCASE) == "HELLO WORLD"

    def test_dispatches_title_and_sentence_styles(self):
        assert to_case("king of the north", CapitalizationStyle.TITLE_CASE) == "King Of The North"
        assert (
            to_case("king of the north", CapitalizationStyle.TITLE_CASE_EXCEPT_CONJUNCTIONS)
            == "King of The North"
        )
        assert to_case("KING OF THE NORTH", CapitalizationStyle.SENTENCE_CASE) == "King of the north"

    def test_accepts_style_value_strings(self):
        assert to_case("shout", "uppercase") == "SHOUT"

    def test_unknown_style_string_raises(self):
        with pytest.raises(ValueError):
            to_case("text", "camel_case")

    def test_every_style_has_a_transform(self):
        assert set(casing._TRANSFORMS) == set(CapitalizationStyle)

    def test_unmapped_style_raises_unsupported(self, monkeypatch):
        transforms = dict(casing._TRANSFORMS)
        del transforms[CapitalizationStyle.SENTENCE_CASE]
        monkeypatch.setattr(casing, "_TRANSFORMS", transforms)

        with pytest.raises(UnsupportedOperationError):
            to_case("text", CapitalizationStyle.SENTENCE_CASE)

    def test_translator_runs_before_casing(self, french_localizer):
        assert to_case("pair of boxes", CapitalizationStyle.UPPERCASE, french_localizer) == "PAIRE DE BOÎTES"


class TestTitleCase:
    def test_all_lowercase_input(self):
        assert to_title_case("the quick brown fox") == "The Quick Brown Fox"

    def test_all_caps_input_is_folded_first(self):
        assert to_title_case("THE QUICK BROWN FOX") == "The Quick Brown Fox"

    def test_mixed_case_is_left_alone(self):
        """Intentional casing such as 'iPhone' or 'McDonald' survives."""
        assert to_title_case("my iPhone from McDonald") == "My IPhone From McDonald"
        assert to_title_case("NASA launches") == "NASA Launches"

    def test_hyphens_and_punctuation_are_word_boundaries(self):
        assert to_title_case("state-of-the-art (beta)") == "State-Of-The-Art (Beta)"

    def test_conjunctions_are_lowered(self):
        """'the' is not in the lowered set, so it keeps its capital."""
        assert to_title_case("king of the north", True) == "King of The North"
        assert to_title_case("made in china by hand and heart", True) == "Made in China by Hand and Heart"

    def test_leading_conjunction_stays_capitalized(self):
        assert to_title_case("of mice and men", True) == "Of Mice and Men"

    def test_conjunction_inside_a_word_is_untouched(self):
        assert to_title_case("andrew inside bygone", True) == "Andrew Inside Bygone"

    def test_possessive_suffix_case(self):
        assert to_title_case("king's landing") == "King'S Landing"
        assert to_title_case("king's landing", True) == "King's Landing"
        assert to_title_case("DON'T STOP", True) == "Don't Stop"

    def test_no_word_characters(self):
        assert to_title_case("... --- !!!") == "... --- !!!"

    def test_translator_runs_before_casing(self, french_localizer):
        assert to_title_case("pair of boxes", translator=french_localizer) == "Paire De Boîtes"

    def test_translator_is_skipped_for_empty_input(self, mock_translator):
        assert to_title_case("", translator=mock_translator) == ""
        assert to_title_case(None, translator=mock_translator) == ""
        mock_translator.assert_not_called()

    def test_translated_value_is_cased(self, mock_translator):
        assert to_title_case("box", translator=mock_translator) == "<Box>"
        mock_translator.assert_called_once_with("box")


class TestSentenceCase:
    def test_all_three_terminators(self):
        assert to_sentence_case("hello. world; there") == "Hello. World; There"
        assert to_sentence_case("note: see below") == "Note: See below"

    def test_everything_else_is_lowered(self):
        assert to_sentence_case("THE QUICK BROWN FOX. JUMPS OVER") == "The quick brown fox. Jumps over"

    def test_terminator_without_whitespace(self):
        assert to_sentence_case("one.two") == "One.Two"

    def test_multiple_whitespace_after_terminator(self):
        assert to_sentence_case("first.\n\n  second") == "First.\n\n  Second"

    def test_leading_whitespace(self):
        assert to_sentence_case("  padded start") == "  Padded start"

    def test_translator_runs_before_casing(self, french_localizer):
        assert to_sentence_case("pair of boxes", french_localizer) == "Paire de boîtes"

    def test_translator_is_skipped_for_empty_input(self, mock_translator):
        assert to_sentence_case("", mock_translator) == ""
        mock_translator.assert_not_called()


class TestIsAllSameCase:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("lower", True),
            ("UPPER", True),
            ("123 !?", True),
            ("Mixed", False),
        ],
    )
    def test_detection(self, value, expected):
        assert is_all_same_case(value) is expected


class TestSimpleCaseMapping:
    """Characters whose full case mapping changes length keep their form."""

    def test_sharp_s_survives_upper_casing(self):
        assert simple_upper("straße") == "STRAßE"
        assert to_case("straße", CapitalizationStyle.UPPERCASE) == "STRAßE"

    def test_length_is_preserved(self):
        for value in ("straße", "ﬁnal", "İstanbul"):
            assert len(simple_upper(value)) == len(value)
            assert len(simple_lower(value)) == len(value)

    def test_one_to_one_mappings_still_apply(self):
        assert simple_upper("éclair") == "ÉCLAIR"
        assert simple_lower("ÉCLAIR") == "éclair"

    def test_upper_cased_sharp_s_counts_as_all_caps(self):
        assert is_all_same_case("STRAßE")
        assert to_title_case("STRAßE") == "Straße"
        assert to_case("STRAßE", CapitalizationStyle.LOWERCASE) == "straße"
