"""
Unit tests for word checking helpers.
"""
from docspell.schemas.diagnostic import SourceFile
from docspell.schemas.options import SpellOptions
from docspell.services.suggestion_cache import SuggestionCache
from docspell.services.word_checker import check_tree, format_reason, is_correct, rule_id_for


class TestFormatReason:
    """Tests for format_reason()."""

    def test_without_suggestions(self):
        assert format_reason("color", []) == "`color` is misspelt"

    def test_with_suggestions(self):
        assert format_reason("color", ["colon", "colour", "Colo"]) == (
            "`color` is misspelt; did you mean `colon`, `colour`, `Colo`?"
        )


class TestRuleIdFor:
    """Tests for rule_id_for()."""

    def test_lowercases(self):
        assert rule_id_for("Color") == "color"

    def test_collapses_non_word_runs(self):
        assert rule_id_for("Wrongely--spelled’word") == "wrongely-spelled-word"

    def test_keeps_word_characters(self):
        assert rule_id_for("colour_2") == "colour_2"


class TestIsCorrect:
    """Tests for the compound fallback."""

    def _word(self, parse, text):
        return parse(text).children[0].children[0].children[0]

    def test_single_segment(self, parse, make_checker):
        options = SpellOptions(dictionary=make_checker())
        checker = make_checker(words={"alpha"})
        assert is_correct("alpha", self._word(parse, "alpha"), checker, options)
        assert not is_correct("alpah", self._word(parse, "alpah"), checker, options)

    def test_compound_of_known_words(self, parse, make_checker):
        checker = make_checker(words={"alpha", "bravo"})
        options = SpellOptions(dictionary=checker)
        assert is_correct("alpha-bravo", self._word(parse, "alpha-bravo"), checker, options)

    def test_compound_with_unknown_segment(self, parse, make_checker):
        checker = make_checker(words={"alpha"})
        options = SpellOptions(dictionary=checker)
        assert not is_correct("alpha-brvo", self._word(parse, "alpha-brvo"), checker, options)

    def test_compound_with_ignored_segment(self, parse, make_checker):
        checker = make_checker(words={"alpha"})
        options = SpellOptions(dictionary=checker, ignore=["brvo"])
        assert is_correct("alpha-brvo", self._word(parse, "alpha-brvo"), checker, options)


class TestCheckTree:
    """Tests for check_tree()."""

    def test_returns_added_count(self, parse, english_checker):
        options = SpellOptions(dictionary=english_checker)
        file = SourceFile()
        file.message("existing")
        added = check_tree(parse("color useles"), file, english_checker, SuggestionCache(), options)
        assert added == 2
        assert len(file.messages) == 3

    def test_shared_cache(self, parse, english_checker):
        """Test a cache shared between calls prevents repeated lookups."""
        options = SpellOptions(dictionary=english_checker)
        cache = SuggestionCache()
        check_tree(parse("color"), SourceFile(), english_checker, cache, options)
        check_tree(parse("color"), SourceFile(), english_checker, cache, options)
        assert english_checker.suggest_calls == ["color"]
        assert cache.count == 1
