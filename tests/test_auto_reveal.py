"""
自動顯示判斷測試
"""
import re

import pytest

from phonomatch.core.auto_reveal import AutoRevealClassifier, should_auto_reveal


class TestAutoRevealClassifier:
    """預設樣式測試"""

    @pytest.mark.parametrize(
        "word",
        ["9", "30", "9am", "12PM", "5:30", "5:30am", "12:45pm", "$100", "$9.99", "100$",
         "50%", "10kg", "180cm", "5m", "9am.", "50%!"],
    )
    def test_reveals_numeric_tokens(self, word):
        assert should_auto_reveal(word) is True

    @pytest.mark.parametrize("word", ["happy", "9th", "5km", "am", "a", "", "nine", "%50"])
    def test_keeps_regular_words(self, word):
        assert should_auto_reveal(word) is False

    def test_empty_pattern_set_disables(self):
        classifier = AutoRevealClassifier(patterns=())
        assert classifier.should_auto_reveal("9am") is False

    @pytest.mark.parametrize("word", ["\uff19am", "\u0663", "\u0669\u0660%", "9\n", "5:30am\n"])
    def test_only_ascii_digits_with_strict_end(self, word):
        assert should_auto_reveal(word) is False

    def test_custom_patterns_accept_strings(self):
        classifier = AutoRevealClassifier(patterns=[r"^\d+km$", re.compile(r"^no\d+$")])
        assert classifier("5km") is True
        assert classifier("9am") is False
        assert len(classifier.patterns) == 2

    def test_custom_patterns_see_normalized_word(self):
        # normalize() 已去除句點，樣式看不到 "."
        dotted = AutoRevealClassifier(patterns=[r"^no\.\d+$"])
        assert dotted("no.5") is False
        undotted = AutoRevealClassifier(patterns=[r"^no\d+$"])
        assert undotted("No.5") is True
