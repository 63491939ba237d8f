"""
單字比對器測試
"""
import pytest

from phonomatch.config import MatchThresholds
from phonomatch.core.alias_tables import AliasTables
from phonomatch.core.auto_reveal import AutoRevealClassifier
from phonomatch.core.records import MatchRule, MatchStatus
from phonomatch.matching import WordMatcher, is_complete, match_words


@pytest.fixture
def matcher():
    return WordMatcher()


@pytest.fixture
def phonetic_matcher():
    """停用自動顯示，讓數字發音表的規則可以被測到"""
    return WordMatcher(classifier=AutoRevealClassifier(patterns=()))


def matched(records):
    return [r.is_matched for r in records]


class TestBasicMatching:
    """基本比對"""

    def test_exact_sentence_completes(self, matcher):
        records = matcher.match("I am happy today.", "I am happy today.")
        assert matched(records) == [True, True, True, True]
        assert all(r.rule is MatchRule.EXACT for r in records)
        assert is_complete(records, 4)

    def test_one_record_per_target_token(self, matcher):
        records = matcher.match("", ["see", "you", "at", "9am"])
        assert [r.original_index for r in records] == [0, 1, 2, 3]
        assert [r.status for r in records] == [
            MatchStatus.UNMATCHED,
            MatchStatus.UNMATCHED,
            MatchStatus.UNMATCHED,
            MatchStatus.AUTO_REVEALED,
        ]

    def test_punctuation_and_case_ignored(self, matcher):
        records = matcher.match("HAPPY!", ["happy."])
        assert records[0].matched_spoken == "happy"
        assert records[0].canonical == "happy"
        assert records[0].original == "happy."

    def test_out_of_order_speech(self, matcher):
        records = matcher.match("day happy", ["happy", "day"])
        assert [r.spoken_index for r in records] == [1, 0]

    def test_empty_target(self, matcher):
        assert matcher.match("anything", []) == []
        assert matcher.match("anything", "") == []
        assert not is_complete([], 0)

    def test_deterministic(self, matcher):
        first = matcher.match("i am hapy to day", "I'm happy today")
        second = matcher.match("i am hapy to day", "I'm happy today")
        assert first == second


class TestConsumption:
    """語音 token 消耗"""

    def test_token_satisfies_only_one_target(self, matcher):
        records = matcher.match("go", ["go", "go"])
        assert matched(records) == [True, False]

    def test_repeated_tokens_match_in_order(self, matcher):
        records = matcher.match("go go", ["go", "go"])
        assert [r.spoken_index for r in records] == [0, 1]

    def test_no_spoken_index_reused(self, matcher):
        records = matcher.match("a cat sat on a mat", "a cat sat on the mat a")
        used = [r.spoken_index for r in records if r.spoken_index is not None]
        assert len(used) == len(set(used))


class TestContractions:
    """縮寫規則邊界"""

    def test_unapostrophized_contraction_matches_exactly(self, matcher):
        # "i'm" 正規化後為 "im"，與說出的 "im" 完全相同
        records = matcher.match("im happy", ["i'm", "happy"])
        assert records[0].rule is MatchRule.EXACT
        assert records[0].matched_spoken == "im"
        assert is_complete(records, 2)

    def test_expanded_form_matches_by_first_word(self, matcher):
        records = matcher.match("i am happy", ["i'm", "happy"])
        assert records[0].rule is MatchRule.CONTRACTION
        assert records[0].matched_spoken == "i"
        assert records[1].spoken_index == 2

    def test_two_word_expansion_is_not_merged(self, matcher):
        """'do' 與 'not' 各自是獨立 token，只有 'do' 被消耗"""
        records = matcher.match("do not worry", ["don't", "worry"])
        assert records[0].rule is MatchRule.CONTRACTION
        assert records[0].spoken_index == 0
        assert records[1].spoken_index == 2

    def test_spoken_contraction_matches_expanded_target(self, matcher):
        records = matcher.match("don't", ["do", "not"])
        assert records[0].rule is MatchRule.CONTRACTION_REVERSE
        assert records[1].is_matched is False

    def test_plain_word_is_not_treated_as_contraction(self, matcher):
        # "were" 不是 "we're"，說出 "we" 不應滿足它
        records = matcher.match("we", ["were"])
        assert records[0].is_matched is False

    def test_curly_apostrophe_from_recognizer(self, matcher):
        records = matcher.match("don\u2019t", ["do"])
        assert records[0].rule is MatchRule.CONTRACTION_REVERSE

    def test_contraction_without_aliases(self):
        matcher = WordMatcher(alias_tables=AliasTables.from_dict({}))
        records = matcher.match("do", ["don't"])
        # 沒有縮寫表時只剩相似度規則：sim("do", "dont") = 0.5，長度不足 3
        assert records[0].is_matched is False


class TestPhoneticAliases:
    """發音別名"""

    def test_korean_number_pronunciation(self, phonetic_matcher):
        records = phonetic_matcher.match("나인에이엠", ["9am"])
        assert records[0].rule is MatchRule.NUMBER_PHONETIC

    def test_number_pronunciation_substring(self, phonetic_matcher):
        records = phonetic_matcher.match("nine am", ["9am"])
        assert records[0].rule is MatchRule.NUMBER_PHONETIC
        assert records[0].matched_spoken == "nine"

    def test_unrelated_word_does_not_match_number(self, phonetic_matcher):
        records = phonetic_matcher.match("ten", ["9"])
        assert records[0].is_matched is False

    def test_empty_token_is_not_a_number_substring(self, phonetic_matcher):
        records = phonetic_matcher.match("!", ["9"])
        assert records[0].is_matched is False

    def test_injected_number_table(self):
        tables = AliasTables.from_dict({"number_phonetics": {"nine": ["나인"]}})
        records = WordMatcher(alias_tables=tables).match("나인", ["nine"])
        assert records[0].rule is MatchRule.NUMBER_PHONETIC

    def test_number_pronunciation_by_similarity(self):
        # "naine" 與去空白後的 "nainu" 相似度 0.8，未去空白時只有 0.67
        tables = AliasTables.from_dict({"number_phonetics": {"9": ["nai nu"]}})
        matcher = WordMatcher(alias_tables=tables, classifier=AutoRevealClassifier(patterns=()))
        records = matcher.match("naine", ["9"])
        assert records[0].rule is MatchRule.NUMBER_PHONETIC
        assert records[0].matched_spoken == "naine"

    def test_number_pronunciation_below_threshold(self):
        tables = AliasTables.from_dict({"number_phonetics": {"9": ["nai nu"]}})
        matcher = WordMatcher(alias_tables=tables, classifier=AutoRevealClassifier(patterns=()))
        assert matcher.match("naixx", ["9"])[0].is_matched is False

    def test_korean_letter_pronunciation(self, matcher):
        records = matcher.match("에이 cat", ["a", "cat"])
        assert records[0].rule is MatchRule.LETTER_PHONETIC
        assert records[0].matched_spoken == "에이"
        assert records[1].rule is MatchRule.EXACT

    @pytest.mark.parametrize(
        "spoken, expected",
        [
            ("doubleyou", True),   # 完全相同
            ("doubleyu", True),    # 8/9 = 0.89
            ("dubleyu", False),    # 7/9 = 0.78
        ],
    )
    def test_letter_pronunciation_threshold(self, spoken, expected):
        tables = AliasTables.from_dict({"letter_phonetics": {"w": ["doubleyou"]}})
        matcher = WordMatcher(alias_tables=tables, classifier=AutoRevealClassifier(patterns=()))
        record = matcher.match(spoken, ["w"])[0]
        assert record.is_matched is expected
        if expected:
            assert record.rule is MatchRule.LETTER_PHONETIC

    def test_letter_does_not_steal_unrelated_word(self, matcher):
        records = matcher.match("cat", ["a", "cat"])
        assert matched(records) == [False, True]


class TestSimilarityRules:
    """相似度規則與門檻"""

    def test_short_word_threshold(self, matcher):
        loose = matcher.match("gu", ["go"], MatchThresholds(short=0.4))
        strict = matcher.match("gu", ["go"], MatchThresholds(short=0.6))
        assert loose[0].rule is MatchRule.SHORT_SIMILARITY
        assert loose[0].score == pytest.approx(0.5)
        assert strict[0].is_matched is False

    def test_long_word_similarity(self, matcher):
        records = matcher.match("beautifull", ["beautiful"])
        assert records[0].rule is MatchRule.LONG_SIMILARITY
        assert records[0].score == pytest.approx(0.9)

    def test_long_rule_needs_long_spoken_word(self, matcher):
        records = matcher.match("be", ["beautiful"], MatchThresholds(long=0.0))
        assert records[0].is_matched is False

    def test_zero_threshold_accepts_anything(self, matcher):
        records = matcher.match("abc", ["xyz"], MatchThresholds(long=0.0))
        assert records[0].rule is MatchRule.LONG_SIMILARITY

    def test_threshold_above_one_still_allows_exact(self, matcher):
        limits = MatchThresholds(short=1.1, long=1.1)
        assert matcher.match("hapy", ["happy"], limits)[0].is_matched is False
        assert matcher.match("happy", ["happy"], limits)[0].rule is MatchRule.EXACT

    def test_instance_thresholds_used_by_default(self):
        strict = WordMatcher(thresholds=MatchThresholds(short=0.6))
        assert strict.match("gu", ["go"])[0].is_matched is False


class TestAutoReveal:
    """自動顯示"""

    def test_auto_reveal_with_empty_transcript(self, matcher):
        records = matcher.match("", ["5:30am"])
        assert records[0].auto_revealed is True
        assert records[0].matched_spoken is None
        assert is_complete(records, 1)

    @pytest.mark.parametrize("token", ["9am", "5:30am", "50%", "10kg", "$20"])
    def test_auto_reveal_ignores_transcript(self, matcher, token):
        for transcript in ["", "nine", token, "completely unrelated words"]:
            assert matcher.match(transcript, [token])[0].auto_revealed is True

    def test_auto_reveal_consumes_no_token(self, matcher):
        records = matcher.match("wake", ["9am", "wake"])
        assert records[1].spoken_index == 0


class TestEvents:
    """事件回呼"""

    def test_events_emitted(self):
        events = []
        matcher = WordMatcher(on_event=events.append)
        matcher.match("i am happy", ["i'm", "happy", "9am"], trace_id="t-1")
        assert [e["type"] for e in events] == ["match", "match", "auto_reveal"]
        assert events[0]["rule"] == "contraction"
        assert events[0]["spoken"] == "i"
        assert all(e["trace_id"] == "t-1" for e in events)

    def test_silent_emits_nothing(self):
        events = []
        WordMatcher(on_event=events.append).match("happy", ["happy"], silent=True)
        assert events == []

    def test_failing_callback_does_not_break_matching(self):
        def boom(event):
            raise RuntimeError("handler failed")

        records = WordMatcher(on_event=boom).match("happy", ["happy"])
        assert records[0].is_matched is True


class TestExactTranscriptProperty:
    """說出完全相同的句子必定完成"""

    @pytest.mark.parametrize(
        "sentence",
        [
            "I'm happy.",
            "Don't worry, be happy!",
            "I wake up at 5:30am every day",
            "It costs $20 and weighs 10kg",
            "a b c d e",
            "Wait !! what ?",
        ],
    )
    @pytest.mark.parametrize("limits", [MatchThresholds(), MatchThresholds(1.0, 1.0), MatchThresholds(2.0, 2.0)])
    def test_identical_transcript(self, matcher, sentence, limits):
        records = matcher.match(sentence, sentence, limits)
        assert is_complete(records, len(sentence.split()))

    def test_match_words_function(self):
        records = match_words("do not worry", ["don't", "worry"])
        assert matched(records) == [True, True]
