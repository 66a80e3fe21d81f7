import pytest

from text_processor.models import Sentence, TextStats
from text_processor.segmentation import parse
from text_processor.stats import BYTES_PER_CHAR, calculate, flatten_words, merge_stats
from tests.utils import SCENARIO_A_TEXT


def test_calculate_counts_repeated_words():
    stats = calculate(parse("one two two three three three"))

    assert dict(stats.word_meeting_rate) == {"One": 1, "Two": 2, "Three": 3}
    assert stats.word_count == 6
    assert stats.unique_word_count == 3
    assert stats.char_count == 24
    assert stats.sentence_count == 1
    assert stats.memory_used == len("one two two three three three") * BYTES_PER_CHAR


def test_calculate_empty_input_is_all_zero():
    stats = calculate([])

    assert stats.word_count == 0
    assert stats.char_count == 0
    assert stats.unique_word_count == 0
    assert stats.memory_used == 0
    assert stats.sentence_count == 0
    assert dict(stats.word_meeting_rate) == {}
    assert stats.average_word_length == 0.0
    assert stats.average_sentence_length == 0.0
    assert stats.percentage(5) == 0.0


def test_calculate_blank_text_matches_empty_input():
    assert calculate(parse("")).to_dict() == calculate([]).to_dict()


def test_memory_estimate_uses_raw_sentence_length():
    sentence = Sentence("abcdefghij")

    assert calculate([sentence]).memory_used == 20
    assert calculate([sentence], bytes_per_char=4).memory_used == 40


def test_scenario_a_counts():
    stats = calculate(parse(SCENARIO_A_TEXT))

    assert stats.word_count == 7
    assert stats.unique_word_count == 7
    assert stats.sentence_count == 3
    assert sum(stats.word_meeting_rate.values()) == stats.word_count


@pytest.mark.parametrize(
    "text",
    [
        SCENARIO_A_TEXT,
        "The cat. The dog! The cat?",
        "Apple apple APPLE-pie apple-pie",
        "",
    ],
)
def test_frequency_map_invariants(text: str):
    stats = calculate(parse(text))

    assert sum(stats.word_meeting_rate.values()) == stats.word_count
    assert len(stats.word_meeting_rate) == stats.unique_word_count


def test_case_differences_merge_after_normalization():
    stats = calculate(parse("apple Apple"))

    assert dict(stats.word_meeting_rate) == {"Apple": 2}


def test_flatten_words_keeps_sentence_then_word_order():
    words = flatten_words(parse("b a. d c."))

    assert [word.text for word in words] == ["B", "A", "D", "C"]


def test_frequency_map_is_read_only():
    stats = calculate(parse("one"))

    with pytest.raises(TypeError):
        stats.word_meeting_rate["Two"] = 2  # type: ignore[index]


def test_merge_stats_is_commutative_and_preserves_invariants():
    first = calculate(parse("one two. two three."))
    second = calculate(parse("three four!"))

    merged = merge_stats(first, second)

    assert merged.to_dict() == merge_stats(second, first).to_dict()
    assert dict(merged.word_meeting_rate) == {"One": 1, "Two": 2, "Three": 2, "Four": 1}
    assert merged.word_count == first.word_count + second.word_count
    assert merged.unique_word_count == 4
    assert merged.sentence_count == 3
    assert merged.memory_used == first.memory_used + second.memory_used
    assert sum(merged.word_meeting_rate.values()) == merged.word_count


def test_merge_with_empty_stats_is_identity():
    stats = calculate(parse("alpha beta beta"))

    assert merge_stats(TextStats(), stats).to_dict() == stats.to_dict()


def test_text_stats_freezes_plain_dict_input():
    frequencies = {"One": 1}
    stats = TextStats(
        word_count=1,
        char_count=3,
        unique_word_count=1,
        word_meeting_rate=frequencies,
    )
    frequencies["Two"] = 2

    assert dict(stats.word_meeting_rate) == {"One": 1}
