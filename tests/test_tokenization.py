import pytest

from text_processor.models import Sentence, Word, normalize_words
from text_processor.tokenization import capitalize_first, normalize_tokens


def _texts(words: list[Word]) -> list[str]:
    return [word.text for word in words]


def test_normalize_words_strips_punctuation_and_capitalizes():
    words = normalize_words(Sentence("Hello, world! It's sunny today."))

    assert _texts(words) == ["Hello", "World", "It's", "Sunny", "Today"]


def test_internal_hyphen_and_apostrophe_are_preserved():
    words = normalize_words(Sentence("well-known it's here"))

    assert _texts(words) == ["Well-known", "It's", "Here"]


def test_dangling_hyphens_and_apostrophes_are_stripped():
    words = normalize_words("'quoted' -dash trailing- mid-word rock'n'roll")

    assert _texts(words) == ["Quoted", "Dash", "Trailing", "Mid-word", "Rock'n'roll"]


def test_hyphen_between_digits_is_a_separator():
    assert _texts(normalize_words("pages 2-3 of 42b")) == ["Pages", "2", "3", "Of", "42b"]


def test_stripped_characters_separate_words():
    assert _texts(normalize_words("a.b,c")) == ["A", "B", "C"]


def test_unicode_letters_are_kept():
    words = normalize_words(Sentence("Это тестовый текст... Как дела?"))

    assert _texts(words) == ["Это", "Тестовый", "Текст", "Как", "Дела"]


def test_only_first_character_is_uppercased():
    assert _texts(normalize_words("iPhone mcDonald")) == ["IPhone", "McDonald"]
    assert capitalize_first("") == ""


def test_normalize_tokens_works_on_plain_strings():
    tokens = normalize_tokens("it's a well-known fact, 2-3 times")

    assert tokens == ["It's", "A", "Well-known", "Fact", "2", "3", "Times"]
    assert all(isinstance(token, str) for token in tokens)


def test_sentence_words_are_derived_on_demand():
    sentence = Sentence("one two")

    assert sentence.words() == [Word("One"), Word("Two")]
    assert sentence.words() == sentence.words()


@pytest.mark.parametrize(
    "text",
    [
        "Hello,,,, words!! Это тестовый текст... Как дела?",
        "well-known it's here -- 'quoted' 2-3",
        "   ",
        "MiXeD cAsE words, with: colons; and (parens)",
    ],
)
def test_normalization_is_a_fixed_point(text: str):
    first = normalize_words(text)
    second = normalize_words(" ".join(word.text for word in first))

    assert second == first


def test_word_rejects_blank_text():
    with pytest.raises(ValueError):
        Word("   ")
    with pytest.raises(TypeError):
        Word(None)  # type: ignore[arg-type]
