"""Tests for word normalization and tokenization."""

import pytest

from bayes_spam.spam import Model, Tokenizer, TokenizerConfig, train


@pytest.fixture
def tokenizer():
    return Tokenizer()


@pytest.mark.parametrize(
    "word,expected",
    [
        ("Hello", "hello"),
        ("MONEY!!!", "money"),
        ("don't", "dont"),
        ("abc", "abc"),                         # minimum length
        ("abcdefghijklmn", "abcdefghijklmn"),   # 14 chars, under the maximum
        ("ab", None),                           # too short
        ("abcdefghijklmno", None),              # 15 chars, maximum is exclusive
        ("1234", None),                         # empty once digits are stripped
        ("!!!", None),
        ("", None),
        ("user@example.com", None),
        ("a=b", None),
        ("AAAA+BBBB", None),
        ("http://spam", None),
        ("x1y2z3", "xyz"),
    ],
)
def test_normalize(tokenizer, word, expected):
    assert tokenizer.normalize(word) == expected


def test_disallowed_chars_checked_before_stripping(tokenizer):
    # Without the raw-word check this would normalize to "wordword"
    assert tokenizer.normalize("word=word") is None


def test_tokenize_keeps_duplicates_and_order(tokenizer):
    text = "Free money,\tfree\n\nMONEY  now"
    assert tokenizer.tokenize(text) == ["free", "money", "free", "money", "now"]


def test_unique_tokens(tokenizer):
    assert tokenizer.unique_tokens("free money free MONEY") == {"free", "money"}


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n", "a b c", "== ++ //"])
def test_tokenize_without_accepted_words(tokenizer, text):
    assert tokenizer.tokenize(text) == []


def test_custom_config():
    tokenizer = Tokenizer(TokenizerConfig(
        min_length=2,
        max_length=4,
        disallowed_chars="",
        strip_non_alpha=False,
    ))

    assert tokenizer.normalize("ok") == "ok"
    assert tokenizer.normalize("a@b") == "a@b"
    assert tokenizer.normalize("four") is None
    assert tokenizer.normalize("x1") == "x1"


@pytest.mark.parametrize(
    "word",
    ["Hello", "MONEY!!!", "ab", "user@example.com", "abcdefghijklmno", "Viagra", "x1y2z3", "=="],
)
def test_training_and_scoring_normalize_identically(word):
    model = Model()
    train(model, [(word, True)])

    scored = model.tokenizer.tokenize(word)
    trained = list(model.spam_counts)

    assert scored == trained
    assert scored == ([] if model.tokenizer.normalize(word) is None
                      else [model.tokenizer.normalize(word)])


@pytest.mark.parametrize(
    "word,expected",
    [
        ("Kelvin", "elvin"),      # KELVIN SIGN lowercases to ASCII "k"
        ("\u0130stanbul", "stanbul"),  # DOTTED CAPITAL I lowercases to "i" + dot
        ("Cafés", "cafs"),
    ],
)
def test_non_ascii_letters_are_stripped_before_lowercasing(tokenizer, word, expected):
    assert tokenizer.normalize(word) == expected
