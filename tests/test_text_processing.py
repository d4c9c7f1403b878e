import pytest
from pydantic import ValidationError

from common.datasets import STOPWORDS
from reviews import lowercase_text, remove_punctuation, remove_stopwords, split_tokens


def test_lowercase():
    assert lowercase_text("The product quality is EXCELLENT!") == "the product quality is excellent!"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("excellent! fast delivery.", "excellent fast delivery"),
        ("don't stop-me now", "dont stopme now"),
        ("snake_case and 42 digits", "snake_case and 42 digits"),
        ("tabs\tand\nnewlines stay", "tabs\tand\nnewlines stay"),
        ("café", "caf"),
    ],
)
def test_remove_punctuation(text, expected):
    assert remove_punctuation(text) == expected


def test_split_tokens_discards_empty_strings():
    assert split_tokens("  the   product \t is  ") == ["the", "product", "is"]
    assert split_tokens("   ") == []


def test_remove_stopwords_preserves_order():
    tokens = ["the", "product", "quality", "is", "excellent", "the"]

    kept, removed = remove_stopwords(tokens, STOPWORDS)

    assert kept == ["product", "quality", "excellent"]
    assert removed == ["the", "is", "the"]


def test_text_helpers_reject_non_strings():
    with pytest.raises(ValidationError):
        lowercase_text(None)
