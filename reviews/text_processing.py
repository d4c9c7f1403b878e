import re
from typing import AbstractSet, List, Tuple

from pydantic import validate_call

# [^\w\s] with ASCII classes: letters, digits, underscore and whitespace survive
_PUNCTUATION_RE = re.compile(r"[^\w\s]", flags=re.ASCII)


@validate_call
def lowercase_text(text: str) -> str:
    """Locale-independent lowercasing."""
    return text.lower()


@validate_call
def remove_punctuation(text: str) -> str:
    """Drop every character that is not a word character or whitespace."""
    return _PUNCTUATION_RE.sub("", text)


@validate_call
def split_tokens(text: str) -> List[str]:
    """Split on whitespace runs; leading, trailing and repeated spaces yield no empty tokens."""
    return text.split()


def remove_stopwords(tokens: List[str], stopwords: AbstractSet[str]) -> Tuple[List[str], List[str]]:
    """
    Partition tokens into (kept, removed), both in their original order.
    Args: tokens (list[str]): Raw tokens. stopwords (set[str]): Lowercase stopwords.
    Returns: tuple: Tokens not in the stopword set, and the stopwords that were dropped.
    """
    kept, removed = [], []
    for token in tokens:
        if token in stopwords:
            removed.append(token)
        else:
            kept.append(token)
    return kept, removed
