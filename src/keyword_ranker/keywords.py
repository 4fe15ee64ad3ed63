"""
Keyword normalization.

A keyword is any word that, after its trailing punctuation is stripped,
consists only of letters and is not a noise word. Matching is
case-insensitive: keywords are always returned in lower case.

Usage:
    from keyword_ranker.keywords import get_keyword

    get_keyword("Apple.", {"the", "a", "of"})   # "apple"
    get_keyword("wo!rd")                       # None
"""

from __future__ import annotations

# Only these characters may trail a keyword; anything else is not punctuation.
PUNCTUATION = frozenset(".,?;:!")


def get_keyword(word: str, noise_words: frozenset[str] | set[str] = frozenset()) -> str | None:
    """
    Returns the canonical keyword for ``word``, or None if it is not a keyword.

    Args:
        word: Raw token with case and punctuation preserved.
        noise_words: Lower-case words that are never keywords.

    Returns:
        The lower-cased word without its trailing punctuation, or None if the
        word contains any other non-letter, strips down to nothing, or is a
        noise word.
    """
    letters = []
    last = len(word) - 1

    for i, char in enumerate(word):
        if char.isalpha():
            letters.append(char.lower())
            continue
        # a non-letter may only appear in the trailing punctuation run
        if i != last and word[i + 1].isalpha():
            return None
        if char not in PUNCTUATION:
            return None

    keyword = "".join(letters)
    if not keyword or keyword in noise_words:
        return None
    return keyword

