"""Per-document keyword counting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from keyword_ranker.keywords import get_keyword


@dataclass
class Occurrence:
    """
    One document's count for one keyword.

    ``frequency`` is only incremented while the owning document is scanned;
    once the occurrence is merged into an index it is treated as fixed.
    """

    document: str
    frequency: int = 1

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def scan_document(
    tokens: Iterable[str],
    document_id: str,
    noise_words: frozenset[str] | set[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Counts the keywords of a single document.

    Args:
        tokens: Whitespace-delimited words of the document, raw case and
            punctuation preserved.
        document_id: Opaque identifier stored in every Occurrence.
        noise_words: Lower-case words excluded from indexing.

    Returns:
        Mapping from keyword to its Occurrence in this document.
    """
    keywords: dict[str, Occurrence] = {}
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue
        occurrence = keywords.get(keyword)
        if occurrence is None:
            keywords[keyword] = Occurrence(document_id, 1)
        else:
            occurrence.frequency += 1
    return keywords
