"""
Master keyword index and the merge engine that maintains it.

Each keyword maps to a list of Occurrences kept in DESCENDING order of
frequency. Documents are folded in one at a time: the document's occurrence
for a keyword is appended to that keyword's list and then moved into place
by a binary search over the already-sorted prefix.

The index has a single-writer lifecycle: build it completely with
``add_document``/``merge`` (or ``build_index``), then only query it.

Usage:
    from keyword_ranker.index import build_index

    index = build_index([("doc1.txt", tokens1), ("doc2.txt", tokens2)], noise_words)
    index.top_matches("deep", "world")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from keyword_ranker.scanner import Occurrence, scan_document
from keyword_ranker.search import DEFAULT_LIMIT, top_matches

logger = logging.getLogger(__name__)


# =============================================================================
# Ordered insertion
# =============================================================================


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int]:
    """
    Moves the last occurrence of the list into its descending-frequency slot.

    Elements ``0..n-2`` must already be sorted. The slot is found by binary
    search over that prefix, and the occurrence is reinserted at the final lower
    bound of the search. The search stops as soon as it probes an equal
    frequency without moving the lower bound, so a tie is placed at the
    current lower bound, which can be ahead of the element it tied with.

    Args:
        occurrences: Keyword entry whose last element was just appended.

    Returns:
        The midpoint indexes probed by the search, in order. Empty when the
        list holds a single occurrence.
    """
    probes: list[int] = []
    if len(occurrences) < 2:
        return probes

    target = occurrences[-1].frequency
    low, high = 0, len(occurrences) - 2
    while low <= high:
        mid = (low + high) // 2
        probes.append(mid)
        if occurrences[mid].frequency < target:
            high = mid - 1
        elif occurrences[mid].frequency > target:
            low = mid + 1
        else:
            break

    occurrence = occurrences.pop()
    occurrences.insert(low, occurrence)
    return probes


# =============================================================================
# Master index
# =============================================================================


class MasterIndex(Mapping[str, list[Occurrence]]):
    """
    Mapping from keyword to its occurrence list, most frequent document first.

    Args:
        noise_words: Words never indexed. Lower-cased on construction.
    """

    def __init__(self, noise_words: Iterable[str] = ()):
        self.noise_words = frozenset(word.lower() for word in noise_words)
        self._keywords: dict[str, list[Occurrence]] = {}
        self._documents: set[str] = set()

    @property
    def documents(self) -> frozenset[str]:
        """Identifiers of every document added through ``add_document``."""
        return frozenset(self._documents)

    def __getitem__(self, keyword: str) -> list[Occurrence]:
        return self._keywords[keyword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def __repr__(self) -> str:
        return f"MasterIndex(keywords={len(self._keywords)}, documents={len(self._documents)})"

    def merge(self, keywords: Mapping[str, Occurrence]) -> None:
        """
        Merges the keywords of a single document into the index.

        Args:
            keywords: Keyword to Occurrence mapping for ONE document, as
                produced by ``scan_document``.
        """
        for keyword, occurrence in keywords.items():
            entry = self._keywords.get(keyword)
            if entry is None:
                self._keywords[keyword] = [occurrence]
                logger.debug("new keyword %r from %s", keyword, occurrence.document)
                continue
            entry.append(occurrence)
            probes = insert_last_occurrence(entry)
            logger.debug("merged %r %s, probes=%s", keyword, occurrence, probes)

    def add_document(self, document_id: str, tokens: Iterable[str]) -> bool:
        """
        Scans one document and merges its keywords.

        Returns:
            False if the document was already indexed (nothing is merged),
            True otherwise.
        """
        if document_id in self._documents:
            logger.warning("document %s is already indexed, skipping", document_id)
            return False
        self._documents.add(document_id)
        self.merge(scan_document(tokens, document_id, self.noise_words))
        return True

    def top_matches(self, kw1: str, kw2: str, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Documents containing ``kw1`` or ``kw2``, most frequent first."""
        return top_matches(self, kw1, kw2, limit)


def build_index(
    documents: Iterable[tuple[str, Iterable[str]]],
    noise_words: Iterable[str] = (),
) -> MasterIndex:
    """
    Indexes every keyword of every document.

    Args:
        documents: ``(document id, tokens)`` pairs, merged in order.
        noise_words: Words excluded from the index.

    Returns:
        A fully built MasterIndex, ready for queries.
    """
    index = MasterIndex(noise_words)
    for document_id, tokens in documents:
        index.add_document(document_id, tokens)
    logger.info("indexed %d documents, %d keywords", len(index.documents), len(index))
    return index
