"""
Two-keyword "kw1 OR kw2" search over a built index.

Results are ordered by descending frequency, each document appears once, and
ties between the keywords are broken in favour of the first keyword.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from keyword_ranker.scanner import Occurrence

# Maximum number of documents returned by a search.
DEFAULT_LIMIT = 5


def _merge_ranked(
    first: Sequence[Occurrence],
    second: Sequence[Occurrence],
    limit: int,
) -> list[str]:
    results: list[str] = []
    seen: set[str] = set()
    i = j = 0

    while (i < len(first) or j < len(second)) and len(results) < limit:
        if i == len(first):
            document = second[j].document
            j += 1
        elif j == len(second):
            document = first[i].document
            i += 1
        elif first[i].frequency >= second[j].frequency:
            document = first[i].document
            i += 1
        else:
            document = second[j].document
            j += 1

        # a document found under both keywords still consumes its cursor
        if document not in seen:
            seen.add(document)
            results.append(document)

    return results


def top_matches(
    index: Mapping[str, Sequence[Occurrence]],
    kw1: str,
    kw2: str,
    limit: int = DEFAULT_LIMIT,
) -> list[str]:
    """
    Search result for "kw1 or kw2".

    Args:
        index: Keyword to occurrence list mapping, each list sorted by
            descending frequency.
        kw1: First keyword. Wins frequency ties.
        kw2: Second keyword.
        limit: Maximum number of documents to return.

    Returns:
        Document identifiers in descending order of frequency. Empty if
        neither keyword is indexed.
    """
    if limit <= 0:
        return []

    first = index.get(kw1.lower())
    second = index.get(kw2.lower())

    if first is None and second is None:
        return []
    if second is None:
        return [occurrence.document for occurrence in first[:limit]]
    if first is None:
        return [occurrence.document for occurrence in second[:limit]]
    return _merge_ranked(first, second, limit)
