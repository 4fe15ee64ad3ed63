"""
Build a keyword index from document files and run "kw1 OR kw2" searches.

Usage:
    keyword-ranker docs.txt noisewords.txt -q deep world -q earth sky
    keyword-ranker docs.txt noisewords.txt --limit 10 < queries.txt

``docs.txt`` lists document file names (relative to its own directory),
``noisewords.txt`` lists noise words. Without ``-q`` the queries are read
from stdin, one "kw1 kw2" pair per line, until EOF or an empty line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator

from tqdm import tqdm

from keyword_ranker.corpus import Corpus, SourceNotFoundError, load_noise_words
from keyword_ranker.index import MasterIndex
from keyword_ranker.search import DEFAULT_LIMIT

logger = logging.getLogger(__name__)


def _read_queries(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    for line in lines:
        words = line.split()
        if not words:
            return
        if len(words) != 2:
            print(f"Skipping query {line.strip()!r}: expected two keywords", file=sys.stderr)
            continue
        yield words[0], words[1]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyword-ranker",
        description="Frequency-ranked two-keyword search over a set of documents.",
    )
    parser.add_argument("docs_file", help="File listing the document file names.")
    parser.add_argument("noise_words_file", help="File listing the noise words.")
    parser.add_argument(
        "-q",
        "--query",
        nargs=2,
        action="append",
        metavar=("KW1", "KW2"),
        help="Keyword pair to search for (repeatable). Reads stdin if omitted.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of documents per result (default: {DEFAULT_LIMIT}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.limit < 1:
        parser.error("--limit must be at least 1.")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        noise_words = load_noise_words(args.noise_words_file)
        corpus = Corpus.from_docs_file(args.docs_file)
    except SourceNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    index = MasterIndex(noise_words)
    for document_id, tokens in tqdm(corpus, total=len(corpus), desc="Indexing", unit="doc"):
        index.add_document(document_id, tokens)

    print(
        f"Indexed {len(corpus):,} documents "
        f"({corpus.token_count:,} tokens, avg {corpus.average_document_length:.1f}), "
        f"{len(index):,} keywords"
    )

    queries = args.query if args.query else _read_queries(sys.stdin)
    for kw1, kw2 in queries:
        results = index.top_matches(kw1, kw2, limit=args.limit)
        print(f"{kw1} OR {kw2}: {', '.join(results) if results else '(no matches)'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
