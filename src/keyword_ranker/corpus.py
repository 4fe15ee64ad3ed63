"""
Document sources for the keyword index.

Everything that touches the file system lives here; the index itself only
ever sees ``(document id, tokens)`` pairs.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import cached_property
from pathlib import Path

import numpy as np


class SourceNotFoundError(FileNotFoundError):
    """A document, document list, or noise-word file could not be found."""


def tokenize(text: str) -> list[str]:
    """Splits text on whitespace, keeping case and punctuation."""
    return text.split()


def _read_text(path: str | Path) -> str:
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(f"Could not find file: {path}")
    return path.read_text(encoding="utf-8")


def read_document(path: str | Path) -> list[str]:
    """Returns the raw tokens of one document file."""
    return tokenize(_read_text(path))


def load_noise_words(path: str | Path) -> frozenset[str]:
    """Loads noise words, one or more per line, lower-cased."""
    return frozenset(word.lower() for word in tokenize(_read_text(path)))


class Corpus:
    """
    An ordered collection of tokenized documents with their identifiers.

    Iterating a Corpus yields ``(document id, tokens)`` pairs, which is what
    ``build_index`` consumes.

    Args:
        documents (list[list[str]]): Tokenized documents.
        ids (list[str] | None): Document identifiers. Defaults to the
            document positions as strings.

    Attributes:
        documents (list[list[str]]): The raw tokenized documents.
        ids (list[str]): Identifier of each document.
        document_count (int): Total number of documents in the corpus.
    """

    def __init__(self, documents: list[list[str]], ids: list[str] | None = None):
        if ids is not None and len(ids) != len(documents):
            raise ValueError(f"Got {len(ids)} ids for {len(documents)} documents.")
        self.documents = documents
        self.ids = ids if ids is not None else [str(idx) for idx in range(len(documents))]
        self.document_count = len(documents)

    def __len__(self) -> int:
        return self.document_count

    def __getitem__(self, index: int) -> tuple[str, list[str]]:
        return self.ids[index], self.documents[index]

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        return zip(self.ids, self.documents)

    @classmethod
    def from_files(cls, paths: list[str | Path]) -> "Corpus":
        """Reads each file as one document, identified by its path as given."""
        return cls([read_document(path) for path in paths], [str(path) for path in paths])

    @classmethod
    def from_docs_file(cls, docs_file: str | Path) -> "Corpus":
        """
        Reads a document list file: whitespace-separated document file names.

        Relative names are resolved against the list file's directory; the
        name as written is kept as the document id.
        """
        docs_file = Path(docs_file)
        names = tokenize(_read_text(docs_file))
        documents = [read_document(docs_file.parent / name) for name in names]
        return cls(documents, names)

    @cached_property
    def document_length(self) -> np.ndarray:
        """Number of raw tokens in each document."""
        return np.array([len(doc) for doc in self.documents], dtype=np.int64)

    @cached_property
    def average_document_length(self) -> float:
        """Average number of tokens per document."""
        return float(np.mean(self.document_length)) if len(self.document_length) else 0.0

    @cached_property
    def token_count(self) -> int:
        """Total number of tokens in the corpus."""
        return int(np.sum(self.document_length))
