from keyword_ranker.scanner import Occurrence, scan_document


def test_scan_document_counts_keywords():
    tokens = "The cat sat. The CAT, the cat! A dog's bone wo!rd".split()
    keywords = scan_document(tokens, "doc1.txt", frozenset({"the", "a"}))

    assert keywords == {
        "cat": Occurrence("doc1.txt", 3),
        "sat": Occurrence("doc1.txt", 1),
        "bone": Occurrence("doc1.txt", 1),
    }


def test_scan_document_without_keywords():
    assert scan_document([], "empty.txt") == {}
    assert scan_document(["123", "?!", "it's"], "junk.txt") == {}


def test_every_occurrence_belongs_to_the_document():
    keywords = scan_document("alpha beta gamma alpha".split(), "greek")
    assert {occurrence.document for occurrence in keywords.values()} == {"greek"}
    assert keywords["alpha"].frequency == 2


def test_occurrence_str():
    assert str(Occurrence("doc1.txt", 4)) == "(doc1.txt,4)"
