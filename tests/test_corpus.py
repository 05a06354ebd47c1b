"""Tests for loading corpus directories."""

import pytest

from bayes_spam.core import Label
from bayes_spam.corpus import Corpus, CorpusError, iter_directory


def test_iter_directory_yields_sorted_files(temp_dir):
    for name in ["b.txt", "a.txt", "c.txt"]:
        (temp_dir / name).write_text(name)
    (temp_dir / "subdir").mkdir()

    docs = list(iter_directory(temp_dir, is_spam=True))

    assert [doc.name for doc in docs] == ["a.txt", "b.txt", "c.txt"]
    assert all(doc.label is Label.SPAM for doc in docs)
    assert docs[0].read() == "a.txt"


def test_iter_directory_missing(temp_dir):
    with pytest.raises(CorpusError, match="Not a directory"):
        list(iter_directory(temp_dir / "nope", is_spam=False))


def test_corpus_from_root(sample_corpus):
    corpus = Corpus.from_root(sample_corpus)

    training = corpus.training_documents()
    testing = corpus.test_documents()

    assert [doc.label for doc in training] == [Label.HAM] * 2 + [Label.SPAM] * 2
    assert len(testing) == 5
    assert corpus.ham_test == sample_corpus / "ham-test"


def test_corpus_missing_directory(temp_dir):
    corpus = Corpus.from_root(temp_dir)
    with pytest.raises(CorpusError):
        corpus.training_documents()


def test_corpus_encoding_is_passed_on(sample_corpus):
    corpus = Corpus.from_root(sample_corpus, encoding="utf-8")
    assert all(doc.encoding == "utf-8" for doc in corpus.test_documents())
