# =============================================================================
# Corpus Loading
# =============================================================================
# Turns directories of mail files into labeled Document sequences.
#
# A corpus is four flat directories, one file per email:
#   ham_train/   spam_train/   ham_test/   spam_test/
#
# Files are not read here. Each Document reads its own file when the
# trainer or evaluator gets to it, so a single unreadable file only costs
# that one document.
# =============================================================================

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from bayes_spam.core import DEFAULT_ENCODING, Document

logger = logging.getLogger(__name__)


def iter_directory(
    directory: Path,
    *,
    is_spam: bool,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[Document]:
    """
    Yield a lazily-read Document for each regular file in ``directory``.

    Subdirectories are ignored. Files are yielded in name order so runs
    are reproducible.

    Raises:
        CorpusError: If ``directory`` doesn't exist or isn't a directory.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise CorpusError(f"Not a directory: {directory}")

    files = sorted(p for p in directory.iterdir() if p.is_file())
    logger.debug(f"Found {len(files)} files in {directory}")

    for path in files:
        yield Document.from_path(path, is_spam=is_spam, encoding=encoding)


@dataclass
class Corpus:
    """
    The four directories of a train/test corpus.

    Attributes:
        ham_train: Ham documents to train on.
        spam_train: Spam documents to train on.
        ham_test: Ham documents to evaluate on.
        spam_test: Spam documents to evaluate on.
        encoding: Encoding used to read every file.

    Example:
        >>> corpus = Corpus.from_root(Path("data"))
        >>> corpus.ham_train
        PosixPath('data/ham-anlern')
    """
    ham_train: Path
    spam_train: Path
    ham_test: Path
    spam_test: Path
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_root(cls, root: Path, *, encoding: str = DEFAULT_ENCODING) -> "Corpus":
        """Use the standard directory names below ``root``."""
        root = Path(root)
        return cls(
            ham_train=root / "ham-anlern",
            spam_train=root / "spam-anlern",
            ham_test=root / "ham-test",
            spam_test=root / "spam-test",
            encoding=encoding,
        )

    def training_documents(self) -> list[Document]:
        """All training documents, ham first."""
        return [
            *iter_directory(self.ham_train, is_spam=False, encoding=self.encoding),
            *iter_directory(self.spam_train, is_spam=True, encoding=self.encoding),
        ]

    def test_documents(self) -> list[Document]:
        """All test documents, ham first."""
        return [
            *iter_directory(self.ham_test, is_spam=False, encoding=self.encoding),
            *iter_directory(self.spam_test, is_spam=True, encoding=self.encoding),
        ]


# =============================================================================
# Exceptions
# =============================================================================

class CorpusError(Exception):
    """Raised when a corpus directory is missing."""
    pass
