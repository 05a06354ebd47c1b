# =============================================================================
# Document Model
# =============================================================================
# A Document is one labeled email as the classifier sees it: a name (for
# log messages), a label, and some text.
#
# The text is either held in memory (tests, ad-hoc classification) or read
# lazily from disk when the trainer/evaluator gets to it. Reading is the
# only step that can fail; a failed read raises DocumentReadError so that
# callers can skip the document and carry on with the rest of the corpus.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

# Corpus files are plain 8-bit mail dumps. Latin-1 maps every byte to a
# character, so decoding never fails on stray bytes.
DEFAULT_ENCODING = "iso-8859-1"


class Label(Enum):
    """
    The two classes a document can belong to.

    HAM is the negative class (legitimate mail), SPAM the positive one.
    """
    HAM = "ham"
    SPAM = "spam"

    @classmethod
    def from_bool(cls, is_spam: bool) -> "Label":
        """Map the usual ``is_spam`` flag onto a Label."""
        return cls.SPAM if is_spam else cls.HAM

    @property
    def is_spam(self) -> bool:
        return self is Label.SPAM


@dataclass(frozen=True)
class Document:
    """
    A labeled document supplied to the trainer or evaluator.

    Exactly one of ``text`` or ``path`` is normally set. In-memory text
    wins if both are present.

    Attributes:
        name: Identifier used in log messages (file name, test case id).
        label: Known class of the document.
        text: Document text, if already in memory.
        path: File to read the text from on demand.
        encoding: Encoding used when reading ``path``.

    Example:
        >>> doc = Document(name="greeting", label=Label.HAM, text="hello world")
        >>> doc.read()
        'hello world'
    """
    name: str
    label: Label
    text: str | None = None
    path: Path | None = None
    encoding: str = DEFAULT_ENCODING

    @property
    def is_spam(self) -> bool:
        return self.label.is_spam

    @classmethod
    def from_text(cls, text: str, *, is_spam: bool, name: str = "<memory>") -> "Document":
        """Create an in-memory document."""
        return cls(name=name, label=Label.from_bool(is_spam), text=text)

    @classmethod
    def from_path(
        cls,
        path: Path,
        *,
        is_spam: bool,
        encoding: str = DEFAULT_ENCODING,
    ) -> "Document":
        """Create a document whose text is read from ``path`` when needed."""
        return cls(
            name=path.name,
            label=Label.from_bool(is_spam),
            path=path,
            encoding=encoding,
        )

    def read(self) -> str:
        """
        Return the document text.

        Returns:
            The in-memory text, or the decoded file contents.

        Raises:
            DocumentReadError: If there is no text, the text is not a
                string, or the file cannot be read or decoded.
        """
        if self.text is not None:
            if not isinstance(self.text, str):
                raise DocumentReadError(
                    f"{self.name}: expected text, got {type(self.text).__name__}"
                )
            return self.text

        if self.path is None:
            raise DocumentReadError(f"{self.name}: document has no text and no path")

        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(f"{self.name}: {e}") from e


def as_document(item: Any, *, index: int = 0) -> Document:
    """
    Coerce an item from a document sequence into a Document.

    Accepts Document instances as-is and ``(text, is_spam)`` pairs (tuples,
    lists or any other two-item sequence), which is the shape the trainer
    and evaluator are documented to consume.

    Args:
        item: A Document or a ``(text, is_spam)`` pair.
        index: Position in the input sequence, used to name pair documents.

    Raises:
        DocumentReadError: If the item has neither shape.
    """
    if isinstance(item, Document):
        return item

    if isinstance(item, Sequence) and not isinstance(item, (str, bytes)) and len(item) == 2:
        text, is_spam = item
        return Document(
            name=f"<document {index}>",
            label=Label.from_bool(bool(is_spam)),
            text=text,
        )

    raise DocumentReadError(
        f"<document {index}>: expected Document or (text, is_spam) pair, "
        f"got {type(item).__name__}"
    )


# =============================================================================
# Exceptions
# =============================================================================

class DocumentReadError(Exception):
    """Raised when a document's text cannot be obtained."""
    pass
