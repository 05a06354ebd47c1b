# =============================================================================
# Frequency Model
# =============================================================================
# The trained state of the classifier: one word-frequency table per class
# plus the hyperparameters that control scoring.
#
# Counting is Bernoulli-style: a token is counted once per document that
# contains it, no matter how often it appears there. One long newsletter
# therefore can't dominate the vocabulary statistics.
#
# Lifecycle:
#   construct -> train (add_tokens, repeatedly) -> freeze -> score -> discard
#
# Nothing here is global. Each run builds its own Model and passes it to
# the trainer and the classifier explicitly.
# =============================================================================

import math
import threading
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from bayes_spam.core import Label
from bayes_spam.spam.tokenizer import Tokenizer


class FrequencyTable:
    """
    Token -> document count for one class.

    Counts only ever grow. A token is present in the table once it has
    been seen in at least one document of the class.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()
        self._total = 0

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __iter__(self):
        return iter(self._counts)

    def count(self, token: str) -> int:
        """Return the number of documents that contained ``token``."""
        return self._counts.get(token, 0)

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct tokens seen for this class."""
        return len(self._counts)

    @property
    def total(self) -> int:
        """Sum of all counts (token occurrences across documents)."""
        return self._total

    def increment(self, tokens: Iterable[str]) -> None:
        """Add one to the count of each token."""
        for token in tokens:
            self._counts[token] += 1
            self._total += 1

    def as_mapping(self) -> Mapping[str, int]:
        """Read-only view of the counts."""
        return MappingProxyType(self._counts)


# =============================================================================
# Divisor Strategies
# =============================================================================
# The per-token likelihood is approximated as count / divisor(table).
#
# The baseline divides by the vocabulary size (number of distinct tokens),
# which is not a normalized distribution but reproduces the accuracy the
# filter was tuned for. "tokens" divides by the total count instead, which
# is the textbook estimate. Switching changes accuracy; measure before
# changing the default.

Divisor = Callable[[FrequencyTable], float]


def vocabulary_size(table: FrequencyTable) -> float:
    return float(table.vocabulary_size)


def token_total(table: FrequencyTable) -> float:
    return float(table.total)


DIVISORS: dict[str, Divisor] = {
    "vocabulary": vocabulary_size,
    "tokens": token_total,
}


@dataclass(frozen=True)
class ModelParams:
    """
    Hyperparameters for scoring.

    Attributes:
        alpha: Pseudo-count used for tokens absent from a class table.
               Must be > 0.
        threshold: Documents scoring >= threshold are labeled spam.
                   Must be within [0, 1].
        divisor: Name of the divisor strategy ("vocabulary" or "tokens").

    Raises:
        InvalidParameterError: On construction, if any value is invalid.
            Values are never clamped.
    """
    alpha: float = 0.001
    threshold: float = 0.5
    divisor: str = "vocabulary"

    def __post_init__(self) -> None:
        if isinstance(self.alpha, bool) or not isinstance(self.alpha, (int, float)):
            raise InvalidParameterError(f"alpha must be a number, got {self.alpha!r}")
        if not math.isfinite(self.alpha):
            raise InvalidParameterError(f"alpha must be finite, got {self.alpha}")
        if not self.alpha > 0:
            raise InvalidParameterError(f"alpha must be > 0, got {self.alpha}")

        if isinstance(self.threshold, bool) or not isinstance(self.threshold, (int, float)):
            raise InvalidParameterError(f"threshold must be a number, got {self.threshold!r}")
        if not math.isfinite(self.threshold) or not 0.0 <= self.threshold <= 1.0:
            raise InvalidParameterError(
                f"threshold must be within [0, 1], got {self.threshold}"
            )

        if self.divisor not in DIVISORS:
            raise InvalidParameterError(
                f"unknown divisor {self.divisor!r} "
                f"(expected one of: {', '.join(sorted(DIVISORS))})"
            )


@dataclass
class ModelStats:
    """
    Statistics about a model.

    Attributes:
        ham_documents: Number of ham documents trained on.
        spam_documents: Number of spam documents trained on.
        ham_vocabulary: Distinct tokens in the ham table.
        spam_vocabulary: Distinct tokens in the spam table.
    """
    ham_documents: int = 0
    spam_documents: int = 0
    ham_vocabulary: int = 0
    spam_vocabulary: int = 0


@dataclass
class Model:
    """
    Two frequency tables plus the parameters used to score against them.

    Usage:
        >>> model = Model(params=ModelParams(alpha=0.001, threshold=0.5))
        >>> model.add_tokens({"hello", "world"}, Label.HAM)
        >>> model.add_tokens({"free", "money"}, Label.SPAM)
        >>> model.freeze()
        >>> model.ham_counts["hello"]
        1

    Attributes:
        params: Scoring hyperparameters.
        tokenizer: Normalization shared by training and scoring.
        ham: Frequency table for ham documents.
        spam: Frequency table for spam documents.
    """
    params: ModelParams = field(default_factory=ModelParams)
    tokenizer: Tokenizer = field(default_factory=Tokenizer)
    ham: FrequencyTable = field(default_factory=FrequencyTable)
    spam: FrequencyTable = field(default_factory=FrequencyTable)

    def __post_init__(self) -> None:
        self._lock = threading.Lock()
        self._frozen = False
        self._documents = {Label.HAM: 0, Label.SPAM: 0}

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def table(self, label: Label) -> FrequencyTable:
        """Return the frequency table for ``label``."""
        return self.spam if label is Label.SPAM else self.ham

    def add_tokens(self, tokens: Iterable[str], label: Label) -> None:
        """
        Record one document's tokens under ``label``.

        Tokens are deduplicated here as well, so passing a raw token list
        still counts each token once for the document. Safe to call from
        several threads.

        Raises:
            FrozenModelError: If the model has been frozen.
        """
        unique = set(tokens)
        with self._lock:
            if self._frozen:
                raise FrozenModelError("model is frozen; build a new Model to retrain")
            self.table(label).increment(unique)
            self._documents[label] += 1

    def add_text(self, text: str, label: Label) -> None:
        """Tokenize ``text`` with the model's tokenizer and record it."""
        self.add_tokens(self.tokenizer.unique_tokens(text), label)

    def freeze(self) -> None:
        """Mark training as finished. Further training raises FrozenModelError."""
        with self._lock:
            self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def is_trained(self) -> bool:
        """True once both tables contain at least one token."""
        return len(self.ham) > 0 and len(self.spam) > 0

    @property
    def divisor(self) -> Divisor:
        return DIVISORS[self.params.divisor]

    @property
    def ham_counts(self) -> Mapping[str, int]:
        return self.ham.as_mapping()

    @property
    def spam_counts(self) -> Mapping[str, int]:
        return self.spam.as_mapping()

    @property
    def stats(self) -> ModelStats:
        """Get model statistics."""
        return ModelStats(
            ham_documents=self._documents[Label.HAM],
            spam_documents=self._documents[Label.SPAM],
            ham_vocabulary=len(self.ham),
            spam_vocabulary=len(self.spam),
        )


# =============================================================================
# Exceptions
# =============================================================================

class ModelError(Exception):
    """Base class for model and classification errors."""
    pass


class InvalidParameterError(ModelError, ValueError):
    """Raised when a hyperparameter is out of range."""
    pass


class ModelNotTrainedError(ModelError):
    """Raised when scoring against a model with an empty class table."""
    pass


class FrozenModelError(ModelError):
    """Raised when training a model that has been frozen."""
    pass


class InvalidDocumentError(ModelError, TypeError):
    """Raised when a document's text is missing or not a string."""
    pass
