# =============================================================================
# Naive Bayes Spam Classifier
# =============================================================================
# Scores a document against a trained Model.
#
# How it works:
#   1. Tokenize the document with the model's tokenizer (duplicates kept)
#   2. For each token, look up its count in both tables. A token missing
#      from a table uses alpha in place of the zero count.
#   3. Accumulate in log space:
#        log_ham  += ln(ham_count  / divisor(ham_table))
#        log_spam += ln(spam_count / divisor(spam_table))
#   4. P(spam) = 1 / (1 + exp(log_ham - log_spam))
#
# Summing logs instead of multiplying probabilities keeps long documents
# from underflowing to 0/0. A document with no recognized tokens adds the
# same term to both sums and lands at 0.5.
# =============================================================================

import math
from dataclasses import dataclass

from bayes_spam.core import Label
from bayes_spam.spam.model import (
    InvalidDocumentError,
    Model,
    ModelNotTrainedError,
)


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one document.

    Attributes:
        probability: Spam probability in [0, 1].
        label: SPAM if probability >= threshold, else HAM.
        token_count: Number of accepted tokens in the document.
        known_tokens: Accepted tokens seen in at least one table.
    """
    probability: float
    label: Label
    token_count: int = 0
    known_tokens: int = 0

    @property
    def is_spam(self) -> bool:
        return self.label.is_spam


class SpamClassifier:
    """
    Naive Bayes spam classifier over a trained Model.

    The classifier holds no state of its own; scoring the same text
    against an unchanged model always gives the same result.

    Usage:
        >>> classifier = SpamClassifier(model)
        >>> classifier.score("free money now")
        0.99...
        >>> classifier.label("meeting notes attached")
        <Label.HAM: 'ham'>

    Attributes:
        model: The model to score against.
    """

    def __init__(self, model: Model) -> None:
        self.model = model

    @property
    def threshold(self) -> float:
        return self.model.params.threshold

    def score(self, text: str) -> float:
        """
        Return the spam probability of ``text``.

        Args:
            text: Document text. Empty or whitespace-only text is valid
                  and scores 0.5.

        Returns:
            Spam probability (0.0 = ham, 1.0 = spam).

        Raises:
            InvalidDocumentError: If ``text`` is None or not a string.
            ModelNotTrainedError: If either class table is empty.
        """
        return self.classify(text).probability

    def label(self, text: str) -> Label:
        """Return SPAM if ``score(text) >= threshold``, else HAM."""
        return self.classify(text).label

    def is_spam(self, text: str) -> bool:
        return self.classify(text).is_spam

    def classify(self, text: str) -> Classification:
        """
        Score ``text`` and apply the decision threshold.

        Raises:
            InvalidDocumentError: If ``text`` is None or not a string.
            ModelNotTrainedError: If either class table is empty.
        """
        if not isinstance(text, str):
            raise InvalidDocumentError(
                f"document text must be a string, got {type(text).__name__}"
            )
        self.ensure_trained()

        tokens = self.model.tokenizer.tokenize(text)
        log_ham, log_spam, known = self._log_likelihoods(tokens)
        probability = _logistic(log_spam - log_ham)

        label = Label.SPAM if probability >= self.threshold else Label.HAM
        return Classification(
            probability=probability,
            label=label,
            token_count=len(tokens),
            known_tokens=known,
        )

    def ensure_trained(self) -> None:
        """Raise ModelNotTrainedError if either class divisor is zero."""
        model = self.model
        empty = [
            label.value for label in (Label.HAM, Label.SPAM)
            if model.divisor(model.table(label)) <= 0
        ]
        if empty:
            raise ModelNotTrainedError(
                f"model not trained: no {' or '.join(empty)} tokens recorded"
            )

    def _log_likelihoods(self, tokens: list[str]) -> tuple[float, float, int]:
        """
        Sum per-token log likelihoods for both classes.

        Returns:
            (log_ham, log_spam, number of tokens known to either table)
        """
        model = self.model
        alpha = model.params.alpha
        ham_divisor = model.divisor(model.ham)
        spam_divisor = model.divisor(model.spam)

        log_ham = 0.0
        log_spam = 0.0
        known = 0
        for token in tokens:
            ham_count = model.ham.count(token)
            spam_count = model.spam.count(token)
            if ham_count or spam_count:
                known += 1

            log_ham += math.log((ham_count or alpha) / ham_divisor)
            log_spam += math.log((spam_count or alpha) / spam_divisor)

        return log_ham, log_spam, known


def _logistic(x: float) -> float:
    """1 / (1 + exp(-x)) without overflowing for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)
