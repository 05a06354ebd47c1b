# =============================================================================
# Evaluator
# =============================================================================
# Measures a classifier against held-out labeled documents.
#
# Aggregate accuracy alone hides class imbalance (a filter that calls
# everything ham scores 90% on a 90/10 corpus), so the report always
# carries the per-class breakdown as well.
#
# Unreadable documents are skipped and left out of every total.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Iterable

from bayes_spam.core import Document, DocumentReadError, Label
from bayes_spam.spam.classifier import SpamClassifier
from bayes_spam.spam.pool import map_documents

logger = logging.getLogger(__name__)


@dataclass
class EvaluationReport:
    """
    Per-class tallies from an evaluation run.

    Attributes:
        correct_ham: Ham documents scored below the threshold.
        total_ham: Ham documents evaluated.
        correct_spam: Spam documents scored at or above the threshold.
        total_spam: Spam documents evaluated.
        skipped: Documents that could not be read.
    """
    correct_ham: int = 0
    total_ham: int = 0
    correct_spam: int = 0
    total_spam: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.total_ham + self.total_spam

    @property
    def correct(self) -> int:
        return self.correct_ham + self.correct_spam

    @property
    def accuracy(self) -> float:
        """Percentage of documents classified correctly (0.0 if none)."""
        if not self.total:
            return 0.0
        return self.correct / self.total * 100

    def record(self, label: Label, predicted: Label) -> None:
        """Tally one classified document."""
        if label is Label.SPAM:
            self.total_spam += 1
            if predicted is Label.SPAM:
                self.correct_spam += 1
        else:
            self.total_ham += 1
            if predicted is Label.HAM:
                self.correct_ham += 1

    def summary(self) -> str:
        """Human-readable report, accuracy rounded to two decimals."""
        lines = [
            f"Ham:      {self.correct_ham}/{self.total_ham} correct",
            f"Spam:     {self.correct_spam}/{self.total_spam} correct",
            f"Accuracy: {self.accuracy:.2f}% ({self.correct}/{self.total})",
        ]
        if self.skipped:
            lines.append(f"Skipped:  {self.skipped} unreadable")
        return "\n".join(lines)


def evaluate(
    classifier: SpamClassifier,
    documents: Iterable[Document | tuple[str, bool]],
    *,
    workers: int = 1,
) -> EvaluationReport:
    """
    Classify each labeled document and tally the results.

    Args:
        classifier: Classifier over a trained model.
        documents: Documents or ``(text, is_spam)`` pairs.
        workers: Number of threads used to read and score documents.

    Returns:
        Per-class correct/total counts and the number skipped.

    Raises:
        ModelNotTrainedError: If the classifier's model is not trained.
    """
    classifier.ensure_trained()
    report = EvaluationReport()

    results = map_documents(
        documents,
        lambda doc, text: classifier.label(text),
        workers=workers,
    )
    for name, doc, predicted in results:
        if isinstance(predicted, DocumentReadError):
            report.skipped += 1
            logger.warning(f"Skipping unreadable document {name}: {predicted}")
            continue

        report.record(doc.label, predicted)
        logger.debug(f"{name}: expected {doc.label.value}, got {predicted.value}")

    logger.info(
        f"Evaluation finished: {report.accuracy:.2f}% accuracy over "
        f"{report.total} documents ({report.skipped} skipped)"
    )
    return report
