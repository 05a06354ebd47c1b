# =============================================================================
# Trainer
# =============================================================================
# Builds a Model's frequency tables from a sequence of labeled documents.
#
# Documents are independent, so reading and tokenizing them is spread over
# a thread pool. Each worker returns the token set for one document and
# the calling thread merges it into the model, so workers never share a
# table while counting.
#
# A document that can't be read is logged and skipped. One bad file in a
# corpus of thousands must not abort the run.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Iterable

from bayes_spam.core import Document, DocumentReadError
from bayes_spam.spam.model import FrozenModelError, Model
from bayes_spam.spam.pool import map_documents

logger = logging.getLogger(__name__)


@dataclass
class TrainingStats:
    """
    Outcome of one training run.

    Attributes:
        ham_documents: Ham documents added to the model.
        spam_documents: Spam documents added to the model.
        skipped: Documents that could not be read.
    """
    ham_documents: int = 0
    spam_documents: int = 0
    skipped: int = 0

    @property
    def trained(self) -> int:
        return self.ham_documents + self.spam_documents


def train(
    model: Model,
    documents: Iterable[Document | tuple[str, bool]],
    *,
    workers: int = 1,
) -> TrainingStats:
    """
    Train ``model`` on labeled documents.

    Can be called more than once (e.g. once for the ham corpus, once for
    the spam corpus) before the model is frozen.

    Args:
        model: Model to update in place.
        documents: Documents or ``(text, is_spam)`` pairs.
        workers: Number of threads used to read and tokenize documents.

    Returns:
        Counts of trained and skipped documents.

    Raises:
        FrozenModelError: If the model has already been frozen.
    """
    if model.is_frozen:
        raise FrozenModelError("model is frozen; build a new Model to retrain")

    stats = TrainingStats()
    tokenizer = model.tokenizer

    results = map_documents(
        documents,
        lambda doc, text: tokenizer.unique_tokens(text),
        workers=workers,
    )
    for name, doc, tokens in results:
        if isinstance(tokens, DocumentReadError):
            stats.skipped += 1
            logger.warning(f"Skipping unreadable document {name}: {tokens}")
            continue

        model.add_tokens(tokens, doc.label)
        if doc.is_spam:
            stats.spam_documents += 1
        else:
            stats.ham_documents += 1
        logger.debug(f"Trained on {name} ({doc.label.value}, {len(tokens)} tokens)")

    logger.info(
        f"Training finished: {stats.ham_documents} ham, "
        f"{stats.spam_documents} spam, {stats.skipped} skipped"
    )
    return stats
