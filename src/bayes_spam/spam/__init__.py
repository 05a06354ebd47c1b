# =============================================================================
# Spam Module
# =============================================================================
# Naive Bayes spam filtering over a bag-of-words model.
#
#   - Tokenizer: raw text -> normalized tokens
#   - Model: per-class document-frequency tables plus hyperparameters
#   - train(): fills a Model from labeled documents
#   - SpamClassifier: scores text against a Model
#   - evaluate(): measures a classifier on held-out documents
#
# Typical run:
#   model = Model(params=ModelParams(alpha=0.001, threshold=0.5))
#   train(model, training_documents)
#   model.freeze()
#   report = evaluate(SpamClassifier(model), test_documents)
# =============================================================================

from bayes_spam.spam.classifier import Classification, SpamClassifier
from bayes_spam.spam.evaluator import EvaluationReport, evaluate
from bayes_spam.spam.model import (
    DIVISORS,
    FrequencyTable,
    FrozenModelError,
    InvalidDocumentError,
    InvalidParameterError,
    Model,
    ModelError,
    ModelNotTrainedError,
    ModelParams,
    ModelStats,
    token_total,
    vocabulary_size,
)
from bayes_spam.spam.tokenizer import Tokenizer, TokenizerConfig
from bayes_spam.spam.trainer import TrainingStats, train

__all__ = [
    "Classification",
    "DIVISORS",
    "EvaluationReport",
    "FrequencyTable",
    "FrozenModelError",
    "InvalidDocumentError",
    "InvalidParameterError",
    "Model",
    "ModelError",
    "ModelNotTrainedError",
    "ModelParams",
    "ModelStats",
    "SpamClassifier",
    "Tokenizer",
    "TokenizerConfig",
    "TrainingStats",
    "evaluate",
    "train",
    "token_total",
    "vocabulary_size",
]
