# =============================================================================
# bayes-spam Command Line Interface
# =============================================================================
# Thin driver around the spam package:
#
#   bayes-spam evaluate          Train on the training corpus and report
#                                accuracy on the test corpus
#   bayes-spam classify FILE...  Train, then score individual files
#
# Every run builds a fresh Model from the configuration, trains it,
# freezes it, and throws it away on exit. Nothing is persisted.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from bayes_spam import __version__, __app_name__
from bayes_spam.config import Config, ConfigError, print_paths
from bayes_spam.core import Document, DocumentReadError
from bayes_spam.corpus import Corpus, CorpusError
from bayes_spam.spam import (
    Model,
    ModelNotTrainedError,
    SpamClassifier,
    evaluate,
    train,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Commands
# =============================================================================

def train_model(config: Config, corpus: Corpus) -> Model:
    """Build a model from ``config`` and train it on ``corpus``."""
    model = config.build_model()
    stats = train(model, corpus.training_documents(), workers=config.corpus.workers)
    model.freeze()

    model_stats = model.stats
    logger.info(
        f"Model vocabulary: {model_stats.ham_vocabulary} ham tokens, "
        f"{model_stats.spam_vocabulary} spam tokens "
        f"({stats.trained} documents, {stats.skipped} skipped)"
    )
    return model


def run_evaluate(config: Config, corpus: Corpus) -> int:
    """Train, evaluate on the test corpus, and print the report."""
    model = train_model(config, corpus)
    classifier = SpamClassifier(model)

    report = evaluate(classifier, corpus.test_documents(), workers=config.corpus.workers)

    print(f"Alpha:     {model.params.alpha}")
    print(f"Threshold: {model.params.threshold}")
    print(report.summary())
    return 0


def run_classify(config: Config, corpus: Corpus, files: list[Path]) -> int:
    """Train, then print probability and label for each file."""
    model = train_model(config, corpus)
    classifier = SpamClassifier(model)

    status = 0
    for path in files:
        # The label here is irrelevant; only the text is scored
        doc = Document.from_path(path, is_spam=False, encoding=config.corpus.encoding)
        try:
            text = doc.read()
        except DocumentReadError as e:
            print(f"{path}: cannot read ({e})", file=sys.stderr)
            status = 1
            continue

        result = classifier.classify(text)
        print(f"{path}: {result.probability:.4f} {result.label.value}")

    return status


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="bayes-spam: a naive Bayes spam filter",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    parser.add_argument(
        "--corpus",
        type=Path,
        help="Corpus root containing ham-anlern/, spam-anlern/, ham-test/, spam-test/",
    )

    parser.add_argument("--alpha", type=float, help="Smoothing constant (> 0)")
    parser.add_argument("--threshold", type=float, help="Spam threshold (0.0-1.0)")
    parser.add_argument("--workers", type=int, help="Worker threads for reading mail")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "evaluate",
        help="Train on the training corpus and report test accuracy",
    )

    classify = subparsers.add_parser(
        "classify",
        help="Train on the training corpus and score the given files",
    )
    classify.add_argument("files", type=Path, nargs="+", help="Mail files to score")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for bayes-spam.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and applies command-line overrides
        4. Runs the requested command

    Returns:
        Exit code (0 for success, 1 for errors, 2 for usage errors).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    if args.command is None:
        print("No command given (use 'evaluate' or 'classify')", file=sys.stderr)
        return 2

    try:
        config = Config.load(args.config)

        if args.alpha is not None:
            config.classifier.alpha = args.alpha
        if args.threshold is not None:
            config.classifier.threshold = args.threshold
        if args.workers is not None:
            config.corpus.workers = args.workers
        config.validate()

        if args.corpus:
            corpus = Corpus.from_root(args.corpus, encoding=config.corpus.encoding)
        else:
            corpus = config.build_corpus()

        if args.command == "classify":
            return run_classify(config, corpus, args.files)
        return run_evaluate(config, corpus)

    except (ConfigError, CorpusError, ModelNotTrainedError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
