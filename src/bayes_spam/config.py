# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating bayes-spam configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/bayes-spam/  (default: ~/.config/bayes-spam/)
#
# Files:
#   - config.toml: Hyperparameters, tokenizer policy, corpus locations
#
# Every hyperparameter is an explicit setting so that parameter sweeps can
# vary them without touching code. Invalid values are reported, never
# clamped.
# =============================================================================

import codecs
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from bayes_spam.corpus import Corpus
from bayes_spam.core import DEFAULT_ENCODING
from bayes_spam.spam import (
    InvalidParameterError,
    Model,
    ModelParams,
    Tokenizer,
    TokenizerConfig,
)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "bayes-spam"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for bayes-spam.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/bayes-spam/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class ClassifierConfig:
    """
    Scoring hyperparameters.

    Attributes:
        alpha: Pseudo-count for tokens missing from a class table (> 0).
        threshold: Scores >= threshold are spam (0.0-1.0).
        divisor: "vocabulary" (distinct tokens per class, the baseline) or
                 "tokens" (total token count per class).
    """
    alpha: float = 0.001
    threshold: float = 0.5
    divisor: str = "vocabulary"


@dataclass
class TokenizerSettings:
    """
    Token normalization policy.

    Attributes:
        min_length: Shortest accepted token (inclusive).
        max_length: Longest accepted token (exclusive).
        disallowed_chars: Words containing any of these are dropped.
        strip_non_alpha: Remove non-letters before the length check.
    """
    min_length: int = 3
    max_length: int = 15
    disallowed_chars: str = "=+/@"
    strip_non_alpha: bool = True


@dataclass
class CorpusConfig:
    """
    Where the training and test mail lives.

    Attributes:
        ham_train: Directory of ham training files.
        spam_train: Directory of spam training files.
        ham_test: Directory of ham test files.
        spam_test: Directory of spam test files.
        encoding: Encoding for reading mail files.
        workers: Threads used to read and process documents.
    """
    ham_train: str = "data/ham-anlern"
    spam_train: str = "data/spam-anlern"
    ham_test: str = "data/ham-test"
    spam_test: str = "data/spam-test"
    encoding: str = DEFAULT_ENCODING
    workers: int = 4


@dataclass
class Config:
    """
    Main configuration container for bayes-spam.

    Attributes:
        classifier: Scoring hyperparameters.
        tokenizer: Token normalization policy.
        corpus: Corpus locations and I/O settings.

    Usage:
        >>> config = Config.load()
        >>> model = config.build_model()
    """
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    tokenizer: TokenizerSettings = field(default_factory=TokenizerSettings)
    corpus: CorpusConfig = field(default_factory=CorpusConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a TOML file.

        If the file doesn't exist, returns default configuration.

        Args:
            path: Config file. Uses the XDG location if None.

        Returns:
            Loaded and validated Config object.

        Raises:
            ConfigError: If the file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a TOML file.

        Creates the parent directory if it doesn't exist.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).
        """
        config = cls()

        # Classifier settings
        classifier = _section(data, "classifier")
        config.classifier = ClassifierConfig(
            alpha=classifier.get("alpha", 0.001),
            threshold=classifier.get("threshold", 0.5),
            divisor=classifier.get("divisor", "vocabulary"),
        )

        # Tokenizer settings
        tokenizer = _section(data, "tokenizer")
        config.tokenizer = TokenizerSettings(
            min_length=tokenizer.get("min_length", 3),
            max_length=tokenizer.get("max_length", 15),
            disallowed_chars=tokenizer.get("disallowed_chars", "=+/@"),
            strip_non_alpha=tokenizer.get("strip_non_alpha", True),
        )

        # Corpus settings
        corpus = _section(data, "corpus")
        config.corpus = CorpusConfig(
            ham_train=corpus.get("ham_train", "data/ham-anlern"),
            spam_train=corpus.get("spam_train", "data/spam-anlern"),
            ham_test=corpus.get("ham_test", "data/ham-test"),
            spam_test=corpus.get("spam_test", "data/spam-test"),
            encoding=corpus.get("encoding", DEFAULT_ENCODING),
            workers=corpus.get("workers", 4),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["classifier"] = {
            "alpha": self.classifier.alpha,
            "threshold": self.classifier.threshold,
            "divisor": self.classifier.divisor,
        }

        data["tokenizer"] = {
            "min_length": self.tokenizer.min_length,
            "max_length": self.tokenizer.max_length,
            "disallowed_chars": self.tokenizer.disallowed_chars,
            "strip_non_alpha": self.tokenizer.strip_non_alpha,
        }

        data["corpus"] = {
            "ham_train": self.corpus.ham_train,
            "spam_train": self.corpus.spam_train,
            "ham_test": self.corpus.ham_test,
            "spam_test": self.corpus.spam_test,
            "encoding": self.corpus.encoding,
            "workers": self.corpus.workers,
        }

        return data

    # -------------------------------------------------------------------------
    # Validation and Construction
    # -------------------------------------------------------------------------

    def validate(self) -> None:
        """
        Check every setting.

        Raises:
            ConfigError: Describing the first invalid setting found.
        """
        self.model_params()
        self.tokenizer_config()

        workers = self.corpus.workers
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ConfigError(f"corpus.workers must be a positive integer, got {workers!r}")

        encoding = self.corpus.encoding
        if not isinstance(encoding, str):
            raise ConfigError(f"corpus.encoding must be a string, got {encoding!r}")
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ConfigError(f"corpus.encoding: unknown encoding {encoding!r}") from e

    def model_params(self) -> ModelParams:
        """Build validated ModelParams from the classifier section."""
        try:
            return ModelParams(
                alpha=self.classifier.alpha,
                threshold=self.classifier.threshold,
                divisor=self.classifier.divisor,
            )
        except InvalidParameterError as e:
            raise ConfigError(f"Invalid classifier setting: {e}") from e

    def tokenizer_config(self) -> TokenizerConfig:
        """Build a validated TokenizerConfig from the tokenizer section."""
        settings = self.tokenizer
        for name in ("min_length", "max_length"):
            value = getattr(settings, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"tokenizer.{name} must be a positive integer, got {value!r}")
        if settings.min_length >= settings.max_length:
            raise ConfigError(
                f"tokenizer.min_length ({settings.min_length}) must be less than "
                f"max_length ({settings.max_length})"
            )
        if not isinstance(settings.disallowed_chars, str):
            raise ConfigError("tokenizer.disallowed_chars must be a string")
        if not isinstance(settings.strip_non_alpha, bool):
            raise ConfigError(
                f"tokenizer.strip_non_alpha must be true or false, got {settings.strip_non_alpha!r}"
            )

        return TokenizerConfig(
            min_length=settings.min_length,
            max_length=settings.max_length,
            disallowed_chars=settings.disallowed_chars,
            strip_non_alpha=settings.strip_non_alpha,
        )

    def build_model(self) -> Model:
        """
        Create an empty Model from this configuration.

        Raises:
            ConfigError: If a hyperparameter is invalid.
        """
        return Model(
            params=self.model_params(),
            tokenizer=Tokenizer(self.tokenizer_config()),
        )

    def build_corpus(self) -> Corpus:
        """Create a Corpus from the corpus section."""
        return Corpus(
            ham_train=Path(self.corpus.ham_train),
            spam_train=Path(self.corpus.spam_train),
            ham_test=Path(self.corpus.ham_test),
            spam_test=Path(self.corpus.spam_test),
            encoding=self.corpus.encoding,
        )


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or validating configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the [name] table of a parsed config file, or {} if absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def print_paths() -> None:
    """
    Print the config path for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:       {get_xdg_config_home()}")
    print(f"Config file:  {Config.config_file_path()}")
