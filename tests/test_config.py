"""Tests for configuration loading, saving and validation."""

from pathlib import Path

import pytest

from bayes_spam.config import Config, ConfigError, get_xdg_config_home


@pytest.fixture(autouse=True)
def xdg_home(temp_dir, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir))
    return temp_dir


def test_xdg_config_home(xdg_home):
    assert get_xdg_config_home() == xdg_home / "bayes-spam"
    assert Config.config_file_path() == xdg_home / "bayes-spam" / "config.toml"


def test_defaults_when_no_file():
    config = Config.load()

    assert config.classifier.alpha == 0.001
    assert config.classifier.threshold == 0.5
    assert config.tokenizer.min_length == 3
    assert config.tokenizer.max_length == 15
    assert config.tokenizer.disallowed_chars == "=+/@"
    assert config.corpus.encoding == "iso-8859-1"


def test_save_and_load(temp_dir):
    config = Config()
    config.classifier.alpha = 0.5
    config.classifier.threshold = 0.8
    config.classifier.divisor = "tokens"
    config.tokenizer.max_length = 20
    config.corpus.workers = 2

    path = temp_dir / "nested" / "config.toml"
    config.save(path)
    loaded = Config.load(path)

    assert loaded == config


def test_partial_file(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[classifier]\nthreshold = 0.9\n")

    config = Config.load(path)

    assert config.classifier.threshold == 0.9
    assert config.classifier.alpha == 0.001


def test_invalid_toml(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[classifier\nalpha = ")

    with pytest.raises(ConfigError, match="Invalid config file"):
        Config.load(path)


@pytest.mark.parametrize(
    "toml,match",
    [
        ("[classifier]\nalpha = 0.0\n", "alpha"),
        ("[classifier]\nalpha = -1\n", "alpha"),
        ("[classifier]\nthreshold = 1.5\n", "threshold"),
        ("[classifier]\nthreshold = -0.1\n", "threshold"),
        ("[classifier]\ndivisor = 'median'\n", "divisor"),
        ("[tokenizer]\nmin_length = 10\nmax_length = 5\n", "min_length"),
        ("[tokenizer]\nmin_length = 0\n", "min_length"),
        ("[corpus]\nworkers = 0\n", "workers"),
        ("[classifier]\nalpha = inf\n", "alpha"),
        ("[classifier]\nalpha = nan\n", "alpha"),
        ("[corpus]\nencoding = 'no-such-codec'\n", "encoding"),
        ("[corpus]\nencoding = 8\n", "encoding"),
        ("[tokenizer]\nstrip_non_alpha = 'false'\n", "strip_non_alpha"),
        ("classifier = 3\n", "classifier"),
        ("tokenizer = 'strict'\n", "tokenizer"),
    ],
)
def test_invalid_values_are_rejected(temp_dir, toml, match):
    path = temp_dir / "config.toml"
    path.write_text(toml)

    with pytest.raises(ConfigError, match=match):
        Config.load(path)


def test_build_model():
    config = Config()
    config.classifier.alpha = 0.01
    config.tokenizer.min_length = 2

    model = config.build_model()

    assert model.params.alpha == 0.01
    assert model.tokenizer.config.min_length == 2
    assert model.tokenizer.normalize("ok") == "ok"
    assert not model.is_trained


def test_build_model_rejects_invalid_override():
    config = Config()
    config.classifier.threshold = 2.0

    with pytest.raises(ConfigError, match="threshold"):
        config.build_model()


def test_build_corpus():
    config = Config()
    corpus = config.build_corpus()

    assert corpus.ham_train == Path("data/ham-anlern")
    assert corpus.encoding == "iso-8859-1"
