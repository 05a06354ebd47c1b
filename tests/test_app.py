"""Tests for the command line interface."""

import pytest

from bayes_spam.app import main


@pytest.fixture(autouse=True)
def xdg_home(temp_dir, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "xdg"))


def test_evaluate(sample_corpus, capsys):
    exit_code = main(["--corpus", str(sample_corpus), "--workers", "2", "evaluate"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Alpha:     0.001" in out
    assert "Threshold: 0.5" in out
    assert "Ham:      3/3 correct" in out
    assert "Spam:     2/2 correct" in out
    assert "Accuracy: 100.00% (5/5)" in out


def test_evaluate_with_overrides(sample_corpus, capsys):
    exit_code = main([
        "--corpus", str(sample_corpus),
        "--alpha", "0.01",
        "--threshold", "0.7",
        "evaluate",
    ])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Alpha:     0.01" in out
    assert "Threshold: 0.7" in out


def test_classify(sample_corpus, temp_dir, capsys):
    spam = temp_dir / "incoming-spam.txt"
    spam.write_text("Claim your free money offer")
    ham = temp_dir / "incoming-ham.txt"
    ham.write_text("Meeting notes for the project")

    exit_code = main(["--corpus", str(sample_corpus), "classify", str(spam), str(ham)])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0].startswith(str(spam)) and lines[0].endswith(" spam")
    assert lines[1].startswith(str(ham)) and lines[1].endswith(" ham")


def test_classify_unreadable_file(sample_corpus, temp_dir, capsys):
    exit_code = main(["--corpus", str(sample_corpus), "classify", str(temp_dir / "nope")])

    assert exit_code == 1
    assert "cannot read" in capsys.readouterr().err


def test_invalid_alpha(sample_corpus, capsys):
    exit_code = main(["--corpus", str(sample_corpus), "--alpha", "0", "evaluate"])

    assert exit_code == 1
    assert "alpha" in capsys.readouterr().err


def test_missing_corpus(temp_dir, capsys):
    exit_code = main(["--corpus", str(temp_dir / "nowhere"), "evaluate"])

    assert exit_code == 1
    assert "Not a directory" in capsys.readouterr().err


def test_empty_corpus_is_not_trained(temp_dir, capsys):
    for name in ["ham-anlern", "spam-anlern", "ham-test", "spam-test"]:
        (temp_dir / name).mkdir()

    exit_code = main(["--corpus", str(temp_dir), "evaluate"])

    assert exit_code == 1
    assert "not trained" in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 2


def test_paths(capsys):
    assert main(["--paths"]) == 0
    assert "config.toml" in capsys.readouterr().out


def test_unknown_encoding(sample_corpus, temp_dir, capsys):
    config = temp_dir / "config.toml"
    config.write_text("[corpus]\nencoding = 'no-such-codec'\n")

    exit_code = main(["--config", str(config), "--corpus", str(sample_corpus), "evaluate"])

    assert exit_code == 1
    assert "unknown encoding" in capsys.readouterr().err


def test_infinite_alpha(sample_corpus, capsys):
    exit_code = main(["--corpus", str(sample_corpus), "--alpha", "inf", "evaluate"])

    assert exit_code == 1
    assert "alpha" in capsys.readouterr().err
