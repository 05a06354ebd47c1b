# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the bayes-spam test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from bayes_spam.spam import Model, ModelParams, SpamClassifier, train


HAM_TEXT = "hello world meeting notes"
SPAM_TEXT = "free money viagra offer"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def training_pairs():
    """The minimal two-document training set."""
    return [(HAM_TEXT, False), (SPAM_TEXT, True)]


@pytest.fixture
def trained_model(training_pairs):
    """A frozen model trained on one ham and one spam document."""
    model = Model(params=ModelParams(alpha=0.001, threshold=0.5))
    train(model, training_pairs)
    model.freeze()
    return model


@pytest.fixture
def classifier(trained_model):
    """A classifier over the trained model."""
    return SpamClassifier(trained_model)


@pytest.fixture
def sample_corpus(temp_dir):
    """
    A corpus directory tree with the standard layout.

    Training: 2 ham, 2 spam. Test: 3 ham, 2 spam.
    """
    files = {
        "ham-anlern": {
            "1.txt": "Hello team, the meeting notes are attached.\n",
            "2.txt": "Project meeting moved to Friday, see notes.\n",
        },
        "spam-anlern": {
            "1.txt": "FREE money!!! Claim your offer today.\n",
            "2.txt": "Cheap viagra, free offer, money back.\n",
        },
        "ham-test": {
            "1.txt": "Meeting notes from the project review.\n",
            "2.txt": "Hello, are the notes ready for Friday?\n",
            "3.txt": "Team meeting agenda attached.\n",
        },
        "spam-test": {
            "1.txt": "Free money offer, claim today!\n",
            "2.txt": "Cheap viagra money offer.\n",
        },
    }
    for directory, entries in files.items():
        path = temp_dir / directory
        path.mkdir()
        for name, text in entries.items():
            (path / name).write_text(text, encoding="iso-8859-1")
    return temp_dir
