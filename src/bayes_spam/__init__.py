# =============================================================================
# bayes-spam: A Naive Bayes Spam Filter
# =============================================================================
#
# Classifies email as spam or ham with a bag-of-words naive Bayes model
# trained on two labeled corpora.
#
# Features:
#   - Document-frequency (presence) counting per class
#   - Log-space scoring with additive smoothing
#   - Pluggable likelihood divisor (vocabulary size or token total)
#   - Parallel training and evaluation over a thread pool
#   - TOML configuration, XDG Base Directory compliant
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "bayes-spam"

# Main entry point - this is what gets called by the 'bayes-spam' command
from bayes_spam.app import main

__all__ = ["main", "__version__", "__app_name__"]
