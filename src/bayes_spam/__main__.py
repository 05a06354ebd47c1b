# =============================================================================
# bayes-spam Entry Point for `python -m bayes_spam`
# =============================================================================
# This module allows bayes-spam to be run as a Python module:
#
#   python -m bayes_spam evaluate
#
# This is equivalent to running the 'bayes-spam' command after installation.
# =============================================================================

import sys

from bayes_spam.app import main

if __name__ == "__main__":
    sys.exit(main())
