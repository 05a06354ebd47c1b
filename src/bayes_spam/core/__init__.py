# =============================================================================
# bayes-spam Core Module
# =============================================================================
# Plain domain dataclasses with no dependencies on the rest of the package.
# They can be imported from anywhere (classifier, corpus loader, CLI)
# without causing circular imports.
#
#   - Label: The two classes a document can belong to (ham or spam)
#   - Document: A labeled piece of text, held in memory or read lazily
# =============================================================================

from bayes_spam.core.document import (
    DEFAULT_ENCODING,
    Document,
    DocumentReadError,
    Label,
    as_document,
)

__all__ = [
    "DEFAULT_ENCODING",
    "Document",
    "DocumentReadError",
    "Label",
    "as_document",
]
