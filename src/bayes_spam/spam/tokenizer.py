# =============================================================================
# Email Tokenizer for Spam Classification
# =============================================================================
# Converts raw email text into tokens (features) for the classifier.
#
# The policy is deliberately simple:
#   - Split on runs of whitespace
#   - Reject words containing characters typical of encoded or obfuscated
#     content (base64 padding, URL paths, addresses): = + / @
#   - Strip everything that isn't an ASCII letter (by default), then lowercase
#   - Keep only tokens whose length is within [min_length, max_length)
#
# The trainer and the scorer must share one Tokenizer instance. If the two
# phases normalize differently, trained counts never line up with scored
# tokens and the classifier quietly degrades to a coin flip.
# =============================================================================

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Configuration for word normalization.

    Attributes:
        min_length: Shortest accepted token (inclusive).
        max_length: Longest accepted token (exclusive).
        disallowed_chars: Any raw word containing one of these is rejected.
        strip_non_alpha: Remove every non-letter before length checks.
        lowercase: Fold case before comparing tokens.
    """
    min_length: int = 3
    max_length: int = 15
    disallowed_chars: str = "=+/@"
    strip_non_alpha: bool = True
    lowercase: bool = True


class Tokenizer:
    """
    Turns document text into normalized tokens.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> tokenizer.normalize("Money!!")
        'money'
        >>> tokenizer.normalize("a@b.com") is None
        True
        >>> tokenizer.tokenize("Free money, free MONEY")
        ['free', 'money', 'free', 'money']
        >>> sorted(tokenizer.unique_tokens("Free money, free MONEY"))
        ['free', 'money']
    """

    NON_ALPHA_PATTERN = re.compile(r"[^a-zA-Z]")

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """
        Initialize the tokenizer.

        Args:
            config: Tokenizer configuration. Uses defaults if None.
        """
        self.config = config or TokenizerConfig()
        self._disallowed = frozenset(self.config.disallowed_chars)

    def normalize(self, word: str) -> str | None:
        """
        Normalize a single whitespace-delimited word.

        Args:
            word: Raw word from the document.

        Returns:
            The normalized token, or None if the word is rejected.
        """
        # Checked on the raw word: stripping would remove these characters
        if self._disallowed and not self._disallowed.isdisjoint(word):
            return None

        if self.config.strip_non_alpha:
            word = self.NON_ALPHA_PATTERN.sub("", word)
        if self.config.lowercase:
            word = word.lower()

        if not word:
            return None
        if not self.config.min_length <= len(word) < self.config.max_length:
            return None

        return word

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize text, keeping duplicates and order.

        Used at scoring time, where every occurrence contributes a term.
        """
        tokens = []
        for word in text.split():
            token = self.normalize(word)
            if token is not None:
                tokens.append(token)
        return tokens

    def unique_tokens(self, text: str) -> set[str]:
        """
        Tokenize text into a set of distinct tokens.

        Used at training time: a token counts at most once per document.
        """
        return set(self.tokenize(text))
