import re
from typing import List


# =============================
# Token handling
# =============================


class TokenHandler:
    """Splits text into word tokens and normalizes them for comparison"""

    WHITESPACE_PATTERN = re.compile(r"\s+")
    TRAILING_PERIOD_PATTERN = re.compile(r"\.$")

    @staticmethod
    def tokenize(text: str) -> List[str]:
        """
        Split text into tokens on runs of whitespace.

        Leading and trailing whitespace never produce empty tokens, so an
        empty or whitespace-only text yields an empty list.

        Args:
            text: input text

        Returns:
            list of tokens in their original form
        """
        return [t for t in TokenHandler.WHITESPACE_PATTERN.split(text) if t]

    @staticmethod
    def clean_token(token: str) -> str:
        """
        Remove a single terminal full stop ("dog." -> "dog", "dog.." -> "dog.").

        Only used for comparisons; displayed tokens keep their original form.
        """
        return TokenHandler.TRAILING_PERIOD_PATTERN.sub("", token, count=1)

    @staticmethod
    def tokens_equal(token1: str, token2: str) -> bool:
        """Case-insensitive equality of two tokens after cleaning"""
        return (
            TokenHandler.clean_token(token1).casefold()
            == TokenHandler.clean_token(token2).casefold()
        )


def tokenize_string(text: str) -> List[str]:
    """Module-level shortcut for :meth:`TokenHandler.tokenize`."""
    return TokenHandler.tokenize(text)


def clean_token(token: str) -> str:
    return TokenHandler.clean_token(token)
