"""
Core text handling for word alignment.
"""

from .tokens import TokenHandler, tokenize_string, clean_token

__all__ = [
    "TokenHandler",
    "tokenize_string",
    "clean_token",
]
