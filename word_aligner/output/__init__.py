"""Output formatting module"""

from .formatter import SnippetFormatter

__all__ = ["SnippetFormatter"]
