"""Count occurrences of characters, words or lines in UTF-8 text."""

from textfreq.counter import CountOption, count

__all__ = ["CountOption", "count"]
