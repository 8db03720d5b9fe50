"""Romanizer port."""

from typing import Protocol


class Romanizer(Protocol):
    """Port for station name transliteration. Must be pure and total."""

    def romanize(self, text: str) -> str:
        """Return a Latin-script rendering of text."""
        ...
