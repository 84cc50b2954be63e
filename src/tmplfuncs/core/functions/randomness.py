"""Random strings drawn from fixed character alphabets.

The entropy source is injected at construction so callers (and tests) can
substitute a seeded source. Without one, each generator owns a fresh
``random.Random`` seeded from the operating system.

Each character is drawn with ``source.choice``, which rejection-samples
over ``getrandbits`` and therefore has no modulo bias for any alphabet size.

These strings are for display and formatting only. They are NOT suitable
for passwords, tokens or any other secret; use :mod:`secrets` for those.
"""
from __future__ import annotations

import random
import string
from enum import Enum
from typing import Any, Optional

from tmplfuncs.core.exceptions import InvalidArgumentError


class Alphabet(Enum):
    """Character domains available to :class:`RandomStringGenerator`."""

    ALPHA = string.ascii_letters
    ALPHANUMERIC = string.ascii_letters + string.digits
    NUMERIC = string.digits
    # Printable ASCII, space through tilde.
    ASCII = "".join(chr(code) for code in range(32, 127))

    @property
    def characters(self) -> str:
        return self.value


class RandomStringGenerator:
    """Generate fixed-length strings over an :class:`Alphabet`."""

    def __init__(self, source: Optional[random.Random] = None) -> None:
        self.source = source if source is not None else random.Random()

    def generate(self, alphabet: Alphabet, length: Any) -> str:
        """Return ``length`` characters drawn uniformly from ``alphabet``.

        Raises:
            InvalidArgumentError: If ``length`` is negative or not an integer
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidArgumentError(
                f"length must be an integer, got {type(length).__name__}",
                context={"argument": "length", "value": repr(length)},
            )
        if length < 0:
            raise InvalidArgumentError(
                f"length must not be negative, got {length}",
                context={"argument": "length", "value": length},
            )
        chars = alphabet.characters
        choice = self.source.choice
        return "".join(choice(chars) for _ in range(length))

    def alpha(self, length: int) -> str:
        return self.generate(Alphabet.ALPHA, length)

    def alphanumeric(self, length: int) -> str:
        return self.generate(Alphabet.ALPHANUMERIC, length)

    def numeric(self, length: int) -> str:
        return self.generate(Alphabet.NUMERIC, length)

    def ascii(self, length: int) -> str:
        return self.generate(Alphabet.ASCII, length)


def build_source(kind: str = "pseudo") -> random.Random:
    """Create an entropy source by configured name (``pseudo`` or ``system``)."""
    if kind == "system":
        return random.SystemRandom()
    return random.Random()


__all__ = ["Alphabet", "RandomStringGenerator", "build_source"]
