"""Character set the rain draws from.

Only printable ASCII is used: lower and upper case letters plus a fixed set of
punctuation.  Digits are deliberately absent.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


ALPHABET = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "!@#$%^&*()+=[]{};:/?.>,<|\\'\"`~"
)

_ALPHABET_ARRAY = np.array(list(ALPHABET), dtype="<U1")


def random_glyph(rng: np.random.Generator) -> str:
    """Return one character drawn uniformly from :data:`ALPHABET`."""

    return ALPHABET[int(rng.integers(len(ALPHABET)))]


def random_glyphs(rng: np.random.Generator, size) -> NDArray[np.str_]:
    """Return an array of shape ``size`` filled with uniform draws."""

    return _ALPHABET_ARRAY[rng.integers(len(ALPHABET), size=size)]
