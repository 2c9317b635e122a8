#!/usr/bin/env python3

"""
Word Arithmetic

Python integers are unbounded, so anything that produces a new Word must be
folded back into the signed 32-bit range.  Overflow wraps around (two's
complement) rather than raising.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import WORD_BITS

WORD_MASK = (1 << WORD_BITS) - 1
WORD_SIGN = 1 << (WORD_BITS - 1)


def to_word(value):
    value = int(value) & WORD_MASK
    return value - (1 << WORD_BITS) if value & WORD_SIGN else value


def add_words(a, b):
    return to_word(a + b)
