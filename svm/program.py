#!/usr/bin/env python3

"""
Program Memory

Holds the loaded program as an immutable tuple of Words.  The source sequence
is copied on load, so changing the caller's buffer afterwards cannot affect a
running engine.

Reading is not bounds-checked here: the engine's fetch is the only reader,
and it checks the program counter itself using contains().
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import VMError
from .word import to_word


class EmptyProgramError(VMError):
    pass


class Program:
    def __init__(self, words):
        words = tuple(to_word(word) for word in words)

        if not words:
            raise EmptyProgramError("Empty program")

        self.words = words
        self.size = len(words)

    def __len__(self):
        return self.size

    def __eq__(self, other):
        if isinstance(other, Program):
            return self.words == other.words

        try:
            return self.words == tuple(other)
        except TypeError:
            return NotImplemented

    def __iter__(self):
        return iter(self.words)

    def contains(self, location):
        return 0 <= location < self.size

    def read(self, location):
        return self.words[location]
