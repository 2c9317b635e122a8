#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading program binaries from the host and converting them to and
from Words.  A program file is nothing but a run of 4-byte big-endian signed
integers.  There is no header, footer, or padding, so the file size must be a
whole, non-zero number of Words.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import WORD_SIZE, WORD_ENDIAN
from .errors import SVMError
from .word import to_word


class LoaderError(SVMError):
    pass


class MalformedEncodingError(LoaderError):
    pass


def check_program_length(size):
    if size <= 0 or size % WORD_SIZE:
        raise MalformedEncodingError("Bad program length {}".format(size))


def decode_program(data):
    check_program_length(len(data))
    return [
        int.from_bytes(data[offset:offset + WORD_SIZE], WORD_ENDIAN, signed=True)
        for offset in range(0, len(data), WORD_SIZE)
    ]


def encode_program(words):
    return b"".join(to_word(word).to_bytes(WORD_SIZE, WORD_ENDIAN, signed=True) for word in words)


def read_program(stream, size):
    # For streams where the size is known up front, e.g. from a file stat
    check_program_length(size)
    data = stream.read(size)

    if len(data) != size:
        raise MalformedEncodingError("Expected {} bytes, read {}".format(size, len(data)))

    return decode_program(data)


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()

    def save_binary(self, filename, data):
        with open(filename, "wb") as f:
            f.write(data)

    def load_program(self, filename):
        return decode_program(self.load_binary(filename))
