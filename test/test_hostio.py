#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import os
import tempfile
import unittest
from svm.errors import SVMError
from svm.hostio import Loader, LoaderError, MalformedEncodingError, decode_program, encode_program, read_program


class TestDecoding(unittest.TestCase):
    def test_decode_program(self):
        data = bytes.fromhex("00000003" "00000041" "00000002" "00000000")
        self.assertEqual([3, 65, 2, 0], decode_program(data))

    def test_decode_program_signed(self):
        data = bytes.fromhex("ffffffff" "80000000" "7fffffff")
        self.assertEqual([-1, -0x80000000, 0x7FFFFFFF], decode_program(data))

    def test_decode_program_bad_length(self):
        for size in 0, 1, 3, 5, 7:
            self.assertRaises(MalformedEncodingError, decode_program, bytes(size))

    def test_decode_program_error_kind(self):
        self.assertRaises(LoaderError, decode_program, bytes(5))
        self.assertRaises(SVMError, decode_program, b"")

    def test_encode_program(self):
        self.assertEqual(bytes.fromhex("00000003" "ffffffff"), encode_program([3, -1]))
        self.assertEqual(bytes.fromhex("00000000"), encode_program([0x100000000]))

    def test_read_program(self):
        stream = io.BytesIO(bytes.fromhex("00000001" "00000000" "ffff"))
        self.assertEqual([1, 0], read_program(stream, 8))

    def test_read_program_short(self):
        stream = io.BytesIO(bytes.fromhex("00000001"))
        self.assertRaises(MalformedEncodingError, read_program, stream, 8)

    def test_read_program_bad_size(self):
        stream = io.BytesIO(bytes(8))
        self.assertRaises(MalformedEncodingError, read_program, stream, 6)
        self.assertEqual(0, stream.tell())


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.filename = os.path.join(self.tmp_dir.name, "program.bin")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_loader_save_load_binary(self):
        self.loader.save_binary(self.filename, b"\x00\x01\x02\x03")
        self.assertEqual(b"\x00\x01\x02\x03", self.loader.load_binary(self.filename))

    def test_loader_load_program(self):
        self.loader.save_binary(self.filename, encode_program([3, 72, 2, 0]))
        self.assertEqual([3, 72, 2, 0], self.loader.load_program(self.filename))

    def test_loader_load_program_malformed(self):
        self.loader.save_binary(self.filename, b"\x00" * 6)
        self.assertRaises(MalformedEncodingError, self.loader.load_program, self.filename)

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_binary, os.path.join(self.tmp_dir.name, "NoFile.bin"))
