#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from svm.debugger import Debugger
from svm.opcodes import PUSH, CALL, HALT
from svm.vm import VM


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.trace = io.StringIO()
        self.debugger = Debugger(self.trace)
        self.vm = VM(io.StringIO(), debugger=self.debugger)
        self.vm.load_program([PUSH, 7, CALL, 5, HALT, HALT])

    def test_debugger_live(self):
        self.assertFalse(self.debugger.is_live())
        self.debugger.set_live(True)
        self.assertTrue(self.debugger.is_live())

    def test_debugger_debug(self):
        self.vm.debug_pc = 2
        self.vm.opcode = CALL
        self.assertEqual(
            "PC: 0x00000002 OP: 0x00000009 IN: CALL 5 SP: 0 RP: 0", self.debugger.debug(self.vm, "CALL 5")
        )

    def test_debugger_debug_default_instruction(self):
        self.vm.opcode = PUSH
        self.assertIn("IN: PUSH ", self.debugger.debug(self.vm))

    def test_debugger_debug_negative_opcode(self):
        self.vm.opcode = -1
        self.assertIn("OP: 0xffffffff IN: ???", self.debugger.debug(self.vm))

    def test_debugger_debug_verbose(self):
        self.vm.run()
        self.assertEqual(
            "PC: 0x00000005 OP: 0x00000000 IN: HALT SP: 1 RP: 1\nStack: 7\nReturn: 0x00000004",
            self.debugger.debug(self.vm, "HALT", verbose=True)
        )

    def test_debugger_debug_verbose_empty(self):
        debug_str = self.debugger.debug(self.vm, "NOP", verbose=True)
        self.assertTrue(debug_str.endswith("\nStack: (Empty)\nReturn: (Empty)"))

    def test_debugger_output(self):
        self.debugger.output(self.vm, "NOP")
        self.assertEqual("PC: 0x00000000 OP: 0x00000000 IN: NOP SP: 0 RP: 0\n", self.trace.getvalue())

    def test_debugger_not_live_is_silent(self):
        self.vm.run()
        self.assertEqual("", self.trace.getvalue())
