#!/usr/bin/env python3

"""
VM Debugger

If enabled, this will output information before each instruction executed:
    * PC - Program counter of the opcode
    * OP - OpCode number
    * IN - Decoded instruction, with its operand if it has one
    * SP - Number of items on the operand stack
    * RP - Number of items on the return-address stack

If a crash occurs, all of the above will be outputted, with the addition of:
    * Stack  - Operand stack contents, bottom first
    * Return - Return-address stack contents, bottom first

Trace lines go to the debugger's own stream, never to the VM output sink.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .opcodes import get_opcode_name


class Debugger:
    def __init__(self, out=None):
        self.live = False
        self.out = out

    def debug(self, vm, instruction=None, verbose=False):
        if instruction is None:
            instruction = get_opcode_name(vm.opcode)

        debug_str = "PC: 0x{:08x} OP: 0x{:08x} IN: {} SP: {} RP: {}".format(
            vm.debug_pc & 0xFFFFFFFF, vm.opcode & 0xFFFFFFFF, instruction, len(vm.stack), len(vm.return_stack)
        )

        if verbose:
            stack_str = (" {}" * len(vm.stack)).format(*vm.stack.get_items())
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")
            return_str = (" 0x{:08x}" * len(vm.return_stack)).format(*vm.return_stack.get_items())
            debug_str += "\nReturn:{}".format(return_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, vm, instruction):
        print(self.debug(vm, instruction), file=self.out)
