#!/usr/bin/env python3

"""
Stack Virtual Machine

The engine repeatedly fetches an opcode from the program, looks up how many
operand Words it takes, fetches those too, and then executes it against the
operand stack, the return-address stack, and the program counter.

Execution stops when HALT is fetched, or as soon as anything goes wrong.
Errors are raised straight out of run() without being wrapped or recovered,
and the engine is left exactly as the failing instruction left it.  Nothing
is rolled back: an ADD which underflows on its second pop has still consumed
the first value.

There is no step limit.  A program which never reaches HALT runs forever.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import DEFAULT_STACK_SIZE, STATE_FETCHING, STATE_EXECUTING, STATE_HALTED, STATE_ERRORED
from .debugger import Debugger
from .errors import SVMError, VMError
from .opcodes import (
    HALT, NOP, PRINT, PUSH, POP, ADD, JMP, JZ, JNZ, CALL, RET, UnknownOpcodeError, get_params_number
)
from .program import Program
from .stack import Stack
from .word import add_words

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)
REPLACEMENT_CHAR = "\ufffd"


class OutOfBoundsError(VMError):
    pass


class JumpOutOfBoundsError(VMError):
    pass


def word_to_char(word):
    if word < 0 or word > MAX_CODE_POINT or word in SURROGATES:
        return REPLACEMENT_CHAR

    return chr(word)


class VM:
    def __init__(self, out, stack_size=DEFAULT_STACK_SIZE, return_stack_size=DEFAULT_STACK_SIZE, debugger=None):
        # The output sink is any object with a text write() method
        self.out = out
        self.stack = Stack(stack_size)
        self.return_stack = Stack(return_stack_size)
        self.debugger = Debugger() if debugger is None else debugger
        self.live_debug = self.debugger.is_live()
        self.program = None
        self.program_size = 0

        self.instructions = {
            HALT: self._halt,
            NOP: self._nop,
            PRINT: self._print,
            PUSH: self._push,
            POP: self._pop,
            ADD: self._add,
            JMP: self._jmp,
            JZ: self._jz,
            JNZ: self._jnz,
            CALL: self._call,
            RET: self._ret
        }

        self.pc = 0
        self.debug_pc = 0
        self.opcode = HALT
        self.params = []
        self.state = STATE_FETCHING

    def load_program(self, words):
        self.program = Program(words)
        self.program_size = len(self.program)

    def run(self):
        try:
            while True:
                self.state = STATE_FETCHING
                # Keep track of the program counter before altering it in any way for debugging purposes
                self.debug_pc = self.pc
                self.opcode = self.fetch()

                if self.opcode == HALT:
                    if self.live_debug:
                        self.debug("HALT")

                    self.state = STATE_HALTED
                    return

                self.params = self.load_params(get_params_number(self.opcode))
                self.state = STATE_EXECUTING
                self.decode_exec()
        except SVMError:
            self.state = STATE_ERRORED
            raise

    def fetch(self):
        pc = self.pc

        if pc < 0 or pc >= self.program_size:
            raise OutOfBoundsError("Program counter {} out of bounds".format(pc))

        self.pc = pc + 1
        return self.program.read(pc)

    def load_params(self, n):
        return [self.fetch() for _ in range(n)]

    def execute(self, opcode, params):
        self.opcode = opcode
        self.params = list(params)
        self.decode_exec()

    def decode_exec(self):
        instruction = self.instructions.get(self.opcode)

        if instruction is None:
            raise UnknownOpcodeError("Unknown opcode {}".format(self.opcode))

        instruction()

    def jump(self, address):
        if address < 0 or address >= self.program_size:
            raise JumpOutOfBoundsError("Jump to {} out of bounds".format(address))

        self.pc = address

    @property
    def operand(self):
        return self.params[0]

    def debug(self, instruction):
        self.debugger.output(self, instruction)

    def _halt(self):  # HALT
        # Run stops before executing HALT.  Executing it directly has no effect.
        pass

    def _nop(self):  # NOP
        if self.live_debug:
            self.debug("NOP")

    def _print(self):  # PRINT
        if self.live_debug:
            self.debug("PRINT")

        self.out.write(word_to_char(self.stack.pop()))

    def _push(self):  # PUSH value
        if self.live_debug:
            self.debug("PUSH {}".format(self.operand))

        self.stack.push(self.operand)

    def _pop(self):  # POP
        if self.live_debug:
            self.debug("POP")

        self.stack.pop()

    def _add(self):  # ADD
        if self.live_debug:
            self.debug("ADD")

        # Not transactional.  If the second pop fails, the first value stays popped.
        first = self.stack.pop()
        second = self.stack.pop()
        self.stack.push(add_words(first, second))

    def _jmp(self):  # JMP
        if self.live_debug:
            self.debug("JMP")

        self.jump(self.stack.pop())

    def _jz(self):  # JZ addr
        if self.live_debug:
            self.debug("JZ {}".format(self.operand))

        if self.stack.pop() == 0:
            self.jump(self.operand)

    def _jnz(self):  # JNZ addr
        if self.live_debug:
            self.debug("JNZ {}".format(self.operand))

        if self.stack.pop() != 0:
            self.jump(self.operand)

    def _call(self):  # CALL addr
        if self.live_debug:
            self.debug("CALL {}".format(self.operand))

        # The return address is pushed before the target is checked
        self.return_stack.push(self.pc)
        self.jump(self.operand)

    def _ret(self):  # RET
        if self.live_debug:
            self.debug("RET")

        self.jump(self.return_stack.pop())
