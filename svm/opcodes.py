#!/usr/bin/env python3

"""
Opcode Table

Every instruction is a single Word opcode, optionally followed by one operand
Word in the program stream.  The arity of each opcode tells the engine how
many operand Words to fetch before executing it.

    Opcode  Arity  Effect
    ------  -----  ------
    HALT    0      Stop execution
    NOP     0      Do nothing
    PRINT   0      Pop a value and write it as a character
    PUSH    1      Push the operand
    POP     0      Pop and discard a value
    ADD     0      Pop two values, push their sum
    JMP     0      Pop an address and jump to it
    JZ      1      Pop a value, jump to the operand if it is zero
    JNZ     1      Pop a value, jump to the operand if it is not zero
    CALL    1      Push the return address, jump to the operand
    RET     0      Pop a return address and jump to it
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import VMError

HALT = 0
NOP = 1
PRINT = 2
PUSH = 3
POP = 4
ADD = 5
JMP = 6
JZ = 7
JNZ = 8
CALL = 9
RET = 10

NO_PARAMS = 0
ONE_PARAM = 1

OPCODE_NAMES = {
    HALT: "HALT",
    NOP: "NOP",
    PRINT: "PRINT",
    PUSH: "PUSH",
    POP: "POP",
    ADD: "ADD",
    JMP: "JMP",
    JZ: "JZ",
    JNZ: "JNZ",
    CALL: "CALL",
    RET: "RET"
}

OPCODE_PARAMS = {
    HALT: NO_PARAMS,
    NOP: NO_PARAMS,
    PRINT: NO_PARAMS,
    PUSH: ONE_PARAM,
    POP: NO_PARAMS,
    ADD: NO_PARAMS,
    JMP: NO_PARAMS,
    JZ: ONE_PARAM,
    JNZ: ONE_PARAM,
    CALL: ONE_PARAM,
    RET: NO_PARAMS
}


class UnknownOpcodeError(VMError):
    pass


def get_params_number(opcode):
    try:
        return OPCODE_PARAMS[opcode]
    except (KeyError, TypeError):
        raise UnknownOpcodeError("Unknown opcode {}".format(opcode)) from None


def get_opcode_name(opcode):
    return OPCODE_NAMES.get(opcode, "???")
