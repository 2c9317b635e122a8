#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to run a program, replacing args with a dictionary of
options.  This can be done via the Terminal or another Python program.

All options must be supplied.  Defaults can be specified with a 'None'.

    filename          - Program binary to execute
    stack_size        - Operand stack capacity
    return_stack_size - Return-address stack capacity
    debug             - Trace every instruction to the error stream

Returns the process exit status: 0 if the program halted normally, or 1 if
the file could not be opened, decoded, loaded, or run.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys
from .constants import APP_INTRO, DEFAULT_STACK_SIZE
from .debugger import Debugger
from .errors import SVMError
from .hostio import Loader, decode_program
from .vm import VM


def _fail(err, message, error):
    print("{}: {}".format(message, error), file=err)
    return 1


def main(args, out=None, err=None):
    # Standard streams are only chosen here, never inside the VM itself
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    print(APP_INTRO, file=out)

    stack_size = args["stack_size"]
    return_stack_size = args["return_stack_size"]

    debugger = Debugger(err)
    debugger.set_live(bool(args["debug"]))

    vm = VM(
        out,
        stack_size=DEFAULT_STACK_SIZE if stack_size is None else stack_size,
        return_stack_size=DEFAULT_STACK_SIZE if return_stack_size is None else return_stack_size,
        debugger=debugger
    )

    try:
        data = Loader().load_binary(args["filename"])
    except OSError as error:
        return _fail(err, "error loading file", error)

    try:
        program = decode_program(data)
    except SVMError as error:
        return _fail(err, "error reading program", error)

    try:
        vm.load_program(program)
    except SVMError as error:
        return _fail(err, "error loading program", error)

    try:
        vm.run()
    except SVMError as error:
        if debugger.is_live():
            print(debugger.debug(vm, verbose=True), file=err)

        return _fail(err, "error running program", error)
    finally:
        out.flush()

    return 0
