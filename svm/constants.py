#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "stack-vm"
APP_VERSION = "1.0.0"
APP_INTRO = "{} ({})".format(APP_NAME, APP_VERSION)

# Words are 32-bit signed, stored big-endian in program files
WORD_SIZE = 4
WORD_BITS = WORD_SIZE * 8
WORD_ENDIAN = "big"
WORD_MIN = -(1 << (WORD_BITS - 1))
WORD_MAX = (1 << (WORD_BITS - 1)) - 1

# Operand and return-address stack capacity, unless overridden
DEFAULT_STACK_SIZE = 1024

# Engine states
STATE_FETCHING = "fetching"
STATE_EXECUTING = "executing"
STATE_HALTED = "halted"
STATE_ERRORED = "errored"
