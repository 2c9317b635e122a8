#!/usr/bin/env python3

"""
Bounded Stack

Both the operand stack and the return-address stack are fixed-size.  All of
the storage is allocated up front and zeroed, then a top index is moved up
and down, so nothing is allocated while a program is running.

Popped slots are left as they are.  Only the items below the top index are
considered part of the stack.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import SVMError


class StackError(SVMError):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass


class Stack:
    def __init__(self, size):
        if size < 0:
            raise ValueError("Stack size cannot be negative")

        self.size = size
        self.top = 0
        self.items = [0] * size

    def __len__(self):
        return self.top

    def push(self, item):
        if self.top == self.size:
            raise StackOverflowError("Stack overflow")

        self.items[self.top] = item
        self.top += 1

    def pop(self):
        if self.top == 0:
            raise StackUnderflowError("Stack underflow")

        self.top -= 1
        return self.items[self.top]

    def get_items(self):
        # For debugging.  Bottom of the stack first
        return self.items[:self.top]
