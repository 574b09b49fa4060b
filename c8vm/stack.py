#!/usr/bin/env python3

"""
Stack Emulator

The call stack isn't part of system RAM, because there is no specified
location for it and no program can address it directly.  It is a fixed bank of
16 slots with a stack pointer: the pointer is 0 when empty and 16 when full,
and always indexes the next free slot.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE


class StackError(Exception):
    pass


class StackOverflow(StackError):
    pass


class StackUnderflow(StackError):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.slots = [0] * size
        self.size = size
        self.sp = 0

    def push(self, item):
        if self.sp >= self.size:
            raise StackOverflow("Stack overflow")

        self.slots[self.sp] = item & 0xFFFF
        self.sp += 1

    def pop(self):
        if self.sp <= 0:
            raise StackUnderflow("Stack underflow")

        self.sp -= 1
        return self.slots[self.sp]

    def get_items(self):
        # For debugging
        return self.slots[:self.sp]
