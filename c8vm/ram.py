#!/usr/bin/env python3

"""
RAM Emulator

A flat 4K address space.  Single byte reads and writes wrap around the 12-bit
address bus, the same way the instructions that use the address register do,
so an instruction can never reach outside of memory.

Block writes are used by the host (fonts and program images) and are checked
against the top of memory instead of wrapping.  A program image that doesn't
fit above the program base address is refused outright.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, ADDR_MASK, PROGRAM_BASE


class RAMError(Exception):
    pass


class RomTooLarge(RAMError):
    pass


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        return self.mem[location & ADDR_MASK]

    def read_block(self, location, size=1):
        location &= ADDR_MASK
        block_top = location + size

        if block_top <= self.mem_size:
            return bytes(self.mem[location:block_top])

        # Wrap around the top of the address space
        return bytes(self.mem[location:]) + bytes(self.mem[:block_top - self.mem_size])

    def write(self, location, byte):
        self.mem[location & ADDR_MASK] = byte & 0xFF

    def write_block(self, location, block):
        block_top = location + len(block)
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location > self.mem_top:
            raise RAMError("Memory overflow")

    def load_program(self, data, base=PROGRAM_BASE):
        space = self.mem_size - base

        if len(data) > space:
            raise RomTooLarge(
                "Program is {} bytes, but only {} bytes are available from 0x{:03x}".format(len(data), space, base)
            )

        self.write_block(base, data)

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
