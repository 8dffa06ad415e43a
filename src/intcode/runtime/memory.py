import logging as lg
from typing import Iterable

from intcode.common.modes import MODE_POSITION, MODE_IMMEDIATE, MODE_RELATIVE


class IllegalAccess(Exception):
    pass


class InvalidMode(Exception):
    pass


class Memory():
    ''' Two-tier store: a dense copy of the program and a sparse
        mapping for every address past its end. Unset cells read as zero.
    '''

    dense: list[int]
    sparse: dict[int, int]

    def __init__(self, program: Iterable[int]):
        self.dense = list(program)
        self.sparse = {}

    def __len__(self):
        return len(self.dense)

    def check(self, addr: int):
        if addr < 0:
            raise IllegalAccess(f'Illegal memory access at {addr}')

    def read(self, addr: int) -> int:
        self.check(addr)

        if addr >= len(self.dense):
            return self.sparse.get(addr, 0)

        return self.dense[addr]

    def write(self, addr: int, value: int):
        self.check(addr)

        if addr >= len(self.dense):
            lg.debug(f'Sparse write [{addr}] = {value}')
            self.sparse[addr] = value
        else:
            self.dense[addr] = value

    def resolve(self, value: int, mode: int, rb: int) -> int:
        if mode == MODE_IMMEDIATE:
            return value

        if mode == MODE_POSITION:
            return self.read(value)

        if mode == MODE_RELATIVE:
            return self.read(value + rb)

        raise InvalidMode(f'Unknown parameter mode {mode}')
