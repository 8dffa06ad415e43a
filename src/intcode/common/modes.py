''' Parameter modes packed into the instruction word '''

from intcode.common.vmconf import OPCODE_BASE, MODE_SLOTS

MODE_POSITION = 0   # Operand is an address
MODE_IMMEDIATE = 1  # Operand is the value
MODE_RELATIVE = 2   # Operand is an offset from the relocation base


class InvalidModeSlot(Exception):
    pass


class ParamModes():
    modes: tuple[int, ...]

    def __init__(self, word: int):
        param_part = word // OPCODE_BASE
        self.modes = tuple((param_part // 10 ** i) % 10 for i in range(MODE_SLOTS))

    def mode(self, n: int) -> int:
        if not 1 <= n <= MODE_SLOTS:
            raise InvalidModeSlot(f'Unsupported parameter mode number {n}')

        return self.modes[n - 1]

    def __str__(self):
        return 'Modes({0} {1} {2})'.format(*self.modes)
