from dataclasses import dataclass


@dataclass(frozen=True)
class Instruction:
    opcode: int
    advance: int    # Cursor advance when the IP is not set directly
    mnemonic: str

    def __str__(self):
        return f'{self.mnemonic}({self.opcode})'


class UnknownOpcode(Exception):
    def __init__(self, opcode: int):
        super().__init__(f'Unknown opcode {opcode}')
        self.opcode = opcode


ADD = Instruction(1, 4, 'ADD')     # P1 + P2 -> [A3]
MUL = Instruction(2, 4, 'MUL')     # P1 * P2 -> [A3]
IN = Instruction(3, 2, 'IN')       # input -> [A1]
OUT = Instruction(4, 2, 'OUT')     # P1 -> output
JT = Instruction(5, 3, 'JT')       # if P1 .ne 0 IP = P2
JF = Instruction(6, 3, 'JF')       # if P1 .eq 0 IP = P2
LT = Instruction(7, 4, 'LT')       # P1 .lt P2 -> [A3]
EQ = Instruction(8, 4, 'EQ')       # P1 .eq P2 -> [A3]
RBO = Instruction(9, 2, 'RBO')     # RB + P1 -> RB
HALT = Instruction(99, 0, 'HALT')

INSTRUCTIONS = {i.opcode: i for i in [ADD, MUL, IN, OUT, JT, JF, LT, EQ, RBO, HALT]}


def decode(opcode: int) -> Instruction:
    instr = INSTRUCTIONS.get(opcode)

    if instr is None:
        raise UnknownOpcode(opcode)

    return instr
