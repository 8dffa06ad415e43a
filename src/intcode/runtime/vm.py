import logging as lg
from enum import Enum
from typing import Callable, Iterable

import intcode.common.ops as ops
from intcode.common.modes import ParamModes
from intcode.common.vmconf import OPCODE_BASE
from intcode.runtime.memory import Memory, IllegalAccess


class OutputUnderflow(Exception):
    pass


class State(Enum):
    READY = 'ready'
    RUNNING = 'running'
    INTERRUPTED = 'interrupted'
    HALTED = 'halted'


class VM():
    ip: int  # Instruction pointer
    rb: int  # Relocation base
    in_p: int  # Next input to consume
    out_rp: int  # Next output to read
    inputs: list[int]
    outputs: list[int]
    halted: bool
    interrupted: bool
    running: bool

    def __init__(self, program: Iterable[int], inputs: Iterable[int] = ()):
        self.memory = Memory(program)

        self.ip = 0
        self.rb = 0

        self.inputs = list(inputs)
        self.in_p = 0
        self.outputs = []
        self.out_rp = 0

        self.halted = False
        self.interrupted = False
        self.running = False

    @property
    def state(self) -> State:
        if self.halted:
            return State.HALTED

        if self.interrupted:
            return State.INTERRUPTED

        if self.running:
            return State.RUNNING

        return State.READY

    # - Helpers - #

    def __str__(self):
        inputs = ' '.join(
            f'[{v}]' if i == self.in_p else str(v)
            for i, v in enumerate(self.inputs)
        )
        flags = ('H' if self.halted else '') + ('I' if self.interrupted else '')
        outputs = ' '.join(str(v) for v in self.outputs)
        return f'VM(ip={self.ip} rb={self.rb} input={inputs} [{flags}] output={outputs})'

    def debug_dump(self):
        state = [f'{k}:{v}' for k, v in {
            'IP': self.ip,
            'RB': self.rb,
            'IN': f'{self.in_p}/{len(self.inputs)}',
            'OUT': f'{self.out_rp}/{len(self.outputs)}',
            'ST': self.state.name
        }.items()]

        lg.debug(' '.join(state))

    def fetch_instr(self) -> tuple[ops.Instruction, ParamModes]:
        word = self.memory.read(self.ip)

        if word < 0:
            raise ops.UnknownOpcode(word)

        return ops.decode(word % OPCODE_BASE), ParamModes(word)

    def fetch_arg(self, n: int) -> int:
        return self.memory.read(self.ip + n)

    def fetch_arg_value(self, n: int, modes: ParamModes) -> int:
        return self.memory.resolve(self.fetch_arg(n), modes.mode(n), self.rb)

    def step_over(self, instr: ops.Instruction):
        self.ip += instr.advance

    def goto(self, dest: int):
        if dest < 0:
            raise IllegalAccess(f'Trying to jump out of the program to {dest}')

        self.ip = dest

    def arithm_pair(self, instr: ops.Instruction, modes: ParamModes, op: Callable[[int, int], int]):
        a = self.fetch_arg_value(1, modes)
        b = self.fetch_arg_value(2, modes)
        dest = self.fetch_arg(3)
        value = op(a, b)
        lg.debug(f'{instr.mnemonic} [{dest}] = {value} ({a}, {b})')
        self.memory.write(dest, value)
        self.step_over(instr)

    def has_input(self) -> bool:
        return self.in_p < len(self.inputs)

    def has_output(self) -> bool:
        return self.out_rp < len(self.outputs)

    # - Operations - #

    def add(self, modes: ParamModes):
        self.arithm_pair(ops.ADD, modes, lambda a, b: a + b)

    def mul(self, modes: ParamModes):
        self.arithm_pair(ops.MUL, modes, lambda a, b: a * b)

    def lt(self, modes: ParamModes):
        self.arithm_pair(ops.LT, modes, lambda a, b: 1 if a < b else 0)

    def eq(self, modes: ParamModes):
        self.arithm_pair(ops.EQ, modes, lambda a, b: 1 if a == b else 0)

    def inp(self, modes: ParamModes):
        dest = self.fetch_arg(1)

        if not self.has_input():
            lg.debug('Interrupting, awaiting input')
            self.interrupted = True
            return

        value = self.inputs[self.in_p]
        self.in_p += 1
        lg.debug(f'IN [{dest}] = {value}')
        self.memory.write(dest, value)
        self.step_over(ops.IN)

    def out(self, modes: ParamModes):
        value = self.fetch_arg_value(1, modes)
        lg.debug(f'OUT {value}')
        self.outputs.append(value)
        self.step_over(ops.OUT)

    def jt(self, modes: ParamModes):
        cond = self.fetch_arg_value(1, modes)
        dest = self.fetch_arg_value(2, modes)
        lg.debug(f'JT {cond} -> {dest}')

        if cond != 0:
            self.goto(dest)
        else:
            self.step_over(ops.JT)

    def jf(self, modes: ParamModes):
        cond = self.fetch_arg_value(1, modes)
        dest = self.fetch_arg_value(2, modes)
        lg.debug(f'JF {cond} -> {dest}')

        if cond == 0:
            self.goto(dest)
        else:
            self.step_over(ops.JF)

    def rbo(self, modes: ParamModes):
        offset = self.fetch_arg_value(1, modes)
        lg.debug(f'RBO {self.rb} + {offset}')
        self.rb += offset
        self.step_over(ops.RBO)

    def hlt(self, modes: ParamModes):
        lg.debug('HALT')
        self.halted = True

    HANDLERS = {
        ops.ADD.opcode: add,
        ops.MUL.opcode: mul,
        ops.IN.opcode: inp,
        ops.OUT.opcode: out,
        ops.JT.opcode: jt,
        ops.JF.opcode: jf,
        ops.LT.opcode: lt,
        ops.EQ.opcode: eq,
        ops.RBO.opcode: rbo,
        ops.HALT.opcode: hlt
    }

    # - Execution - #

    def step(self):
        try:
            instr, modes = self.fetch_instr()
        except ops.UnknownOpcode as e:
            lg.error(f'{e} at ip={self.ip}, halting')
            self.halted = True
            return

        lg.debug(f'Executing {instr} ip={self.ip} {modes}')
        handler = self.HANDLERS[instr.opcode]
        handler(self, modes)

    def is_runnable(self) -> bool:
        return not self.halted and not self.interrupted

    def loop(self):
        self.running = True

        try:
            while self.is_runnable():
                self.step()
        finally:
            self.running = False
            self.debug_dump()

    def run(self):
        lg.debug(f'Start {self}')
        self.ip = 0
        self.loop()

    def resume(self):
        lg.debug(f'Resuming {self}')
        self.interrupted = False
        self.loop()

    # - I/O - #

    def add_input(self, value: int):
        self.inputs.append(value)
        self.interrupted = False

    def read_output(self) -> int:
        if not self.has_output():
            raise OutputUnderflow(f'No output at {self.out_rp}, {len(self.outputs)} produced')

        value = self.outputs[self.out_rp]
        self.out_rp += 1
        return value

    def drain_output(self) -> list[int]:
        pending = self.outputs[self.out_rp:]
        self.out_rp = len(self.outputs)
        return pending
