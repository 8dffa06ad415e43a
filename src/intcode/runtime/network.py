''' Chains of VMs wired output-to-input, with feedback from the last to the first '''

import logging as lg
from itertools import permutations
from typing import Sequence

from intcode.common.vmconf import INITIAL_SIGNAL
from intcode.runtime.vm import VM


class ChainDeadlock(Exception):
    pass


def run_amplifiers(program: Sequence[int], phases: Sequence[int], signal: int = INITIAL_SIGNAL) -> int:
    if not phases:
        raise ValueError('At least one phase is required')

    amps = [VM(program, [phase]) for phase in phases]

    for amp in amps:
        amp.run()

    signals = [signal]
    last = None
    rounds = 0

    while not amps[-1].halted:
        rounds += 1

        for amp in amps:
            for value in signals:
                amp.add_input(value)

            amp.resume()
            signals = amp.drain_output()

        lg.debug(f'Round {rounds}: {signals}')

        if signals:
            last = signals[-1]
        elif not amps[-1].halted:
            raise ChainDeadlock(f'No VM can make progress after round {rounds}')

    if last is None:
        raise ChainDeadlock('Last VM halted without producing a signal')

    return last


def best_phase_setting(
    program: Sequence[int],
    phase_values: Sequence[int],
    signal: int = INITIAL_SIGNAL
) -> tuple[int, tuple[int, ...]]:
    best = None

    for phases in permutations(phase_values):
        result = run_amplifiers(program, phases, signal)

        if best is None or result > best[0]:
            best = (result, phases)

    if best is None:
        raise ValueError('No phase values to try')

    lg.info(f'Best signal {best[0]} with phases {best[1]}')
    return best
