import logging as lg
from pathlib import Path

import click

from intcode.common.vmconf import PROGRAM_FILE, SERIAL_PHASES, FEEDBACK_PHASES, INITIAL_SIGNAL
from intcode.loader.program import load_program_file
from intcode.runtime.network import run_amplifiers, best_phase_setting


def parse_phases(ctx, param, value: str | None) -> list[int] | None:
    if value is None:
        return None

    try:
        return [int(v) for v in value.split(',')]
    except ValueError:
        raise click.BadParameter(f'expected comma separated integers, got {value!r}')


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-p', '--phases', callback=parse_phases, help='Phase settings, e.g. 4,3,2,1,0')
@click.option('--feedback', is_flag=True, help='Search the feedback phase set')
@click.option('--signal', type=int, default=INITIAL_SIGNAL, help='Initial input signal')
@click.argument('program_filename', type=Path, default=PROGRAM_FILE)
def amplify(verbose: bool, phases: list[int] | None, feedback: bool, signal: int, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE AMPLIFY')

    program = load_program_file(program_filename)

    if phases is not None:
        click.echo(run_amplifiers(program, phases, signal))
        return

    phase_values = FEEDBACK_PHASES if feedback else SERIAL_PHASES
    best, best_phases = best_phase_setting(program, phase_values, signal)
    click.echo(f'{best} {",".join(str(p) for p in best_phases)}')


if __name__ == '__main__':
    amplify()
