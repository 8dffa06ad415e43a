import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Iterable, Sequence

import click

from intcode.common.vmconf import PROGRAM_FILE
from intcode.loader.program import load_program_file
from intcode.runtime.vm import VM


EXIT_HALT = 0
EXIT_KEYBOARD = 3
EXIT_AWAITING_INPUT = 4
EXIT_EXEC_ERROR = 100


def parse_patches(ctx, param, values: Sequence[str]) -> list[tuple[int, int]]:
    patches = []

    for value in values:
        addr, sep, word = value.partition('=')

        try:
            if not sep:
                raise ValueError(value)

            patches.append((int(addr), int(word)))
        except ValueError:
            raise click.BadParameter(f'expected ADDR=VALUE, got {value!r}')

    return patches


def execute(program: Sequence[int], inputs: Iterable[int] = (),
            patches: Iterable[tuple[int, int]] = ()) -> VM:
    vm = VM(program, inputs)

    for addr, value in patches:
        lg.debug(f'Patching [{addr}] = {value}')
        vm.memory.write(addr, value)

    vm.run()
    return vm


def echo_outputs(vm: VM):
    for value in vm.drain_output():
        click.echo(value)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Initial input value')
@click.option('-s', '--set', 'patches', multiple=True, callback=parse_patches,
              help='Memory patch ADDR=VALUE applied before the run')
@click.option('--interactive', is_flag=True, help='Prompt for input when the program waits for it')
@click.argument('program_filename', type=Path, default=PROGRAM_FILE)
def run(verbose: bool, inputs: tuple[int], patches: list[tuple[int, int]],
        interactive: bool, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("INTCODE")

    try:
        program = load_program_file(program_filename)
        vm = execute(program, inputs, patches)
        echo_outputs(vm)

        while vm.interrupted and interactive:
            try:
                value = click.prompt('input', type=int)
            except click.Abort:
                break

            vm.add_input(value)
            vm.resume()
            echo_outputs(vm)

        if vm.interrupted:
            lg.info('Execution suspended awaiting input')
            sys.exit(EXIT_AWAITING_INPUT)

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
