''' Program and data loading '''

import logging as lg
from pathlib import Path

import pyparsing as pp


class ProgramFormatError(Exception):
    pass


integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
program = integer + pp.ZeroOrMore(pp.Suppress(',') + integer)


def parse_program(text: str) -> list[int]:
    try:
        values = program.parse_string(text, parse_all=True)
    except pp.ParseException as e:
        raise ProgramFormatError(f'Malformed program: {e}') from e

    return list(values)


def load_program_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')
    values = parse_program(filepath.read_text())
    lg.debug(f'Loaded {len(values)} cells')
    return values


def parse_digits(text: str) -> list[int]:
    return [int(c) for c in text if '0' <= c <= '9']


def load_digits_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading digits {filepath}')
    return parse_digits(filepath.read_text())
