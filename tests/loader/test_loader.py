import pytest

from intcode.loader.program import parse_program, parse_digits, load_program_file, ProgramFormatError

import unit_utils


def test_parse_program():
    assert parse_program('1,-2, 3 ,+4\n') == [1, -2, 3, 4]


def test_parse_big_values():
    assert parse_program('104,1125899906842624000000,99') == [104, 1125899906842624000000, 99]


def test_load_file():
    program = load_program_file(unit_utils.find_file('testdata/intcode/arith.txt'))
    assert program == [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50]


def test_malformed():
    with pytest.raises(ProgramFormatError):
        load_program_file(str(unit_utils.find_file('testdata/intcode/malformed.txt')))


@pytest.mark.parametrize('text', ['', '1,,2', '1,2,', '1.5', 'abc'])
def test_rejected(text):
    with pytest.raises(ProgramFormatError):
        parse_program(text)


def test_parse_digits():
    assert parse_digits('12 3\n4a5') == [1, 2, 3, 4, 5]
