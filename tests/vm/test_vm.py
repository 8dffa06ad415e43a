# type: ignore
import logging

import pytest

from intcode.runtime.vm import VM, State, OutputUnderflow
from intcode.runtime.memory import IllegalAccess

import unit_utils
from fixtures import quine, echo_vm  # noqa: F401


def test_quine(quine):  # noqa: F811
    vm = VM(quine)
    vm.run()

    assert vm.halted
    assert vm.drain_output() == quine
    assert len(quine) == 16


def test_arithmetic():
    vm = VM(unit_utils.load_program('arith'))
    vm.run()

    assert vm.state == State.HALTED
    assert vm.memory.read(0) == 3500
    assert vm.memory.dense[0] == 3500


def test_immediate_multiply():
    vm = VM(unit_utils.load_program('bigmul'))
    vm.run()

    value = vm.read_output()
    assert value == 34915192 * 34915192
    assert len(str(value)) == 16


def test_large_output():
    vm = VM(unit_utils.load_program('bigout'))
    vm.run()

    assert vm.read_output() == 1125899906842624


def test_beyond_64_bits():
    vm = VM([1101, 2 ** 63, 2 ** 63, 9, 4, 9, 99, 0, 0, 0])
    vm.run()

    assert vm.read_output() == 2 ** 64


def test_input_interrupt():
    vm = VM([3, 3, 99, 0])
    assert vm.state == State.READY

    vm.run()
    assert vm.state == State.INTERRUPTED
    assert vm.interrupted
    assert vm.ip == 0

    vm.add_input(7)
    assert not vm.interrupted
    assert vm.ip == 0

    vm.resume()
    assert vm.halted
    assert vm.memory.read(3) == 7


def test_initial_inputs(echo_vm):  # noqa: F811
    echo_vm.add_input(-13)
    echo_vm.run()

    assert echo_vm.halted
    assert echo_vm.read_output() == -13


@pytest.mark.parametrize('value, expected', [(7, 999), (8, 1000), (9, 1001)])
def test_compare(value, expected):
    vm = VM(unit_utils.load_program('compare8'), [value])
    vm.run()

    assert vm.drain_output() == [expected]


def test_relative_base():
    # RB = 2000 + 19 -> output [RB - 34]
    program = [109, 2000, 109, 19, 204, -34, 99]
    vm = VM(program)
    vm.memory.write(1985, 77)
    vm.run()

    assert vm.rb == 2019
    assert vm.read_output() == 77


def test_jumps_set_ip_directly():
    # JF 0 -> 7, skipping the first output
    vm = VM([1106, 0, 7, 104, 1, 99, 0, 104, 2, 99])
    vm.run()

    assert vm.drain_output() == [2]


def test_jump_not_taken_advances():
    vm = VM([1105, 0, 7, 104, 1, 99, 0, 104, 2, 99])
    vm.run()

    assert vm.drain_output() == [1]


def test_negative_jump():
    vm = VM([1105, 1, -1, 99])

    with pytest.raises(IllegalAccess):
        vm.run()


def test_negative_write():
    vm = VM([1101, 1, 1, -4, 99])

    with pytest.raises(IllegalAccess):
        vm.run()


def test_unknown_opcode_halts(caplog):
    vm = VM([104, 5, 42, 104, 6, 99])

    with caplog.at_level(logging.ERROR):
        vm.run()

    assert vm.halted
    assert vm.ip == 2
    assert vm.drain_output() == [5]
    assert 'Unknown opcode 42' in caplog.text


def test_negative_instruction_halts():
    vm = VM([-1, 99])
    vm.run()

    assert vm.halted
    assert vm.ip == 0


def test_resume_halted_is_noop():
    vm = VM([104, 1, 99])
    vm.run()
    vm.resume()

    assert vm.halted
    assert vm.drain_output() == [1]


def test_read_output_underflow():
    vm = VM([104, 1, 99])
    vm.run()

    assert vm.read_output() == 1

    with pytest.raises(OutputUnderflow):
        vm.read_output()


def test_drain_output():
    vm = VM([104, 1, 104, 2, 104, 3, 99])
    vm.run()

    assert vm.read_output() == 1
    assert vm.has_output()
    assert vm.drain_output() == [2, 3]
    assert not vm.has_output()
    assert vm.drain_output() == []


def test_step():
    vm = VM([1101, 2, 3, 5, 99, 0])
    vm.step()

    assert vm.ip == 4
    assert vm.memory.read(5) == 5
    assert not vm.halted

    vm.step()
    assert vm.halted


def test_program_not_aliased():
    program = [1101, 2, 3, 0, 99]
    vm = VM(program)
    vm.run()

    assert vm.memory.read(0) == 5
    assert program[0] == 1101


def test_str():
    vm = VM([3, 0, 4, 0, 3, 0, 99], [5])
    vm.run()

    assert str(vm) == 'VM(ip=4 rb=0 input=5 [I] output=5)'


def test_destinations_ignore_relative_mode():
    # RB = 50; ADD and IN with relative destination modes still write to 9 and 10
    vm = VM([109, 50, 21101, 2, 3, 9, 203, 10, 99, 0, 0], [4])
    vm.run()

    assert vm.halted
    assert vm.memory.read(9) == 5
    assert vm.memory.read(10) == 4
    assert vm.memory.read(59) == 0
    assert vm.memory.read(60) == 0


def test_compare_destinations_ignore_relative_mode():
    vm = VM([109, 50, 21107, 1, 2, 11, 21108, 3, 3, 12, 99, 0, 0])
    vm.run()

    assert vm.memory.read(11) == 1
    assert vm.memory.read(12) == 1
    assert vm.memory.read(61) == 0
    assert vm.memory.read(62) == 0
