# type: ignore
import pytest

from intcode.runtime.vm import VM

import unit_utils


@pytest.fixture
def quine():
    yield unit_utils.load_program('quine')


@pytest.fixture
def echo_vm():
    yield VM(unit_utils.load_program('echo'))
