"""
Pytest configuration and fixtures.
"""
import pytest
import sys
import os

# Add the parent directory to path so we can import the calculator modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from calculator import Calculator
from memory_manager import MemoryStore


@pytest.fixture
def memory():
    return MemoryStore()


@pytest.fixture
def calc(memory):
    return Calculator(memory=memory)


@pytest.fixture
def press(calc):
    """Feed a key sequence such as "12+3=" to the calculator fixture."""
    actions = {
        '.': calc.input_decimal,
        '=': calc.equals,
        'C': calc.clear,
        '<': calc.delete,
        '%': calc.percentage,
    }

    def _press(keys):
        for key in keys:
            if key.isdigit():
                calc.input_digit(key)
            elif key in actions:
                actions[key]()
            else:
                calc.input_operator(key)

    return _press
