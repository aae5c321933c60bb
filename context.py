"""
Calculator context for TallyUp
Owns the single engine, memory store and calculator used by a UI layer
"""
from calculator import Calculator
from memory_manager import MemoryStore
from operations import ArithmeticEngine


class CalculatorContext:
    def __init__(self, engine=None, memory=None):
        self.engine = engine if engine is not None else ArithmeticEngine()
        self.memory = memory if memory is not None else MemoryStore()
        self.calculator = Calculator(self.engine, self.memory)

    def reset(self):
        """Start over with an empty memory store and a cleared calculator"""
        self.memory = MemoryStore()
        self.calculator = Calculator(self.engine, self.memory)
