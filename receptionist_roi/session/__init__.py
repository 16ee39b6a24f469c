from .calculator_session import CalculatorSession

__all__ = ["CalculatorSession"]
