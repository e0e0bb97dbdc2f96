import logging


class Calculator:
    """
    The accumulator every command acts on. Holds a single running result
    and applies arithmetic to it in place.
    """

    def __init__(self, initial_value: float = 0.0):
        self._result: float = float(initial_value)

    @property
    def result(self) -> float:
        return self._result

    def add(self, value: float):
        self._result += value

    def subtract(self, value: float):
        self._result -= value

    def multiply(self, value: float):
        self._result *= value

    def divide(self, value: float) -> bool:
        """
        Divide the result by value.

        Division by zero is reported and skipped, leaving the result untouched.
        Returns True when the division was applied.
        """
        if value == 0:
            logging.error("Error: Division by zero")
            return False
        self._result /= value
        return True

    def clear(self):
        self._result = 0.0

    def get_result(self) -> float:
        return self._result
