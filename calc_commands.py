"""
calc_commands.py - Reversible calculator operations.

Each command wraps one arithmetic step against a Calculator and knows how to
reverse it. Destructive steps (multiply, divide, clear) remember the result
as it was right before they ran and restore that snapshot on undo.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from calc_core import Calculator


class Command(ABC):
    """Base class for operations that can be executed and undone."""

    name: str = ""

    def __init__(self, calculator: Calculator, value: Optional[float] = None):
        self.calculator = calculator
        self.value = value

    @abstractmethod
    def execute(self):
        """Apply the operation to the calculator."""

    @abstractmethod
    def undo(self):
        """Reverse the effect of execute()."""

    def describe(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name} {self.value:g}"

    def __repr__(self):
        return f"{type(self).__name__}({self.describe()!r})"


class SnapshotCommand(Command):
    """
    A command whose effect cannot be reversed from the operand alone.

    The result is captured before execution; undo puts it back exactly.
    """

    def __init__(self, calculator: Calculator, value: Optional[float] = None):
        super().__init__(calculator, value)
        self.previous_value: Optional[float] = None

    def execute(self):
        self.previous_value = self.calculator.get_result()
        self.apply()

    @abstractmethod
    def apply(self):
        """Perform the forward operation once the snapshot is taken."""

    def undo(self):
        if self.previous_value is None:
            return
        # clear first so the snapshot comes back bit-for-bit
        self.calculator.clear()
        self.calculator.add(self.previous_value)


class AddCommand(Command):
    name = "add"

    def execute(self):
        self.calculator.add(self.value)

    def undo(self):
        self.calculator.subtract(self.value)


class SubtractCommand(Command):
    name = "subtract"

    def execute(self):
        self.calculator.subtract(self.value)

    def undo(self):
        self.calculator.add(self.value)


class MultiplyCommand(SnapshotCommand):
    name = "multiply"

    def apply(self):
        self.calculator.multiply(self.value)


class DivideCommand(SnapshotCommand):
    """
    Divides the result. A zero divisor is skipped by the calculator; undoing
    it still restores the snapshot, which is the unchanged result.
    """
    name = "divide"

    def apply(self):
        self.calculator.divide(self.value)


class ClearCommand(SnapshotCommand):
    name = "clear"

    def __init__(self, calculator: Calculator, value: Optional[float] = None):
        super().__init__(calculator, None)

    def apply(self):
        self.calculator.clear()


COMMAND_TYPES: Dict[str, Type[Command]] = {
    cls.name: cls
    for cls in (AddCommand, SubtractCommand, MultiplyCommand, DivideCommand, ClearCommand)
}


def requires_value(name: str) -> bool:
    """True if the named operation takes a numeric operand."""
    return name in COMMAND_TYPES and name != ClearCommand.name


def create_command(name: str, calculator: Calculator, value: Optional[float] = None) -> Command:
    """
    Build the command registered under name.

    Raises:
        ValueError: if name is unknown, or an operand is required but missing.
    """
    command_cls = COMMAND_TYPES.get(name)
    if command_cls is None:
        raise ValueError(f"Unknown operation '{name}'")
    if requires_value(name) and value is None:
        raise ValueError(f"Operation '{name}' requires a value")
    return command_cls(calculator, value)
