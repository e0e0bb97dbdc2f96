import logging
from typing import List, Tuple

from calc_commands import Command


class CalculatorControl:
    """
    Invoker: runs commands and keeps them so they can be undone, most recent
    first. There is no redo; an undone command is discarded.
    """

    def __init__(self):
        self._commands: List[Command] = []

    def execute_command(self, command: Command):
        command.execute()
        self._commands.append(command)
        logging.debug(f"Executed {command.describe()} (history depth {len(self._commands)})")

    def undo_last_command(self) -> bool:
        """
        Undo the most recent command.

        An empty history is not an error: nothing happens and False is returned.
        """
        if not self._commands:
            return False
        command = self._commands.pop()
        command.undo()
        logging.debug(f"Undid {command.describe()} (history depth {len(self._commands)})")
        return True

    @property
    def history(self) -> Tuple[Command, ...]:
        return tuple(self._commands)

    def __len__(self):
        return len(self._commands)
