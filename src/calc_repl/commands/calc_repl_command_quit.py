"""Command for ending the calculator session."""

import logging
from typing import List

from calc_repl.calc_repl_command import CalcReplCommand, CalcReplOutput


class CalcReplCommandQuit(CalcReplCommand):
    """Command to end the session."""

    def __init__(self, output_func: CalcReplOutput) -> None:
        super().__init__(output_func)
        self._logger = logging.getLogger("CalcReplCommandQuit")

    def name(self) -> str:
        """Get the name of the command."""
        return "quit"

    def aliases(self) -> List[str]:
        """Get alternate names for the command."""
        return ["exit"]

    def help_text(self) -> str:
        """Get the help text for the command."""
        return "End the session"

    def execute(self) -> bool:
        """Say goodbye and end the session."""
        self._logger.info("Session ended by user")
        self._output("Goodbye.")
        return False
