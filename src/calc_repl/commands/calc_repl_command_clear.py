"""Command for clearing the terminal."""

from calc_repl.calc_repl_command import CalcReplCommand


class CalcReplCommandClear(CalcReplCommand):
    """Command to clear the terminal screen."""

    # Erase display, then move the cursor home
    CLEAR_SEQUENCE = "\x1b[2J\x1b[1;1H"

    def name(self) -> str:
        """Get the name of the command."""
        return "clear"

    def help_text(self) -> str:
        """Get the help text for the command."""
        return "Clear the screen"

    def execute(self) -> bool:
        """Emit the terminal clear sequence."""
        self._output(self.CLEAR_SEQUENCE, end="")
        return True
