"""Interactive read loop for the calculator."""

import logging
import math
from typing import Callable

from calc import Calc, CalcError

from calc_repl.calc_repl_command import CalcReplOutput
from calc_repl.calc_repl_command_registry import CalcReplCommandRegistry
from calc_repl.calc_repl_settings import CalcReplSettings
from calc_repl.commands.calc_repl_command_clear import CalcReplCommandClear
from calc_repl.commands.calc_repl_command_help import CalcReplCommandHelp
from calc_repl.commands.calc_repl_command_quit import CalcReplCommandQuit


def format_result(value: float, tolerance: float = 1e-12) -> str:
    """
    Format a result for display.

    Values within tolerance of their truncation print as integers, anything
    else prints as the float's own representation.

    Args:
        value: The result to format
        tolerance: Largest fractional part still shown as an integer

    Returns:
        Display string for the value
    """
    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    truncated = math.trunc(value)
    if abs(value - truncated) < tolerance:
        return str(truncated)

    return repr(value)


class CalcRepl:
    """Reads expressions line by line and prints their results."""

    def __init__(
        self,
        settings: CalcReplSettings | None = None,
        input_func: Callable[[str], str] | None = None,
        output_func: CalcReplOutput | None = None
    ) -> None:
        """
        Initialize the read loop.

        Args:
            settings: Settings to use, defaults if not given
            input_func: Function that shows a prompt and returns one line, defaults to input
            output_func: Function used to write output lines, defaults to print
        """
        self._settings = settings if settings is not None else CalcReplSettings.create_default()
        self._input = input_func if input_func is not None else input
        self._output = output_func if output_func is not None else print
        self._calc = Calc()
        self._logger = logging.getLogger("CalcRepl")

        self._registry = CalcReplCommandRegistry()
        self._registry.register_command(CalcReplCommandQuit(self._output))
        self._registry.register_command(CalcReplCommandHelp(self._output, self._registry))
        self._registry.register_command(CalcReplCommandClear(self._output))

    def run(self) -> None:
        """Run the loop until a quit command or end of input."""
        if self._settings.show_banner:
            help_command = self._registry.get_command("help")
            if help_command is not None:
                help_command.execute()

        while True:
            try:
                line = self._input(self._settings.prompt)

            except EOFError:
                self._logger.info("End of input, ending session")
                self._output("")
                break

            except KeyboardInterrupt:
                self._logger.info("Interrupted, ending session")
                self._output("")
                break

            except OSError as e:
                self._logger.warning("Failed to read input: %s", e)
                self._output("Input error, try again.")
                continue

            if not self.process_line(line):
                break

    def process_line(self, line: str) -> bool:
        """
        Handle one line of input.

        Args:
            line: Raw input line

        Returns:
            True if the session should continue, False if it should end
        """
        line = line.strip()
        if not line:
            return True

        command = self._registry.get_command(line)
        if command is not None:
            self._logger.debug("Running command: %s", command.name())
            return command.execute()

        try:
            result = self._calc.evaluate(line)

        except CalcError as e:
            self._logger.warning("Failed to evaluate '%s': %s (%s)", line, e.message, e.kind.value)
            self._output(f"Error: {e.message}")
            return True

        self._logger.debug("Evaluated '%s' = %r", line, result)
        self._output(format_result(result, self._settings.integer_tolerance))
        return True
