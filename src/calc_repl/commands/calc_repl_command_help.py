"""Command for showing usage help."""

from typing import List

from calc_repl.calc_repl_command import CalcReplCommand, CalcReplOutput
from calc_repl.calc_repl_command_registry import CalcReplCommandRegistry


class CalcReplCommandHelp(CalcReplCommand):
    """Command to display usage text."""

    def __init__(self, output_func: CalcReplOutput, registry: CalcReplCommandRegistry) -> None:
        """
        Initialize the command.

        Args:
            output_func: Function used to write output lines
            registry: Registry whose commands are listed in the help text
        """
        super().__init__(output_func)
        self._registry = registry

    def name(self) -> str:
        """Get the name of the command."""
        return "help"

    def help_text(self) -> str:
        """Get the help text for the command."""
        return "Show this help"

    def usage_lines(self) -> List[str]:
        """Build the usage text, one entry per output line."""
        lines = [
            "Calculator REPL",
            "Type expressions, e.g.: 2 + 3 * (4 - 1) ^ 2",
            "Operators: + - * / ^ % (percent converts number to fraction, e.g. 50% -> 0.5)",
        ]

        commands = self._registry.get_all_commands()
        names = []
        for command_name in sorted(commands):
            names.append(command_name)
            names.extend(commands[command_name].aliases())

        lines.append(f"Commands: {', '.join(names)}")
        for command_name in sorted(commands):
            lines.append(f"  {command_name:<8}{commands[command_name].help_text()}")

        return lines

    def execute(self) -> bool:
        """Print the usage text."""
        for line in self.usage_lines():
            self._output(line)

        return True
