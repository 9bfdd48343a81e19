"""Registry of interactive calculator commands."""

from typing import Dict

from calc_repl.calc_repl_command import CalcReplCommand


class CalcReplCommandRegistry:
    """Registry for read loop commands."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._commands: Dict[str, CalcReplCommand] = {}
        self._aliases: Dict[str, str] = {}

    def register_command(self, command: CalcReplCommand) -> None:
        """
        Register a command with the registry.

        Args:
            command: The command to register
        """
        command_name = command.name()
        self._commands[command_name] = command

        # Register aliases
        for alias in command.aliases():
            self._aliases[alias] = command_name

    def get_command(self, name: str) -> CalcReplCommand | None:
        """
        Get a command by name or alias.

        Matching is case-insensitive.

        Args:
            name: The command name or alias

        Returns:
            The command if found, None otherwise
        """
        name = name.lower()

        # Check if it's an alias
        if name in self._aliases:
            name = self._aliases[name]

        return self._commands.get(name)

    def get_all_commands(self) -> Dict[str, CalcReplCommand]:
        """
        Get all registered commands.

        Returns:
            Dictionary of command names to commands
        """
        return self._commands.copy()
