"""Abstract base class for interactive calculator commands."""

from abc import ABC, abstractmethod
from typing import Callable, List


# Type alias for the function commands write their output through, called
# like print: output(text) or output(text, end="")
CalcReplOutput = Callable[..., None]


class CalcReplCommand(ABC):
    """Abstract base class for control commands recognized by the read loop."""

    def __init__(self, output_func: CalcReplOutput) -> None:
        """
        Initialize the command.

        Args:
            output_func: Function used to write output lines
        """
        self._output = output_func

    @abstractmethod
    def name(self) -> str:
        """Get the name of the command."""

    def aliases(self) -> List[str]:
        """Get alternate names for the command."""
        return []

    @abstractmethod
    def help_text(self) -> str:
        """Get the help text for the command."""

    @abstractmethod
    def execute(self) -> bool:
        """
        Execute the command.

        Returns:
            True if the session should continue, False if it should end
        """
