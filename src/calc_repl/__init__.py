"""Calc REPL - interactive read loop for the calculator."""

from calc_repl.calc_repl import CalcRepl, format_result
from calc_repl.calc_repl_command import CalcReplCommand
from calc_repl.calc_repl_command_registry import CalcReplCommandRegistry
from calc_repl.calc_repl_settings import CalcReplSettings


__version__ = "0.1"


__all__ = [
    "CalcRepl", "format_result", "CalcReplCommand", "CalcReplCommandRegistry", "CalcReplSettings"
]
