"""Shared fixtures for calculator read loop tests."""

from typing import List

import pytest

from calc_repl import CalcRepl, CalcReplSettings


class ScriptedConsole:
    """Feeds scripted input lines and records output lines."""

    def __init__(self, lines: List[str]) -> None:
        self._lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.endings: List[str] = []

    def input(self, prompt: str) -> str:
        """Return the next scripted line, raising EOFError when exhausted."""
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError

        return self._lines.pop(0)

    def print(self, text: str, end: str = "\n") -> None:
        """Record one output line and its terminator."""
        self.output.append(text)
        self.endings.append(end)


@pytest.fixture
def console():
    """Factory for scripted consoles."""
    def _create_console(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(list(lines))
    return _create_console


@pytest.fixture
def quiet_settings():
    """Settings with the start banner disabled."""
    settings = CalcReplSettings.create_default()
    settings.show_banner = False
    return settings


@pytest.fixture
def repl_factory(quiet_settings):
    """Factory for read loops wired to a scripted console."""
    def _create_repl(console: ScriptedConsole, settings: CalcReplSettings | None = None) -> CalcRepl:
        return CalcRepl(
            settings if settings is not None else quiet_settings,
            input_func=console.input,
            output_func=console.print
        )
    return _create_repl
