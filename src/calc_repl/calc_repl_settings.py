"""Settings for the interactive calculator."""

from dataclasses import dataclass
import json
import logging
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CalcReplSettings:
    """
    Interactive calculator settings.
    """
    prompt: str = "> "
    show_banner: bool = True
    integer_tolerance: float = 1e-12
    log_level: str = "DEBUG"
    log_dir: str = "~/.calc/logs"
    max_log_files: int = 50

    @classmethod
    def create_default(cls) -> "CalcReplSettings":
        """Create a new CalcReplSettings object with default values."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "CalcReplSettings":
        """
        Load settings from file.

        Keys missing from the file keep their default values.

        Args:
            path: Path to the settings file

        Returns:
            CalcReplSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            ValueError: If the JSON document is not an object
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            if not isinstance(data, dict):
                raise ValueError("Settings file must contain a JSON object")

            settings.prompt = str(data.get("prompt", settings.prompt))
            settings.log_dir = str(data.get("logDir", settings.log_dir))

            show_banner = data.get("showBanner", settings.show_banner)
            if isinstance(show_banner, bool):
                settings.show_banner = show_banner

            # JSON true/false load as bool, which is also an int
            tolerance = data.get("integerTolerance", settings.integer_tolerance)
            if isinstance(tolerance, (int, float)) and not isinstance(tolerance, bool) and tolerance >= 0:
                settings.integer_tolerance = float(tolerance)

            max_log_files = data.get("maxLogFiles", settings.max_log_files)
            if isinstance(max_log_files, int) and not isinstance(max_log_files, bool) and max_log_files > 0:
                settings.max_log_files = max_log_files

            # Unknown level names fall back to the default
            log_level = str(data.get("logLevel", settings.log_level)).upper()
            if log_level in LOG_LEVELS:
                settings.log_level = log_level

        return settings

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save the settings file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "prompt": self.prompt,
            "showBanner": self.show_banner,
            "integerTolerance": self.integer_tolerance,
            "logLevel": self.log_level,
            "logDir": self.log_dir,
            "maxLogFiles": self.max_log_files
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def numeric_log_level(self) -> int:
        """Get the logging module constant for the configured level."""
        return logging.getLevelName(self.log_level)
