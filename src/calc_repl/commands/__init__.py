"""Control commands for the interactive calculator."""
