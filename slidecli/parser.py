"""Turns a line of user input into a command with its options set."""

from __future__ import annotations

from .commands import Command, CommandRegistry, OptionValue


class CommandParser:
    """Parses ``name -option value ...`` lines into commands.

    Each option's value is read as the type of that option's default.
    """

    def __init__(self, registry: CommandRegistry | None = None) -> None:
        self._registry = registry if registry is not None else CommandRegistry()

    @staticmethod
    def _convert(name: str, default: OptionValue, token: str) -> OptionValue:
        if isinstance(default, str):
            return token
        try:
            if isinstance(default, int):
                return int(token)
            return float(token)
        except ValueError:
            raise ValueError(
                f"Invalid value for option [{name}]: [{token}]"
            ) from None

    def parse(self, line: str) -> Command:
        """Return the command the line names, with the given options applied."""
        tokens = iter(line.split())
        command = self._registry.find_command(next(tokens, ""))
        for name in tokens:
            default = command.get_value(name)
            token = next(tokens, None)
            if token is None:
                raise ValueError(f"Missing value for option [{name}]")
            command.set_option(name, self._convert(name, default, token))
        return command