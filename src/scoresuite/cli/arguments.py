"""
Declarative command line arguments for scripts that drive a suite.

Arguments are declared up front by name with an optional short prefix, long
prefix, default value and required flag, then parsed in one go. Every missing
required argument is reported together.

Example:
    manager = ArgumentManager()
    manager.add({
        "user": {"prefix": "u", "long_prefix": "user", "required": True, "description": "Student name"},
        "level": {"prefix": "l", "default_value": "easy"},
    })
    manager.parse()
    manager.get("user")
"""

import argparse
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

from scoresuite.models import MissingArgumentsError


@dataclass
class Argument:
    name: str
    prefix: str | None = None
    long_prefix: str | None = None
    required: bool = False
    default_value: Any = None
    description: str = ""
    cast: Callable[[str], Any] = str

    def __post_init__(self):
        if not self.prefix and not self.long_prefix:
            raise ValueError(f"Argument '{self.name}' needs a prefix or a long_prefix")
        if self.prefix and len(self.prefix) != 1:
            raise ValueError(f"Short prefix for '{self.name}' must be a single character, got '{self.prefix}'")

    def flags(self) -> list[str]:
        flags = []
        if self.prefix:
            flags.append(f"-{self.prefix}")
        if self.long_prefix:
            flags.append(f"--{self.long_prefix}")
        return flags


class ArgumentManager:
    def __init__(self, prog: str | None = None, description: str | None = None):
        self.prog = prog
        self.description = description
        self._arguments: dict[str, Argument] = {}
        self._values: dict[str, Any] = {}
        self._defaults_used: dict[str, bool] = {}

    def add(self, argument: str | dict[str, dict[str, Any]], **options: Any) -> None:
        """Declare one argument by name, or several from a ``{name: options}`` mapping."""
        if isinstance(argument, dict):
            for name, argument_options in argument.items():
                self.add(name, **argument_options)
            return
        self._arguments[argument] = Argument(name=argument, **options)

    def all(self) -> dict[str, Argument]:
        return dict(self._arguments)

    def build_parser(self) -> argparse.ArgumentParser:
        # -h is left free for declared arguments such as "host".
        parser = argparse.ArgumentParser(prog=self.prog, description=self.description, add_help=False)
        for argument in self._arguments.values():
            parser.add_argument(
                *argument.flags(),
                dest=argument.name,
                type=argument.cast,
                default=None,
                help=argument.description,
            )
        return parser

    def parse(self, argv: list[str] | None = None) -> dict[str, Any]:
        """Parse ``argv`` (``sys.argv[1:]`` when None) into the declared arguments.

        Raises:
            MissingArgumentsError: listing every required argument with no value
                and no default.
        """
        namespace = self.build_parser().parse_args(argv)
        missing = []

        for name, argument in self._arguments.items():
            value = getattr(namespace, name)
            if value is None:
                if argument.default_value:
                    value = argument.default_value
                    self._defaults_used[name] = True
                elif argument.required:
                    missing.append(name)
                    continue
                else:
                    value = ""
            self.set(name, value)

        if missing:
            logger.error(f"Missing required arguments: {', '.join(missing)}")
            raise MissingArgumentsError(missing)
        return dict(self._values)

    def has_default_value(self, name: str) -> bool:
        return self._defaults_used.get(name, False)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def get(self, name: str) -> Any:
        return self._values.get(name)
