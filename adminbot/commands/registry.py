"""Name -> command lookup table."""

import logging
from collections.abc import Iterator

from .base import Command

logger = logging.getLogger(__name__)


class CommandRegistryError(Exception):
    pass


class DuplicateCommandError(CommandRegistryError):
    def __init__(self, name: str) -> None:
        super().__init__(f"A command named '{name}' is already registered")
        self.name = name


class RegistryFrozenError(CommandRegistryError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot register '{name}': the registry is frozen")
        self.name = name


class CommandRegistry:
    """Populated once at startup, then frozen and only read."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, command: Command) -> Command:
        key = command.name.lower()
        if self._frozen:
            raise RegistryFrozenError(key)
        if key in self._commands:
            raise DuplicateCommandError(key)

        self._commands[key] = command
        logger.debug(f"Registered command: {key}")
        return command

    def register_all(self, commands: list[Command]) -> None:
        for command in commands:
            self.register(command)

    def freeze(self) -> None:
        self._frozen = True
        logger.info(f"Command registry frozen with {len(self._commands)} command(s)")

    def resolve(self, name: str) -> Command | None:
        return self._commands.get(name.lower())

    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)
