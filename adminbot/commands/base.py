"""Command descriptors and the result type returned by command bodies."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

import hikari

CommandCallback = Callable[[hikari.MessageCreateEvent, list[str]], Awaitable["CommandResult | None"]]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one command body, rendered by the dispatcher."""

    ok: bool
    message: str | None = None
    embed: hikari.Embed | None = None

    @classmethod
    def success(cls, message: str | None = None, *, embed: hikari.Embed | None = None) -> CommandResult:
        return cls(True, message, embed)

    @classmethod
    def failure(cls, message: str) -> CommandResult:
        return cls(False, message)


class Command(Protocol):
    """Anything exposing these attributes can be registered as a command."""

    name: str
    description: str
    usage: str
    permissions: frozenset[hikari.Permissions]

    def run(self, event: hikari.MessageCreateEvent, args: list[str]) -> Awaitable[CommandResult | None]: ...


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    name: str
    description: str
    usage: str
    run: CommandCallback
    permissions: frozenset[hikari.Permissions] = field(default_factory=frozenset)


def command(
    name: str,
    description: str = "",
    usage: str | None = None,
    permissions: Iterable[hikari.Permissions] | None = None,
) -> Callable[[CommandCallback], CommandDescriptor]:
    """
    Turn an async ``(event, args)`` function into a :class:`CommandDescriptor`.

    Each entry of ``permissions`` is checked on its own, so pass single flags
    rather than a combined value.
    """

    def decorator(func: CommandCallback) -> CommandDescriptor:
        return CommandDescriptor(
            name=name,
            description=description,
            usage=usage or name,
            run=func,
            permissions=frozenset(permissions or ()),
        )

    return decorator


def target_id(event: hikari.MessageCreateEvent, args: Sequence[str]) -> str | None:
    """First mentioned user's id, falling back to the first argument."""
    mentions: Any = event.message.user_mentions_ids
    if mentions:
        return str(mentions[0])
    return args[0] if args else None
