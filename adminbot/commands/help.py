from __future__ import annotations

from collections.abc import Sequence

import hikari

from ..embeds import create_embed
from .base import CommandDescriptor, CommandResult, command
from .registry import CommandRegistry


def setup_help_commands(registry: CommandRegistry, prefix: str) -> list[CommandDescriptor]:
    @command(
        name="help",
        description="List commands, or show how to use one.",
        usage="help [command]",
        permissions=[hikari.Permissions.SEND_MESSAGES],
    )
    async def help_command(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        if args:
            target = registry.resolve(args[0])
            if target is None:
                return CommandResult.failure(f"No command named `{args[0]}`.")

            embed = create_embed(title=f"{prefix}{target.name}", description=target.description)
            embed.add_field("Usage", f"`{prefix}{target.usage}`")
            return CommandResult.success(embed=embed)

        lines = [f"`{prefix}{cmd.name}` - {cmd.description}" for cmd in registry]
        return CommandResult.success(embed=create_embed(title="Commands", description="\n".join(lines)))

    return [help_command]
