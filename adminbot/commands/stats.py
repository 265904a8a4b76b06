from __future__ import annotations

from collections.abc import Sequence

import hikari

from ..api import AdminAPI, TotalStats
from ..embeds import create_embed
from .base import CommandDescriptor, CommandResult, command

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(size: float) -> str:
    for unit in BYTE_UNITS:
        if size < 1024 or unit == BYTE_UNITS[-1]:
            return f"{size:.2f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.2f} {BYTE_UNITS[-1]}"


def build_stats_embed(stats: TotalStats) -> hikari.Embed:
    embed = create_embed(title="Statistics")
    embed.add_field("Users", str(stats.total_users), inline=True)
    embed.add_field("Premium", str(stats.premium), inline=True)
    embed.add_field("Blacklisted", str(stats.total_bans), inline=True)
    embed.add_field("Files", str(stats.total_files), inline=True)
    embed.add_field("Storage Used", format_bytes(stats.storage_used), inline=True)
    embed.add_field("Domains", str(stats.count), inline=True)
    return embed


def setup_stats_commands(api: AdminAPI) -> list[CommandDescriptor]:
    @command(
        name="stats",
        description="Show the service's statistics.",
        usage="stats",
        permissions=[hikari.Permissions.SEND_MESSAGES],
    )
    async def stats(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        return CommandResult.success(embed=build_stats_embed(await api.get_total_stats()))

    return [stats]
