from __future__ import annotations

from collections.abc import Sequence

import hikari

from ..api import AdminAPI
from .base import CommandDescriptor, CommandResult, command
from .users import ADMIN

TRUTHY = {"true", "yes", "y", "1", "wildcard"}


def setup_domain_commands(api: AdminAPI) -> list[CommandDescriptor]:
    """Domain management."""

    @command(
        name="adddomain",
        description="Add a domain.",
        usage="adddomain <domain> [wildcard] [donated by]",
        permissions=ADMIN,
    )
    async def adddomain(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        if not args:
            return CommandResult.failure("Provide a domain.")

        wildcard = len(args) > 1 and args[1].lower() in TRUTHY
        donated_by = args[2] if len(args) > 2 else None
        await api.add_domain(args[0], wildcard=wildcard, donated=donated_by is not None, donated_by=donated_by)
        return CommandResult.success(f"Added domain `{args[0]}`")

    @command(
        name="adddomains",
        description="Add several domains at once.",
        usage="adddomains <domain> [domain ...]",
        permissions=ADMIN,
    )
    async def adddomains(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        if not args:
            return CommandResult.failure("Provide at least one domain.")

        await api.add_domains(
            [
                {"name": name, "wildcard": False, "donated": False, "donatedBy": "null", "userOnly": False}
                for name in args
            ]
        )
        return CommandResult.success(f"Added {len(args)} domain(s)")

    @command(
        name="deletedomain",
        description="Delete a domain.",
        usage="deletedomain <domain>",
        permissions=ADMIN,
    )
    async def deletedomain(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        if not args:
            return CommandResult.failure("Provide a domain.")

        await api.delete_domain(args[0])
        return CommandResult.success(f"Deleted domain `{args[0]}`")

    return [adddomain, adddomains, deletedomain]
