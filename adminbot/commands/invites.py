from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import hikari

from ..api import AdminAPI
from .base import CommandDescriptor, CommandResult, command
from .users import ADMIN, parse_int


def _codes(payload: Any) -> list[str]:
    if not isinstance(payload, dict):
        return []
    if payload.get("code"):
        return [str(payload["code"])]
    return [str(code) for code in payload.get("codes") or payload.get("invites") or []]


def setup_invite_commands(api: AdminAPI) -> list[CommandDescriptor]:
    """Invite code generation and cleanup."""

    @command(name="invite", description="Generate an invite code.", usage="invite", permissions=ADMIN)
    async def invite(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        payload = await api.generate_invite(str(event.author.id))
        codes = _codes(payload)
        return CommandResult.success(f"Generated invite: `{codes[0]}`" if codes else "Generated an invite")

    @command(
        name="bulkinvites",
        description="Generate several invite codes at once.",
        usage="bulkinvites <count>",
        permissions=ADMIN,
    )
    async def bulkinvites(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        count = parse_int(args[0] if args else None)
        if count is None or count < 1:
            return CommandResult.failure("Provide how many invites to generate.")

        payload = await api.generate_bulk_invites(str(event.author.id), count)
        codes = _codes(payload)
        if not codes:
            return CommandResult.success(f"Generated {count} invite(s)")
        return CommandResult.success(f"Generated {len(codes)} invite(s):\n```{chr(10).join(codes)}```")

    @command(
        name="deleteinvite",
        description="Delete an invite code.",
        usage="deleteinvite <invite>",
        permissions=ADMIN,
    )
    async def deleteinvite(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        if not args:
            return CommandResult.failure("Provide an invite.")

        await api.delete_invite(args[0])
        return CommandResult.success("Deleted invite")

    @command(
        name="invitewave",
        description="Give every user some invites.",
        usage="invitewave <amount>",
        permissions=ADMIN,
    )
    async def invitewave(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        amount = parse_int(args[0] if args else None)
        if amount is None:
            return CommandResult.failure("Provide an amount.")

        await api.invite_wave(amount)
        return CommandResult.success(f"Sent an invite wave of {amount}")

    return [invite, bulkinvites, deleteinvite, invitewave]
