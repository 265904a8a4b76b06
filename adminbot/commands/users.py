from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

import hikari

from ..api import AdminAPI
from ..embeds import create_embed
from .base import CommandDescriptor, CommandResult, command, target_id

ADMIN = (hikari.Permissions.SEND_MESSAGES, hikari.Permissions.ADMINISTRATOR)
MISSING_IDENTIFIER = "Provide a identifier."


def parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def format_timestamp(value: Any) -> str:
    """Render a backend date as a Discord timestamp when it can be parsed."""
    if value is None:
        return "never"
    try:
        if isinstance(value, (int, float)):
            moment = datetime.fromtimestamp(value / 1000)
        else:
            moment = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except (ValueError, OverflowError, OSError):
        return str(value)
    return f"<t:{int(moment.timestamp())}:f>"


def build_user_embed(user: dict[str, Any], profile_base_url: str) -> hikari.Embed:
    uid = user.get("uid")
    embed = create_embed(
        description=f"UID {uid} | [{user.get('username')}]({profile_base_url}{uid}) ({user.get('role')})"
    )
    if user.get("avatar"):
        embed.set_thumbnail(user["avatar"])
    embed.set_footer(f"UUID {user.get('uuid')} | Invited by {user.get('invitedBy')}")

    embed.add_field(
        "Statistics",
        f"Uploaded {user.get('uploads', 0)} images\n"
        f"Last login was {format_timestamp(user.get('lastLogin'))}, "
        f"registered at {format_timestamp(user.get('registrationDate'))}",
        inline=True,
    )
    discord_id = user.get("discordId")
    embed.add_field("Discord", f"<@{discord_id}>" if discord_id else "Not Linked", inline=True)

    invited = user.get("invitedUsers") or []
    embed.add_field("Invites", f"```{', '.join(map(str, invited))}```" if invited else "None", inline=False)
    return embed


def setup_user_commands(api: AdminAPI, profile_base_url: str) -> list[CommandDescriptor]:
    """Commands that look up or modify a single backend user."""

    @command(
        name="lookup",
        description="Lookup a user.",
        usage="lookup <uuid/uid/discord>",
        permissions=[hikari.Permissions.SEND_MESSAGES],
    )
    async def lookup(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        if not user_id:
            return CommandResult.failure(MISSING_IDENTIFIER)

        payload = await api.get_user(user_id)
        return CommandResult.success(embed=build_user_embed(payload["user"], profile_base_url))

    @command(
        name="verifyemail",
        description="verifyemail someone's email",
        usage="verifyemail <uuid/username/email/invite/key/discord>",
        permissions=ADMIN,
    )
    async def verifyemail(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        if not user_id:
            return CommandResult.failure(MISSING_IDENTIFIER)

        await api.verify_email(user_id)
        return CommandResult.success("Verified user email")

    @command(
        name="blacklist",
        description="Blacklist a user.",
        usage="blacklist <uuid/uid/discord> [reason]",
        permissions=ADMIN,
    )
    async def blacklist(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        if not user_id:
            return CommandResult.failure(MISSING_IDENTIFIER)

        reason = " ".join(args[1:]) or None
        await api.blacklist(user_id, reason, str(event.author.id))
        return CommandResult.success("Blacklisted user")

    @command(
        name="unblacklist",
        description="Remove a user from the blacklist.",
        usage="unblacklist <uuid/uid/discord> [reason]",
        permissions=ADMIN,
    )
    async def unblacklist(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        if not user_id:
            return CommandResult.failure(MISSING_IDENTIFIER)

        reason = " ".join(args[1:]) or None
        await api.unblacklist(user_id, reason, str(event.author.id))
        return CommandResult.success("Unblacklisted user")

    @command(
        name="premium",
        description="Give a user premium.",
        usage="premium <uuid/uid/discord>",
        permissions=ADMIN,
    )
    async def premium(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        if not user_id:
            return CommandResult.failure(MISSING_IDENTIFIER)

        await api.grant_premium(user_id)
        return CommandResult.success("Gave user premium")

    @command(
        name="wipe",
        description="Wipe all of a user's files.",
        usage="wipe <uuid/uid/discord>",
        permissions=ADMIN,
    )
    async def wipe(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        if not user_id:
            return CommandResult.failure(MISSING_IDENTIFIER)

        await api.wipe_user(user_id)
        return CommandResult.success("Wiped user")

    @command(
        name="giveinv",
        description="Add invites to a user's balance.",
        usage="giveinv <uuid/uid/discord> <amount>",
        permissions=ADMIN,
    )
    async def giveinv(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        amount = parse_int(args[1] if len(args) > 1 else None)
        if not user_id or amount is None:
            return CommandResult.failure("Provide a identifier and an amount.")

        await api.add_invites(user_id, amount)
        return CommandResult.success(f"Gave {amount} invite(s)")

    @command(
        name="setuid",
        description="Change a user's UID.",
        usage="setuid <uuid/uid/discord> <new uid>",
        permissions=ADMIN,
    )
    async def setuid(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        user_id = target_id(event, args)
        new_uid = parse_int(args[1] if len(args) > 1 else None)
        if not user_id or new_uid is None:
            return CommandResult.failure("Provide a identifier and a new UID.")

        await api.set_uid(user_id, new_uid)
        return CommandResult.success(f"Set UID to {new_uid}")

    return [lookup, verifyemail, blacklist, unblacklist, premium, wipe, giveinv, setuid]
