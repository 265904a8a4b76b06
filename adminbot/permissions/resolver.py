"""Effective Discord permission lookup for the invoking member."""

import logging
from collections.abc import Iterable

import hikari

logger = logging.getLogger(__name__)

ALL_PERMISSIONS = ~hikari.Permissions.NONE


def calculate_member_permissions(
    member: hikari.Member, guild: hikari.Guild, channel: hikari.GuildChannel | None = None
) -> hikari.Permissions:
    """
    Calculate the effective permissions for a member in a guild or channel.

    Args:
        member: The guild member to calculate permissions for
        guild: The guild the member belongs to
        channel: Optional channel to include channel overwrites

    Returns:
        The calculated permissions for the member
    """
    if member.id == guild.owner_id:
        return ALL_PERMISSIONS

    # @everyone role has the same ID as the guild
    everyone_role = guild.get_role(guild.id)
    permissions = everyone_role.permissions if everyone_role else hikari.Permissions.NONE

    for role_id in member.role_ids:
        role = guild.get_role(role_id)
        if role:
            permissions |= role.permissions

    if permissions & hikari.Permissions.ADMINISTRATOR:
        return ALL_PERMISSIONS

    if channel is not None and getattr(channel, "permission_overwrites", None):
        overwrites = channel.permission_overwrites

        everyone_overwrite = overwrites.get(guild.id)
        if everyone_overwrite:
            permissions &= ~everyone_overwrite.deny
            permissions |= everyone_overwrite.allow

        # Role overwrites are merged before being applied
        role_allow = hikari.Permissions.NONE
        role_deny = hikari.Permissions.NONE
        for role_id in member.role_ids:
            role_overwrite = overwrites.get(role_id)
            if role_overwrite:
                role_allow |= role_overwrite.allow
                role_deny |= role_overwrite.deny
        permissions &= ~role_deny
        permissions |= role_allow

        member_overwrite = overwrites.get(member.id)
        if member_overwrite:
            permissions &= ~member_overwrite.deny
            permissions |= member_overwrite.allow

    return permissions


def has_all(granted: hikari.Permissions, required: Iterable[hikari.Permissions]) -> bool:
    """True when every required flag is present in ``granted``."""
    for permission in required:
        if (granted & permission) != permission:
            return False
    return True


class PermissionResolver:
    """Looks up an invoking member's permissions from the gateway cache."""

    def resolve(self, event: hikari.GuildMessageCreateEvent) -> hikari.Permissions:
        member = event.member
        guild = event.get_guild()
        if member is None or guild is None:
            logger.debug(f"No cached guild/member for message {event.message_id}; treating as no permissions")
            return hikari.Permissions.NONE

        return calculate_member_permissions(member, guild, event.get_channel())

    def has_permissions(
        self, event: hikari.GuildMessageCreateEvent, required: Iterable[hikari.Permissions]
    ) -> bool:
        required = list(required)
        if not required:
            return True
        return has_all(self.resolve(event), required)
