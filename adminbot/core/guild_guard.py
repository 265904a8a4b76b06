import logging

import hikari

logger = logging.getLogger(__name__)


def first_text_channel(event: hikari.GuildJoinEvent) -> hikari.GuildTextChannel | None:
    text_channels = [c for c in event.channels.values() if isinstance(c, hikari.GuildTextChannel)]
    if not text_channels:
        return None
    return min(text_channels, key=lambda c: (c.position, c.id))


class GuildGuard:
    """Leaves every guild except the single allowed one."""

    name = "guild_join"

    def __init__(self, rest: hikari.api.RESTClient, allowed_guild_id: int, rejection_message: str) -> None:
        self.rest = rest
        self.allowed_guild_id = allowed_guild_id
        self.rejection_message = rejection_message

    async def run(self, event: hikari.GuildJoinEvent) -> bool:
        """Returns True when the guild was left."""
        if event.guild_id == self.allowed_guild_id:
            logger.info(f"Joined allowed guild {event.guild_id}")
            return False

        logger.warning(f"Joined unauthorized guild {event.guild_id}; leaving")

        channel = first_text_channel(event)
        if channel is not None:
            try:
                await self.rest.create_message(channel.id, self.rejection_message)
            except Exception as e:
                logger.error(f"Could not post rejection message in guild {event.guild_id}: {e}")

        await self.rest.leave_guild(event.guild_id)
        return True
