"""Tests for the guild allow-list."""

from unittest.mock import MagicMock

import hikari
import pytest

from adminbot.core.guild_guard import GuildGuard, first_text_channel

ALLOWED = 797483366634750063


def make_channel(channel_id: int, position: int, kind=hikari.GuildTextChannel) -> MagicMock:
    channel = MagicMock(spec=kind)
    channel.id = channel_id
    channel.position = position
    return channel


def make_join_event(guild_id: int, channels=()) -> MagicMock:
    event = MagicMock(spec=hikari.GuildJoinEvent)
    event.guild_id = guild_id
    event.channels = {channel.id: channel for channel in channels}
    return event


@pytest.fixture
def guard(mock_rest):
    return GuildGuard(mock_rest, ALLOWED, "Bruh this aint dny")


class TestFirstTextChannel:
    def test_picks_lowest_position_text_channel(self):
        voice = make_channel(1, 0, hikari.GuildVoiceChannel)
        later = make_channel(2, 5)
        first = make_channel(3, 1)

        assert first_text_channel(make_join_event(1, [voice, later, first])) is first

    def test_no_text_channels(self):
        voice = make_channel(1, 0, hikari.GuildVoiceChannel)

        assert first_text_channel(make_join_event(1, [voice])) is None


class TestGuildGuard:
    @pytest.mark.asyncio
    async def test_allowed_guild_is_kept(self, guard, mock_rest):
        left = await guard.run(make_join_event(ALLOWED, [make_channel(10, 0)]))

        assert left is False
        mock_rest.create_message.assert_not_called()
        mock_rest.leave_guild.assert_not_called()

    @pytest.mark.asyncio
    async def test_unauthorized_guild_is_rejected_and_left(self, guard, mock_rest):
        left = await guard.run(make_join_event(42, [make_channel(10, 0)]))

        assert left is True
        mock_rest.create_message.assert_awaited_once_with(10, "Bruh this aint dny")
        mock_rest.leave_guild.assert_awaited_once_with(42)

    @pytest.mark.asyncio
    async def test_leaves_even_when_post_fails(self, guard, mock_rest):
        mock_rest.create_message.side_effect = Exception("Missing access")

        left = await guard.run(make_join_event(42, [make_channel(10, 0)]))

        assert left is True
        mock_rest.leave_guild.assert_awaited_once_with(42)

    @pytest.mark.asyncio
    async def test_leaves_without_any_text_channel(self, guard, mock_rest):
        await guard.run(make_join_event(42))

        mock_rest.create_message.assert_not_called()
        mock_rest.leave_guild.assert_awaited_once_with(42)
