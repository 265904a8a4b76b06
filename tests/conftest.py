"""Pytest configuration and shared fixtures."""

import json
import logging
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from adminbot.api import AdminAPI
from adminbot.commands import CommandRegistry
from config.settings import BotSettings

# Disable logging during tests
logging.disable(logging.CRITICAL)

BASE_URL = "https://backend.test/api"
API_KEY = "secret-api-key"


class FakeResponse:
    """Stand-in for ``aiohttp.ClientResponse`` used as an async context manager."""

    def __init__(self, status: int = 200, payload: Any = None, raw: str | None = None) -> None:
        self.status = status
        self._payload = payload
        self._raw = raw

    async def json(self, content_type: str | None = "application/json") -> Any:
        if self._raw is not None:
            return json.loads(self._raw)
        return self._payload

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False


class FakeSession:
    """Records requests and answers them from a ``(method, path) -> response`` table."""

    def __init__(self, responses: dict[tuple[str, str], Any] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        path = url[len(BASE_URL):]
        response = self.responses.get((method, path), FakeResponse(200, {}))
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    """Settings built explicitly so tests never depend on the environment."""
    return BotSettings(
        discord_token="test-token",
        backend_url=BASE_URL,
        api_key=API_KEY,
        bot_prefix=",",
        allowed_guild_id=123456789,
        suggestions_channel_id=555,
        word_channel_id=666,
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def api(fake_session):
    return AdminAPI(BASE_URL, API_KEY, session=fake_session)


@pytest.fixture
def mock_api():
    """AdminAPI with every coroutine method mocked."""
    return AsyncMock(spec=AdminAPI)


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def mock_rest():
    rest = MagicMock()
    rest.create_message = AsyncMock()
    rest.delete_message = AsyncMock()
    rest.leave_guild = AsyncMock()
    return rest


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock(spec=hikari.User)
    user.id = 111111111
    user.username = "testuser"
    user.is_bot = False
    user.mention = "<@111111111>"
    return user


@pytest.fixture
def mock_guild():
    """Mock Discord guild."""
    guild = MagicMock(spec=hikari.Guild)
    guild.id = 123456789
    guild.name = "Test Guild"
    guild.owner_id = 987654321
    guild.get_role = MagicMock(return_value=None)
    return guild


@pytest.fixture
def mock_member(mock_user):
    """Mock Discord member."""
    member = MagicMock(spec=hikari.Member)
    member.id = mock_user.id
    member.username = mock_user.username
    member.is_bot = False
    member.role_ids = [222222222]
    return member


@pytest.fixture
def mock_channel():
    """Mock Discord channel."""
    channel = MagicMock(spec=hikari.GuildTextChannel)
    channel.id = 444444444
    channel.name = "test-channel"
    channel.position = 0
    channel.permission_overwrites = {}
    return channel


@pytest.fixture
def mock_message_event(mock_user, mock_guild, mock_channel, mock_member):
    """Mock guild message create event."""
    event = MagicMock(spec=hikari.GuildMessageCreateEvent)
    event.author = mock_user
    event.member = mock_member
    event.guild_id = mock_guild.id
    event.channel_id = mock_channel.id
    event.message_id = 999
    event.content = ",test command"
    event.message = MagicMock()
    event.message.user_mentions_ids = []
    event.get_guild = MagicMock(return_value=mock_guild)
    event.get_channel = MagicMock(return_value=mock_channel)
    return event


@pytest.fixture
def mock_dm_event(mock_user):
    """Mock direct message create event."""
    event = MagicMock(spec=hikari.DMMessageCreateEvent)
    event.author = mock_user
    event.channel_id = 777777777
    event.message_id = 1000
    event.content = ",test"
    event.message = MagicMock()
    event.message.user_mentions_ids = []
    return event


def make_role(role_id: int, permissions: hikari.Permissions) -> MagicMock:
    role = MagicMock(spec=hikari.Role)
    role.id = role_id
    role.permissions = permissions
    return role


@pytest.fixture
def role_factory():
    return make_role
