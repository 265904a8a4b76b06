"""Tests for the command registry."""

from unittest.mock import AsyncMock

import hikari
import pytest

from adminbot.commands import (
    CommandDescriptor,
    CommandRegistry,
    DuplicateCommandError,
    RegistryFrozenError,
    command,
)


def make_command(name: str) -> CommandDescriptor:
    return CommandDescriptor(name=name, description="", usage=name, run=AsyncMock())


class TestCommandDecorator:
    def test_builds_descriptor(self):
        @command(
            name="lookup",
            description="Lookup a user.",
            usage="lookup <id>",
            permissions=[hikari.Permissions.SEND_MESSAGES],
        )
        async def lookup(event, args):
            return None

        assert isinstance(lookup, CommandDescriptor)
        assert lookup.name == "lookup"
        assert lookup.description == "Lookup a user."
        assert lookup.usage == "lookup <id>"
        assert lookup.permissions == frozenset({hikari.Permissions.SEND_MESSAGES})

    def test_defaults(self):
        @command(name="ping")
        async def ping(event, args):
            return None

        assert ping.usage == "ping"
        assert ping.description == ""
        assert ping.permissions == frozenset()

    def test_descriptor_is_immutable(self):
        descriptor = make_command("ping")

        with pytest.raises(AttributeError):
            descriptor.name = "pong"


class TestCommandRegistry:
    def test_register_and_resolve(self, registry):
        cmd = make_command("lookup")

        registry.register(cmd)

        assert registry.resolve("lookup") is cmd
        assert "lookup" in registry
        assert len(registry) == 1

    def test_resolve_is_case_insensitive(self, registry):
        cmd = make_command("Lookup")
        registry.register(cmd)

        assert registry.resolve("LOOKUP") is cmd
        assert registry.resolve("lookup") is cmd

    def test_resolve_unknown(self, registry):
        assert registry.resolve("missing") is None
        assert "missing" not in registry

    def test_duplicate_registration_fails(self, registry):
        first = make_command("lookup")
        registry.register(first)

        with pytest.raises(DuplicateCommandError):
            registry.register(make_command("LOOKUP"))

        assert registry.resolve("lookup") is first

    def test_register_after_freeze_fails(self, registry):
        registry.freeze()

        with pytest.raises(RegistryFrozenError):
            registry.register(make_command("lookup"))

        assert registry.frozen is True

    def test_iteration_preserves_registration_order(self, registry):
        registry.register_all([make_command("b"), make_command("a"), make_command("c")])

        assert [cmd.name for cmd in registry] == ["b", "a", "c"]
        assert registry.names() == ["b", "a", "c"]

    def test_accepts_any_command_shaped_object(self, registry):
        class Ping:
            name = "ping"
            description = "Pong"
            usage = "ping"
            permissions = frozenset()

            async def run(self, event, args):
                return None

        ping = Ping()
        registry.register(ping)

        assert registry.resolve("ping") is ping
