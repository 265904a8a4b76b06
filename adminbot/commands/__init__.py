"""Command descriptors and the registry they are collected into."""

from config.settings import BotSettings

from ..api import AdminAPI
from .base import Command, CommandDescriptor, CommandResult, command
from .domains import setup_domain_commands
from .files import setup_file_commands
from .help import setup_help_commands
from .invites import setup_invite_commands
from .registry import CommandRegistry, CommandRegistryError, DuplicateCommandError, RegistryFrozenError
from .stats import setup_stats_commands
from .users import setup_user_commands


def build_registry(api: AdminAPI, settings: BotSettings) -> CommandRegistry:
    """Register every built-in command and freeze the registry."""
    registry = CommandRegistry()
    registry.register_all(setup_user_commands(api, settings.profile_base_url))
    registry.register_all(setup_invite_commands(api))
    registry.register_all(setup_domain_commands(api))
    registry.register_all(setup_file_commands(api))
    registry.register_all(setup_stats_commands(api))
    registry.register_all(setup_help_commands(registry, settings.bot_prefix))
    registry.freeze()
    return registry


__all__ = [
    "Command",
    "CommandDescriptor",
    "CommandResult",
    "CommandRegistry",
    "CommandRegistryError",
    "DuplicateCommandError",
    "RegistryFrozenError",
    "build_registry",
    "command",
]
