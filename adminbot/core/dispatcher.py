import enum
import logging
from collections.abc import Sequence

import hikari

from .. import embeds
from ..api.errors import BackendError, TransportError
from ..commands.base import Command, CommandResult
from ..commands.registry import CommandRegistry
from ..permissions import PermissionResolver
from .channel_policy import ChannelPolicy
from .invocation import parse_invocation

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong while running that command."


class DispatchStatus(enum.Enum):
    IGNORED = "ignored"
    POLICY_DELETED = "policy_deleted"
    NOT_COMMAND = "not_command"
    UNKNOWN_COMMAND = "unknown_command"
    PERMISSION_DENIED = "permission_denied"
    EXECUTED = "executed"
    FAILED = "failed"


class CommandDispatcher:
    """Turns inbound messages into command executions.

    This is the only place where a failed command becomes a reply; nothing
    raised by a command body escapes :meth:`dispatch`.
    """

    name = "message_create"

    def __init__(
        self,
        registry: CommandRegistry,
        rest: hikari.api.RESTClient,
        *,
        prefix: str,
        policies: Sequence[ChannelPolicy] = (),
        permission_resolver: PermissionResolver | None = None,
    ) -> None:
        self.registry = registry
        self.rest = rest
        self.prefix = prefix
        self.policies = list(policies)
        self.permission_resolver = permission_resolver or PermissionResolver()

    async def run(self, event: hikari.MessageCreateEvent) -> DispatchStatus:
        try:
            return await self.dispatch(event)
        except Exception as e:
            logger.exception(f"Unhandled error while dispatching message {event.message_id}: {e}")
            return DispatchStatus.FAILED

    async def dispatch(self, event: hikari.MessageCreateEvent) -> DispatchStatus:
        if event.author.is_bot:
            return DispatchStatus.IGNORED

        content = event.content or ""

        if await self._enforce_channel_policies(event, content):
            return DispatchStatus.POLICY_DELETED

        invocation = parse_invocation(content, self.prefix)
        if invocation is None:
            return DispatchStatus.NOT_COMMAND

        command = self.registry.resolve(invocation.command_name)
        if command is None:
            return DispatchStatus.UNKNOWN_COMMAND

        if isinstance(event, hikari.GuildMessageCreateEvent) and not self.permission_resolver.has_permissions(
            event, command.permissions
        ):
            logger.info(
                f"Permission denied: {event.author.username} tried to use {self.prefix}{command.name}"
            )
            return DispatchStatus.PERMISSION_DENIED

        logger.info(f"Prefix command called: {self.prefix}{command.name} by {event.author.username}")

        result = await self._execute(command, event, list(invocation.args))
        await self._render(event, result)

        if result is not None and not result.ok:
            return DispatchStatus.FAILED
        return DispatchStatus.EXECUTED

    async def _enforce_channel_policies(self, event: hikari.MessageCreateEvent, content: str) -> bool:
        for policy in self.policies:
            if policy.channel_id != event.channel_id or not policy.is_violated_by(content):
                continue

            logger.debug(f"Deleting message {event.message_id} in channel {event.channel_id}: policy violation")
            try:
                await self.rest.delete_message(event.channel_id, event.message_id)
            except Exception as e:
                logger.error(f"Failed to delete message {event.message_id}: {e}")
            return True

        return False

    async def _execute(
        self, command: Command, event: hikari.MessageCreateEvent, args: list[str]
    ) -> CommandResult | None:
        try:
            return await command.run(event, args)
        except BackendError as e:
            logger.info(f"Backend rejected {command.name}: {e} (status {e.status})")
            return CommandResult.failure(str(e))
        except TransportError as e:
            logger.warning(f"Transport error in {command.name}: {e}", exc_info=True)
            return CommandResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Error executing prefix command {command.name}: {e}")
            return CommandResult.failure(str(e) or GENERIC_FAILURE)

    async def _render(self, event: hikari.MessageCreateEvent, result: CommandResult | None) -> None:
        if result is None:
            return

        if not result.ok:
            embed = embeds.error(result.message or GENERIC_FAILURE)
        elif result.embed is not None:
            embed = result.embed
        elif result.message:
            embed = embeds.success(result.message)
        else:
            return

        try:
            await self.rest.create_message(event.channel_id, embed=embed)
        except Exception as e:
            logger.error(f"Failed to send reply in channel {event.channel_id}: {e}")
