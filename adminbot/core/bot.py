import logging

import hikari

from config.settings import BotSettings

from ..api import AdminAPI
from ..commands import CommandRegistry, build_registry
from ..middleware import ErrorHandlerMiddleware, LoggingMiddleware
from ..permissions import PermissionResolver
from .channel_policy import policies_from_settings
from .dispatcher import CommandDispatcher
from .event_router import EventRouter
from .guild_guard import GuildGuard

logger = logging.getLogger(__name__)

INTENTS = (
    hikari.Intents.GUILDS
    | hikari.Intents.GUILD_MEMBERS
    | hikari.Intents.ALL_MESSAGES
    | hikari.Intents.MESSAGE_CONTENT
)


class AdminBot:
    def __init__(self, settings: BotSettings, registry: CommandRegistry | None = None) -> None:
        self.settings = settings
        self.hikari_bot = hikari.GatewayBot(token=settings.discord_token, intents=INTENTS)

        self.api = AdminAPI(settings.backend_url, settings.api_key, timeout=settings.api_timeout)
        self.registry = registry if registry is not None else build_registry(self.api, settings)

        self.dispatcher = CommandDispatcher(
            self.registry,
            self.hikari_bot.rest,
            prefix=settings.bot_prefix,
            policies=policies_from_settings(settings),
            permission_resolver=PermissionResolver(),
        )
        self.guild_guard = GuildGuard(self.hikari_bot.rest, settings.allowed_guild_id, settings.rejection_message)

        self.event_router = EventRouter()
        self.event_router.add_middleware(LoggingMiddleware())
        self.event_router.add_middleware(ErrorHandlerMiddleware())
        self.event_router.register(self.dispatcher)
        self.event_router.register(self.guild_guard)

        self._setup_event_listeners()

    def _setup_event_listeners(self) -> None:
        @self.hikari_bot.listen(hikari.StartedEvent)
        async def on_started(event: hikari.StartedEvent) -> None:
            logger.info(f"Bot is ready! Logged in as {self.hikari_bot.get_me()} with {len(self.registry)} commands")

        @self.hikari_bot.listen(hikari.StoppingEvent)
        async def on_stopping(event: hikari.StoppingEvent) -> None:
            logger.info("Bot is stopping...")
            await self.api.close()

        @self.hikari_bot.listen(hikari.GuildJoinEvent)
        async def on_guild_join(event: hikari.GuildJoinEvent) -> None:
            await self.event_router.emit("guild_join", event)

        @self.hikari_bot.listen(hikari.MessageCreateEvent)
        async def on_message_create(event: hikari.MessageCreateEvent) -> None:
            await self.event_router.emit("message_create", event)

    @property
    def rest(self) -> hikari.api.RESTClient:
        return self.hikari_bot.rest

    def run(self) -> None:
        try:
            logger.info("Starting Discord bot...")
            self.hikari_bot.run()
        except KeyboardInterrupt:
            logger.info("Bot stopped by user")
        except Exception as e:
            logger.error(f"Bot crashed: {e}")
            raise
