from .bot import AdminBot
from .dispatcher import CommandDispatcher, DispatchStatus
from .event_router import EventRouter
from .guild_guard import GuildGuard

__all__ = ["AdminBot", "CommandDispatcher", "DispatchStatus", "EventRouter", "GuildGuard"]
