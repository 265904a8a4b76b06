import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class EventHandler(Protocol):
    name: str

    async def run(self, *args: Any, **kwargs: Any) -> Any: ...


class EventRouter:
    """Routes named platform events to their handlers.

    Middleware is called as ``middleware(event_context, phase)`` with phase
    ``"pre"`` before the handlers and ``"post"`` after them. A middleware that
    returns ``False`` in the pre phase stops the event.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable]] = {}
        self._middleware: list[Callable] = []

    def add_middleware(self, middleware: Callable) -> None:
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {type(middleware).__name__}")

    def register(self, handler: EventHandler) -> None:
        self.add_listener(handler.name, handler.run)

    def add_listener(self, event_name: str, callback: Callable) -> None:
        if event_name not in self._listeners:
            self._listeners[event_name] = []
        self._listeners[event_name].append(callback)
        logger.debug(f"Added listener for {event_name}: {_callable_name(callback)}")

    def remove_listener(self, event_name: str, callback: Callable) -> None:
        if event_name in self._listeners:
            try:
                self._listeners[event_name].remove(callback)
                logger.debug(f"Removed listener for {event_name}: {_callable_name(callback)}")
            except ValueError:
                logger.warning(f"Listener {_callable_name(callback)} not found for {event_name}")

    async def emit(self, event_name: str, *args: Any, **kwargs: Any) -> None:
        listeners = self.get_listeners(event_name)
        if not listeners:
            return

        event_context: dict[str, Any] = {
            "event_name": event_name,
            "args": args,
            "kwargs": kwargs,
            "stopped": False,
        }

        for middleware in self._middleware:
            try:
                result = await self._call_maybe_async(middleware, event_context, "pre")
                if result is False or event_context.get("stopped"):
                    logger.debug(f"Event {event_name} stopped by middleware")
                    return
            except Exception as e:
                logger.error(f"Error in middleware {type(middleware).__name__}: {e}")

        results = await asyncio.gather(
            *(self._call_maybe_async(listener, *args, **kwargs) for listener in listeners),
            return_exceptions=True,
        )
        for listener, result in zip(listeners, results):
            if isinstance(result, Exception):
                logger.error(f"Error in listener {_callable_name(listener)} for {event_name}: {result}")
                event_context.setdefault("error", result)

        for middleware in self._middleware:
            try:
                await self._call_maybe_async(middleware, event_context, "post")
            except Exception as e:
                logger.error(f"Error in middleware {type(middleware).__name__} (post): {e}")

    async def _call_maybe_async(self, func: Callable, *args: Any, **kwargs: Any) -> Any:
        result = func(*args, **kwargs)
        if asyncio.iscoroutine(result):
            return await result
        return result

    def get_listeners(self, event_name: str) -> list[Callable]:
        return self._listeners.get(event_name, []).copy()

    def get_all_events(self) -> list[str]:
        return list(self._listeners.keys())


def _callable_name(func: Callable) -> str:
    return getattr(func, "__qualname__", None) or type(func).__name__
