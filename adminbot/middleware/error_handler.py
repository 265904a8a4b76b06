import logging
import traceback
from typing import Any

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Logs the first handler failure recorded on an event context."""

    async def __call__(self, event_context: dict[str, Any], phase: str) -> None:
        if phase != "post":
            return

        error = event_context.get("error")
        if error is None:
            return

        event_name = event_context.get("event_name", "unknown")
        logger.error(f"Error in event {event_name}: {error}")
        logger.error(
            "Traceback: %s",
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        )
