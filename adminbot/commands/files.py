from __future__ import annotations

from collections.abc import Sequence

import hikari

from ..api import AdminAPI
from .base import CommandDescriptor, CommandResult, command
from .users import ADMIN


def setup_file_commands(api: AdminAPI) -> list[CommandDescriptor]:
    @command(
        name="deleteimage",
        description="Delete an uploaded file.",
        usage="deleteimage <filename>",
        permissions=ADMIN,
    )
    async def deleteimage(event: hikari.MessageCreateEvent, args: Sequence[str]) -> CommandResult:
        if not args:
            return CommandResult.failure("Provide a filename.")

        await api.delete_image(args[0])
        return CommandResult.success(f"Deleted `{args[0]}`")

    return [deleteimage]
