"""Minimal success/error embeds used for command replies."""

import hikari

INFO_COLOR = hikari.Color(0x7289DA)
SUCCESS_COLOR = hikari.Color(0x57F287)
ERROR_COLOR = hikari.Color(0xED4245)


def create_embed(
    title: str | None = None,
    description: str | None = None,
    color: hikari.Color = INFO_COLOR,
) -> hikari.Embed:
    return hikari.Embed(title=title, description=description, color=color)


def success(message: str) -> hikari.Embed:
    return create_embed(title="✅ Success", description=message, color=SUCCESS_COLOR)


def error(message: str) -> hikari.Embed:
    return create_embed(title="❌ Error", description=message, color=ERROR_COLOR)
