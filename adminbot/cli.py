import logging
from typing import Optional

import typer

from config.settings import get_settings

from .api import AdminAPI
from .commands import build_registry
from .core import AdminBot

app = typer.Typer(
    name="adminbot",
    help="Discord administration bot for the file host backend",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@app.command()
def run(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Run the Discord bot."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    bot = AdminBot(settings)
    bot.run()


@app.command()
def commands() -> None:
    """List the registered commands."""
    settings = get_settings()
    registry = build_registry(AdminAPI(settings.backend_url, settings.api_key), settings)

    for cmd in registry:
        typer.echo(f"{settings.bot_prefix}{cmd.usage}  {cmd.description}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
