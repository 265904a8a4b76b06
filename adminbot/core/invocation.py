from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Invocation:
    """One parsed attempt to run a command."""

    raw_content: str
    prefix: str
    command_name: str
    args: tuple[str, ...]


def parse_invocation(content: str | None, prefix: str) -> Invocation | None:
    """Split ``content`` into a command name and arguments.

    Returns ``None`` when the content does not start with ``prefix`` or
    nothing follows it.
    """
    if not content or not content.startswith(prefix):
        return None

    parts = content[len(prefix):].split()
    if not parts:
        return None

    return Invocation(
        raw_content=content,
        prefix=prefix,
        command_name=parts[0].lower(),
        args=tuple(parts[1:]),
    )
