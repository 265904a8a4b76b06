"""Content rules for channels that only accept one kind of message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config.settings import BotSettings


class ChannelPolicy(Protocol):
    channel_id: int

    def is_violated_by(self, content: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class RequiredPrefixPolicy:
    """Every message must start with ``prefix`` (case-sensitive)."""

    channel_id: int
    prefix: str

    def is_violated_by(self, content: str) -> bool:
        return not content.startswith(self.prefix)


@dataclass(frozen=True, slots=True)
class ExactWordPolicy:
    """Every message must be exactly ``word``, ignoring case."""

    channel_id: int
    word: str

    def is_violated_by(self, content: str) -> bool:
        return content.lower() != self.word.lower()


def policies_from_settings(settings: BotSettings) -> list[ChannelPolicy]:
    policies: list[ChannelPolicy] = []
    if settings.suggestions_channel_id is not None:
        policies.append(RequiredPrefixPolicy(settings.suggestions_channel_id, settings.suggestions_required_prefix))
    if settings.word_channel_id is not None:
        policies.append(ExactWordPolicy(settings.word_channel_id, settings.word_channel_word))
    return policies
