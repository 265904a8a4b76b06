from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class BotSettings(BaseSettings):
    discord_token: str = Field(..., description="Discord bot token")

    # Backend API
    backend_url: str = Field(..., description="Base URL of the administrative backend")
    api_key: SecretStr = Field(..., description="Credential sent in the Authorization header")
    api_timeout: float = Field(default=15.0, description="Total timeout for one backend request, in seconds")

    bot_prefix: str = Field(default=",", description="Command prefix")
    log_level: str = Field(default="INFO", description="Logging level")

    # Guild allow-list
    allowed_guild_id: int = Field(default=797483366634750063, description="The only guild the bot may stay in")
    rejection_message: str = Field(
        default="Bruh this aint dny", description="Posted to unauthorized guilds before leaving"
    )

    # Channel policies
    suggestions_channel_id: int | None = Field(
        default=799622023323975741, description="Channel where every message must be a suggestion"
    )
    suggestions_required_prefix: str = Field(default=",suggest", description="Required start of suggestions")
    word_channel_id: int | None = Field(
        default=804812690329174058, description="Channel where only one word may be posted"
    )
    word_channel_word: str = Field(default="wawa", description="The only word allowed in the word channel")

    # Reply formatting
    profile_base_url: str = Field(default="https://clippy.gg/u/", description="Prefix for user profile links")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> BotSettings:
    """Load settings once from the environment."""
    return BotSettings()
