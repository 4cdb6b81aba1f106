from pathlib import Path
from typing import Annotated
from zoneinfo import ZoneInfo

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from relay import ENV_FILE_PATH, COGS_DIR_PATH


class SettingsManager(BaseSettings):
    discord_token: SecretStr = Field()
    webhook_url: str = Field(
        validation_alias=AliasChoices("n8n_webhook_url", "webhook_url"),
    )
    target_guild_id: int | None = Field(default=None)
    target_channel_id: int | None = Field(default=None)
    allowed_emojis: Annotated[tuple[str, ...], NoDecode] = Field(default_factory=tuple)
    trigger_on_count: int | None = Field(default=None)
    debug_mode: bool = Field(default=False)
    bot_time_zone: ZoneInfo = Field(default=ZoneInfo("UTC"))
    bot_defined_cogs: list[str] = sorted([
        f"relay.cogs.{p.name}"
        for p in Path(COGS_DIR_PATH).iterdir()
        if p.is_dir() and (p / "__init__.py").exists()
    ])
    bot_enabled_cogs: list[str] = Field(default_factory=lambda: ["relay.cogs.reaction_relay"])

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("bot_enabled_cogs")
    @classmethod
    def enabled_cogs_must_exist(cls, enabled: list[str], info):
        defined: set[str] = set(info.data.get("bot_defined_cogs", []))
        invalid: set[str] = set([c for c in enabled if c not in defined])

        if invalid:
            raise ValueError(
                f"Unknown cogs in bot_enabled_cogs: {', '.join(sorted(invalid))}. "
                f"Available cogs: {', '.join(sorted(defined))}"
            )

        return sorted(enabled)

    @field_validator("discord_token", mode="before")
    @classmethod
    def discord_token_must_not_be_empty(cls, v):
        if isinstance(v, str) and v.strip() == "":
            raise ValueError("discord_token cannot be empty")

        return v

    @field_validator("webhook_url", mode="before")
    @classmethod
    def webhook_url_must_be_http(cls, v):
        if not isinstance(v, str) or v.strip() == "":
            raise ValueError("webhook_url cannot be empty")

        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"webhook_url must be an http(s) URL, got {v!r}")

        return v

    @field_validator(
        "target_guild_id",
        "target_channel_id",
        "trigger_on_count",
        mode="before",
    )
    @classmethod
    def empty_str_to_none(cls, v):
        if v is None:
            return None
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    # "1️⃣,2️⃣, ✅,party:123" -> ("1️⃣", "2️⃣", "✅", "party:123")
    @field_validator("allowed_emojis", mode="before")
    @classmethod
    def parse_allowed_emojis_csv(cls, v):
        if v is None or v == "":
            return ()

        if isinstance(v, str):
            v = v.split(",")

        if not isinstance(v, (list, tuple, set)):
            raise TypeError(f"allowed_emojis must be a comma-separated string (or list), got {type(v).__name__}")

        return tuple(str(item).strip() for item in v if str(item).strip())

    @field_validator("bot_time_zone", mode="before")
    @classmethod
    def normalize_bot_time_zone(cls, v):
        return ZoneInfo(v) if isinstance(v, str) else v
