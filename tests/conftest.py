import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import httpx
import pytest

# Add the repository root to sys.path so we can import 'relay'
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from relay.models.reaction_event import ReactedEmoji, ReactedMessage, ReactingUser, ReactionEvent
from relay.utils.settings import SettingsManager
from relay.utils.webhook import WebhookClient

WEBHOOK_URL = "https://n8n.example.com/webhook/reactions"

SETTINGS_ENV_VARS = (
    "DISCORD_TOKEN",
    "N8N_WEBHOOK_URL",
    "WEBHOOK_URL",
    "TARGET_GUILD_ID",
    "TARGET_CHANNEL_ID",
    "ALLOWED_EMOJIS",
    "TRIGGER_ON_COUNT",
    "DEBUG_MODE",
    "BOT_TIME_ZONE",
    "BOT_ENABLED_COGS",
    "BOT_DEFINED_COGS",
)


class FakeUser:
    def __init__(self, id: int = 42, name: str = "alice", bot: bool = False) -> None:
        self.id = id
        self.name = name
        self.bot = bot

    def __str__(self) -> str:
        return self.name


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    def _make(**overrides) -> SettingsManager:
        values = {"discord_token": "token", "webhook_url": WEBHOOK_URL}
        values.update(overrides)
        return SettingsManager(_env_file=None, **values)

    return _make


@pytest.fixture
def make_event():
    def _make(
        *,
        emoji_name: str = "✅",
        emoji_id: int | None = None,
        count: int | None = 1,
        guild_id: int | None = 1000,
        channel_id: int = 2000,
        bot: bool = False,
    ) -> ReactionEvent:
        return ReactionEvent(
            user=ReactingUser(id=42, username="alice", tag="alice", bot=bot),
            emoji=ReactedEmoji(name=emoji_name, id=emoji_id, count=count),
            message=ReactedMessage(
                id=3000,
                url=f"https://discord.com/channels/{guild_id}/{channel_id}/3000",
                channel_id=channel_id,
                guild_id=guild_id,
                author_id=77,
                content="Ship it?",
                created_timestamp=1767225600000,
            ),
        )

    return _make


def make_message(*, reactions: list | None = None, guild_id: int | None = 1000, channel_id: int = 2000, content: str = "Ship it?"):
    return SimpleNamespace(
        id=3000,
        jump_url=f"https://discord.com/channels/{guild_id}/{channel_id}/3000",
        channel=SimpleNamespace(id=channel_id),
        guild=SimpleNamespace(id=guild_id) if guild_id is not None else None,
        author=SimpleNamespace(id=77),
        content=content,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        reactions=reactions if reactions is not None else [SimpleNamespace(emoji="✅", count=1)],
    )


def make_raw_payload(*, emoji: discord.PartialEmoji | None = None, member=None, guild_id: int | None = 1000, channel_id: int = 2000):
    return SimpleNamespace(
        user_id=42,
        member=member,
        emoji=emoji or discord.PartialEmoji(name="✅"),
        message_id=3000,
        channel_id=channel_id,
        guild_id=guild_id,
    )


class RecordingWebhook:
    """httpx.MockTransport handler that remembers every request."""

    def __init__(self, status_code: int = 200, text: str = "ok", error: Exception | None = None) -> None:
        self.status_code = status_code
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text)

    def client(self) -> WebhookClient:
        return WebhookClient(WEBHOOK_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(self)))


@pytest.fixture
def recording_webhook():
    return RecordingWebhook()


@pytest.fixture
def make_bot():
    def _make(settings: SettingsManager, webhook: WebhookClient, *, user=None, message=None):
        channel = SimpleNamespace(fetch_message=AsyncMock(return_value=message or make_message()))
        return SimpleNamespace(
            settings=settings,
            webhook=webhook,
            get_user=MagicMock(return_value=user or FakeUser()),
            fetch_user=AsyncMock(return_value=user or FakeUser()),
            get_channel=MagicMock(return_value=channel),
            fetch_channel=AsyncMock(return_value=channel),
            channel=channel,
        )

    return _make
