from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from relay.models.reaction_event import ReactionEvent


def _str_or_none(value: int | None) -> str | None:
    return str(value) if value is not None else None


def iso_timestamp(moment: datetime | None = None) -> str:
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True, frozen=True)
class WebhookPayload:
    event: ReactionEvent
    timestamp: str
    event_type: str = "reaction_add"

    @classmethod
    def from_event(cls, event: ReactionEvent, *, now: datetime | None = None) -> "WebhookPayload":
        return cls(event=event, timestamp=iso_timestamp(now))

    def to_dict(self) -> dict[str, Any]:
        emoji = self.event.emoji
        user = self.event.user
        message = self.event.message

        return {
            "event": self.event_type,
            "emoji": {
                "key": emoji.key,
                "name": emoji.name,
                "id": _str_or_none(emoji.id),
            },
            "reactionCount": emoji.count,
            "user": {
                "id": str(user.id),
                "username": user.username,
                "tag": user.tag,
            },
            "message": {
                "id": str(message.id),
                "url": message.url,
                "channelId": str(message.channel_id),
                "guildId": _str_or_none(message.guild_id),
                "authorId": _str_or_none(message.author_id),
                "content": message.content,
                "createdTimestamp": message.created_timestamp,
            },
            "timestamp": self.timestamp,
        }
