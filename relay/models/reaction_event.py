from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ReactingUser:
    id: int
    username: str
    tag: str
    bot: bool


@dataclass(slots=True, frozen=True)
class ReactedEmoji:
    name: str
    id: int | None
    count: int | None

    @property
    def key(self) -> str:
        # custom emoji are "name:id", unicode emoji are just the name
        return f"{self.name}:{self.id}" if self.id is not None else self.name


@dataclass(slots=True, frozen=True)
class ReactedMessage:
    id: int
    url: str
    channel_id: int
    guild_id: int | None
    author_id: int | None
    content: str | None
    created_timestamp: int


@dataclass(slots=True, frozen=True)
class ReactionEvent:
    user: ReactingUser
    emoji: ReactedEmoji
    message: ReactedMessage

    @property
    def emoji_key(self) -> str:
        return self.emoji.key
