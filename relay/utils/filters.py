from collections.abc import Sequence

from relay.models.reaction_event import ReactionEvent
from relay.utils.settings import SettingsManager


def emoji_is_allowed(allowed: Sequence[str], event: ReactionEvent) -> bool:
    """Empty allow-list lets everything through.

    Entries may be unicode emoji ("✅") or custom emoji keys ("party:123").
    The bare display name is checked as well, so "party" also admits
    every custom emoji named "party".
    """
    if not allowed:
        return True

    return event.emoji_key in allowed or event.emoji.name in allowed


def get_rejection_reason(settings: SettingsManager, event: ReactionEvent) -> str | None:
    """Return why the event is filtered out, or None when it should be relayed."""
    if settings.target_guild_id is not None and event.message.guild_id != settings.target_guild_id:
        return f"guild {event.message.guild_id} is not target guild {settings.target_guild_id}"

    if settings.target_channel_id is not None and event.message.channel_id != settings.target_channel_id:
        return f"channel {event.message.channel_id} is not target channel {settings.target_channel_id}"

    if not emoji_is_allowed(settings.allowed_emojis, event):
        return f"emoji '{event.emoji_key}' is not in the allow-list"

    if settings.trigger_on_count is not None and event.emoji.count != settings.trigger_on_count:
        return f"reaction count {event.emoji.count} does not equal trigger count {settings.trigger_on_count}"

    return None
