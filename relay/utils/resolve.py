import discord

from relay.models.reaction_event import ReactedEmoji, ReactedMessage, ReactingUser, ReactionEvent


async def resolve_user(
    bot: discord.Client,
    payload: discord.RawReactionActionEvent,
) -> discord.User | discord.Member:
    if payload.member is not None:
        return payload.member

    user = bot.get_user(payload.user_id)
    if user:
        return user

    return await bot.fetch_user(payload.user_id)


async def resolve_message(
    bot: discord.Client,
    payload: discord.RawReactionActionEvent,
) -> discord.Message:
    """Always fetch the message, even if cached, so reaction counts are current."""
    channel = bot.get_channel(payload.channel_id)
    if channel is None:
        channel = await bot.fetch_channel(payload.channel_id)

    return await channel.fetch_message(payload.message_id) # type: ignore


def same_emoji(reaction_emoji: discord.Emoji | discord.PartialEmoji | str, emoji: discord.PartialEmoji) -> bool:
    if emoji.id is not None:
        return getattr(reaction_emoji, "id", None) == emoji.id

    if isinstance(reaction_emoji, str):
        return reaction_emoji == emoji.name

    return getattr(reaction_emoji, "id", None) is None and getattr(reaction_emoji, "name", None) == emoji.name


def find_reaction_count(message: discord.Message, emoji: discord.PartialEmoji) -> int | None:
    for reaction in message.reactions:
        if same_emoji(reaction.emoji, emoji):
            return reaction.count

    return None


def build_reaction_event(
    payload: discord.RawReactionActionEvent,
    user: discord.User | discord.Member,
    message: discord.Message,
) -> ReactionEvent:
    return ReactionEvent(
        user=ReactingUser(
            id=user.id,
            username=user.name,
            tag=str(user),
            bot=user.bot,
        ),
        emoji=ReactedEmoji(
            name=payload.emoji.name or "",
            id=payload.emoji.id,
            count=find_reaction_count(message, payload.emoji),
        ),
        message=ReactedMessage(
            id=message.id,
            url=message.jump_url,
            channel_id=message.channel.id,
            guild_id=message.guild.id if message.guild is not None else payload.guild_id,
            author_id=message.author.id if message.author else None,
            content=message.content or None,
            created_timestamp=int(message.created_at.timestamp() * 1000),
        ),
    )
