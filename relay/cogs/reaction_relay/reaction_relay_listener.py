import discord
from discord.ext import commands

from relay.core.bot import Bot
from relay.utils.logger import logger
from relay.models.webhook_payload import WebhookPayload
from relay.utils.filters import get_rejection_reason
from relay.utils.resolve import build_reaction_event, resolve_message, resolve_user


class ReactionRelayListener(commands.Cog):
    def __init__(self, bot: Bot) -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent) -> None:
        try:
            await self.relay_reaction(payload)
        except Exception as e:
            logger.error(
                f"Reaction handler error on message {payload.message_id} "
                f"in channel {payload.channel_id}: {e!r}"
            )

    async def relay_reaction(self, payload: discord.RawReactionActionEvent) -> bool:
        user = await resolve_user(self.bot, payload)
        if user.bot:
            logger.debug(f"Ignoring reaction from bot user {user.id}.")
            return False

        message = await resolve_message(self.bot, payload)
        event = build_reaction_event(payload, user, message)

        reason = get_rejection_reason(self.bot.settings, event)
        if reason is not None:
            logger.debug(f"Ignoring reaction on message {event.message.id}: {reason}.")
            return False

        if self.bot.webhook is None:
            raise RuntimeError("Webhook client is not initialized.")

        return await self.bot.webhook.post(WebhookPayload.from_event(event))
