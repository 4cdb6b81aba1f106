from relay.core.bot import Bot
from relay.cogs.reaction_relay.reaction_relay_listener import ReactionRelayListener


async def setup(bot: Bot) -> None:
    await bot.add_cog(ReactionRelayListener(bot))
