
import discord
from pydantic import ValidationError

from relay.core.bot import Bot
from relay.utils.settings import SettingsManager
from relay.utils.logger import logger


def create_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.guild_reactions = True
    intents.message_content = True
    return intents


def load_settings() -> SettingsManager:
    try:
        return SettingsManager() # type: ignore
    except ValidationError as e:
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "settings"
            logger.error(f'Invalid configuration for "{location}": {error["msg"]}')
        raise SystemExit(1)


def main() -> None:
    settings = load_settings()
    logger.configure(debug_enabled=settings.debug_mode, time_zone=settings.bot_time_zone)

    bot = Bot(
        settings=settings,
        intents=create_intents(),
        help_command=None,
    )

    try:
        logger.info('Bot is starting up...')
        bot.run(settings.discord_token.get_secret_value())
    except KeyboardInterrupt:
        logger.info('Bot is shutting down...')
    finally:
        logger.info('Bot has exited...')


if __name__ == "__main__":
    main()
