from discord.ext import commands

from relay.utils.logger import logger
from relay.utils.settings import SettingsManager
from relay.utils.webhook import WebhookClient


class Bot(commands.Bot):
    def __init__(self, *args, settings: SettingsManager, webhook: WebhookClient | None = None, **kwargs):
        kwargs.setdefault("command_prefix", "__disabled__")
        super().__init__(*args, **kwargs)
        self.settings = settings
        self.webhook = webhook

    async def setup_hook(self) -> None:
        logger.debug('Running setup hook...')

        logger.log_settings(self.settings)

        if self.webhook is None:
            logger.info('Creating webhook client...')
            self.webhook = WebhookClient(self.settings.webhook_url)

        logger.info('Loading extensions...')
        if not self.settings.bot_enabled_cogs:
            logger.error(
                'No extensions to load! Enable one in your .env file.')

        loaded: list[str] = []
        failed: dict[str, Exception] = {}
        for ext in self.settings.bot_enabled_cogs:
            try:
                await self.load_extension(ext)
                loaded.append(ext)
            except Exception as e:
                failed[ext] = e

        logger.log_extensions(loaded, failed)

    async def on_ready(self) -> None:
        logger.debug('Running on-ready hook...')

        if not self.user:
            raise Exception("Bot user information is None.")

        logger.info(
            f'User "{self.user}" with ID "{self.user.id}" is logged in and ready.'
        )

    async def close(self) -> None:
        logger.debug('Closing Discord connection...')
        await super().close()

        if self.webhook is None:
            return

        try:
            logger.debug('Closing webhook client...')
            await self.webhook.close()
        except Exception as e:
            logger.warning(f'Error closing webhook client: {e}')
