import datetime
import sys
from typing import TextIO
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

RESET_CODE = "\033[0m"
TIMESTAMP_CODE = "\033[37;2m"

# level -> (label, ANSI color)
LEVELS: dict[str, tuple[str, str]] = {
    "debug": ("DEBUG", "93"),
    "info": ("INFO", "34;1"),
    "warning": ("WARN", "91"),
    "error": ("CRIT", "91;1"),
}


class ConsoleLogger:
    """Colored one-line-per-record console logger.

    Created unconfigured at import so startup errors can be reported before
    settings exist; ``configure`` applies ``debug_mode`` and ``bot_time_zone``
    once they are loaded.
    """

    def __init__(
        self,
        debug_enabled: bool = False,
        time_zone: ZoneInfo | None = None,
        date_format: str = "%Y-%m-%d %H:%M:%S",
        stream: TextIO | None = None,
    ) -> None:
        self.debug_enabled = debug_enabled
        self.time_zone = time_zone or ZoneInfo("UTC")
        self.date_format = date_format
        self.stream = stream

    def configure(self, *, debug_enabled: bool, time_zone: ZoneInfo | None = None) -> None:
        self.debug_enabled = debug_enabled
        self.time_zone = time_zone or self.time_zone

    def format(self, level: str, message: str | None) -> str:
        label, color = LEVELS[level]
        timestamp = datetime.datetime.now(tz=self.time_zone).strftime(self.date_format)
        return f"{TIMESTAMP_CODE}{timestamp}{RESET_CODE} \033[{color}m{label.ljust(8)}{RESET_CODE} {message}"

    def _write(self, level: str, message: str | None) -> None:
        # sys.stdout is looked up per call so redirected/captured output is honored
        print(self.format(level, message), file=self.stream or sys.stdout)

    def debug(self, message: str | None) -> None:
        if self.debug_enabled:
            self._write("debug", message)

    def info(self, message: str | None) -> None:
        self._write("info", message)

    def warning(self, message: str | None) -> None:
        self._write("warning", message)

    def error(self, message: str | None) -> None:
        self._write("error", message)

    # dump settings under their environment variable names; SecretStr prints masked
    def log_settings(self, settings: BaseSettings) -> None:
        self.info("Loaded configuration...")

        names = {field: field.upper() for field in settings.__class__.model_fields}
        width = max(len(env) for env in names.values())

        for field, env in names.items():
            self.debug(f"- {env.ljust(width)} = {getattr(settings, field)!s}")

    def log_extensions(self, loaded: list[str], failed: dict[str, Exception]) -> None:
        self.debug(f'Loaded "{len(loaded)}" extensions...')

        for ext in loaded:
            self.debug(f'- "{ext}" (success)')

        for ext, e in failed.items():
            self.warning(f'- "{ext}" (failure: {e})')


logger = ConsoleLogger()
