from pathlib import Path

PACKAGE_DIR_PATH = Path(__file__).resolve().parent
ENV_FILE_PATH = PACKAGE_DIR_PATH.parent / ".env"
COGS_DIR_PATH = PACKAGE_DIR_PATH / "cogs"
