"""
Settings for the s3tasks CLI.

This module creates a single 'cli_settings' object at module load time that can be imported and used throughout the entire package.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "s3tasks" / "config.yaml"
DEFAULT_ACCESS_KEY_ENV = "S3TASKS_ACCESS_KEY"
DEFAULT_SECRET_KEY_ENV = "S3TASKS_SECRET_KEY"


@dataclass
class S3TasksSettings:
    """
    Settings for the s3tasks CLI.
    NOTE: Do not create an instance of this class yourself,
    import the 'cli_settings' instance created at this module's load time.

    S3_URL of None means the default AWS endpoint is used.
    The use case for changing the env variables is mostly for running against a local MinIO or with pytest.
    """

    CONFIG_PATH: Path = Path(os.getenv("S3TASKS_CONFIG_PATH", DEFAULT_CONFIG_PATH))
    S3_URL: str | None = os.getenv("S3TASKS_S3_URL") or None
    ACCESS_KEY_ENV: str = os.getenv("S3TASKS_ACCESS_KEY_ENV", DEFAULT_ACCESS_KEY_ENV)
    SECRET_KEY_ENV: str = os.getenv("S3TASKS_SECRET_KEY_ENV", DEFAULT_SECRET_KEY_ENV)


cli_settings = S3TasksSettings()


def load_cli_env() -> Path | None:
    """
    Load environment variables (e.g. the S3 credentials) from a .env file.

    If S3TASKS_ENV is set, '.env.<S3TASKS_ENV>' must exist.
    Otherwise '.env' is loaded if there is one, and nothing happens if there isn't.
    Returns the path of the file loaded, if any.
    """
    env_name = os.getenv("S3TASKS_ENV")

    if env_name:
        dotenv_path = Path(f".env.{env_name}")
        if not dotenv_path.exists():
            raise FileNotFoundError(
                f"s3tasks environment file: '{dotenv_path}' not found. Please create it or unset S3TASKS_ENV."
            )
    else:
        dotenv_path = Path(".env")
        if not dotenv_path.exists():
            logger.debug("No .env file found, using the environment as is.")
            return None

    dotenv.load_dotenv(dotenv_path=dotenv_path, override=True)
    # cli_settings was created before the .env file was read
    cli_settings.S3_URL = os.getenv("S3TASKS_S3_URL") or cli_settings.S3_URL
    logger.debug(f"Loaded environment variables from {dotenv_path}")
    return dotenv_path
