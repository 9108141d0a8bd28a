"""
Fill in what a command left out (bucket, S3 URL) from the user config and the CLI settings.
"""

import logging
from pathlib import Path

from s3tasks.cli_config import cli_settings
from s3tasks.user_config import UserConfig, load_user_config

logger = logging.getLogger(__name__)


def _load_user_config_if_exists(config_path: Path) -> UserConfig | None:
    if not config_path.exists():
        logger.debug(f"No user config file at '{config_path}', nothing to fall back on.")
        return None
    return load_user_config(config_path)


def resolve_bucket_name(bucket_name: str | None, config_path: Path) -> str | None:
    """
    Falls back to the default bucket in the user config if not explicitly provided.

    Returns None when neither is set, the download operation itself reports the missing bucket.
    """
    if bucket_name:
        return bucket_name
    config = _load_user_config_if_exists(config_path)
    if config is None:
        return None
    return config.default_bucket


def resolve_s3_url(s3_url: str | None, bucket_name: str | None, config_path: Path) -> str | None:
    """
    Priority given to the `s3_url` argument, then the URL stored for the bucket in the user config,
    then S3TASKS_S3_URL. None means the default AWS endpoint.
    """
    if s3_url:
        return s3_url

    if bucket_name:
        config = _load_user_config_if_exists(config_path)
        bucket = config.bucket_info(bucket_name) if config else None
        if bucket and bucket.s3_url:
            return bucket.s3_url

    return cli_settings.S3_URL
