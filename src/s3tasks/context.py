"""
What an operation gets from the build it runs in: a storage manager and somewhere to log.
"""

import logging
from dataclasses import dataclass, field

from s3tasks.s3_client import S3FileManager

BUILD_LOGGER_NAME = "s3tasks.build"


@dataclass
class OperationContext:
    """Shared by every operation of one build run."""

    s3: S3FileManager
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(BUILD_LOGGER_NAME))

    def log(self, message: str, level: int = logging.INFO) -> None:
        self.logger.log(level, message)
