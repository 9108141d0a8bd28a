"""
Service layer between the CLI commands and the operations.

Each command builds the operation(s), validates all of them, and only then runs them in order.
Errors are not caught here, the CLI decides how to report them.
"""

import logging
from pathlib import Path

from s3tasks.build_file import load_build_file
from s3tasks.config_resolver import resolve_s3_url
from s3tasks.context import OperationContext
from s3tasks.download import Download
from s3tasks.s3_client import S3FileManager, create_s3_file_manager

logger = logging.getLogger(__name__)


class _ManagerCache:
    """One S3FileManager per object store URL for the duration of a command."""

    def __init__(self):
        self._managers: dict[str | None, S3FileManager] = {}

    def get(self, url: str | None) -> S3FileManager:
        if url not in self._managers:
            self._managers[url] = create_s3_file_manager(url=url)
        return self._managers[url]


def download_command(download: Download, s3_url: str | None, config_path: Path) -> None:
    """Run a single download operation."""
    download.init()
    url = resolve_s3_url(s3_url=s3_url, bucket_name=download.bucket_name, config_path=config_path)
    context = OperationContext(s3=create_s3_file_manager(url=url))
    download.execute(context)


def run_build_file_command(build_file_path: Path, config_path: Path) -> int:
    """
    Run every operation of a build file, returns how many were run.

    All operations are validated up front so a mistake in the last one does not leave
    the earlier ones half done.
    """
    build_file = load_build_file(build_file_path)
    for operation in build_file.operations:
        operation.init()

    managers = _ManagerCache()
    for number, operation in enumerate(build_file.operations, start=1):
        url = resolve_s3_url(
            s3_url=build_file.s3_url,
            bucket_name=operation.get_operation_bucket(),
            config_path=config_path,
        )
        logger.debug(f"Running operation {number}/{len(build_file.operations)} of '{build_file_path}'")
        operation.execute(OperationContext(s3=managers.get(url)))

    return len(build_file.operations)
