import contextlib
import logging

import typer
from botocore.exceptions import BotoCoreError, ClientError
from rich.console import Console
from rich.markup import escape

from s3tasks.exceptions import S3TasksError

logger = logging.getLogger(__name__)

BUILD_FAILURES = (S3TasksError, ClientError, BotoCoreError, OSError)

# error messages hold paths and keys, they should not be wrapped to the terminal width
error_console = Console(soft_wrap=True)


@contextlib.contextmanager
def fail_build_on_error():
    """
    Turn any error from an operation into a 'BUILD FAILED' message and exit code 1.

    The full traceback is only logged at debug level.
    """
    try:
        yield
    except BUILD_FAILURES as err:
        report_build_failure(err)
        raise typer.Exit(code=1) from err


def report_build_failure(err: Exception) -> None:
    logger.debug("Build failed", exc_info=err)
    error_console.print(f"[red]BUILD FAILED[/red]: {escape(str(err))}")
