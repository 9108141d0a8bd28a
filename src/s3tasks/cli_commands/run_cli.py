"""
Command line interface for running the operations declared in a build file.
"""

from pathlib import Path

import typer
from rich import print

from s3tasks.cli_commands.shared_args_options import CONFIG_FILE_OPTION
from s3tasks.cli_commands.utils import fail_build_on_error
from s3tasks.services import run_build_file_command


def run_build_file(
    build_file: Path = typer.Argument(..., help="YAML build file declaring the operations to run."),
    config_file: Path = CONFIG_FILE_OPTION,
):
    """
    Run every operation of a build file, in order.
    All operations are checked before the first one runs, and the first failure stops the build.
    """
    with fail_build_on_error():
        operations_run = run_build_file_command(build_file_path=build_file, config_path=config_file)

    print(f"[green]BUILD SUCCESSFUL[/green] ({operations_run} operation(s) run from '{build_file}')")
