"""
The entry point for the s3tasks CLI tool, which downloads objects from S3 (compatible) buckets
as described in a build file or on the command line.
"""

import logging
import sys

import typer

from s3tasks.cli_commands.download_cli import download_objects
from s3tasks.cli_commands.run_cli import run_build_file
from s3tasks.cli_commands.user_config_cli import config_app
from s3tasks.cli_commands.utils import report_build_failure
from s3tasks.cli_config import load_cli_env

logger = logging.getLogger(__name__)


app = typer.Typer(
    help="""
    This tool lets you download objects from your S3 bucket(s) either: \n
        - as declared in a YAML build file (s3tasks run). \n
        - directly from the command line (s3tasks download).
    """,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def set_verbosity(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
):
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


app.command("run")(run_build_file)
app.command("download")(download_objects)
app.add_typer(config_app, name="config")


def main():
    logging.basicConfig(level=logging.INFO, handlers=[logging.StreamHandler(sys.stdout)])
    logger.debug("Starting s3tasks CLI application.")
    try:
        load_cli_env()
    except FileNotFoundError as err:
        report_build_failure(err)
        sys.exit(1)
    app()


if __name__ == "__main__":
    main()
