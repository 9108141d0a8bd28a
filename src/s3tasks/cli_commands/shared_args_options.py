"""
To avoid potential problems with circular imports, we can put shared typer args + options (etc...) here

If you have something that is only used in one of the cli subcommands, don't move it here.
"""

import typer

from s3tasks.cli_config import cli_settings

CONFIG_FILE_OPTION = typer.Option(
    cli_settings.CONFIG_PATH,
    "--config",
    "-c",
    help="Path to your user configuration file. By default it is stored at ~/.config/s3tasks/config.yaml.",
)

S3_URL_OPTION = typer.Option(
    None,
    "--s3-url",
    help="URL of the S3 compatible object store. If not provided uses the URL stored for the bucket in your config, or AWS.",
    show_default=False,
)
