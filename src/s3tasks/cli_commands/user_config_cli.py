"""
config subcommand for the s3tasks CLI.

Controls the user config file stored at "~/.config/s3tasks/config.yaml" (unless specified otherwise).
"""

from pathlib import Path

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from s3tasks.cli_commands.shared_args_options import CONFIG_FILE_OPTION
from s3tasks.user_config import create_user_config, load_user_config

config_app = typer.Typer(help="Manage your user configuration file for the s3tasks CLI.", no_args_is_help=True)


@config_app.command("create")
def create_user_config_command(
    config_file: Path = CONFIG_FILE_OPTION,
):
    """Create a user configuration file."""
    create_user_config(config_path=config_file)
    print(f"User configuration file created at {config_file.resolve()}.")


@config_app.command("add-bucket")
def add_bucket_command(
    name: str = typer.Argument(..., help="Name of the storage bucket to add to the user configuration file."),
    s3_url: str | None = typer.Option(
        None, help="S3 object store URL the bucket lives in. Leave out for AWS.", show_default=False
    ),
    make_default: bool = typer.Option(
        False,
        "--default",
        "-d",
        help="Set the bucket as the default bucket in the user configuration file.",
    ),
    config_file: Path = CONFIG_FILE_OPTION,
):
    """Add a storage bucket to the user configuration file."""
    config = load_user_config(config_file)
    bucket = config.add_bucket(name=name, s3_url=s3_url, is_default=make_default)

    print(f"Bucket: '{bucket.name}' added to your config file located at {config_file.resolve()}.")
    print(f"S3 URL: {bucket.s3_url or 'AWS default'} was set for this bucket.")

    if make_default:
        print(f"Bucket '{bucket.name}' is now set as your default bucket")
    else:
        print(f"To make '{bucket.name}' your default bucket you can run: 's3tasks config set-default {bucket.name}'")


@config_app.command("remove-bucket")
def remove_bucket_command(
    name: str = typer.Argument(..., help="Name of the storage bucket to remove from the user configuration file."),
    config_file: Path = CONFIG_FILE_OPTION,
):
    """Remove a storage bucket from the user configuration file."""
    config = load_user_config(config_file)
    removed_bucket = config.remove_bucket(name)

    if not removed_bucket:
        print(f"The bucket '{name}' was not found in your config file located at {config_file.resolve()}.")
    else:
        print(f"The bucket '{removed_bucket}' was removed from your config.")


@config_app.command("set-default")
def set_default_bucket_command(
    name: str = typer.Argument(..., help="Name of the storage bucket to use when a command does not name one."),
    config_file: Path = CONFIG_FILE_OPTION,
):
    """Set the default bucket to use."""
    config = load_user_config(config_file)
    default_bucket_name = config.set_default_bucket(name=name)
    print(f"Default bucket is now set to '{default_bucket_name}'.")


@config_app.command("show")
def show_user_config(
    config_file: Path = CONFIG_FILE_OPTION,
):
    """Pretty print the contents of your current config file."""
    config = load_user_config(config_file)
    console = Console()

    if not config.buckets:
        console.print("[bold]No buckets defined in your user config file.[/bold]")
        console.print("You can add a bucket using the command: 's3tasks config add-bucket <bucket_name>'")
        return

    table = Table(title=f"Your s3tasks user configuration file's contents located at: '{config_file}'")
    table.add_column("Bucket Name", style="cyan")
    table.add_column("S3 URL", style="green")
    table.add_column("Is default", style="yellow")

    for bucket in config.buckets:
        is_default = "Yes" if bucket.name == config.default_bucket else ""
        table.add_row(bucket.name, bucket.s3_url or "AWS default", is_default)
    console.print(table)
