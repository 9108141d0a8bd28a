"""
Command line interface for downloading from a bucket without writing a build file.
"""

from pathlib import Path
from typing import List

import typer
from rich import print
from typing_extensions import Annotated

from s3tasks.cli_commands.shared_args_options import CONFIG_FILE_OPTION, S3_URL_OPTION
from s3tasks.cli_commands.utils import fail_build_on_error
from s3tasks.config_resolver import resolve_bucket_name
from s3tasks.download import Download
from s3tasks.filesets import FileSet
from s3tasks.services import download_command


def download_objects(
    key: Annotated[str | None, typer.Option("--key", "-k", help="Key of a single object to download.")] = None,
    to_file: Annotated[
        Path | None, typer.Option("--to-file", help="File to write the single object to (only with --key).")
    ] = None,
    to_dir: Annotated[Path | None, typer.Option("--to-dir", help="Directory to download into.")] = None,
    fileset_dir: Annotated[
        str | None,
        typer.Option("--fileset-dir", help="Directory (key prefix) in the bucket to select objects from."),
    ] = None,
    includes: Annotated[
        List[str] | None,
        typer.Option("--include", help="Pattern of objects to download, relative to --fileset-dir. Repeatable."),
    ] = None,
    excludes: Annotated[
        List[str] | None,
        typer.Option("--exclude", help="Pattern of objects to skip, relative to --fileset-dir. Repeatable."),
    ] = None,
    bucket_name: Annotated[
        str | None,
        typer.Option(help="Name of the bucket, if not provided uses the default in your config file."),
    ] = None,
    s3_url: str | None = S3_URL_OPTION,
    config_file: Path = CONFIG_FILE_OPTION,
):
    """
    Download from the bucket by either:
        1. --key and --to-file: one object to an exact file.
        2. --key and --to-dir: one object into a directory, keeping its name.
        3. --fileset-dir and/or --include/--exclude with --to-dir: every matching object into a directory.
    """
    with fail_build_on_error():
        download_op = Download(
            bucket_name=resolve_bucket_name(bucket_name, config_file),
            file=key,
            to_file=to_file,
            to_dir=to_dir,
        )
        if fileset_dir is not None or includes or excludes:
            download_op.add_fileset(FileSet(dir=fileset_dir or "", includes=includes or [], excludes=excludes or []))

        download_command(download=download_op, s3_url=s3_url, config_path=config_file)

    print("[green]BUILD SUCCESSFUL[/green]")
