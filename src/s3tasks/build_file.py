"""
Loading of build files: YAML documents declaring which operations to run.

Example:

    s3_url: http://localhost:9000
    bucket_name: releases
    operations:
      - download:
          file: dist/app-1.0.zip
          to_dir: build/downloads
      - download:
          bucket_name: datasets
          to_dir: build/data
          filesets:
            - dir: data
              includes: "**/*.csv, **/*.json"
              excludes: ["**/tmp/**"]

Relative local paths are resolved against the directory containing the build file.
The schema only checks types and names, the rules between parameters are checked by the operations themselves.
"""

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from s3tasks.download import Download
from s3tasks.exceptions import BuildFileError
from s3tasks.filesets import FileSet


def _split_patterns(value):
    """Ant style: patterns may be given as one string separated by commas and/or spaces."""
    if value is None:
        return []
    if isinstance(value, str):
        return [pattern for pattern in re.split(r"[,\s]+", value) if pattern]
    return value


class FileSetSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dir: str = ""
    includes: list[str] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def split_patterns(cls, value):
        return _split_patterns(value)


class DownloadSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    bucket_name: str | None = None
    file: str | None = None
    to_file: Path | None = None
    to_dir: Path | None = None
    filesets: list[FileSetSchema] = Field(default_factory=list)


class OperationSchema(BaseModel):
    """One entry of 'operations', keyed by the operation's name."""

    model_config = ConfigDict(extra="forbid")

    download: DownloadSchema


class BuildFileSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    s3_url: str | None = None
    bucket_name: str | None = None
    operations: list[OperationSchema] = Field(default_factory=list)


class BuildFile:
    """A parsed build file, with its operations ready to be initialised and executed."""

    def __init__(self, path: Path, schema: BuildFileSchema):
        self.path = path
        self.base_dir = path.resolve().parent
        self.s3_url = schema.s3_url
        self.bucket_name = schema.bucket_name
        self.operations = [self._to_download(operation.download) for operation in schema.operations]

    def _resolve_local_path(self, path: Path | None) -> Path | None:
        if path is None or path.is_absolute():
            return path
        return self.base_dir / path

    def _to_download(self, schema: DownloadSchema) -> Download:
        download = Download(
            bucket_name=schema.bucket_name or self.bucket_name,
            file=schema.file,
            to_file=self._resolve_local_path(schema.to_file),
            to_dir=self._resolve_local_path(schema.to_dir),
        )
        for fileset in schema.filesets:
            download.add_fileset(FileSet(dir=fileset.dir, includes=fileset.includes, excludes=fileset.excludes))
        return download


def load_build_file(path: Path) -> BuildFile:
    """Read and validate a build file, any problem is raised as a BuildFileError."""
    try:
        with open(path, "r") as file:
            contents = yaml.safe_load(file) or {}
    except OSError as err:
        raise BuildFileError(build_file=path, details=str(err)) from err
    except yaml.YAMLError as err:
        raise BuildFileError(build_file=path, details=f"Invalid YAML: {err}") from err

    try:
        schema = BuildFileSchema.model_validate(contents)
    except ValidationError as err:
        raise BuildFileError(build_file=path, details=str(err)) from err

    return BuildFile(path=path, schema=schema)
