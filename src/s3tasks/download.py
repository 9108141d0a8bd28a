"""
The download operation: copies one object, or every object selected by one or more filesets,
from a bucket to local disk.

Parameters mirror what can be written in a build file:
    bucket_name     required
    file            key of a single object to download
    filesets        filesets selecting several objects (dir + include/exclude patterns)
    to_file         exact local file to write (only with 'file')
    to_dir          local directory to write into

Exactly one of file/filesets and exactly one of to_file/to_dir must be given.
`init()` checks this and parses the parameters into one of three plans,
`execute()` then carries the plan out. Nothing is retried and the first failure stops the operation.
"""

import contextlib
import time
from dataclasses import dataclass, field
from pathlib import Path

from s3tasks.context import OperationContext
from s3tasks.exceptions import BuildConfigurationError
from s3tasks.filesets import S3_PATH_SEPARATOR, FileSet, KeyScanner, s3_safe_directory
from s3tasks.s3_client import S3Object
from s3tasks.transfer_utils import format_file_size, format_speed, format_time

BUFFER_SIZE = 64 * 1024


@dataclass(frozen=True)
class SingleKeyToFile:
    key: str
    to_file: Path


@dataclass(frozen=True)
class SingleKeyToDir:
    key: str
    to_dir: Path


@dataclass(frozen=True)
class FileSetToDir:
    filesets: tuple[FileSet, ...]
    to_dir: Path


DownloadPlan = SingleKeyToFile | SingleKeyToDir | FileSetToDir


@dataclass
class Download:
    bucket_name: str | None = None
    file: str | None = None
    to_file: Path | None = None
    to_dir: Path | None = None
    filesets: list[FileSet] = field(default_factory=list)

    def __post_init__(self):
        self._plan: DownloadPlan | None = None

    def add_fileset(self, fileset: FileSet) -> None:
        self.filesets.append(fileset)

    def init(self) -> DownloadPlan:
        """Verify that the required parameters have been set, and only one of each exclusive pair."""
        if not self.bucket_name:
            raise BuildConfigurationError("bucket_name must be set")
        if self.file and self.filesets:
            raise BuildConfigurationError("Only one of file and fileset may be set")
        if not self.file and not self.filesets:
            raise BuildConfigurationError("At least one of file and fileset must be set")
        if self.to_file is not None and self.to_dir is not None:
            raise BuildConfigurationError("Only one of to_file and to_dir may be set")
        if self.to_file is None and self.to_dir is None:
            raise BuildConfigurationError("At least one of to_file and to_dir must be set")
        if self.filesets and self.to_file is not None:
            raise BuildConfigurationError("to_file cannot be used when specifying a fileset to download")

        if self.file and self.to_file is not None:
            self._plan = SingleKeyToFile(key=self.file, to_file=Path(self.to_file))
        elif self.file:
            self._plan = SingleKeyToDir(key=self.file, to_dir=Path(self.to_dir))
        else:
            self._plan = FileSetToDir(filesets=tuple(self.filesets), to_dir=Path(self.to_dir))
        return self._plan

    def get_operation_bucket(self) -> str:
        if self._plan is None:
            self.init()
        return self.bucket_name

    def execute(self, context: OperationContext) -> None:
        plan = self._plan if self._plan is not None else self.init()

        if isinstance(plan, SingleKeyToFile):
            self._process_file_to_file(context, plan)
        elif isinstance(plan, SingleKeyToDir):
            self._process_file_to_dir(context, plan)
        else:
            self._process_set_to_dir(context, plan)

    def _process_file_to_file(self, context: OperationContext, plan: SingleKeyToFile) -> None:
        self.get_file(context, self.get_operation_bucket(), plan.key, plan.to_file)

    def _process_file_to_dir(self, context: OperationContext, plan: SingleKeyToDir) -> None:
        file_name = plan.key.rsplit(S3_PATH_SEPARATOR, 1)[-1]
        if not file_name:
            raise BuildConfigurationError(
                f"The key '{plan.key}' ends in '{S3_PATH_SEPARATOR}' and does not name a file that can be written to to_dir"
            )
        self.get_file(context, self.get_operation_bucket(), plan.key, plan.to_dir / file_name)

    def _process_set_to_dir(self, context: OperationContext, plan: FileSetToDir) -> None:
        bucket_name = self.get_operation_bucket()
        for fileset in plan.filesets:
            base_dir = s3_safe_directory(fileset.dir)
            scanner = KeyScanner(bucket_name, fileset.merge_patterns(), base_dir)
            for key in scanner.get_qualifying_keys(context.s3):
                # a key such as "data//x" must not turn into an absolute path
                relative_key = key[len(base_dir) :].lstrip(S3_PATH_SEPARATOR)
                self.get_file(context, bucket_name, key, plan.to_dir / relative_key)

    def get_file(self, context: OperationContext, bucket_name: str, key: str, destination: Path) -> None:
        """
        Stream one object to destination, creating parent directories as needed.

        Both streams are always closed. An error while closing is dropped so it can't hide
        whatever went wrong first (or a successful copy).
        """
        destination.parent.mkdir(parents=True, exist_ok=True)

        with contextlib.ExitStack() as stack:
            source = context.s3.get_object(bucket_name=bucket_name, key=key)
            stack.callback(_close_quietly, source)
            out = open(destination, "wb")
            stack.callback(_close_quietly, out)

            self._log_start(context, source, destination)
            start_time = time.perf_counter()
            while chunk := source.read(BUFFER_SIZE):
                out.write(chunk)
            # buffered bytes must be written here, not in the quiet close
            out.flush()
            end_time = time.perf_counter()
            self._log_end(context, source, start_time, end_time)

    def _log_start(self, context: OperationContext, source: S3Object, destination: Path) -> None:
        context.log(
            f"Downloading s3://{source.bucket_name}/{source.key} ({format_file_size(source.content_length)}) "
            f"to {destination.resolve()}"
        )

    def _log_end(self, context: OperationContext, source: S3Object, start_time: float, end_time: float) -> None:
        transfer_time = int((end_time - start_time) * 1000)
        context.log(
            f"Transfer Time: {format_time(transfer_time)} - "
            f"Transfer Rate: {format_speed(source.content_length, transfer_time)}"
        )


def _close_quietly(stream) -> None:
    with contextlib.suppress(Exception):
        stream.close()
