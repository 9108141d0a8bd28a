"""
Top-level pytest configuration for s3tasks.

The object store is replaced by an in memory fake (tests/helpers/fake_s3.py) so no network or MinIO instance is needed.
Fixtures stored here are shared by the unit tests and the CLI command tests.
"""

import logging

import pytest

from s3tasks.cli_config import cli_settings
from s3tasks.context import OperationContext
from tests.helpers.fake_s3 import FakeS3FileManager


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep the developer's own S3TASKS_* environment out of the tests."""
    monkeypatch.setattr(cli_settings, "S3_URL", None)
    monkeypatch.setattr(cli_settings, "ACCESS_KEY_ENV", "S3TASKS_ACCESS_KEY")
    monkeypatch.setattr(cli_settings, "SECRET_KEY_ENV", "S3TASKS_SECRET_KEY")
    monkeypatch.delenv("S3TASKS_ENV", raising=False)


@pytest.fixture
def CONSTANTS():
    return {
        "BUCKET": "bucket1",
        "REPORT_KEY": "a/b/report.txt",
        "REPORT_CONTENT": b"quarterly numbers\n" * 100,
        "DATA_KEYS": {
            "data/x.csv": b"x,1\n",
            "data/y.csv": b"y,2\n",
            "data/sub/": b"",
            "data/sub/z.json": b'{"z": 3}',
            "other/w.csv": b"w,4\n",
        },
    }


@pytest.fixture
def fake_s3(CONSTANTS) -> FakeS3FileManager:
    objects = {CONSTANTS["REPORT_KEY"]: CONSTANTS["REPORT_CONTENT"], **CONSTANTS["DATA_KEYS"]}
    return FakeS3FileManager(buckets={CONSTANTS["BUCKET"]: objects, "empty-bucket": {}})


@pytest.fixture
def context(fake_s3) -> OperationContext:
    return OperationContext(s3=fake_s3, logger=logging.getLogger("s3tasks.build.test"))
