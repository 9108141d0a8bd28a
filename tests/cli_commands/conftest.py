"""
Setup for pytest fixtures for testing the CLI commands.

create_s3_file_manager is patched in all tests to hand out the in memory fake object store,
it is autoused, so it does not need to be specified in each test.
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from s3tasks.s3tasks_cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def patched_s3_file_manager(fake_s3):
    with patch("s3tasks.services.create_s3_file_manager") as mock_create_s3_manager:
        mock_create_s3_manager.return_value = fake_s3
        yield mock_create_s3_manager


@pytest.fixture
def tmp_config_path(tmp_path):
    """
    Fixture to provide a path to where the a configuration can be created.
    """
    return tmp_path / "test_config.yaml"


@pytest.fixture
def user_with_default_bucket(tmp_config_path, CONSTANTS):
    """A user config with two buckets, the one holding the test objects being the default."""
    for command in [
        f"config create --config {tmp_config_path}",
        f"config add-bucket {CONSTANTS['BUCKET']} --s3-url http://localhost:9000 --default --config {tmp_config_path}",
        f"config add-bucket empty-bucket --config {tmp_config_path}",
    ]:
        result = runner.invoke(app, command)
        assert result.exit_code == 0, result.output

    return tmp_config_path
