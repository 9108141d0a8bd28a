from pathlib import Path

import pytest

from s3tasks.config_resolver import resolve_bucket_name, resolve_s3_url
from s3tasks.user_config import create_user_config, load_user_config


@pytest.fixture
def config_path(tmp_path) -> Path:
    path = tmp_path / "s3tasks" / "config.yaml"
    create_user_config(path)
    return path


def test_load_user_config_fails_if_no_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_user_config(config_path=tmp_path / "non_existent_config.yaml")


def test_create_user_config_twice_fails(config_path):
    with pytest.raises(FileExistsError):
        create_user_config(config_path)


def test_add_set_default_and_remove_bucket(config_path):
    config = load_user_config(config_path)
    config.add_bucket(name="bucket1", s3_url="http://localhost:9000", is_default=False)
    config.add_bucket(name="bucket2", s3_url=None, is_default=True)

    reloaded = load_user_config(config_path)
    assert reloaded.all_bucket_names == ["bucket1", "bucket2"]
    assert reloaded.default_bucket == "bucket2"
    assert reloaded.bucket_info("bucket1").s3_url == "http://localhost:9000"

    reloaded.set_default_bucket("bucket1")
    assert reloaded.remove_bucket("bucket1") == "bucket1"
    assert reloaded.remove_bucket("bucket1") is None

    final = load_user_config(config_path)
    assert final.all_bucket_names == ["bucket2"]
    assert final.default_bucket is None


def test_adding_existing_bucket_replaces_it(config_path):
    config = load_user_config(config_path)
    config.add_bucket(name="bucket1", s3_url="http://old:9000", is_default=False)
    with pytest.warns(UserWarning):
        config.add_bucket(name="bucket1", s3_url="http://new:9000", is_default=False)

    assert [b.s3_url for b in load_user_config(config_path).buckets] == ["http://new:9000"]


def test_set_default_to_unknown_bucket_fails(config_path):
    with pytest.raises(ValueError):
        load_user_config(config_path).set_default_bucket("nope")


def test_resolve_bucket_name(config_path, tmp_path):
    load_user_config(config_path).add_bucket(name="bucket1", s3_url=None, is_default=True)

    assert resolve_bucket_name("explicit", config_path) == "explicit"
    assert resolve_bucket_name(None, config_path) == "bucket1"
    assert resolve_bucket_name(None, tmp_path / "missing.yaml") is None


def test_resolve_s3_url(config_path, tmp_path):
    load_user_config(config_path).add_bucket(name="bucket1", s3_url="http://minio:9000", is_default=False)
    load_user_config(config_path).add_bucket(name="aws-bucket", s3_url=None, is_default=False)

    assert resolve_s3_url("http://explicit:9000", "bucket1", config_path) == "http://explicit:9000"
    assert resolve_s3_url(None, "bucket1", config_path) == "http://minio:9000"
    assert resolve_s3_url(None, "aws-bucket", config_path) is None
    assert resolve_s3_url(None, "bucket1", tmp_path / "missing.yaml") is None
