"""Unit tests for the S3FileManager, with the boto3 client replaced by a MagicMock."""

from unittest.mock import MagicMock, patch

import pytest

from s3tasks.exceptions import CredentialsNotFoundError
from s3tasks.s3_client import S3FileManager, create_s3_file_manager


@pytest.fixture
def mock_boto3_client():
    with patch("s3tasks.s3_client.boto3.client") as mock_client_factory:
        client = MagicMock()
        mock_client_factory.return_value = client
        yield mock_client_factory, client


def test_client_created_with_endpoint_and_credentials(mock_boto3_client):
    mock_client_factory, _ = mock_boto3_client
    S3FileManager(url="http://localhost:9000", access_key="ak", secret_key="sk")

    mock_client_factory.assert_called_once_with(
        "s3",
        endpoint_url="http://localhost:9000",
        aws_access_key_id="ak",
        aws_secret_access_key="sk",
    )


def test_list_keys_pages_through_results(mock_boto3_client):
    _, client = mock_boto3_client
    client.get_paginator.return_value.paginate.return_value = [
        {"Contents": [{"Key": "data/"}, {"Key": "data/x.csv"}]},
        {"Contents": [{"Key": "data/y.csv"}]},
        {},
    ]

    manager = S3FileManager(url=None, access_key="ak", secret_key="sk")
    keys = manager.list_keys(bucket_name="bucket1", prefix="data/")

    assert keys == ["data/", "data/x.csv", "data/y.csv"]
    client.get_paginator.assert_called_once_with("list_objects_v2")
    client.get_paginator.return_value.paginate.assert_called_once_with(Bucket="bucket1", Prefix="data/")


def test_get_object_wraps_response(mock_boto3_client):
    _, client = mock_boto3_client
    body = MagicMock()
    body.read.side_effect = [b"abc", b""]
    client.get_object.return_value = {"ContentLength": 3, "Body": body}

    manager = S3FileManager(url=None, access_key="ak", secret_key="sk")
    s3_object = manager.get_object(bucket_name="bucket1", key="a/b.txt")

    client.get_object.assert_called_once_with(Bucket="bucket1", Key="a/b.txt")
    assert (s3_object.bucket_name, s3_object.key, s3_object.content_length) == ("bucket1", "a/b.txt", 3)
    assert s3_object.read(10) == b"abc"
    s3_object.close()
    body.close.assert_called_once()


def test_create_s3_file_manager_reads_env(mock_boto3_client, monkeypatch):
    mock_client_factory, _ = mock_boto3_client
    monkeypatch.setenv("MY_ACCESS", "ak")
    monkeypatch.setenv("MY_SECRET", "sk")

    create_s3_file_manager(url="http://minio:9000", s3_env_access_key_name="MY_ACCESS", s3_env_secret_key_name="MY_SECRET")

    assert mock_client_factory.call_args.kwargs["aws_access_key_id"] == "ak"
    assert mock_client_factory.call_args.kwargs["aws_secret_access_key"] == "sk"


def test_create_s3_file_manager_without_credentials(monkeypatch):
    monkeypatch.delenv("MY_ACCESS", raising=False)
    monkeypatch.setenv("MY_SECRET", "sk")

    with pytest.raises(CredentialsNotFoundError) as excinfo:
        create_s3_file_manager(url=None, s3_env_access_key_name="MY_ACCESS", s3_env_secret_key_name="MY_SECRET")
    assert "MY_ACCESS" in str(excinfo.value)
