"""
An S3FileManager object that provides the two storage calls the operations need:
listing the keys under a prefix and opening an object for streaming.
"""

import os
from dataclasses import dataclass
from typing import Any

import boto3

from s3tasks.cli_config import cli_settings
from s3tasks.exceptions import CredentialsNotFoundError


@dataclass
class S3Object:
    """
    An object opened for reading.

    body is botocore's StreamingBody (or anything with read(amt) and close()).
    """

    bucket_name: str
    key: str
    content_length: int
    body: Any

    def read(self, amt: int) -> bytes:
        return self.body.read(amt)

    def close(self) -> None:
        self.body.close()


class S3FileManager:
    def __init__(self, url: str | None, access_key: str, secret_key: str):
        self.s3_client = boto3.client(
            "s3",
            endpoint_url=url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
        )

    def list_keys(self, bucket_name: str, prefix: str = "") -> list[str]:
        """
        Return all keys in the bucket starting with prefix, in the order the store lists them.
        """
        keys = []
        paginator = self.s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name, Prefix=prefix):
            for obj in page.get("Contents", []):
                keys.append(obj["Key"])
        return keys

    def get_object(self, bucket_name: str, key: str) -> S3Object:
        """
        Open an object for streaming. The caller is responsible for closing it.

        Errors from the service (missing key, access denied etc...) are not caught here.
        """
        response = self.s3_client.get_object(Bucket=bucket_name, Key=key)
        return S3Object(
            bucket_name=bucket_name,
            key=key,
            content_length=response["ContentLength"],
            body=response["Body"],
        )


def create_s3_file_manager(
    url: str | None,
    s3_env_access_key_name: str | None = None,
    s3_env_secret_key_name: str | None = None,
) -> S3FileManager:
    """
    Creates an S3FileManager instance using credentials from environment variables
    """
    s3_env_access_key_name = s3_env_access_key_name or cli_settings.ACCESS_KEY_ENV
    s3_env_secret_key_name = s3_env_secret_key_name or cli_settings.SECRET_KEY_ENV

    access_key = os.getenv(s3_env_access_key_name)
    secret_key = os.getenv(s3_env_secret_key_name)

    if not access_key or not secret_key:
        raise CredentialsNotFoundError(access_key_name=s3_env_access_key_name, secret_key_name=s3_env_secret_key_name)

    return S3FileManager(
        url=url,
        access_key=access_key,
        secret_key=secret_key,
    )
