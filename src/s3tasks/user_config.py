"""
Handles the user's configuration file for the s3tasks package.
User configuration is stored in a local file.
By default the config will be stored at: "~/.config/s3tasks/config.yaml"

The config remembers which object store (S3 URL) each bucket lives in and which bucket to use
when a download does not name one.
"""

import warnings
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class BucketConfig:
    """
    Config of a single bucket.

    s3_url of None means the default AWS endpoint.
    """

    name: str
    s3_url: str | None = None


@dataclass
class UserConfig:
    """Overall user configuration"""

    config_path: Path
    buckets: list[BucketConfig] = field(default_factory=list)
    default_bucket: str | None = None

    @property
    def all_bucket_names(self) -> list[str]:
        """List of all bucket names in the user's config"""
        return [bucket.name for bucket in self.buckets]

    def dump_config(self) -> None:
        """
        Dump the user configuration to the specified output path
        Don't include the config_path in the dumped file.
        """
        config_dict = {
            "buckets": [bucket.__dict__ for bucket in self.buckets],
            "default_bucket": self.default_bucket,
        }

        with open(self.config_path, "w") as file:
            yaml.safe_dump(config_dict, file, sort_keys=False)

    def add_bucket(self, name: str, s3_url: str | None, is_default: bool) -> BucketConfig:
        """
        Add a new bucket to the user configuration file.
        A bucket with the same name is replaced.
        """
        new_bucket = BucketConfig(name=name, s3_url=s3_url)

        if new_bucket.name in self.all_bucket_names:
            warnings.warn(
                f"The bucket: '{new_bucket.name}' already existed in your configuration file. It will be replaced with your new params",
                stacklevel=2,
            )
            self.buckets = [bucket for bucket in self.buckets if bucket.name != new_bucket.name]

        self.buckets.append(new_bucket)

        if is_default:
            self.default_bucket = new_bucket.name

        self.dump_config()
        return new_bucket

    def set_default_bucket(self, name: str) -> str:
        """
        Set the default bucket in the user configuration file.
        """
        if name not in self.all_bucket_names:
            raise ValueError(
                f"The bucket name specified: '{name}', was not found in your config file, please add it first."
            )
        self.default_bucket = name
        self.dump_config()
        return self.default_bucket

    def remove_bucket(self, name: str) -> str | None:
        """
        Remove a bucket from the user configuration file.
        Returns the bucket name if it was removed successfully, otherwise None.
        """
        if name not in self.all_bucket_names:
            return None

        self.buckets = [bucket for bucket in self.buckets if bucket.name != name]

        if self.default_bucket == name:
            self.default_bucket = None

        self.dump_config()
        return name

    def bucket_info(self, name: str) -> BucketConfig | None:
        """
        Get the bucket configuration given the bucket name.
        """
        for bucket in self.buckets:
            if bucket.name == name:
                return bucket
        return None


def load_user_config(config_path: Path) -> UserConfig:
    """Helper function to load the user config file"""
    with open(config_path, "r") as file:
        config_contents = yaml.safe_load(file) or {}

    buckets = [BucketConfig(**bucket) for bucket in config_contents.get("buckets") or []]

    return UserConfig(
        config_path=config_path,
        buckets=buckets,
        default_bucket=config_contents.get("default_bucket"),
    )


def create_user_config(config_path: Path) -> None:
    """Create a user configuration file at the specified path."""
    if config_path.exists():
        raise FileExistsError(f"Config file already exists at {config_path}.")
    config_path.parent.mkdir(parents=True, exist_ok=True)

    user_config = UserConfig(config_path=config_path, buckets=[])
    user_config.dump_config()
