"""
Custom exceptions for the s3tasks package.

These are raised by lower-level functions/methods which understand the context of the error.
Errors raised by the storage service itself (botocore's ClientError etc...) are not wrapped
and are left to propagate as is.

Note: By adding the `__str__` method to each exception,
we ensure that when you manually raise a specific exception the error message looks good
"""

from pathlib import Path


class S3TasksError(Exception):
    """Base exception for all s3tasks errors."""

    pass


class BuildConfigurationError(S3TasksError):
    """
    Raised when the parameters given to an operation (from a build file or the CLI) are invalid,
    e.g. both 'file' and a fileset were set for the same download.
    """

    def __init__(self, error_message: str):
        super().__init__(error_message)
        self.error_message = error_message

    def __str__(self):
        return self.error_message


class BuildFileError(S3TasksError):
    """Raised when a build file can not be read, is not valid YAML or does not follow the expected schema."""

    def __init__(self, build_file: Path, details: str):
        error_message = f"The build file: '{build_file}' could not be loaded.\n{details}"
        super().__init__(error_message)
        self.build_file = build_file
        self.details = details
        self.error_message = error_message

    def __str__(self):
        return self.error_message


class CredentialsNotFoundError(S3TasksError):
    """
    Raised when the credentials for accessing the object store, which are stored as enviroment variables, are not found.
    """

    def __init__(self, access_key_name: str, secret_key_name: str):
        error_message = (
            "\n"
            "Either your S3 access and/or secret key was not found in your enviroment variables.\n"
            f"Please ensure that the environment variables '{access_key_name}' and '{secret_key_name}' are set.\n"
            "The simplest way to do this is to create a .env file in the directory you run your commands from.\n"
        )
        super().__init__(error_message)
        self.access_key_name = access_key_name
        self.secret_key_name = secret_key_name
        self.error_message = error_message

    def __str__(self):
        return self.error_message
