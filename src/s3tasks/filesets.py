"""
Filesets select objects in a bucket the way an Ant <fileset> selects files on disk:
a base directory (which for a bucket is a key prefix) plus include/exclude glob patterns.

Pattern language:
    *   matches zero or more characters inside a single path segment
    ?   matches exactly one character inside a single path segment
    **  matches zero or more whole path segments
A pattern ending in '/' is treated as if it ended in '/**'.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache

from s3tasks.s3_client import S3FileManager

logger = logging.getLogger(__name__)

S3_PATH_SEPARATOR = "/"
MATCH_EVERYTHING = "**"


def s3_safe_directory(directory: str) -> str:
    """
    Convert a directory path into the key prefix it represents in the bucket.

    Separators are forced to '/', leading './' and '/' are removed and a trailing '/' is added,
    so 'data', './data' and 'data\\' all become 'data/'. The bucket root becomes ''.
    """
    prefix = directory.replace("\\", S3_PATH_SEPARATOR)
    while prefix.startswith("./"):
        prefix = prefix[2:]
    prefix = prefix.lstrip(S3_PATH_SEPARATOR)
    if prefix in ("", "."):
        return ""
    if not prefix.endswith(S3_PATH_SEPARATOR):
        prefix += S3_PATH_SEPARATOR
    return prefix


def _segment_to_regex(segment: str) -> str:
    regex = ""
    for char in segment:
        if char == "*":
            regex += "[^/]*"
        elif char == "?":
            regex += "[^/]"
        else:
            regex += re.escape(char)
    return regex


@lru_cache(maxsize=256)
def pattern_to_regex(pattern: str) -> re.Pattern:
    """Compile an Ant style pattern into a regex that must match the whole relative key."""
    pattern = pattern.replace("\\", S3_PATH_SEPARATOR).lstrip(S3_PATH_SEPARATOR)
    if pattern.endswith(S3_PATH_SEPARATOR):
        pattern += MATCH_EVERYTHING

    segments = pattern.split(S3_PATH_SEPARATOR)
    regex = ""
    for i, segment in enumerate(segments):
        is_last = i == len(segments) - 1
        if segment == MATCH_EVERYTHING:
            regex += ".*" if is_last else "(?:[^/]+/)*"
        else:
            regex += _segment_to_regex(segment)
            if not is_last:
                regex += "/"
    return re.compile(regex)


def matches_pattern(relative_key: str, pattern: str) -> bool:
    return pattern_to_regex(pattern).fullmatch(relative_key) is not None


@dataclass(frozen=True)
class PatternSet:
    """Include/exclude patterns ready for matching. No includes at all means include everything."""

    includes: tuple[str, ...] = (MATCH_EVERYTHING,)
    excludes: tuple[str, ...] = ()

    def is_selected(self, relative_key: str) -> bool:
        if not any(matches_pattern(relative_key, pattern) for pattern in self.includes):
            return False
        return not any(matches_pattern(relative_key, pattern) for pattern in self.excludes)


@dataclass
class FileSet:
    """A base directory in the bucket plus include/exclude patterns relative to it."""

    dir: str = ""
    includes: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)

    def merge_patterns(self) -> PatternSet:
        includes = tuple(pattern for pattern in self.includes if pattern) or (MATCH_EVERYTHING,)
        excludes = tuple(pattern for pattern in self.excludes if pattern)
        return PatternSet(includes=includes, excludes=excludes)


class KeyScanner:
    """
    Expands a fileset against the live listing of a bucket.

    base_dir must already be in the form returned by s3_safe_directory.
    """

    def __init__(self, bucket_name: str, patterns: PatternSet, base_dir: str):
        self.bucket_name = bucket_name
        self.patterns = patterns
        self.base_dir = base_dir

    def get_qualifying_keys(self, s3: S3FileManager) -> list[str]:
        """
        Return the keys under base_dir selected by the patterns, in listing order.

        Keys ending in '/' are zero byte "directory" placeholders and are never returned.
        """
        qualifying_keys = []
        for key in s3.list_keys(bucket_name=self.bucket_name, prefix=self.base_dir):
            if key.endswith(S3_PATH_SEPARATOR):
                continue
            if self.patterns.is_selected(key[len(self.base_dir) :]):
                qualifying_keys.append(key)

        logger.debug(
            f"{len(qualifying_keys)} key(s) selected under 's3://{self.bucket_name}/{self.base_dir}' "
            f"with includes={list(self.patterns.includes)} excludes={list(self.patterns.excludes)}"
        )
        return qualifying_keys
