"""Javadoc link resolution."""

from .links import JavadocLinks
from .paths import PackageListPathDirector, PathDirector, to_safe_file_name
from .resolver import UnsupportedVersionError, build_javadoc_links, javase_javadoc_uri

__all__ = [
    "JavadocLinks",
    "PackageListPathDirector",
    "PathDirector",
    "to_safe_file_name",
    "UnsupportedVersionError",
    "build_javadoc_links",
    "javase_javadoc_uri",
]
