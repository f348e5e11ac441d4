"""Java version model and parsing."""

from .models import JavaVersion, VERSION_1_5, VERSION_1_8, VERSION_11
from .parser import InvalidVersionError, parse_java_version, to_version

__all__ = [
    "JavaVersion",
    "VERSION_1_5",
    "VERSION_1_8",
    "VERSION_11",
    "InvalidVersionError",
    "parse_java_version",
    "to_version",
]
