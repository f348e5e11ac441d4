"""Parsing utilities for Java version values.

Accepts the spellings build files use for a target compatibility version:
legacy ``1.N`` names, plain feature numbers, full runtime versions such as
``1.8.0_202`` or ``11.0.2+9`` and Gradle ``JavaVersion`` constant names.
"""

import re
from typing import Union

from .models import JavaVersion

_VERSION_RE = re.compile(r"^(\d+)(?:\.(\d+))?(?P<rest>[._+\-][0-9A-Za-z._+\-]*)?$")
_CONSTANT_RE = re.compile(r"^(?:JavaVersion\.)?VERSION_(\d+)(?:_(\d+))?$")


class InvalidVersionError(ValueError):
    """Raised when a value cannot be interpreted as a Java version."""


def _from_components(first: str, second: str, raw: object) -> JavaVersion:
    major = int(first)
    if major == 1 and second:
        major = int(second)
    if major < 1:
        raise InvalidVersionError(f"Invalid Java version: {raw!r}")
    return JavaVersion(major)


def parse_java_version(raw: str) -> JavaVersion:
    """Parse a version string into a JavaVersion.

    Args:
        raw: Version string, e.g. "1.8", "8", "1.8.0_202", "VERSION_11".

    Returns:
        JavaVersion for the release.

    Raises:
        InvalidVersionError: If the string is not a Java version.
    """
    s = raw.strip().strip("'\"").strip()
    constant = _CONSTANT_RE.match(s)
    if constant:
        return _from_components(constant.group(1), constant.group(2), raw)

    m = _VERSION_RE.match(s)
    if not m:
        raise InvalidVersionError(f"Invalid Java version: {raw!r}")
    first, second = m.group(1), m.group(2)
    # "1.x" style names need a numeric second component
    if first == "1" and second is None and m.group("rest"):
        raise InvalidVersionError(f"Invalid Java version: {raw!r}")
    return _from_components(first, second, raw)


def to_version(value: Union[JavaVersion, str, int, float]) -> JavaVersion:
    """Convert a JavaVersion, string, int or float into a JavaVersion."""
    if isinstance(value, JavaVersion):
        return value
    if isinstance(value, bool):
        raise InvalidVersionError(f"Invalid Java version: {value!r}")
    if isinstance(value, int):
        if value < 1:
            raise InvalidVersionError(f"Invalid Java version: {value!r}")
        return JavaVersion(value)
    if isinstance(value, (float, str)):
        return parse_java_version(str(value))
    raise InvalidVersionError(f"Invalid Java version: {value!r}")
