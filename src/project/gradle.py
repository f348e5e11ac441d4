"""Gradle build script scanning for the Java target compatibility."""
import logging
import re
from typing import List, Optional

from versioning.parser import InvalidVersionError, parse_java_version

from .errors import ProjectConfigError

# String literals are matched first so a "//" inside quotes is not taken for a comment
_COMMENT_OR_STRING = re.compile(
    r"('(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\")|/\*.*?\*/|//[^\n]*",
    re.DOTALL,
)
_TOOLCHAIN = re.compile(r"JavaLanguageVersion\.of\(\s*(['\"]?)(\d+)\1\s*\)")


def _assignment_pattern(key: str) -> re.Pattern:
    # targetCompatibility = '1.8' | targetCompatibility 1.8 | targetCompatibility.set(JavaVersion.VERSION_11)
    # | targetCompatibility = JavaVersion.toVersion("11")
    return re.compile(
        rf"\b{key}[ \t]*(?:=|\.set\()?[ \t]*(?:JavaVersion\.toVersion\([ \t]*)?(['\"]?)([\w.]+)\1"
    )


_TARGET = _assignment_pattern("targetCompatibility")
_SOURCE = _assignment_pattern("sourceCompatibility")


def _strip_comments(script: str) -> str:
    """Remove // and /* */ comments, leaving string literals untouched."""
    return _COMMENT_OR_STRING.sub(lambda m: m.group(1) or " ", script)


def _first_valid(candidates: List[str], build_file) -> Optional[str]:
    for raw in candidates:
        try:
            parse_java_version(raw)
        except InvalidVersionError:
            logging.debug("Ignoring non-version value %r in %s", raw, build_file)
            continue
        return raw
    return None


def read_target_compatibility(build_file) -> Optional[str]:
    """Read the Java target version from a build.gradle or build.gradle.kts file.

    ``targetCompatibility`` wins over ``sourceCompatibility``, which wins over
    a toolchain ``JavaLanguageVersion.of(N)``. When a property is assigned
    more than once the last assignment counts.

    Args:
        build_file (str | Path): Path to the build script.

    Returns:
        str: Raw version string, or None if the script declares none.

    Raises:
        ProjectConfigError: If the file cannot be read.
    """
    try:
        with open(build_file, encoding="utf-8") as file:
            script = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectConfigError(f"Couldn't read {build_file}: {e}") from e

    script = _strip_comments(script)

    for pattern in (_TARGET, _SOURCE):
        values = [m.group(2) for m in pattern.finditer(script)]
        value = _first_valid(list(reversed(values)), build_file)
        if value is not None:
            logging.debug("Found Java target %s in %s", value, build_file)
            return value

    toolchain = [m.group(2) for m in _TOOLCHAIN.finditer(script)]
    if toolchain:
        return toolchain[-1]
    return None
