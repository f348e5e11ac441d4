"""Project configuration provider: where a build declares its Java target."""

import logging
import os
from typing import Optional

from constants import Constants
from versioning.models import JavaVersion
from versioning.parser import parse_java_version

from . import gradle, maven
from .errors import ProjectConfigError

__all__ = ["ProjectConfigError", "detect_target_compatibility"]

_READERS = (
    (Constants.POM_XML_FILE, maven.read_target_compatibility),
    (Constants.GRADLE_KTS_BUILD_FILE, gradle.read_target_compatibility),
    (Constants.GRADLE_BUILD_FILE, gradle.read_target_compatibility),
)


def detect_target_compatibility(dir_name) -> Optional[JavaVersion]:
    """Detect the Java target compatibility of the project in ``dir_name``.

    Build files are tried in order: pom.xml, build.gradle.kts, build.gradle.
    The first one that declares a version wins.

    Args:
        dir_name (str | Path): Project directory.

    Returns:
        JavaVersion, or None if no build file declares a version.

    Raises:
        ProjectConfigError: If a build file cannot be read or parsed.
        InvalidVersionError: If the declared version is not a Java version.
    """
    for file_name, reader in _READERS:
        path = os.path.join(dir_name, file_name)
        if not os.path.isfile(path):
            continue
        raw = reader(path)
        if raw is not None:
            logging.info("Java target compatibility %s read from %s", raw, path)
            return parse_java_version(raw)
    logging.debug("No Java target compatibility declared in %s", dir_name)
    return None
