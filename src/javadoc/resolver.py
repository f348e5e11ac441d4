"""Resolution of the Java SE javadoc link for a target compatibility version."""

from __future__ import annotations

import logging
from typing import Union

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import JavaVersion, VERSION_1_5, VERSION_11
from versioning.parser import to_version

from .links import JavadocLinks

logger = logging.getLogger(__name__)


class UnsupportedVersionError(ValueError):
    """Raised when no javadoc URI is known for a Java version."""

    def __init__(self, version: JavaVersion):
        self.version = version
        super().__init__(f"Unable to get javadoc URI for unsupported java version: {version}")


def javase_javadoc_uri(version: JavaVersion) -> str:
    """Return the Java SE javadoc base URI for ``version``.

    Java 1.5 up to 10 use the docs.oracle.com layout, Java 11 uses the
    early-access location. Anything else has no known location.

    Raises:
        UnsupportedVersionError: For versions below 1.5 or above 11.
    """
    if VERSION_1_5 <= version < VERSION_11:
        return Constants.JAVASE_JAVADOC_URL.format(major=version.major_version)
    if version.is_java11():
        return Constants.JDK11_JAVADOC_URL
    raise UnsupportedVersionError(version)


def build_javadoc_links(version: Union[JavaVersion, str, int, float]) -> JavadocLinks:
    """Build a link table holding the Java SE entry for ``version``.

    Args:
        version: Target compatibility version, or anything ``to_version`` accepts.

    Returns:
        A new JavadocLinks owned by the caller, containing only the "java" entry.

    Raises:
        InvalidVersionError: If ``version`` cannot be parsed.
        UnsupportedVersionError: If no javadoc URI is known for the version.
    """
    java_version = to_version(version)
    uri = javase_javadoc_uri(java_version)
    if is_debug_enabled(logger):
        logger.debug(
            "Resolved Java SE javadoc link",
            extra=extra_context(
                event="decision",
                component="resolver",
                action="build_javadoc_links",
                java_version=str(java_version),
                target=uri,
            ),
        )
    links = JavadocLinks()
    links.insert(Constants.JAVA_ECOSYSTEM, uri)
    return links
