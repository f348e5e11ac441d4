"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONFIG_ERROR = 2
    UNSUPPORTED_VERSION = 3


class OutputFormats(Enum):
    """Output formats supported by the program.

    Args:
        Enum (string): Output formats supported by the program.
    """

    TEXT = "text"
    JSON = "json"
    CSV = "csv"
    OPTIONS = "options"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    JAVA_ECOSYSTEM = "java"
    JAVASE_JAVADOC_URL = "https://docs.oracle.com/javase/{major}/docs/api/index.html?"
    JDK11_JAVADOC_URL = "https://download.java.net/java/early_access/jdk11/docs/api/"

    OUTPUT_FORMATS = [fmt.value for fmt in OutputFormats]
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

    POM_XML_FILE = "pom.xml"
    GRADLE_BUILD_FILE = "build.gradle"
    GRADLE_KTS_BUILD_FILE = "build.gradle.kts"
    POM_NAMESPACE = "{http://maven.apache.org/POM/4.0.0}"

    CONFIG_EXTENSIONS = (".yml", ".yaml", ".json")
    ENV_LOG_LEVEL = "JAVADOCLINKS_LOG_LEVEL"
    ENV_TARGET_COMPATIBILITY = "JAVADOCLINKS_TARGET_COMPATIBILITY"
