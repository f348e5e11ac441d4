"""Argument parsing functionality for javadoclinks."""

import argparse
from constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="javadoclinks",
        description=(
            "javadoclinks - Javadoc link resolver for Java target compatibility versions"
        ),
        add_help=True,
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("-t", "--target-compatibility",
                        dest="TARGET_COMPATIBILITY",
                        help="Java target compatibility version, i.e: 1.8, 9, 11",
                        action="store", type=str)
    source_group.add_argument("-d", "--directory",
                        dest="FROM_SRC",
                        help="Read the target compatibility from the Maven or Gradle project in this directory",
                        action="store", type=str)

    parser.add_argument("-l", "--link",
                        dest="LINKS",
                        help="Additional javadoc link as KEY=URI (can be used multiple times)",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (default: text)",
                        action="store",
                        type=str.lower,
                        default="text",
                        choices=Constants.OUTPUT_FORMATS)
    parser.add_argument("--offline-dir",
                        dest="OFFLINE_DIR",
                        help="Base directory of local package lists; emits -linkoffline options",
                        action="store",
                        type=str)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
