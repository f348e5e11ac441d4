"""javadoclinks - Javadoc link resolver for Java builds

    Resolves the Java SE javadoc base URI for a project's target
    compatibility version and prints it, together with any additional
    links, in a form ready for the javadoc tool.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import (
    ConfigError,
    load_config,
    parse_link_overrides,
    resolve_offline_dir,
    resolve_target_compatibility,
)
from export import render, write_output
from javadoc.links import JavadocLinks
from javadoc.paths import PackageListPathDirector
from javadoc.resolver import UnsupportedVersionError, build_javadoc_links
from project import ProjectConfigError, detect_target_compatibility
from versioning.models import JavaVersion
from versioning.parser import InvalidVersionError, parse_java_version

logger = logging.getLogger(__name__)


def determine_version(args, config) -> JavaVersion:
    """Determine the target compatibility version for this run.

    Args:
        args: Parsed CLI arguments.
        config (LinkConfig): Loaded configuration file.

    Returns:
        JavaVersion: The version to resolve links for.
    """
    try:
        if args.FROM_SRC:
            if not os.path.isdir(args.FROM_SRC):
                logging.error("Project directory not found: %s", args.FROM_SRC)
                sys.exit(ExitCodes.FILE_ERROR.value)
            version = detect_target_compatibility(args.FROM_SRC)
        else:
            raw = resolve_target_compatibility(args, config)
            if raw is not None:
                return parse_java_version(raw)
            version = detect_target_compatibility(os.getcwd())
    except ProjectConfigError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except InvalidVersionError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.CONFIG_ERROR.value)

    if version is None:
        logging.error(
            "No Java target compatibility found. Use --target-compatibility, set %s, "
            "or run against a Maven/Gradle project.",
            Constants.ENV_TARGET_COMPATIBILITY,
        )
        sys.exit(ExitCodes.CONFIG_ERROR.value)
    return version


def build_links(version, config, cli_links) -> JavadocLinks:
    """Build the link table: the Java SE entry, then config links, then CLI links.

    Later sources replace earlier ones for the same identifier.
    """
    try:
        links = build_javadoc_links(version)
    except UnsupportedVersionError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.UNSUPPORTED_VERSION.value)

    try:
        for source in (config.javadoc_links, cli_links):
            for key, uri in source.items():
                if key in links:
                    logging.warning("Overriding javadoc link for '%s' with %s", key, uri)
                links.insert(key, uri)
    except ValueError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.CONFIG_ERROR.value)
    return links


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    try:
        configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    except OSError as e:
        logging.error("Log file couldn't be opened: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        config = load_config(args.CONFIG)
        cli_links = parse_link_overrides(args.LINKS)
    except ConfigError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.CONFIG_ERROR.value)

    version = determine_version(args, config)
    logging.info("Resolving javadoc links for Java %s", version)
    links = build_links(version, config, cli_links)

    offline_dir = resolve_offline_dir(args, config)
    director = PackageListPathDirector(offline_dir) if offline_dir else None
    content = render(links, args.OUTPUT_FORMAT, director)

    if args.OUTPUT:
        try:
            write_output(content, args.OUTPUT)
        except OSError as e:
            logging.error("Output file couldn't be written to disk: %s", e)
            sys.exit(ExitCodes.FILE_ERROR.value)
    else:
        sys.stdout.write(content)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                outcome="success",
                count=len(links),
            )
        )
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
