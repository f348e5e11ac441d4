"""Errors raised while reading project build files."""


class ProjectConfigError(Exception):
    """Raised when a project build file exists but cannot be read."""
