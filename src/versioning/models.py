"""Data models for Java versions."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class JavaVersion:
    """A Java release identified by its feature (major) number.

    Legacy ``1.N`` names and plain ``N`` names denote the same release, so
    ordering and equality only look at ``major``.
    """
    major: int

    def __post_init__(self):
        if not isinstance(self.major, int) or isinstance(self.major, bool) or self.major < 1:
            raise ValueError(f"Java major version must be a positive integer, got {self.major!r}")

    @property
    def major_version(self) -> str:
        """Return the major version token, e.g. ``"8"`` for Java 1.8."""
        return str(self.major)

    def is_java11(self) -> bool:
        """Return True if this is exactly Java 11."""
        return self.major == 11

    def __str__(self) -> str:
        if self.major <= 10:
            return f"1.{self.major}"
        return str(self.major)


VERSION_1_5 = JavaVersion(5)
VERSION_1_8 = JavaVersion(8)
VERSION_11 = JavaVersion(11)
