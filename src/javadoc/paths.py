"""Path directors: objects that decide where something lives on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TypeVar, Union

T_contra = TypeVar("T_contra", contravariant=True)

_SAFE_PUNCTUATION = frozenset("_-.$")


class PathDirector(Protocol[T_contra]):
    """Provides a path based on some inherent characteristics of an object.

    Implementations must never return None and should pass every directory or
    file name they build through ``to_safe_file_name``.
    """

    def determine_path(self, obj: T_contra) -> Path:
        """Determine the path for ``obj``."""
        ...  # pylint: disable=unnecessary-ellipsis


def to_safe_file_name(name: str) -> str:
    """Return ``name`` with every unsafe character escaped.

    ASCII letters, digits and ``_ - . $`` are kept. Anything else becomes
    ``#`` followed by its lowercase hexadecimal code point.
    """
    out = []
    for ch in name:
        if ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9") or ch in _SAFE_PUNCTUATION:
            out.append(ch)
        else:
            out.append(f"#{ord(ch):x}")
    return "".join(out)


class PackageListPathDirector:
    """Directs each ecosystem identifier to its own package-list directory.

    Used for ``javadoc -linkoffline``, where the package list of a link
    target is read from a local directory instead of the URI.
    """

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)

    def determine_path(self, obj: str) -> Path:
        if not obj:
            raise ValueError("Cannot determine a package-list path for an empty identifier")
        return self.base_dir / to_safe_file_name(obj)
