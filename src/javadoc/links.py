"""Javadoc link table."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple
from urllib.parse import urlparse


class JavadocLinks:
    """Mapping of ecosystem identifiers to javadoc base URIs.

    The table is handed to its caller by value and has a single owner. Entries
    can be added or replaced with ``insert`` but never removed.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._links: Dict[str, str] = {}
        for key, uri in (entries or {}).items():
            self.insert(key, uri)

    def get(self, key: str) -> Optional[str]:
        """Return the base URI for ``key`` or None."""
        return self._links.get(key)

    def insert(self, key: str, uri: str) -> None:
        """Add or replace the base URI for ``key``.

        Raises:
            ValueError: If the key is empty or the URI is not absolute.
        """
        if not isinstance(key, str) or not key.strip():
            raise ValueError("Javadoc link key must be a non-empty string")
        parsed = urlparse(uri) if isinstance(uri, str) else None
        if parsed is None or not parsed.scheme or not (parsed.netloc or parsed.path):
            raise ValueError(f"Javadoc link for '{key}' must be an absolute URI, got {uri!r}")
        self._links[key.strip()] = uri

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the table."""
        return dict(self._links)

    def __contains__(self, key: object) -> bool:
        return key in self._links

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._links.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavadocLinks):
            return NotImplemented
        return self._links == other._links

    def __repr__(self) -> str:
        return f"JavadocLinks({self._links!r})"
