"""Rendering of a javadoc link table for output."""

import csv
import io
import json
import logging
from typing import List, Optional

from constants import OutputFormats
from javadoc.links import JavadocLinks
from javadoc.paths import PathDirector


def render_text(links: JavadocLinks) -> str:
    """One ``identifier<TAB>uri`` line per entry."""
    return "".join(f"{key}\t{uri}\n" for key, uri in links)


def render_json(links: JavadocLinks) -> str:
    return json.dumps(links.as_dict(), ensure_ascii=False, indent=4) + "\n"


def render_csv(links: JavadocLinks) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["ecosystem", "uri"])
    for key, uri in links:
        writer.writerow([key, uri])
    return buffer.getvalue()


def javadoc_options(links: JavadocLinks, director: Optional[PathDirector] = None) -> List[str]:
    """Build javadoc command-line options for the link table.

    Args:
        links: Link table to render.
        director: When given, emit ``-linkoffline URI DIR`` with DIR chosen by
            the director for each identifier; otherwise emit ``-link URI``.

    Returns:
        list: Flat list of javadoc arguments.
    """
    options: List[str] = []
    for key, uri in links:
        if director is None:
            options.extend(["-link", uri])
        else:
            options.extend(["-linkoffline", uri, str(director.determine_path(key))])
    return options


def render_options(links: JavadocLinks, director: Optional[PathDirector] = None) -> str:
    opts = javadoc_options(links, director)
    step = 2 if director is None else 3
    return "".join(" ".join(opts[i:i + step]) + "\n" for i in range(0, len(opts), step))


def render(links: JavadocLinks, output_format: str, director: Optional[PathDirector] = None) -> str:
    """Render ``links`` in one of the OutputFormats."""
    fmt = OutputFormats(output_format)
    if fmt == OutputFormats.JSON:
        return render_json(links)
    if fmt == OutputFormats.CSV:
        return render_csv(links)
    if fmt == OutputFormats.OPTIONS:
        return render_options(links, director)
    return render_text(links)


def write_output(content: str, path: str) -> None:
    """Write rendered output to ``path``.

    Raises:
        OSError: If the file couldn't be written.
    """
    with open(path, "w", encoding="utf-8") as file:
        file.write(content)
    logging.info("Javadoc links have been successfully exported at: %s", path)
