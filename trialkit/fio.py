"""Reading delimited lists and resolving file names."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import TextIO

from trialkit.stringset import StringSet

log = logging.getLogger(__name__)


def open_writer(fname: str) -> TextIO:
    """Open ``fname`` for writing, creating or truncating it."""
    return open(fname, "w", encoding="utf-8")


def _lines(fname: str) -> Iterator[str]:
    """Yield the lines of ``fname`` without line endings; nothing if it cannot be opened."""
    try:
        handle = open(fname, encoding="utf-8", newline="")
    except OSError as err:
        log.warning("%s: %s", fname, err)
        return
    with handle:
        for line in handle:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            yield line


def _pair(line: str, delim: str, fname: str, line_no: int) -> tuple[str, str]:
    values = line.split(delim)
    if len(values) < 2:
        raise ValueError(f"{fname}: line {line_no} has no delimiter {delim!r}: {line!r}")
    return values[0].strip(), values[1].strip()


def load_list(fname: str, delim: str) -> list[str]:
    """Return the non-empty first fields of the lines of ``fname``."""
    items = []
    line_count = 0
    for line_count, line in enumerate(_lines(fname), 1):
        value = line.split(delim)[0].strip()
        if value:
            items.append(value)
    log.info("%s: %d, entities: %d", fname, line_count, len(items))
    return items


def load_set(fname: str, delim: str) -> StringSet:
    """Return the set of non-empty first fields of the lines of ``fname``."""
    items = StringSet()
    line_count = 0
    for line_count, line in enumerate(_lines(fname), 1):
        value = line.split(delim)[0].strip()
        if value:
            items.add(value)
    log.info("%s: %d, entities: %d", fname, line_count, len(items))
    return items


def load_map(fname: str, delim: str) -> dict[str, str]:
    """Map the first field of each line to its second field."""
    mapping = {}
    line_count = 0
    for line_count, line in enumerate(_lines(fname), 1):
        key, value = _pair(line, delim, fname, line_count)
        mapping[key] = value
    log.info("%s: %d", fname, line_count)
    return mapping


def load_tuples(fname: str, delim: str) -> list[tuple[str, str]]:
    """Return the first two fields of each line as pairs."""
    pairs = []
    line_count = 0
    for line_count, line in enumerate(_lines(fname), 1):
        pairs.append(_pair(line, delim, fname, line_count))
    log.info("%s: %d", fname, line_count)
    return pairs


def files(spec: str) -> list[str]:
    """Expand ``dir/a; b; c`` into ``dir/a``, ``dir/b`` and ``dir/c``."""
    i = spec.rfind("/") + 1
    path = spec[:i].strip(" ")
    return [path + name.strip() for name in spec[i:].split(";")]


def read_fnames(path: str) -> list[str]:
    """Resolve ``path`` to file names: a ';' list, a directory's files, or itself."""
    if ";" in path:
        return files(path)
    if not os.path.isdir(path):
        os.stat(path)
        return [path]
    with os.scandir(path) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if (entry.is_file(follow_symlinks=False) or entry.is_symlink())
            and entry.name
            and not entry.name.startswith(".")
        )
    return [path + "/" + name for name in names]