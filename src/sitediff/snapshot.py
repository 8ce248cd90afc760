#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/snapshot.py
"""Site snapshots and the file-tree collector that produces them.

A :class:`Snapshot` is an immutable mapping from a normalized site path
(``"/blog/index.html"``) to the full text of that file. Snapshots are the only
input the comparison core accepts; :func:`collect_snapshot` builds one from a
directory on disk and fails fast on anything the core cannot handle
(missing directories, unreadable or non-UTF-8 files).
"""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterator, Mapping

from sitediff.exceptions import CollectionError, ValidationError
from sitediff.options import CollectOptions

logger = logging.getLogger(__name__)


class Snapshot(Mapping[str, str]):
    """Immutable mapping of normalized site path to text content.

    Iteration is always in lexicographic path order so that everything
    derived from a snapshot (comparisons, reports) is reproducible.

    Parameters
    ----------
    files : mapping of str to str, optional
        Path to content mapping. Every path must start with ``/``.
    label : str, default = ""
        Human-readable name of the snapshot (e.g. ``"before"``)

    Raises
    ------
    ValidationError
        If a path is not a ``/``-prefixed string or content is not a string

    Examples
    --------
        >>> snap = Snapshot({"/b.html": "b", "/a.html": "a"}, label="before")
        >>> list(snap)
        ['/a.html', '/b.html']

    """

    __slots__ = ("_files", "label")

    def __init__(self, files: Mapping[str, str] | None = None, label: str = "") -> None:
        """Validate and store the files in path order."""
        files = files or {}
        for path, content in files.items():
            if not isinstance(path, str) or not path.startswith("/"):
                raise ValidationError(
                    f"Snapshot paths must be strings starting with '/', got {path!r}",
                    parameter_name="path",
                    parameter_value=path,
                )
            if not isinstance(content, str):
                raise ValidationError(
                    f"Snapshot content for {path} must be str, got {type(content).__name__}",
                    parameter_name="content",
                    parameter_value=type(content).__name__,
                )
        self._files: dict[str, str] = {path: files[path] for path in sorted(files)}
        self.label = label

    def __getitem__(self, path: str) -> str:
        return self._files[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        label = f"{self.label!r}, " if self.label else ""
        return f"Snapshot({label}{len(self)} files)"

    @classmethod
    def coerce(cls, files: Mapping[str, str], label: str = "") -> Snapshot:
        """Return ``files`` unchanged if it is already a Snapshot, else wrap it."""
        if isinstance(files, Snapshot):
            return files
        return cls(files, label=label)


def normalize_path(path: Path, root: Path) -> str:
    """Convert a file path under ``root`` to a ``/``-prefixed posix site path.

    Examples
    --------
        >>> normalize_path(Path("out/blog/index.html"), Path("out"))
        '/blog/index.html'

    """
    return "/" + path.relative_to(root).as_posix()


def is_excluded(filename: str, patterns: tuple[str, ...]) -> bool:
    """Return True if ``filename`` matches any of the exclusion globs."""
    return any(fnmatch.fnmatch(filename, pattern) for pattern in patterns)


def _walk_files(root: Path) -> Iterator[Path]:
    """Yield every file under ``root`` in sorted, depth-first order."""

    def _raise(error: OSError) -> None:
        raise CollectionError(
            f"Failed to read directory: {error.filename}",
            file_path=error.filename,
            original_error=error,
        )

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def _read_text(path: Path) -> str:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CollectionError(f"Failed to read file: {path}", file_path=str(path), original_error=e) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CollectionError(
            f"File is not valid UTF-8 text: {path}",
            file_path=str(path),
            original_error=e,
        ) from e


def collect_snapshot(
    root: str | Path,
    options: CollectOptions | None = None,
    label: str | None = None,
) -> Snapshot:
    """Collect every text file under ``root`` into a snapshot.

    Files whose name matches one of ``options.exclude_patterns`` (binary
    assets such as images) are skipped with a warning. Every other file must
    decode as UTF-8.

    Parameters
    ----------
    root : str or Path
        Directory holding one built variant of the site
    options : CollectOptions, optional
        Collection settings; defaults to :class:`CollectOptions`
    label : str, optional
        Snapshot label, defaults to the directory name

    Returns
    -------
    Snapshot
        Mapping of ``/``-prefixed relative path to file content

    Raises
    ------
    CollectionError
        If ``root`` is missing or not a directory, or any file cannot be
        read or decoded

    """
    options = options or CollectOptions()
    root = Path(root)

    if not root.exists():
        raise CollectionError(f"Site directory does not exist: {root}", file_path=str(root))
    if not root.is_dir():
        raise CollectionError(f"Site path is not a directory: {root}", file_path=str(root))

    files: dict[str, str] = {}
    for file_path in _walk_files(root):
        if file_path.is_dir():
            continue
        if is_excluded(file_path.name, options.exclude_patterns):
            logger.warning("Skipping file: %s", file_path)
            continue

        files[normalize_path(file_path, root)] = _read_text(file_path)

    logger.debug("Collected %d files from %s", len(files), root)
    return Snapshot(files, label=label if label is not None else root.name)
