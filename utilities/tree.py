"""
tree.py

Lists a directory tree and prints one line per entry, depth first,
a directory's own line before its children.

Unreadable directories are skipped: the walk logs the failure and carries on
with the remaining siblings, so a permission error deep in the tree never
aborts the output printed so far.
"""

import enum
import os
import sys
from dataclasses import dataclass, replace

from utilities.formatting import format_line
from utilities.logging import setup_logging

logger = setup_logging(__name__)


class TraversalMode(enum.Enum):
    BOUNDED = "bounded"
    LEAF = "leaf"


class TraversalError(Exception):
    """Base class for errors raised while walking a tree."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path


class NotADirectory(TraversalError):
    def __init__(self, path):
        super().__init__(path, f"{path} is not a directory")


class EnumerationFailure(TraversalError):
    def __init__(self, path, cause: OSError):
        super().__init__(path, f"cannot list {path}: {cause}")
        self.cause = cause


@dataclass(frozen=True)
class TraversalRequest:
    path: str
    remaining_depth: int = 1
    indent_level: int = 0
    mode: TraversalMode = TraversalMode.BOUNDED
    hide_dotfiles: bool = True

    def __post_init__(self):
        if self.remaining_depth < 0:
            raise ValueError(f"remaining_depth must be >= 0, got {self.remaining_depth}")
        if self.indent_level < 0:
            raise ValueError(f"indent_level must be >= 0, got {self.indent_level}")

    @classmethod
    def bounded(cls, path, depth: int, hide_dotfiles: bool = True) -> "TraversalRequest":
        return cls(path=path, remaining_depth=depth, mode=TraversalMode.BOUNDED, hide_dotfiles=hide_dotfiles)

    @classmethod
    def to_leaves(cls, path, hide_dotfiles: bool = True) -> "TraversalRequest":
        # remaining_depth is never consulted in leaf mode; 1 keeps it non-zero
        return cls(path=path, remaining_depth=1, mode=TraversalMode.LEAF, hide_dotfiles=hide_dotfiles)

    @property
    def leaf_mode(self) -> bool:
        return self.mode is TraversalMode.LEAF

    @property
    def exhausted(self) -> bool:
        return not self.leaf_mode and self.remaining_depth == 0

    def descend(self, path) -> "TraversalRequest":
        """Return the request for a subdirectory one level down."""
        depth = self.remaining_depth if self.leaf_mode else self.remaining_depth - 1
        return replace(self, path=path, remaining_depth=depth, indent_level=self.indent_level + 1)


def list_entries(path, hide_dotfiles: bool) -> list:
    """Return the entries of *path* in filesystem order, dotfiles filtered out if asked.

    Raises EnumerationFailure when the directory cannot be read.
    """
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise EnumerationFailure(path, e) from e

    if hide_dotfiles:
        entries = [e for e in entries if not e.name.startswith(".")]
    return entries


def display_name(name: str) -> str:
    """Undo surrogate escapes so names that are not valid UTF-8 print with U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _open_level(request: TraversalRequest):
    """Return (request, total, enumerate(entries)) for one directory, or None when nothing gets listed."""
    if request.exhausted:
        return None

    try:
        entries = list_entries(request.path, request.hide_dotfiles)
    except EnumerationFailure as e:
        logger.debug(f"skipping {e.path}: {e.cause}")
        return None
    return request, len(entries), enumerate(entries)


def visit(request: TraversalRequest, out=None, color: bool = False) -> None:
    """Print the tree below request.path to *out* (default: stdout).

    Raises NotADirectory if request.path (or a subdirectory about to be
    entered) is not a directory. Directories that cannot be listed are
    skipped. The walk keeps its own stack of open levels, so depth is
    bounded by the filesystem and not by the interpreter's recursion limit.
    """
    if out is None:
        out = sys.stdout

    if not os.path.isdir(request.path):
        raise NotADirectory(request.path)

    level = _open_level(request)
    pending = [level] if level else []
    while pending:
        current, total, rows = pending[-1]
        row = next(rows, None)
        if row is None:
            pending.pop()
            continue

        index, entry = row
        is_dir = _is_dir(entry)
        print(
            format_line(display_name(entry.name), current.indent_level, index, total, is_dir, current.leaf_mode, color=color),
            file=out,
        )

        if is_dir:
            child = current.descend(entry.path)
            if not os.path.isdir(child.path):
                raise NotADirectory(child.path)
            level = _open_level(child)
            if level:
                pending.append(level)
