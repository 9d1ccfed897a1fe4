"""Index (staging area) implementation.

The index is a line-oriented file, one entry per line:

    <mode> <sha1> <entry type> <path>

It is loaded into an ordered mapping, changed in memory and written back
through a temporary file that is renamed over the old index.
"""

import contextlib
import fcntl
import logging
import os
import tempfile
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from .errors import CorruptIndexError, UnsupportedPathError
from .hash import is_object_id

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o100644
EXECUTABLE_MODE = 0o100755
DEFAULT_ENTRY_TYPE = 0

ADDED = 'added'
UPDATED = 'updated'
UNCHANGED = 'unchanged'

PathLike = Union[str, Path]


def check_path(path: str) -> None:
    """
    Reject a path that would not survive a write and read of the index.

    Raises:
        UnsupportedPathError: If path is empty, contains a line break or
        has leading or trailing whitespace
    """
    if not path:
        raise UnsupportedPathError("cannot stage an empty path")
    if '\n' in path or '\r' in path:
        raise UnsupportedPathError(f"cannot stage {path!r}: line breaks are not supported in paths")
    if path != path.strip():
        raise UnsupportedPathError(
            f"cannot stage {path!r}: leading or trailing whitespace is not supported in paths"
        )


@dataclass
class IndexEntry:
    """
    Represents a single entry in the index.

    Maps a repository-relative path to the identifier of its staged
    content, along with its file mode and entry type.
    """
    mode: int           # File mode/permissions
    sha1: str           # Identifier of staged content
    entry_type: int     # Entry type (0 for a regular tracked file)
    path: str           # Path relative to repository root, '/' separated

    def to_line(self) -> str:
        """Render entry as an index line (without newline)."""
        return f"{self.mode:o} {self.sha1} {self.entry_type} {self.path}"

    @classmethod
    def parse(cls, line: str, lineno: int = 0) -> 'IndexEntry':
        """
        Parse an index line.

        Args:
            line: Line without trailing newline
            lineno: Line number, for error reporting

        Returns:
            IndexEntry: Parsed entry

        Raises:
            CorruptIndexError: If the line is malformed
        """
        fields = line.split(None, 3)
        if len(fields) != 4:
            raise CorruptIndexError(lineno, line, f"expected 4 fields, got {len(fields)}")

        mode_str, sha1, type_str, path = fields

        try:
            mode = int(mode_str, 8)
        except ValueError:
            raise CorruptIndexError(lineno, line, f"invalid mode {mode_str!r}") from None

        if not is_object_id(sha1):
            raise CorruptIndexError(lineno, line, f"invalid object id {sha1!r}")

        try:
            entry_type = int(type_str)
        except ValueError:
            raise CorruptIndexError(lineno, line, f"invalid entry type {type_str!r}") from None

        return cls(mode=mode, sha1=sha1, entry_type=entry_type, path=path)

    def __repr__(self) -> str:
        """String representation."""
        return f"IndexEntry({self.mode:o} {self.sha1[:7]} {self.entry_type} {self.path})"


class Index:
    """
    ggit index (staging area) implementation.

    Entries are kept in file order, at most one per path. Staging a new
    path appends it; staging a known path replaces its entry in place.
    """

    def __init__(self):
        """Initialize empty index."""
        self.entries: 'OrderedDict[str, IndexEntry]' = OrderedDict()

    def upsert(
        self,
        path: str,
        sha1: str,
        mode: int = DEFAULT_MODE,
        entry_type: int = DEFAULT_ENTRY_TYPE
    ) -> str:
        """
        Add or update the entry for path.

        Args:
            path: File path relative to repository root
            sha1: Identifier of the staged content
            mode: File mode/permissions
            entry_type: Entry type

        Returns:
            str: 'added', 'updated' or 'unchanged'

        Raises:
            UnsupportedPathError: If path cannot be stored in the index
        """
        check_path(path)
        entry = IndexEntry(mode=mode, sha1=sha1, entry_type=entry_type, path=path)
        existing = self.entries.get(path)

        if existing is None:
            self.entries[path] = entry
            return ADDED

        if existing == entry:
            return UNCHANGED

        # Assigning to an existing key keeps its position
        self.entries[path] = entry
        return UPDATED

    def get_entry(self, path: str) -> Optional[IndexEntry]:
        """Get entry by path."""
        return self.entries.get(path)

    def read(self, index_path: PathLike) -> None:
        """
        Read index from disk, replacing the in-memory entries.

        A missing index file yields an empty index.

        Raises:
            CorruptIndexError: If any line is malformed
        """
        self.entries.clear()
        index_path = Path(index_path)

        if not index_path.exists():
            return

        content = index_path.read_text(encoding='utf-8')
        for lineno, line in enumerate(content.splitlines(), start=1):
            if not line.strip():
                continue

            entry = IndexEntry.parse(line, lineno)
            if entry.path in self.entries:
                raise CorruptIndexError(lineno, line, f"duplicate path {entry.path!r}")
            self.entries[entry.path] = entry

    def write(self, index_path: PathLike) -> None:
        """
        Write index to disk atomically.

        Entries go to a temporary file in the index's directory, which is
        then renamed over the index. Until the rename the previous index
        stays intact, and the temporary file is removed on failure.

        Args:
            index_path: Path to index file
        """
        index_path = Path(index_path)
        content = ''.join(entry.to_line() + '\n' for entry in self.entries.values())
        # mkstemp creates 0600; keep the previous index's permissions
        perms = index_path.stat().st_mode & 0o777 if index_path.exists() else 0o644

        fd, tmp = tempfile.mkstemp(dir=index_path.parent, prefix='.index_')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                os.fchmod(f.fileno(), perms)
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, index_path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

        logger.debug(f"Wrote index with {len(self.entries)} entries to {index_path}")

    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.entries)

    def __contains__(self, path: str) -> bool:
        return path in self.entries

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self.entries.values())

    def __repr__(self) -> str:
        """String representation."""
        return f"Index(entries={len(self.entries)})"


@contextlib.contextmanager
def index_lock(lock_path: PathLike) -> Iterator[None]:
    """
    Hold an exclusive advisory lock on the index for the block.

    Blocks while another process holds the lock, so concurrent staging
    operations rewrite the index one after another.
    """
    lock_path = Path(lock_path)
    with open(lock_path, 'a') as lock_f:
        try:
            fcntl.flock(lock_f.fileno(), fcntl.LOCK_EX)
            logger.debug(f"Acquired index lock: {lock_path}")
            yield
        finally:
            fcntl.flock(lock_f.fileno(), fcntl.LOCK_UN)
            logger.debug(f"Released index lock: {lock_path}")

