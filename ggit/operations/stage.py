"""Staging files into the object store and the index."""

import logging
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ggit.core.errors import GgitError, PathNotFoundWarning
from ggit.core.index import (
    ADDED, DEFAULT_MODE, EXECUTABLE_MODE, UNCHANGED, Index, check_path, index_lock,
)
from ggit.core.objects import Blob
from ggit.core.repository import Repository

logger = logging.getLogger(__name__)


@dataclass
class AddResult:
    """Outcome of an add operation, file by file."""
    added: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    stored: List[str] = field(default_factory=list)
    warnings: List[PathNotFoundWarning] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def staged(self) -> List[str]:
        """Every path now matching the index, changed or not."""
        return self.added + self.updated + self.unchanged

    @property
    def ok(self) -> bool:
        """False if any file failed; missing paths are only warnings."""
        return not self.errors


def iter_directory_files(directory: Path) -> Iterable[Path]:
    """
    Yield the files below directory in sorted order.

    Hidden files and directories (including .ggit) are skipped.
    """
    for file_path in sorted(directory.rglob('*')):
        rel_parts = file_path.relative_to(directory).parts
        if any(part.startswith('.') for part in rel_parts):
            continue
        if file_path.is_file():
            yield file_path


def file_mode(file_path: Path, filemode: bool = True) -> int:
    """Index mode for a file: executable or regular."""
    if filemode and file_path.stat().st_mode & stat.S_IXUSR:
        return EXECUTABLE_MODE
    return DEFAULT_MODE


def stage_file(
    repo: Repository,
    index: Index,
    file_path: Path,
    result: AddResult,
    filemode: bool = True
) -> None:
    """
    Stage one file: store its content if new, then upsert its index entry.

    Failures reading the file or storing its content are recorded in
    result and leave the index untouched. Failures rewriting the index
    propagate.
    """
    store = repo.objects

    try:
        rel_path = repo.relative_path(file_path)
        check_path(rel_path)
        blob = Blob.from_file(file_path)
        mode = file_mode(file_path, filemode)
        obj_id = blob.hash

        if store.exists(obj_id):
            logger.debug(f"Content of {rel_path} already stored as {obj_id}")
        elif store.put(obj_id, blob.data, blob.type):
            result.stored.append(obj_id)
    except (GgitError, OSError) as e:
        logger.error(f"Failed to stage {file_path}: {e}")
        result.errors.append((str(file_path), str(e)))
        return

    status = index.upsert(rel_path, obj_id, mode)
    if status == UNCHANGED:
        logger.debug(f"{rel_path} unchanged")
        result.unchanged.append(rel_path)
        return

    index.write(repo.index_file)

    if status == ADDED:
        logger.info(f"Staged {rel_path} as {obj_id}")
        result.added.append(rel_path)
    else:
        logger.info(f"Updated {rel_path} to {obj_id}")
        result.updated.append(rel_path)


def add_paths(
    repo: Repository,
    paths: Iterable[Union[str, Path]],
    base_dir: Optional[Union[str, Path]] = None
) -> AddResult:
    """
    Stage files for the next commit.

    Paths are processed in the order given. A path that does not exist
    produces a PathNotFoundWarning and is skipped; a directory is staged
    file by file. Each file is its own unit of work: the index is
    rewritten after every changed entry and nothing is rolled back when a
    later file fails.

    The index stays locked for the whole operation.

    Args:
        repo: Repository to stage into
        paths: Files or directories to stage
        base_dir: Directory relative paths are interpreted against
            (defaults to the work tree)

    Returns:
        AddResult: What happened to each path

    Raises:
        CorruptIndexError: If the existing index cannot be parsed
        OSError: If the index cannot be rewritten
    """
    base = Path(base_dir) if base_dir is not None else repo.work_tree
    filemode = repo.config.get_bool('core', 'filemode', fallback=True)
    result = AddResult()

    with index_lock(repo.index_lock_file):
        index = Index()
        index.read(repo.index_file)

        for raw_path in paths:
            path = Path(raw_path)
            if not path.is_absolute():
                path = base / path

            if not path.exists():
                warning = PathNotFoundWarning(str(raw_path))
                logger.warning(str(warning))
                result.warnings.append(warning)
                continue

            if path.is_dir():
                for file_path in iter_directory_files(path):
                    stage_file(repo, index, file_path, result, filemode)
            else:
                stage_file(repo, index, path, result, filemode)

    return result
