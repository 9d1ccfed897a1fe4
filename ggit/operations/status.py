"""Working tree status against the index."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ggit.core.hash import hash_file
from ggit.core.index import Index
from ggit.core.repository import Repository


@dataclass
class StatusReport:
    """Paths grouped by how the working tree relates to the index."""
    branch: Optional[str]
    staged: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.modified or self.deleted or self.untracked)


def get_working_files(repo: Repository) -> Dict[str, str]:
    """Get all files in working directory with their blob hashes."""
    files = {}

    for path in repo.work_tree.rglob('*'):
        rel_path = path.relative_to(repo.work_tree)

        if any(part.startswith('.') for part in rel_path.parts):
            continue

        if path.is_file():
            files[rel_path.as_posix()] = hash_file(str(path))

    return files


def collect_status(repo: Repository) -> StatusReport:
    """
    Compare the working tree with the index.

    Without commits every index entry counts as staged; an entry whose
    file now hashes differently is also reported as modified.
    """
    index = Index()
    index.read(repo.index_file)
    index_files = {entry.path: entry.sha1 for entry in index}

    working_files = get_working_files(repo)

    report = StatusReport(branch=repo.refs.get_current_branch())
    report.staged = sorted(index_files)

    for path, index_hash in index_files.items():
        file_path = repo.work_tree / path
        if not file_path.is_file():
            report.deleted.append(path)
            continue

        # Hidden files can be staged explicitly but are not walked
        working_hash = working_files.get(path) or hash_file(str(file_path))
        if working_hash != index_hash:
            report.modified.append(path)

    report.untracked = sorted(path for path in working_files if path not in index_files)
    report.modified.sort()
    report.deleted.sort()

    return report
