"""Reference reading for ggit."""

from pathlib import Path
from typing import Optional, Union

SYMREF_PREFIX = 'ref: '
HEADS_PREFIX = 'refs/heads/'


def read_current_branch(head_path: Union[str, Path]) -> Optional[str]:
    """
    Read the branch HEAD points to.
    
    Args:
        head_path: Path to the HEAD file
        
    Returns:
        Branch name, or None if HEAD is missing or detached
    """
    head_path = Path(head_path)
    if not head_path.exists():
        return None
    
    for line in head_path.read_text().splitlines():
        if line.startswith(SYMREF_PREFIX):
            target = line[len(SYMREF_PREFIX):].strip()
            if target.startswith(HEADS_PREFIX):
                return target[len(HEADS_PREFIX):]
            return target
    
    return None


class RefManager:
    """
    Reads the references of a repository.
    
    Only HEAD is consulted: ggit keeps refs/heads and refs/tags as an
    empty skeleton until commits exist.
    """
    
    def __init__(self, repo):
        """
        Initialize reference manager.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head_file = repo.head_file
    
    def read_head(self) -> Optional[str]:
        """Return the raw HEAD content, stripped, or None if absent."""
        if not self.head_file.exists():
            return None
        return self.head_file.read_text().strip()
    
    def get_current_branch(self) -> Optional[str]:
        """
        Get the current branch name.
        
        Returns:
            Branch name or None if in detached HEAD state
        """
        return read_current_branch(self.head_file)
    
    def is_detached_head(self) -> bool:
        """
        Check if HEAD is in detached state.
        
        Returns:
            True if detached, False if on a branch
        """
        content = self.read_head()
        if content is None:
            return False
        return not content.startswith(SYMREF_PREFIX)
