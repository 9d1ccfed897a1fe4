"""Repository management for ggit."""

import logging
from pathlib import Path
from typing import Optional, Union

from .errors import NotARepositoryError, PathOutsideRepositoryError

logger = logging.getLogger(__name__)

GGIT_DIR = '.ggit'
DEFAULT_BRANCH = 'master'
DEFAULT_CONFIG = '[core]\n\trepositoryformatversion = 0\n\tfilemode = true\n'


class Repository:
    """
    Represents a ggit repository.

    A repository knows where the .ggit directory and its parts live, and
    hands out the object store, reference reader and configuration bound
    to that location.
    """

    def __init__(self, path: Union[str, Path] = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (the working tree)
        """
        self.work_tree = Path(path).resolve()
        self.ggit_dir = self.work_tree / GGIT_DIR
        self.objects_dir = self.ggit_dir / 'objects'
        self.refs_dir = self.ggit_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.tags_dir = self.refs_dir / 'tags'
        self.head_file = self.ggit_dir / 'HEAD'
        self.index_file = self.ggit_dir / 'index'
        self.index_lock_file = self.ggit_dir / 'index.lock'
        self.config_file = self.ggit_dir / 'config'

        # Lazily created to avoid circular imports
        self._object_store = None
        self._ref_manager = None
        self._config = None

    @property
    def config(self):
        """Get Config instance."""
        if self._config is None:
            from .config import Config
            self._config = Config(self.config_file)
        return self._config

    @property
    def objects(self):
        """Get ObjectStore instance."""
        if self._object_store is None:
            from .object_store import ObjectStore
            verify = self.config.get_bool('core', 'verifyobjects', fallback=True)
            self._object_store = ObjectStore(self.objects_dir, verify=verify)
        return self._object_store

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    def exists(self) -> bool:
        """Check whether the .ggit directory is present."""
        return self.ggit_dir.is_dir()

    def is_complete(self) -> bool:
        """Check whether every part of the .ggit skeleton is present."""
        return (
            self.objects_dir.is_dir()
            and self.heads_dir.is_dir()
            and self.tags_dir.is_dir()
            and self.head_file.is_file()
            and self.config_file.is_file()
        )

    def init(self) -> bool:
        """
        Initialize a new repository.

        Creates the .ggit directory structure:
        .ggit/
        ├── objects/       # Object database
        ├── refs/
        │   ├── heads/     # Branch references
        │   └── tags/      # Tag references
        ├── HEAD           # Current branch
        └── config         # Repository configuration

        An existing repository is left as it is. If a previous init was
        interrupted, only the missing parts are created; files that are
        already present are never rewritten.

        Returns:
            bool: True if a new repository was created, False if one
            already existed (reinitialized)
        """
        created = not self.exists()

        if not created and self.is_complete():
            logger.info(f"Repository already initialized at {self.ggit_dir}")
            return False

        self.ggit_dir.mkdir(exist_ok=True)
        self.objects_dir.mkdir(exist_ok=True)
        self.refs_dir.mkdir(exist_ok=True)
        self.heads_dir.mkdir(exist_ok=True)
        self.tags_dir.mkdir(exist_ok=True)

        if not self.config_file.exists():
            self.config_file.write_text(DEFAULT_CONFIG)

        if not self.head_file.exists():
            self.head_file.write_text(f'ref: refs/heads/{DEFAULT_BRANCH}\n')

        if created:
            logger.info(f"Initialized repository at {self.ggit_dir}")
        else:
            logger.warning(f"Completed partially initialized repository at {self.ggit_dir}")

        return created

    @classmethod
    def find_repository(cls, path: Union[str, Path] = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .ggit directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / GGIT_DIR).is_dir():
                return cls(current)

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def discover(cls, path: Union[str, Path] = '.') -> 'Repository':
        """
        Find the repository containing path.

        Raises:
            NotARepositoryError: If no .ggit directory exists in path or its parents
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise NotARepositoryError(
                f"not a ggit repository (or any of the parent directories): {GGIT_DIR}"
            )
        return repo

    def relative_path(self, path: Union[str, Path]) -> str:
        """
        Convert a path to a '/'-separated path relative to the work tree.

        Args:
            path: Absolute path, or path relative to the work tree

        Raises:
            PathOutsideRepositoryError: If path is outside the work tree or
            inside .ggit
        """
        path = Path(path)
        if not path.is_absolute():
            path = self.work_tree / path
        # A symlink keeps its own name; only the directories above it are resolved
        if path.name in ('', '..'):
            path = path.resolve()
        else:
            path = path.parent.resolve() / path.name

        try:
            rel = path.relative_to(self.work_tree)
        except ValueError:
            raise PathOutsideRepositoryError(f"'{path}' is outside repository at '{self.work_tree}'") from None

        if not rel.parts:
            raise PathOutsideRepositoryError(f"'{path}' is the repository root, not a file")
        if rel.parts[0] == GGIT_DIR:
            raise PathOutsideRepositoryError(f"'{path}' is inside the repository metadata")

        return rel.as_posix()

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
