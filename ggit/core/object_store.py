"""Content-addressed object store.

Objects live under objects/<first 2 hex chars>/<remaining 38 hex chars>
and hold the raw content bytes. A record is written once, through a
temporary file and an atomic rename, and is never modified afterwards.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator

from .errors import AmbiguousObjectError, IntegrityError, ObjectNotFoundError
from .hash import hash_object
from .objects import Blob

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 4


class ObjectStore:
    """
    Write-once store of object content keyed by identifier.

    Storing the same content twice leaves one record, and a record that
    already exists is never replaced, even when put() is handed different
    bytes for the same identifier.
    """

    def __init__(self, objects_dir: Path, verify: bool = True):
        """
        Initialize object store.

        Args:
            objects_dir: The repository's objects directory
            verify: Re-hash written bytes before placing them
        """
        self.objects_dir = Path(objects_dir)
        self.verify_writes = verify

    def object_path(self, obj_id: str) -> Path:
        """
        Get filesystem path for an object.

        Example: ab/cdef0123456789... for id abcdef0123456789...
        """
        return self.objects_dir / obj_id[:2] / obj_id[2:]

    def exists(self, obj_id: str) -> bool:
        """Check if a record is present for obj_id."""
        return self.object_path(obj_id).is_file()

    def put(self, obj_id: str, content: bytes, obj_type: str = 'blob') -> bool:
        """
        Store content under obj_id unless it is already present.

        Args:
            obj_id: 40-character identifier of the content
            content: Raw content bytes
            obj_type: Kind used to re-derive the identifier when verifying

        Returns:
            bool: True if a new record was written, False if it already existed

        Raises:
            IntegrityError: If the written bytes do not hash to obj_id
            OSError: On permission or disk-space problems
        """
        path = self.object_path(obj_id)

        if path.exists():
            logger.debug(f"Object {obj_id} already stored")
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix='.tmp_')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            if self.verify_writes:
                actual = hash_object(Path(tmp).read_bytes(), obj_type)
                if actual != obj_id:
                    raise IntegrityError(obj_id, actual)

            os.chmod(tmp, 0o444)
            os.replace(tmp, path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

        logger.info(f"Stored object {obj_id} ({len(content)} bytes)")
        return True

    def get(self, obj_id: str) -> bytes:
        """
        Read the stored content for obj_id.

        Raises:
            ObjectNotFoundError: If no record exists
        """
        path = self.object_path(obj_id)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFoundError(f"Object {obj_id} not found") from None

    def read(self, obj_id: str) -> Blob:
        """Read a stored blob."""
        return Blob(self.get(obj_id))

    def verify(self, obj_id: str, obj_type: str = 'blob') -> None:
        """
        Check that the stored bytes still hash to obj_id.

        Raises:
            ObjectNotFoundError: If no record exists
            IntegrityError: If the record is corrupt
        """
        actual = hash_object(self.get(obj_id), obj_type)
        if actual != obj_id:
            raise IntegrityError(obj_id, actual)

    def iter_ids(self) -> Iterator[str]:
        """Yield the identifier of every stored object, in sorted order."""
        if not self.objects_dir.exists():
            return

        for subdir in sorted(self.objects_dir.iterdir()):
            if not subdir.is_dir() or len(subdir.name) != 2:
                continue
            for obj_file in sorted(subdir.iterdir()):
                if obj_file.name.startswith('.'):
                    continue
                yield subdir.name + obj_file.name

    def resolve_prefix(self, prefix: str) -> str:
        """
        Expand an abbreviated identifier to a full one.

        Raises:
            ObjectNotFoundError: If nothing matches or the prefix is too short
            AmbiguousObjectError: If several objects match
        """
        prefix = prefix.lower()
        if len(prefix) == 40:
            if not self.exists(prefix):
                raise ObjectNotFoundError(f"Object {prefix} not found")
            return prefix

        if len(prefix) < MIN_PREFIX_LENGTH:
            raise ObjectNotFoundError(f"Object id too short: {prefix}")

        subdir = self.objects_dir / prefix[:2]
        matches = []
        if subdir.is_dir():
            for obj_file in subdir.iterdir():
                full_id = prefix[:2] + obj_file.name
                if not obj_file.name.startswith('.') and full_id.startswith(prefix):
                    matches.append(full_id)

        if not matches:
            raise ObjectNotFoundError(f"Object {prefix} not found")
        if len(matches) > 1:
            raise AmbiguousObjectError(f"Short object id {prefix} is ambiguous")
        return matches[0]

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
