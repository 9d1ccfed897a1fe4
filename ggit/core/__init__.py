"""Core functionality for ggit.

This module contains the core data structures:
- Objects (Blob)
- Content hashing
- Object store (content-addressed, write-once)
- Index/staging area
- Repository layout and discovery
- HEAD reading
- Configuration management

For staging and status, see ggit.operations
"""

from ggit.core.objects import GgitObject, Blob
from ggit.core.repository import Repository
from ggit.core.hash import hash_object, hash_file
from ggit.core.object_store import ObjectStore
from ggit.core.index import Index, IndexEntry, index_lock
from ggit.core.refs import RefManager, read_current_branch
from ggit.core.config import Config, get_config

__all__ = [
    'GgitObject',
    'Blob',
    'Repository',
    'ObjectStore',
    'Index',
    'IndexEntry',
    'index_lock',
    'RefManager',
    'read_current_branch',
    'Config',
    'get_config',
    'hash_object',
    'hash_file',
]
