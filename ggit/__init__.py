"""ggit - a minimal content-addressable version control tool."""

__version__ = '0.1.0'

from ggit.core.repository import Repository
from ggit.core.objects import GgitObject, Blob

__all__ = [
    'Repository',
    'GgitObject',
    'Blob',
]
