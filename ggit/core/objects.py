"""Objects stored by ggit."""

from abc import ABC, abstractmethod
from typing import Optional
from .hash import hash_object


class GgitObject(ABC):
    """Base class for all ggit objects."""
    
    def __init__(self):
        self._hash: Optional[str] = None
    
    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.
        
        Returns:
            bytes: Serialized object data
        """
        pass
    
    @property
    def type(self) -> str:
        """
        Return object type name.
        
        Returns:
            str: Object type (blob, tree, commit)
        """
        return self.__class__.__name__.lower()
    
    def compute_hash(self) -> str:
        """
        Compute and cache object hash.
        
        Returns:
            str: 40-character SHA-1 hash of the typed payload
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize(), self.type)
        return self._hash
    
    @property
    def hash(self) -> str:
        """Get object hash."""
        return self.compute_hash()


class Blob(GgitObject):
    """
    Represents file content.
    
    A blob stores the raw content of a file without any metadata
    like filename or permissions, so two files with the same bytes
    share one blob.
    """
    
    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.
        
        Args:
            data: File content as bytes
        """
        super().__init__()
        self.data = data or b''
    
    def serialize(self) -> bytes:
        """Return the raw file content."""
        return self.data
    
    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.
        
        Args:
            filepath: Path to file
            
        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())
    
    def __len__(self) -> int:
        return len(self.data)
    
    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"
