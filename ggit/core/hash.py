"""Hash utilities for ggit."""

import hashlib

OBJECT_TYPES = ('blob', 'tree', 'commit')


def hash_object(data: bytes, obj_type: str = 'blob') -> str:
    """
    Compute the identifier of a typed payload.
    
    The digest covers a header with the kind and size followed by the
    content: <type> <size>\\0<content>
    
    Args:
        data: Content bytes
        obj_type: Object kind ('blob', 'tree' or 'commit')
        
    Returns:
        40-character hex string
        
    Raises:
        ValueError: If obj_type is not a known kind
    """
    if obj_type not in OBJECT_TYPES:
        raise ValueError(f"Unknown object type: {obj_type}")
    
    header = f"{obj_type} {len(data)}\0".encode()
    return hashlib.sha1(header + data).hexdigest()


def hash_file(filepath: str, obj_type: str = 'blob') -> str:
    """
    Compute the identifier of a file's content.
    
    Args:
        filepath: Path to file
        obj_type: Object kind
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read(), obj_type)


def is_object_id(value: str) -> bool:
    """Check whether value looks like a full 40-char hex identifier."""
    if len(value) != 40:
        return False
    try:
        int(value, 16)
    except ValueError:
        return False
    return value == value.lower()
