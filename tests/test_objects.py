"""Blob object tests."""

import tempfile
from pathlib import Path
from ggit.core.objects import Blob
from conftest import HELLO_ID


def test_blob_creation():
    """Test blob creation with data."""
    blob = Blob(b'hello world')
    assert blob.data == b'hello world'
    assert blob.type == 'blob'


def test_blob_default_is_empty():
    """Test blob without data is empty."""
    assert Blob().data == b''
    assert len(Blob()) == 0


def test_blob_serialize():
    """Test blob serialization is the raw content."""
    blob = Blob(b'test data')
    assert blob.serialize() == b'test data'


def test_blob_hash():
    """Test blob hash computation."""
    assert Blob(b'hello').compute_hash() == HELLO_ID
    assert Blob(b'hello').hash == HELLO_ID


def test_blob_hash_deterministic():
    """Test blob hash determinism."""
    assert Blob(b'same data').hash == Blob(b'same data').hash


def test_blob_from_file():
    """Test blob creation from file."""
    with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        f.write('file content')
        temp_path = f.name
    
    try:
        blob = Blob.from_file(temp_path)
        assert blob.data == b'file content'
    finally:
        Path(temp_path).unlink()


def test_blob_repr():
    """Test blob string representation."""
    assert repr(Blob(b'hello')) == f"Blob(hash={HELLO_ID[:7]}, size=5)"
