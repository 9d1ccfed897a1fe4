"""Shared pytest fixtures for ggit tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from click.testing import CliRunner
from ggit.core.repository import Repository
from ggit.core.objects import Blob

HELLO_ID = 'b6fc4c620b67d95f953a5c1c1230aaab5db5a1b0'
EMPTY_ID = 'e69de29bb2d1d6434b8b29ae775ad8c2e48c5391'


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path_factory):
    """Keep the user's ~/.ggitconfig and GGIT_* variables out of tests."""
    monkeypatch.setenv('HOME', str(tmp_path_factory.mktemp('home')))
    for var in ('GGIT_CORE_FILEMODE', 'GGIT_CORE_VERIFYOBJECTS', 'GGIT_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(temp_dir)
    repo.init()
    return repo


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def working_files(repo):
    """Create sample file structure in repository."""
    file1 = repo.work_tree / "test1.txt"
    file2 = repo.work_tree / "test2.txt"
    
    (repo.work_tree / "subdir").mkdir()
    file3 = repo.work_tree / "subdir" / "test3.txt"
    
    file1.write_text("Content 1")
    file2.write_text("Content 2")
    file3.write_text("Content 3")
    
    return {
        'file1': file1,
        'file2': file2,
        'file3': file3
    }


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run with the repository's work tree as the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


def object_files(repo):
    """All object files currently in the store, as paths relative to objects/."""
    return sorted(
        str(p.relative_to(repo.objects_dir))
        for p in repo.objects_dir.rglob('*')
        if p.is_file()
    )
