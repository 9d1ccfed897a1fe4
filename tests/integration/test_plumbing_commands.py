"""Integration tests for hash-object, cat-file, ls-files and count-objects."""

import os
from ggit.cli.main import cli
from conftest import HELLO_ID


class TestHashObject:
    """Tests for ggit hash-object."""
    
    def test_hash_object_prints_id(self, runner, in_repo):
        """Test the id is printed without storing anything."""
        (in_repo.work_tree / 'a.txt').write_text('hello')
        
        result = runner.invoke(cli, ['hash-object', 'a.txt'])
        
        assert result.exit_code == 0
        assert result.output.strip() == HELLO_ID
        assert not in_repo.objects.exists(HELLO_ID)
    
    def test_hash_object_write(self, runner, in_repo):
        """Test -w stores the content."""
        (in_repo.work_tree / 'a.txt').write_text('hello')
        
        result = runner.invoke(cli, ['hash-object', '-w', 'a.txt'])
        
        assert result.exit_code == 0
        assert in_repo.objects.get(HELLO_ID) == b'hello'


class TestCatFile:
    """Tests for ggit cat-file."""
    
    def test_cat_file_content(self, runner, in_repo):
        """Test printing stored content from an abbreviated id."""
        in_repo.objects.put(HELLO_ID, b'hello')
        
        result = runner.invoke(cli, ['cat-file', '-p', HELLO_ID[:7]])
        
        assert result.exit_code == 0
        assert result.output == 'hello'
    
    def test_cat_file_size(self, runner, in_repo):
        """Test printing the stored size."""
        in_repo.objects.put(HELLO_ID, b'hello')
        
        result = runner.invoke(cli, ['cat-file', '-s', HELLO_ID])
        
        assert result.output.strip() == '5'
    
    def test_cat_file_exists(self, runner, in_repo):
        """Test -e reports existence through the exit code."""
        in_repo.objects.put(HELLO_ID, b'hello')
        
        assert runner.invoke(cli, ['cat-file', '-e', HELLO_ID]).exit_code == 0
        assert runner.invoke(cli, ['cat-file', '-e', 'f' * 40]).exit_code == 1
    
    def test_cat_file_missing(self, runner, in_repo):
        """Test a missing object is an error."""
        result = runner.invoke(cli, ['cat-file', '-p', 'f' * 40])
        
        assert result.exit_code == 1
        assert 'not found' in result.output


class TestLsFiles:
    """Tests for ggit ls-files."""
    
    def test_ls_files(self, runner, in_repo, working_files):
        """Test listing staged paths in index order."""
        runner.invoke(cli, ['add', 'test2.txt', 'test1.txt'])
        
        result = runner.invoke(cli, ['ls-files'])
        
        assert result.exit_code == 0
        assert result.output.splitlines() == ['test2.txt', 'test1.txt']
    
    def test_ls_files_stage(self, runner, in_repo):
        """Test -s shows full records."""
        (in_repo.work_tree / 'a.txt').write_text('hello')
        runner.invoke(cli, ['add', 'a.txt'])
        
        result = runner.invoke(cli, ['ls-files', '-s'])
        
        assert result.output.splitlines() == [f'100644 {HELLO_ID} 0\ta.txt']


class TestCountObjects:
    """Tests for ggit count-objects."""
    
    def test_count_objects(self, runner, in_repo, working_files):
        """Test objects are counted once per distinct content."""
        working_files['file2'].write_text('Content 1')
        runner.invoke(cli, ['add', '.'])
        
        result = runner.invoke(cli, ['count-objects'])
        
        assert result.exit_code == 0
        assert result.output.startswith('2 objects')
    
    def test_count_objects_verbose_detects_corruption(self, runner, in_repo):
        """Test -v re-hashes objects and reports corrupt ones."""
        in_repo.objects.put(HELLO_ID, b'hello')
        path = in_repo.objects.object_path(HELLO_ID)
        os.chmod(path, 0o644)
        path.write_bytes(b'tampered')
        
        result = runner.invoke(cli, ['count-objects', '-v'])
        
        assert result.exit_code == 1
        assert 'integrity check failed' in result.output
