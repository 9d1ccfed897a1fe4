"""Integration tests for repository initialization."""

from ggit.cli.main import cli


def test_init_creates_ggit_directory(runner, temp_dir):
    """Test that init creates the .ggit skeleton."""
    result = runner.invoke(cli, ['init', str(temp_dir)])
    
    assert result.exit_code == 0
    assert 'Initialized empty ggit repository' in result.output
    ggit_dir = temp_dir / '.ggit'
    assert (ggit_dir / 'objects').is_dir()
    assert (ggit_dir / 'refs' / 'heads').is_dir()
    assert (ggit_dir / 'refs' / 'tags').is_dir()
    assert (ggit_dir / 'config').is_file()


def test_init_empty_directory_scenario(runner, temp_dir):
    """Test HEAD content and empty skeleton after init."""
    runner.invoke(cli, ['init', str(temp_dir)])
    
    ggit_dir = temp_dir / '.ggit'
    assert (ggit_dir / 'HEAD').read_text() == 'ref: refs/heads/master\n'
    assert list((ggit_dir / 'objects').iterdir()) == []
    assert list((ggit_dir / 'refs' / 'heads').iterdir()) == []
    assert list((ggit_dir / 'refs' / 'tags').iterdir()) == []


def test_init_current_directory(runner, temp_dir, monkeypatch):
    """Test init without a path uses the current directory."""
    monkeypatch.chdir(temp_dir)
    result = runner.invoke(cli, ['init'])
    
    assert result.exit_code == 0
    assert (temp_dir / '.ggit' / 'HEAD').exists()


def test_init_creates_missing_directory(runner, temp_dir):
    """Test init creates the target directory."""
    target = temp_dir / 'new-project'
    result = runner.invoke(cli, ['init', str(target)])
    
    assert result.exit_code == 0
    assert (target / '.ggit').is_dir()


def test_double_init_reinitializes(runner, temp_dir):
    """Test that a second init succeeds without modifying anything."""
    runner.invoke(cli, ['init', str(temp_dir)])
    head = temp_dir / '.ggit' / 'HEAD'
    head.write_text('ref: refs/heads/topic\n')
    
    result = runner.invoke(cli, ['init', str(temp_dir)])
    
    assert result.exit_code == 0
    assert 'Reinitialized existing ggit repository' in result.output
    assert head.read_text() == 'ref: refs/heads/topic\n'


def test_log_and_commit_are_placeholders(runner, in_repo):
    """Test log and commit are not implemented yet."""
    for args in (['log'], ['commit', '-m', 'message']):
        result = runner.invoke(cli, args)
        assert result.exit_code == 0
        assert 'Not implemented yet' in result.output


def test_version(runner):
    """Test --version reports the package version."""
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output
