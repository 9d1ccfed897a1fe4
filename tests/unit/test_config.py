"""Configuration tests."""

import pytest
from ggit.core.config import Config, get_config


def test_repo_config_defaults(repo):
    """Test init writes core settings."""
    config = get_config(repo)
    assert config.get('core', 'repositoryformatversion') == '0'
    assert config.get_bool('core', 'filemode') is True


def test_get_fallback(repo):
    """Test missing keys fall back."""
    config = get_config(repo)
    assert config.get('core', 'missing') is None
    assert config.get('core', 'missing', fallback='x') == 'x'
    assert config.get_bool('core', 'verifyobjects', fallback=True) is True


def test_env_overrides_repo(repo, monkeypatch):
    """Test GGIT_<SECTION>_<KEY> wins over the repository file."""
    monkeypatch.setenv('GGIT_CORE_FILEMODE', 'no')
    assert get_config(repo).get_bool('core', 'filemode') is False


def test_repo_overrides_global(repo):
    """Test repository values win over ~/.ggitconfig."""
    config = get_config(repo)
    config.global_config_path.write_text('[core]\nfilemode = false\neditor = vi\n')

    fresh = get_config(repo)
    assert fresh.get('core', 'filemode') == 'true'
    assert fresh.get('core', 'editor') == 'vi'


def test_get_bool_invalid(repo):
    """Test unrecognised booleans are rejected."""
    config = get_config(repo)
    config.set('core', 'filemode', 'maybe')
    with pytest.raises(ValueError, match='Invalid boolean'):
        config.get_bool('core', 'filemode')


def test_set_and_unset(repo):
    """Test writing and removing repository values."""
    config = get_config(repo)
    config.set('test', 'key', 'value')
    assert get_config(repo).get('test', 'key') == 'value'

    assert config.unset('test', 'key') is True
    assert config.unset('test', 'key') is False
    assert get_config(repo).get('test', 'key') is None


def test_set_global(tmp_path):
    """Test global values are written to the home directory."""
    config = Config()
    config.set('core', 'verifyobjects', 'false', global_config=True)
    assert Config().get_bool('core', 'verifyobjects', fallback=True) is False


def test_set_without_repo_fails():
    """Test repository writes need a repository."""
    with pytest.raises(ValueError):
        Config().set('core', 'filemode', 'true')


def test_list_all(repo):
    """Test listing merges global and repository values."""
    config = get_config(repo)
    config.global_config_path.write_text('[user]\nname = Someone\n')

    values = get_config(repo).list_all()
    assert values['user']['name (global)'] == 'Someone'
    assert values['core']['filemode'] == 'true'
