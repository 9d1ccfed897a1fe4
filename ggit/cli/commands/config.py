"""Config command - manage repository configuration."""

import click
from ggit.core.config import Config
from ggit.core.repository import Repository
from ggit.cli.output import success, error, info


def split_key(key):
    """Split 'section.option' into its parts; bare keys go to [core]."""
    return key.split('.', 1) if '.' in key else ('core', key)


def load_config(is_global):
    """Config bound to the current repository, or global-only."""
    if is_global:
        return Config()
    
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a ggit repository (use --global for global config)"), err=True)
        raise click.Abort()
    return repo.config


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.
    
    Examples:
        ggit config set core.filemode false
        ggit config set --global core.verifyobjects true
    """
    config = load_config(is_global)
    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)
    
    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.
    
    Examples:
        ggit config get core.filemode
    """
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        config = repo.config if repo else Config()
    
    section, option = split_key(key)
    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"), err=True)
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """Remove a config value."""
    config = load_config(is_global)
    section, option = split_key(key)
    if not config.unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"), err=True)
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.
    
    Examples:
        ggit config list
        ggit config list --global
    """
    if is_global:
        config = Config()
    else:
        repo = Repository.find_repository()
        config = repo.config if repo else Config()
    
    values = config.list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for section, options in values.items():
        for option, value in options.items():
            click.echo(f"  {section}.{option}={value}")
