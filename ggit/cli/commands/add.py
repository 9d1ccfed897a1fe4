"""Add command - stage files for commit."""

import click
from pathlib import Path
from ggit.core.errors import GgitError
from ggit.operations.stage import add_paths
from ggit.cli.output import success, error, info, warning, find_repo_or_abort


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.
    
    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Directories are added recursively,
    skipping hidden files.
    
    Paths that do not exist are reported and skipped; the remaining
    paths are still staged.
    
    Examples:
        ggit add file.txt
        ggit add src/*.py
        ggit add .
    """
    repo = find_repo_or_abort()
    
    try:
        result = add_paths(repo, paths, base_dir=Path.cwd())
    except (GgitError, OSError, ValueError) as e:
        click.echo(error(f"Failed to update index: {e}"), err=True)
        raise click.Abort()
    
    changed = result.added + result.updated
    if changed:
        click.echo(success(f"Added {len(changed)} file(s) to staging area"))
        for file in result.added:
            click.echo(info(f"  {file}"))
        for file in result.updated:
            click.echo(info(f"  {file} (updated)"))
    elif result.unchanged:
        click.echo(info(f"{len(result.unchanged)} file(s) already up to date"))
    
    for warn in result.warnings:
        click.echo(warning(str(warn)), err=True)
    
    if result.errors:
        click.echo(error(f"Failed to add {len(result.errors)} file(s):"), err=True)
        for file, reason in result.errors:
            click.echo(error(f"  {file}: {reason}"), err=True)
    
    if result.warnings and not result.staged and not result.errors:
        click.echo(warning("No files matched"), err=True)
    
    if not result.ok:
        raise click.exceptions.Exit(1)
