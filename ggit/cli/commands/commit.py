"""Commit command - record staged changes."""

import click
from ggit.cli.output import warning


@click.command('commit')
@click.option('-m', '--message', help='Commit message')
def commit_cmd(message):
    """
    Record changes to the repository.
    
    Staged content is kept in the index and object store; commit objects
    are not written yet.
    """
    click.echo(warning("Not implemented yet"))
