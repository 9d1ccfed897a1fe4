"""Log command - show commit history."""

import click
from ggit.cli.output import warning


@click.command('log')
def log_cmd():
    """
    Show commit history.
    
    Commits are not recorded yet, so there is no history to show.
    """
    click.echo(warning("Not implemented yet"))
