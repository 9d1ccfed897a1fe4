"""Main CLI entry point for ggit."""

import logging
import os

import click
from colorama import init

from ggit import __version__
from ggit.cli.output import BANNER
from ggit.cli.commands import (init_cmd, add_cmd, status_cmd, log_cmd, commit_cmd,
                               hash_object_cmd, cat_file_cmd, ls_files_cmd,
                               count_objects_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger.
    
    GGIT_LOG_LEVEL wins if set; otherwise -v selects INFO and -vv DEBUG.
    """
    env_level = os.environ.get('GGIT_LOG_LEVEL')
    if env_level:
        level = getattr(logging, env_level.upper(), logging.WARNING)
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


class GgitGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GgitGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', count=True, help='Increase log verbosity (-vv for debug)')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(status_cmd)
cli.add_command(log_cmd)
cli.add_command(commit_cmd)
cli.add_command(hash_object_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(ls_files_cmd)
cli.add_command(count_objects_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
