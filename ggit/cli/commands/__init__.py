"""CLI commands for ggit."""

from ggit.cli.commands.init import init_cmd
from ggit.cli.commands.add import add_cmd
from ggit.cli.commands.status import status_cmd
from ggit.cli.commands.log import log_cmd
from ggit.cli.commands.commit import commit_cmd
from ggit.cli.commands.config import config_cmd
from ggit.cli.commands.plumbing import (hash_object_cmd, cat_file_cmd, ls_files_cmd,
                                        count_objects_cmd)

__all__ = ['init_cmd', 'add_cmd', 'status_cmd', 'log_cmd', 'commit_cmd', 'config_cmd',
           'hash_object_cmd', 'cat_file_cmd', 'ls_files_cmd', 'count_objects_cmd']
