"""CLI commands for Grove."""

from grove.cli.commands.init import init_cmd
from grove.cli.commands.add import add_cmd
from grove.cli.commands.commit import commit_cmd
from grove.cli.commands.log import log_cmd
from grove.cli.commands.diff import diff_cmd
from grove.cli.commands.status import status_cmd
from grove.cli.commands.config import config_cmd
from grove.cli.commands.objects import cat_file_cmd, count_objects_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'diff_cmd', 'status_cmd',
           'config_cmd', 'cat_file_cmd', 'count_objects_cmd']
