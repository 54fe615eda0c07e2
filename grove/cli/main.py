"""Main CLI entry point for Grove."""

import logging

import click
from colorama import init

from grove import __version__
from grove.core.config import Config
from grove.core.errors import ConfigError
from grove.core.repository import Repository
from grove.cli.output import BANNER
from grove.cli.commands import (init_cmd, add_cmd, commit_cmd, log_cmd, diff_cmd,
                                status_cmd, config_cmd, cat_file_cmd, count_objects_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class GroveGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


def configure_logging(verbose: bool) -> None:
    """
    Set the root log level.
    
    --verbose forces DEBUG; otherwise core.loglevel from the config
    (or GROVE_CORE_LOGLEVEL) is used.
    """
    problem = None
    if verbose:
        level = logging.DEBUG
    else:
        repo = Repository.find_repository()
        config = Config(repo.config_file if repo else None)
        try:
            name = (config.get('core', 'loglevel') or 'WARNING').upper()
        except ConfigError as e:
            name = 'WARNING'
            problem = e
        level = getattr(logging, name, None)
        if not isinstance(level, int):
            level = logging.WARNING
    
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    if problem:
        logger.warning("%s; using default settings", problem)


@click.group(cls=GroveGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(diff_cmd)
cli.add_command(status_cmd)
cli.add_command(config_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(count_objects_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
