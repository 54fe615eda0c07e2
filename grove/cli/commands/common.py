"""Helpers shared by CLI commands."""

import click
from grove.core.config import get_config
from grove.core.errors import ConfigError
from grove.core.repository import Repository
from grove.cli.output import error, warning


def require_repository() -> Repository:
    """Find the enclosing repository or abort."""
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a grove repository (run 'grove init' first)"))
        raise click.Abort()
    return repo


def use_color(repo, no_color: bool = False) -> bool:
    """Whether to emit colors, honoring --no-color and the color.ui setting."""
    if no_color:
        return False
    try:
        return get_config(repo).get_bool('color', 'ui', fallback=True)
    except ConfigError as e:
        click.echo(warning(f"{e}; colors left on"), err=True)
        return True
