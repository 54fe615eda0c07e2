"""Status command - show staged files."""

import click
from colorama import Fore
from grove.core.errors import GroveError
from grove.cli.commands.common import require_repository, use_color
from grove.cli.output import error, info, colorize


@click.command('status')
def status_cmd():
    """
    Show the files staged for the next commit.
    
    Examples:
        grove status
    """
    repo = require_repository()
    color = use_color(repo)
    
    try:
        head = repo.head_commit()
        staged = repo.status()
    except GroveError as e:
        click.echo(error(f"Cannot read repository state: {e}"))
        raise click.Abort()
    
    if head:
        click.echo(f"HEAD: {head[:7]}")
    else:
        click.echo("No commits yet")
    
    if not staged:
        click.echo(info("Nothing staged"))
        return
    
    click.echo("Changes to be committed:")
    for entry in staged:
        click.echo(colorize(f"  {entry.hash[:7]}  {entry.path}", Fore.GREEN, color))
