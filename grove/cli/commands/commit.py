"""Commit command - create a commit from staged changes."""

import click
from grove.core.errors import GroveError
from grove.cli.commands.common import require_repository
from grove.cli.output import success, error, info


@click.command('commit')
@click.option('-m', '--message', help='Commit message')
def commit_cmd(message):
    """
    Record changes to the repository.
    
    Creates a commit from the staged files, on top of the current HEAD,
    then empties the staging area.
    
    Examples:
        grove commit -m "Initial commit"
    """
    repo = require_repository()
    
    if not message:
        click.echo(error("Commit message required. Use -m \"message\""))
        raise click.Abort()
    
    try:
        staged = repo.status()
    except GroveError as e:
        click.echo(error(f"Cannot read staging area: {e}"))
        raise click.Abort()
    
    if not staged:
        click.echo(error("Nothing to commit (staging area is empty)"))
        click.echo(info("Use 'grove add <file>' to stage changes"))
        raise click.Abort()
    
    try:
        parent = repo.head_commit()
        commit_hash = repo.commit(message)
    except (GroveError, ValueError) as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()
    
    click.echo(success(f"Commit Successfully Created: {commit_hash}"))
    click.echo(info(f"Message: {message}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
    click.echo(info(f"Files: {len(staged)}"))
