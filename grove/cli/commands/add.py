"""Add command - stage files for commit."""

import click
from grove.core.errors import GroveError
from grove.cli.commands.common import require_repository
from grove.cli.output import success, error, info


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.
    
    Stores each file's content in the object database and stages it for
    the next commit. Modified files must be added again to stage the new
    content; re-adding a path replaces its earlier staged version.
    
    Only individual files can be added.
    
    Examples:
        grove add file.txt
        grove add a.txt b.txt
    """
    repo = require_repository()
    
    added_files = []
    failed_files = []
    
    for path in paths:
        try:
            digest = repo.add(path)
            added_files.append((repo.relative_path(path), digest))
        except (GroveError, ValueError) as e:
            failed_files.append((path, str(e)))
    
    if added_files:
        click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
        for file, digest in added_files:
            click.echo(info(f"  {digest}  {file}"))
    
    if failed_files:
        click.echo()
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        raise click.Abort()
