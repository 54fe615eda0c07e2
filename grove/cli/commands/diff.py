"""Diff command - show the changes a commit introduced."""

import click
from colorama import Fore
from grove.core.errors import CommitNotFoundError, GroveError
from grove.operations.diff import ADDED, REMOVED
from grove.cli.commands.common import require_repository, use_color
from grove.cli.output import error, colorize


def format_segment(segment, color: bool) -> str:
    """Render one diff segment, marking every added line ++ and every removed line --."""
    if segment.kind == ADDED:
        prefix, fore = '++', Fore.GREEN
    elif segment.kind == REMOVED:
        prefix, fore = '--', Fore.RED
    else:
        prefix, fore = '', Fore.WHITE
    lines = segment.text.splitlines()
    return '\n'.join(colorize(prefix + line, fore, color) for line in lines)


def display_commit_diff(commit_diff, color: bool) -> None:
    """Print the per-file report for one commit."""
    click.echo(colorize(f"commit {commit_diff.commit_hash}", Fore.YELLOW, color))
    click.echo("Changes in this commit are:")
    
    for change in commit_diff.changes:
        click.echo(f"File: {change.path}")
        
        if change.status == 'initial':
            click.echo(change.content.rstrip('\n'))
            click.echo(colorize("First commit", Fore.CYAN, color))
        elif change.status == 'new':
            click.echo(change.content.rstrip('\n'))
            click.echo(colorize("New file in this commit", Fore.CYAN, color))
        else:
            click.echo()
            click.echo("Diff:")
            for segment in change.segments:
                click.echo(format_segment(segment, color))
        click.echo()


@click.command('diff')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commits', nargs=-1)
def diff_cmd(no_color, commits):
    """
    Show the changes introduced by commits.
    
    Each file in the commit is compared with its version in the parent
    commit. Files absent from the parent are reported as new; the first
    commit is reported as the initial snapshot.
    
    A commit that cannot be found is reported and the remaining commits
    are still shown.
    
    Examples:
        grove diff                  # Changes in HEAD
        grove diff abc123           # Changes in commit abc123
        grove diff abc123 def456    # Changes in each of two commits
    """
    repo = require_repository()
    color = use_color(repo, no_color)
    
    failed = False
    for ref in commits or ('HEAD',):
        try:
            commit_hash = repo.resolve(ref)
            display_commit_diff(repo.show_commit_diff(commit_hash), color)
        except CommitNotFoundError:
            click.echo(error(f"Commit not found: {ref}"))
            failed = True
        except GroveError as e:
            click.echo(error(f"Diff failed for {ref}: {e}"))
            failed = True
    
    if failed:
        raise click.Abort()
