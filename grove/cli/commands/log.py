"""Log command - show commit history."""

import click
from datetime import datetime
from colorama import Fore
from grove.core.errors import GroveError
from grove.cli.commands.common import require_repository, use_color
from grove.cli.output import error, warning, colorize


def format_timestamp(timestamp: str) -> str:
    """Format an ISO-8601 timestamp as a readable date."""
    try:
        dt = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
        return dt.strftime("%a %b %d %H:%M:%S %Y %z")
    except (AttributeError, ValueError):
        return timestamp


def display_commit_oneline(commit_hash, commit, color):
    """Display commit in one-line format."""
    message = commit.message.split('\n')[0]
    if len(message) > 60:
        message = message[:57] + "..."
    click.echo(f"{colorize(commit_hash[:7], Fore.YELLOW, color)} {message}")


def display_commit_full(commit_hash, commit, color):
    """Display commit in full format."""
    click.echo("_" * 57)
    click.echo(colorize(f"commit {commit_hash}", Fore.YELLOW, color))
    if commit.parent_commit:
        click.echo(f"Parent:    {commit.parent_commit}")
    click.echo(f"Date:      {format_timestamp(commit.timestamp)}")
    click.echo(f"Files:     {len(commit.files)}")
    click.echo()
    for line in commit.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show commits in one-line format')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def log_cmd(max_count, oneline, no_color):
    """
    Show commit logs.
    
    Displays commit history starting from HEAD, newest first.
    
    Examples:
        grove log                  # Show all commits from HEAD
        grove log -n 10            # Show last 10 commits
        grove log --oneline        # Show compact one-line format
    """
    repo = require_repository()
    color = use_color(repo, no_color)
    
    if not repo.head_commit():
        click.echo(warning("No commits yet"))
        return
    
    try:
        for commit_hash, commit in repo.log(max_count=max_count):
            if oneline:
                display_commit_oneline(commit_hash, commit, color)
            else:
                display_commit_full(commit_hash, commit, color)
    except GroveError as e:
        click.echo(error(str(e)))
        raise click.Abort()
