"""Object inspection commands - cat-file, count-objects."""

import click
from colorama import Fore, Style
from grove.core.errors import GroveError, InvalidObjectError
from grove.core.objects import Commit
from grove.cli.commands.common import require_repository
from grove.cli.output import error


@click.command('cat-file')
@click.argument('object_hash')
@click.option('-t', '--type', 'show_type', is_flag=True, help='Show object type')
@click.option('-s', '--size', 'show_size', is_flag=True, help='Show object size')
def cat_file_cmd(object_hash, show_type, show_size):
    """
    Provide content or type/size information for an object.
    
    Examples:
        grove cat-file abc123          # Print object content
        grove cat-file -t abc123       # Show object type
        grove cat-file -s abc123       # Show object size
    """
    repo = require_repository()
    
    try:
        full_hash = repo.resolve(object_hash)
        data = repo.objects.get(full_hash)
    except GroveError:
        click.echo(error(f"Not a valid object name: {object_hash}"))
        raise click.Abort()
    
    if show_size:
        click.echo(len(data))
        return
    
    if show_type:
        try:
            Commit.deserialize(data)
            click.echo('commit')
        except InvalidObjectError:
            click.echo('blob')
        return
    
    try:
        click.echo(data.decode('utf-8'), nl=False)
    except UnicodeDecodeError:
        click.echo(f"<binary data: {len(data)} bytes>")


@click.command('count-objects')
@click.option('-v', '--verbose', is_flag=True, help='Show detailed information')
def count_objects_cmd(verbose):
    """
    Count objects in the repository.
    
    Examples:
        grove count-objects        # Show object count and size
        grove count-objects -v     # Show commits and blobs separately
    """
    repo = require_repository()
    
    total_objects = 0
    total_size = 0
    type_counts = {'commit': 0, 'blob': 0}
    
    for digest in repo.objects:
        total_objects += 1
        total_size += repo.objects.size(digest)
        
        if verbose:
            try:
                Commit.deserialize(repo.objects.get(digest))
                type_counts['commit'] += 1
            except InvalidObjectError:
                type_counts['blob'] += 1
    
    if verbose:
        click.echo(f"{Fore.CYAN}Object Statistics:{Style.RESET_ALL}")
        click.echo(f"  Commits: {Fore.YELLOW}{type_counts['commit']}{Style.RESET_ALL}")
        click.echo(f"  Blobs:   {Fore.YELLOW}{type_counts['blob']}{Style.RESET_ALL}")
        click.echo()
    
    size_kb = total_size / 1024
    click.echo(f"{total_objects} objects, {size_kb:.2f} KB")
