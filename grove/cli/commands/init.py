"""Initialize a new Grove repository."""

import click
from pathlib import Path
from grove.core.errors import GroveError
from grove.core.repository import Repository
from grove.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Grove repository.
    
    Creates a .grove directory with the object store, HEAD and index.
    Running it again in an existing repository changes nothing.
    
    Examples:
        grove init                  # Initialize in current directory
        grove init my-project       # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()
    
    try:
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))
        
        repo = Repository(str(repo_path))
        created = repo.init()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except GroveError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
    
    if not created:
        click.echo(info(f"Already initialized the Grove repository in {repo.grove_dir}"))
        return
    
    click.echo(success(f"Initialized empty Grove repository in {repo.grove_dir}"))
    click.echo()
    click.echo(info("Repository structure created:"))
    click.echo(info("  .grove/objects/   - Object database"))
    click.echo(info("  .grove/HEAD       - Latest commit pointer"))
    click.echo(info("  .grove/index      - Staging area"))
    click.echo(info("  .grove/config     - Repository configuration"))
    click.echo()
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  grove add <file>"))
    click.echo(info("  grove commit -m 'message'"))
