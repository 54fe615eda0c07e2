"""Config command - manage repository configuration."""

import click
from grove.core.config import Config, split_key
from grove.core.errors import ConfigError
from grove.core.repository import Repository
from grove.cli.output import success, error, info


def _load_config(is_global: bool) -> Config:
    if is_global:
        return Config()
    repo = Repository.find_repository()
    return Config(repo.config_file if repo else None)


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.
    
    Examples:
        grove config set color.ui false
        grove config set core.loglevel INFO
        grove config set --global color.ui false
    """
    config = _load_config(is_global)
    if not is_global and not config.repo_config_path:
        click.echo(error("Not a grove repository (use --global for global config)"))
        raise click.Abort()
    
    section, option = split_key(key)
    try:
        config.set(section, option, value, global_config=is_global)
    except ConfigError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.
    
    Examples:
        grove config get color.ui
    """
    config = _load_config(is_global)
    section, option = split_key(key)
    
    try:
        value = config.get(section, option)
    except ConfigError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.
    
    Examples:
        grove config unset color.ui
    """
    config = _load_config(is_global)
    section, option = split_key(key)
    
    try:
        removed = config.unset(section, option, global_config=is_global)
    except ConfigError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    if not removed:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Removed {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.
    
    Examples:
        grove config list
        grove config list --global
    """
    config = _load_config(is_global)
    try:
        values = config.list_all(global_only=is_global)
    except ConfigError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for section, options in sorted(values.items()):
        for key, value in sorted(options.items()):
            click.echo(f"{section}.{key}={value}")
