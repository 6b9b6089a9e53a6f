"""
CLI Presentation Layer - Main Entry Point
Clean routing to modular commands
"""

import dataclasses
from pathlib import Path
from typing import Optional

import click

from src.infrastructure.config.settings import BACKENDS, LOG_LEVELS, SettingsManager
from src.presentation.context import AppContext, reports_errors
from src.presentation.helpers.logging_setup import configure_logging

# Import commands
from .commands.post_commands import (
    by_tag_command,
    create_command,
    export_command,
    like_command,
    liked_command,
    list_command,
    show_command,
)
from .commands.config_command import config_command


@click.group()
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    envvar='POSTBOARD_CONFIG',
    help='Settings file (default: ./postboard.yaml)'
)
@click.option('--db', 'database', help='SQLite database file, overrides the config')
@click.option(
    '--backend',
    type=click.Choice(BACKENDS),
    help='Storage backend; memory starts empty on every run'
)
@click.option('--user', '-u', help='Caller identity (default: $POSTBOARD_USER or default_user)')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False))
@click.pass_context
@reports_errors
def cli(
    ctx,
    config_path: Optional[Path],
    database: Optional[str],
    backend: Optional[str],
    user: Optional[str],
    log_level: Optional[str]
):
    """📝 Postboard CLI - publish, tag and like posts"""
    settings = SettingsManager(config_path=config_path).load()

    overrides = {
        key: value
        for key, value in (('database', database), ('backend', backend), ('log_level', log_level))
        if value is not None
    }
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    configure_logging(settings.log_level)
    ctx.obj = AppContext(settings, user=user, config_path=config_path)


# Register commands
cli.add_command(create_command)
cli.add_command(list_command)
cli.add_command(show_command)
cli.add_command(like_command)
cli.add_command(liked_command)
cli.add_command(by_tag_command)
cli.add_command(export_command)
cli.add_command(config_command)


if __name__ == "__main__":
    cli()
