"""
Config Command - Inspect and update postboard.yaml
"""

import click
from rich.markup import escape
from rich.table import Table

from src.infrastructure.config.settings import SETTING_KEYS, SettingsManager
from src.presentation.context import AppContext, reports_errors


@click.group('config')
def config_command():
    """Show or change persisted settings."""
    pass


@config_command.command('show')
@click.pass_obj
@reports_errors
def show_config(app: AppContext) -> None:
    """Show the effective settings, command line overrides included."""
    table = Table(title="Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in SETTING_KEYS:
        value = getattr(app.settings, key)
        table.add_row(key, "-" if value is None else str(value))
    app.console.print(table)


@config_command.command('set')
@click.argument('key', type=click.Choice(SETTING_KEYS))
@click.argument('value')
@click.pass_obj
@reports_errors
def set_config(app: AppContext, key: str, value: str) -> None:
    """Persist KEY=VALUE in the config file."""
    manager = SettingsManager(config_path=app.config_path)
    manager.set_value(key, value)
    app.console.print(f"[green]✅ {key} = {escape(value)} saved to {manager.config_path}[/green]")
