"""
Command-line interface (CLI) commands for the KVParse package.

This module provides commands for inspecting configuration files from the
command line: dumping their contents, reading a single typed value, and
checking files for errors.
"""

import io
import sys
from typing import Optional

import click

from KVParse.accessor import ValueType
from KVParse.exceptions import KVParseError
from KVParse.settings import Settings
from KVParse.utils import format_json, format_yaml
from KVParse.utils.logging import configure_logging, get_logger, set_log_level

# Get a logger for this module
logger = get_logger(__name__)

SCALAR_TYPES = [t.value for t in ValueType if t not in (ValueType.LIST, ValueType.VECTOR)]


def apply_log_level(ctx, param, value):
    if value:
        set_log_level(value)
    return value


# Add an option for setting the log level to all commands
def log_level_option(f):
    return click.option('--log-level',
                        type=click.Choice(['debug', 'info', 'warning', 'error', 'critical'], case_sensitive=False),
                        callback=apply_log_level, expose_value=False, is_eager=True,
                        help='Set the logging level')(f)


def load_settings(config_path: str) -> Settings:
    settings = Settings()
    settings.read_configuration_file(config_path)
    return settings


def format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "\n".join(format_value(item) for item in value)
    return str(value)


@click.group()
@click.version_option(package_name='KVParse')
def cli():
    """KVParse CLI for inspecting keyword/value configuration files."""
    pass


@cli.command('dump')
@click.argument('config_path')
@click.option('--format', 'format_type', type=click.Choice(['text', 'yaml', 'json'], case_sensitive=False),
              default='text', help='Output format (text, yaml or json)')
@log_level_option
def dump_command(config_path, format_type):
    """Print every keyword of a configuration file with its values."""
    try:
        settings = load_settings(config_path)
    except KVParseError as e:
        logger.error(f"Error reading configuration: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    format_type = format_type.lower()
    if format_type == 'json':
        click.echo(format_json(settings.as_dict()))
    elif format_type == 'yaml':
        click.echo(format_yaml(settings.as_dict()), nl=False)
    else:
        buffer = io.StringIO()
        settings.dump(buffer)
        click.echo(buffer.getvalue(), nl=False)


@cli.command('get')
@click.argument('config_path')
@click.argument('keyword')
@click.option('--type', 'value_type', type=click.Choice([t.value for t in ValueType]),
              default=ValueType.STRING.value, help='Type to read the value as (default: string)')
@click.option('--item-type', type=click.Choice(SCALAR_TYPES), default=ValueType.STRING.value,
              help='Token type for --type vector (default: string)')
@click.option('--required', is_flag=True, help='Fail if the keyword is not present')
@click.option('--default', 'default', help='Value to print if the keyword is not present')
@log_level_option
def get_command(config_path, keyword, value_type, item_type, required, default: Optional[str]):
    """Print the value of KEYWORD converted to the requested type."""
    try:
        settings = load_settings(config_path)
        result = settings.lookup(keyword, ValueType(value_type), required=required,
                                 item_type=ValueType(item_type))
        value = result.unwrap(default)
    except KVParseError as e:
        logger.error(f"Error getting '{keyword}': {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not result.found and value is None:
        click.echo(f"Keyword '{keyword}' not found", err=True)
        sys.exit(1)

    click.echo(format_value(value))


@cli.command('check')
@click.argument('config_paths', nargs=-1, required=True)
@log_level_option
def check_command(config_paths):
    """Parse each configuration file and report any error."""
    failures = 0
    for config_path in config_paths:
        try:
            settings = load_settings(config_path)
        except KVParseError as e:
            failures += 1
            click.echo(f"{config_path}: {e.error_code} {e}")
            continue
        click.echo(f"{config_path}: OK ({len(settings)} keywords)")

    if failures:
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    configure_logging()
    cli()


if __name__ == '__main__':
    main()
