"""
Main CLI group for one-click unsubscribe links.
"""

import click

from oneclick_unsubscribe import __version__
from oneclick_unsubscribe.config import Config, load_config_from_env_file
from oneclick_unsubscribe.logging import configure_logging
from .commands.link import create, headers, request
from .commands.validate import validate


@click.group()
@click.version_option(version=__version__, prog_name='oneclick')
@click.option('--env-file', default='.env', show_default=True, help='Environment file to load')
@click.option('--log-level', default=None, help='Override ONECLICK_LOG_LEVEL')
def cli(env_file, log_level):
    """
    Build and check RFC 8058 one-click unsubscribe links.

    Composes List-Unsubscribe and List-Unsubscribe-Post headers from a
    base HTTPS URI and an opaque token, and validates tokens presented
    at unsubscribe time.
    """
    load_config_from_env_file(env_file)
    configure_logging(level=log_level or Config.LOG_LEVEL, format=Config.LOG_FORMAT)


cli.add_command(create, name='create')
cli.add_command(headers, name='headers')
cli.add_command(request, name='request')
cli.add_command(validate, name='validate')


if __name__ == '__main__':
    cli()
