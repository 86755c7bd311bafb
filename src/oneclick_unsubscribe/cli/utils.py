"""
Common utilities for CLI commands.
"""

import click

from oneclick_unsubscribe.config import Config
from oneclick_unsubscribe.exceptions import IRIParseError, OneClickError
from oneclick_unsubscribe.link import UnsubscribeLink

# Exit status for rejected input, distinct from a failed validation
EXIT_INVALID_INPUT = 2


def fail(message: str):
    """Print an error and exit with the invalid-input status."""
    click.secho(f"✗ Error: {message}", fg='red', err=True)
    raise click.exceptions.Exit(EXIT_INVALID_INPUT)


def build_link(base_uri, token) -> UnsubscribeLink:
    """
    Build a link from CLI arguments, falling back to the configured base URI.

    Args:
        base_uri: Value of --base-uri, or None
        token: Opaque token argument

    Returns:
        The validated link
    """
    base = Config.get_base_uri(base_uri)
    if not base:
        raise click.UsageError('No base URI: pass --base-uri or set ONECLICK_BASE_URI')

    try:
        return UnsubscribeLink.create(base, token)
    except (OneClickError, IRIParseError) as e:
        fail(str(e))
