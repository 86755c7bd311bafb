"""
Validate command: check a presented token against a stored link.
"""

import click

from oneclick_unsubscribe.exceptions import OneClickError
from oneclick_unsubscribe.link import UnsubscribeLink
from oneclick_unsubscribe.logging import OneClickLogger
from ..utils import fail

logger = OneClickLogger("cli")


@click.command('validate')
@click.argument('link_file', type=click.File('r'))
@click.argument('candidate')
def validate(link_file, candidate):
    """
    Validate CANDIDATE against a link saved with 'create'.

    LINK_FILE is a JSON file written by 'create', or '-' for stdin.
    Exits 0 when the token matches and 1 when it does not.

    Example:
        oneclick create --base-uri https://example.com/unsubscribe abc123 > link.json
        oneclick validate link.json abc123
    """
    try:
        link = UnsubscribeLink.from_json(link_file.read())
    except (ValueError, KeyError, TypeError) as e:
        fail(f"Could not read link: {e}")
    except OneClickError as e:
        fail(str(e))

    if link.validate(candidate):
        click.secho("valid", fg='green')
        return

    logger.warning("Token validation failed", {"uri_host": link.uri.host, "candidate": candidate})
    click.secho("invalid", fg='red')
    raise click.exceptions.Exit(1)
