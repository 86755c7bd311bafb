"""
Link commands: build a link and render what goes into a message.
"""

import json

import click

from oneclick_unsubscribe.config import Config
from oneclick_unsubscribe.headers import render_headers
from oneclick_unsubscribe.post import build_one_click_request
from ..utils import build_link

base_uri_option = click.option(
    '--base-uri', default=None,
    help='Base HTTPS URI (defaults to ONECLICK_BASE_URI)'
)


@click.command('create')
@base_uri_option
@click.argument('token')
def create(base_uri, token):
    """
    Build a link and print it serialized as JSON.

    Example:
        oneclick create --base-uri https://example.com/unsubscribe abc123
    """
    link = build_link(base_uri, token)
    click.echo(link.to_json())


@click.command('headers')
@base_uri_option
@click.argument('token')
@click.option('--json', 'as_json', is_flag=True, help='Print headers as a JSON object')
def headers(base_uri, token, as_json):
    """
    Print the List-Unsubscribe header fields for a link.

    Example:
        oneclick headers --base-uri https://example.com/unsubscribe abc123
    """
    link = build_link(base_uri, token)
    rendered = render_headers(link)

    if as_json:
        click.echo(json.dumps(rendered, indent=2))
        return

    for name, value in rendered.items():
        click.echo(f"{name}: {value}")


@click.command('request')
@base_uri_option
@click.argument('token')
def request(base_uri, token):
    """
    Show the POST a mail client sends for a link, without sending it.

    Example:
        oneclick request --base-uri https://example.com/unsubscribe abc123
    """
    link = build_link(base_uri, token)
    prepared = build_one_click_request(link, user_agent=Config.USER_AGENT).prepare()

    click.echo(f"{prepared.method} {prepared.url}")
    for name, value in prepared.headers.items():
        click.echo(f"{name}: {value}")
    click.echo()
    body = prepared.body
    if isinstance(body, bytes):
        body = body.decode('utf-8')
    click.echo(body)
