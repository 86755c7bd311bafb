#!/usr/bin/env python3
"""
Command-line entry point for one-click unsubscribe links.

Equivalent to the installed ``oneclick`` console script.
"""

from oneclick_unsubscribe.cli import cli


def main():
    """Main CLI entry point."""
    cli(prog_name='oneclick')


if __name__ == '__main__':
    main()
