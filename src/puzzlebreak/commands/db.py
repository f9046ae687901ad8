"""
Database Commands

This module contains the database initialization command.
"""

import sys

import click
from rich.console import Console

from puzzlebreak.core.database import init_database
from puzzlebreak.core.exceptions import DatabaseError
from puzzlebreak.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.pass_context
def init(ctx):
    """Create the question and answer tables.

    \b
    EXAMPLES:

    puzzlebreak db init
    """
    config = ctx.obj['config']

    try:
        init_database()
    except DatabaseError as e:
        logger.error(f"Database initialization failed: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)

    console.print(f"[green]Database initialized at {config.database.url}[/green]")
