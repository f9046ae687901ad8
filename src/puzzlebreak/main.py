"""
CLI Entry Point

Command-line interface for the PuzzleBreak answer validation service
using Click with rich output formatting.
"""

import sys
from pathlib import Path

import click
from rich.console import Console

from puzzlebreak.core.config import get_config, reload_config
from puzzlebreak.core.exceptions import PuzzleBreakException
from puzzlebreak.utils.logging import setup_logging, get_logger
from puzzlebreak.commands.check import check
from puzzlebreak.commands.answers import add as answers_add, import_answers, show as answers_show
from puzzlebreak.commands.db import init as db_init

console = Console()
logger = get_logger(__name__)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """PuzzleBreak - answer validation for trivia puzzles"""
    ctx.ensure_object(dict)

    try:
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        if verbose:
            app_config.logging.level = 'DEBUG'
        setup_logging(app_config)

        ctx.obj['config'] = app_config

    except PuzzleBreakException as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(1)


# ===== DATABASE COMMANDS =====

@cli.group()
def db():
    """Database management commands."""
    pass


db.add_command(db_init)


# ===== ANSWER COMMANDS =====

@cli.group()
def answers():
    """Question and answer management commands."""
    pass


answers.add_command(answers_add)
answers.add_command(import_answers, name='import')
answers.add_command(answers_show)


# ===== TOP-LEVEL COMMANDS =====

cli.add_command(check)


def main():
    """Main entry point with error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
