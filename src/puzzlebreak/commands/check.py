"""
Check Command

Validates a single guess against a stored answer and prints the verdict.
"""

import asyncio
import dataclasses
import json
import sys

import click
from rich.console import Console
from rich.table import Table

from puzzlebreak.core.database import get_db_session
from puzzlebreak.core.exceptions import PuzzleBreakException
from puzzlebreak.evaluation.engine import AnswerValidationEngine
from puzzlebreak.evaluation.types import MatchResult
from puzzlebreak.storage.repositories import AnswerRepository
from puzzlebreak.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('question_id')
@click.argument('guess')
@click.option('--threshold', '-t', type=click.IntRange(min=0), help='Maximum edit distance for fuzzy matches')
@click.option('--no-synonyms', is_flag=True, help='Skip the synonym lookup tier')
@click.option('--json', 'as_json', is_flag=True, help='Print the verdict as JSON')
@click.pass_context
def check(ctx, question_id, guess, threshold, no_synonyms, as_json):
    """Check a guess against a question's answer.

    \b
    EXAMPLES:

    puzzlebreak check q1 "rund"
    puzzlebreak check q1 "circular" --no-synonyms
    puzzlebreak check q1 "globular" --threshold 1 --json
    """
    config = ctx.obj['config']

    overrides = {}
    if threshold is not None:
        overrides['fuzzy_threshold'] = threshold
    if no_synonyms:
        overrides['synonyms_enabled'] = False
    app_config = dataclasses.replace(
        config, validation=dataclasses.replace(config.validation, **overrides)
    )

    try:
        with get_db_session() as session:
            engine = AnswerValidationEngine.from_config(AnswerRepository(session), app_config)
            result = asyncio.run(_validate(engine, question_id, guess))
    except PuzzleBreakException as e:
        logger.error(f"Check failed for question {question_id}: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        _display_result(question_id, guess, result)


async def _validate(engine: AnswerValidationEngine, question_id: str, guess: str) -> MatchResult:
    async with engine:
        return await engine.validate(question_id, guess)


def _display_result(question_id: str, guess: str, result: MatchResult) -> None:
    verdict = "[bold green]ACCEPTED[/bold green]" if result.accepted else "[bold red]REJECTED[/bold red]"

    table = Table(title=f"Question {question_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Guess", guess)
    table.add_row("Verdict", verdict)
    table.add_row("Tier", result.tier.value)
    if result.distance is not None:
        table.add_row("Edit distance", str(result.distance))
    if result.matched_against:
        table.add_row("Matched", result.matched_against)
    console.print(table)
