"""
Answer Commands

Commands for adding, importing and inspecting stored questions and answers.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List

import click
import yaml
from rich.console import Console
from rich.table import Table

from puzzlebreak.core.database import get_db_session
from puzzlebreak.core.exceptions import ConfigurationError, PuzzleBreakException
from puzzlebreak.storage.repositories import AnswerRepository
from puzzlebreak.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('question_id')
@click.argument('canonical_answer')
@click.option('--variant', '-v', 'variants', multiple=True, help='Accepted alternate form (repeatable)')
@click.option('--item', '-i', 'items', multiple=True, help='Clued item shown to players (repeatable)')
def add(question_id, canonical_answer, variants, items):
    """Store a question with its canonical answer.

    \b
    EXAMPLES:

    puzzlebreak answers add q1 round -v circular -v spherical -i ball -i globe -i wheel
    """
    try:
        with get_db_session() as session:
            AnswerRepository(session).add_question(
                question_id, canonical_answer, variants=variants, items=items
            )
    except PuzzleBreakException as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)

    console.print(f"[green]Stored answer for question {question_id}[/green]")


@click.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_answers(file):
    """Import questions from a YAML file.

    \b
    The file holds a list of entries:

    \b
    - id: q1
      items: [ball, globe, wheel]
      answer: round
      variants: [circular, spherical]
    """
    try:
        entries = _load_entries(file)
        with get_db_session() as session:
            repo = AnswerRepository(session)
            for entry in entries:
                repo.add_question(
                    str(entry['id']),
                    entry['answer'],
                    variants=entry.get('variants') or [],
                    items=entry.get('items') or []
                )
    except (PuzzleBreakException, yaml.YAMLError) as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)

    logger.info(f"Imported {len(entries)} questions from {file}")
    console.print(f"[green]Imported {len(entries)} questions[/green]")


@click.command()
@click.argument('question_id')
def show(question_id):
    """Show a stored question and its answer."""
    try:
        with get_db_session() as session:
            repo = AnswerRepository(session)
            answer = repo.get_answer(question_id)
            question = repo.get_question(question_id)
            items = list(question.items) if question is not None else []
    except PuzzleBreakException as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)

    table = Table(title=f"Question {question_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Items", ", ".join(items) or "-")
    table.add_row("Answer", answer.canonical_answer)
    table.add_row("Variants", ", ".join(sorted(answer.variants)) or "-")
    console.print(table)


def _load_entries(file: Path) -> List[Dict[str, Any]]:
    with open(file, 'r', encoding='utf-8') as f:
        entries = yaml.safe_load(f) or []

    if not isinstance(entries, list):
        raise ConfigurationError(f"{file} must contain a list of questions")

    for position, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict) or 'id' not in entry or not isinstance(entry.get('answer'), str):
            raise ConfigurationError(
                f"Entry {position} in {file} needs an 'id' and a string 'answer'"
            )
        for key in ('variants', 'items'):
            if entry.get(key) is not None and not isinstance(entry[key], list):
                raise ConfigurationError(
                    f"Entry {position} in {file} has a non-list '{key}'"
                )

    return entries
