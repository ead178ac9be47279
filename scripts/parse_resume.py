#!/usr/bin/env python3
"""
Offline résumé parsing CLI.

Reads a .txt or .pdf résumé, runs the heuristic parser, prints a per-section
summary and optionally writes the canonical document as JSON.

Usage:
    # Summary only
    python scripts/parse_resume.py cv.pdf

    # Write the document, with reproducible identifiers
    python scripts/parse_resume.py cv.txt --output cv.json --deterministic

    # Force the language guess and keep a DEBUG log
    python scripts/parse_resume.py cv.txt --language pt --log-dir outs/logs/parse
"""

import json
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from curriculo.contexts.parsing.exceptions import ParserConfigError, UnsupportedFileFormatError
from curriculo.contexts.parsing.logger import setup_parsing_logger
from curriculo.contexts.parsing.normalizer import LANGUAGE_GUESSES
from curriculo.contexts.parsing.parser_config import load_parser_settings
from curriculo.contexts.parsing.resume_parser import ParseResult, parse_resume_text
from curriculo.utils.document_text import page_count, read_document_text
from curriculo.utils.identifiers import SequentialIdGenerator, UUIDGenerator

load_dotenv()

app = typer.Typer(
    help="Parse a résumé file into the canonical structured document",
    add_completion=False,
)


def validate_language(language: Optional[str]) -> Optional[str]:
    """
    Check a --language value against the known language guesses.

    Raises:
        typer.BadParameter: If the value is not pt, en, mixed or unknown
    """
    if language is None:
        return None
    language = language.strip().lower()
    if language not in LANGUAGE_GUESSES:
        raise typer.BadParameter(
            f"Invalid language '{language}'. Valid values are: {', '.join(LANGUAGE_GUESSES)}"
        )
    return language


def print_summary(result: ParseResult) -> None:
    """Print section counts, violations and unmapped blocks."""
    document = result.document

    typer.echo("\n=== Metadata ===")
    typer.echo(f"  sourceFormat: {document.metadata.source_format}")
    typer.echo(f"  fileName: {document.metadata.file_name}")
    typer.echo(f"  languageGuess: {document.metadata.language_guess}")

    typer.echo("\n=== Personal Info ===")
    typer.echo(f"  fullName: {document.personal_info.full_name or '(none)'}")
    typer.echo(f"  email: {document.personal_info.email or '(none)'}")
    typer.echo(f"  phone: {document.personal_info.phone or '(none)'}")

    typer.echo(f"\n=== Sections ({len(result.blocks)} blocks) ===")
    typer.echo(f"  experience: {len(document.experience)}")
    typer.echo(f"  education: {len(document.education)}")
    typer.echo(f"  skills: {len(document.skills.categorized.other)}")
    typer.echo(f"  languages: {len(document.languages)}")
    typer.echo(f"  projects: {len(document.projects)}")
    typer.echo(f"  certifications: {len(document.certifications)}")

    if document.unmapped_blocks:
        typer.echo(f"\n=== Unmapped Blocks ({len(document.unmapped_blocks)}) ===")
        for block in document.unmapped_blocks:
            first_line = block.source_text.split("\n", 1)[0]
            typer.echo(f"  {block.reason}: {first_line}")

    if result.violations:
        typer.echo("\n=== Violations ===")
        for violation in result.violations:
            typer.echo(f"  ! {violation}")


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Résumé file (.txt or .pdf)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the canonical document as JSON to this file",
            dir_okay=False,
        ),
    ] = None,
    language: Annotated[
        Optional[str],
        typer.Option(
            "--language",
            "-l",
            help="Language hint overriding detection: pt, en, mixed or unknown",
            callback=validate_language,
        ),
    ] = None,
    deterministic: Annotated[
        bool,
        typer.Option(
            "--deterministic",
            help="Use sequential identifiers (id-1, id-2, ...) instead of random UUIDs",
        ),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML file overriding parser thresholds",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for a DEBUG log file of this run",
            file_okay=False,
        ),
    ] = None,
):
    """
    Parse a résumé and display what was extracted.

    Exits with code 1 when the file format is unsupported, the settings
    override is invalid, or the file contains no text.
    """
    log_file = setup_parsing_logger(log_dir=log_dir, input_name=input_file.name)

    try:
        settings = load_parser_settings(config)
    except ParserConfigError as exc:
        typer.secho(f"ERROR: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    try:
        raw_text = read_document_text(input_file)
    except UnsupportedFileFormatError as exc:
        typer.secho(f"ERROR: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo(f"Parsing {input_file.name}")
    if input_file.suffix.lower() == ".pdf":
        typer.echo(f"Pages: {page_count(input_file) or 'unknown'}")

    id_generator = SequentialIdGenerator() if deterministic else UUIDGenerator()
    result = parse_resume_text(
        raw_text,
        file_name=input_file.name,
        language_hint=language,
        id_generator=id_generator,
        settings=settings,
    )

    if result.is_empty:
        typer.secho("ERROR: Nothing to parse (file contains no text)", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    print_summary(result)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
        )
        typer.echo(f"\nDocument written to {output}")

    if log_file:
        typer.echo(f"Log: {log_file}")

    typer.secho("\n✓ Parsing successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
