#!/usr/bin/env python3
"""CLI entrypoint for inspecting locale matches and classifying text."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from tqdm import tqdm

from .io import ResourceLoadError, count_lines, iter_lines
from .locales import (
    LocaleCache,
    get_match_level,
    get_match_level_sorted_string,
    is_match,
    is_rtl_language,
)
from .resources import ResourceRegistry
from .scripts import get_script_from_spell_checker_locale, is_letter_part_of_script
from .text import (
    get_capitalization_type,
    has_line_break_character,
    is_inside_double_quote_or_after_digit,
    last_part_looks_like_url,
)

DEFAULT_LOCALE = "en_US"

app = typer.Typer(
    help="Inspect locale matching and classify text the way an input method does.",
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr."),
    ] = False,
) -> None:
    """Locale matching and text classification tools."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _load_registry(resources: Path | None, cache: LocaleCache) -> ResourceRegistry:
    if resources is None:
        return ResourceRegistry(cache=cache)
    try:
        return ResourceRegistry.from_file(resources, cache=cache)
    except ResourceLoadError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def match(
    reference: Annotated[str, typer.Argument(help="Required locale, e.g. en_US.")],
    tested: Annotated[str, typer.Argument(help="Locale to test against it.")],
) -> None:
    """Show how well TESTED satisfies REFERENCE."""
    level = get_match_level(reference, tested)
    typer.echo(f"Match level: {level.name} ({level.value})")
    typer.echo(f"Sort key:    {get_match_level_sorted_string(level)}")
    if is_match(level):
        typer.secho("Match", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho("No match", fg=typer.colors.YELLOW, bold=True)


@app.command()
def classify(
    text: Annotated[str, typer.Argument(help="Text before the cursor.")],
    locale: Annotated[
        str,
        typer.Option("--locale", "-l", help="Locale of the text."),
    ] = DEFAULT_LOCALE,
) -> None:
    """Classify TEXT as typed before the cursor."""
    script = get_script_from_spell_checker_locale(locale)
    words = text.split()
    last_word = words[-1] if words else ""
    typer.echo(f"Capitalization:    {get_capitalization_type(last_word).name}")
    typer.echo(f"Looks like URL:    {last_part_looks_like_url(text)}")
    typer.echo(f"Inside quote:      {is_inside_double_quote_or_after_digit(text)}")
    typer.echo(f"Has line break:    {has_line_break_character(text)}")
    typer.echo(f"Script:            {script.name}")
    typer.echo(f"Right-to-left:     {is_rtl_language(locale)}")
    in_script = sum(1 for char in text if is_letter_part_of_script(ord(char), script))
    typer.echo(f"Letters in script: {in_script}/{len(text)}")


@app.command()
def profile(
    locale: Annotated[str, typer.Argument(help="Locale to build the profile for.")],
    resources: Annotated[
        Path | None,
        typer.Option(
            "--resources",
            "-r",
            help="JSON file with extra punctuation resources.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """Dump the spacing and punctuation profile of LOCALE."""
    registry = _load_registry(resources, LocaleCache())
    tag = registry.resolve_tag(locale)
    typer.echo(f"Using resources {tag or '<default>'} for {locale or '<default>'}")
    typer.echo(registry.spacing_and_punctuations(locale).dump())


@app.command()
def scan(
    path: Annotated[
        Path,
        typer.Argument(
            help="Text file to scan line by line.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    locale: Annotated[
        str,
        typer.Option("--locale", "-l", help="Locale of the text."),
    ] = DEFAULT_LOCALE,
    resources: Annotated[
        Path | None,
        typer.Option(
            "--resources",
            "-r",
            help="JSON file with extra punctuation resources.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """Count word capitalization and URL-like words in PATH."""
    registry = _load_registry(resources, LocaleCache())
    spacing = registry.spacing_and_punctuations(locale)
    capitalization: Counter[str] = Counter()
    url_count = 0
    try:
        total = count_lines(path)
        with tqdm(
            iter_lines(path), total=total, desc=f"Scanning {path.name}", unit="line"
        ) as lines:
            for line in lines:
                word: list[str] = []
                for char in line + " ":
                    if spacing.is_word_code_point(ord(char)):
                        word.append(char)
                    elif word:
                        caps = get_capitalization_type("".join(word))
                        capitalization[caps.name] += 1
                        word = []
                if last_part_looks_like_url(line.rstrip()):
                    url_count += 1
    except ResourceLoadError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for name in ("NONE", "FIRST", "ALL"):
        typer.echo(f"{name:<6} {capitalization[name]}")
    typer.echo(f"Lines ending in a URL: {url_count}")
    typer.secho(
        f"\nScanned {total} lines of {path}", fg=typer.colors.GREEN, bold=True
    )


if __name__ == "__main__":
    app()
