"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from PogoSearch.cli.commands import (
    BuildCommand,
    DetectCommand,
    LanguagesCommand,
    ParseCommand,
    TranslateCommand,
    ValidateCommand,
)
from PogoSearch.cli.runner import CommandRunner
from PogoSearch.config import AppConfig, load_config_with_defaults
from PogoSearch.config.output import OUTPUT_FORMATS

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (overrides output.format).",
)


def _source_language(cfg: AppConfig, source: str | None) -> str | None:
    """Return the explicit source language, or None to detect it."""
    if source is not None:
        return None if source.strip().lower() == "auto" else source
    return None if cfg.translation.auto_detect else cfg.translation.source


@click.group(help="PogoSearch: validate, parse and translate Pokemon GO search strings.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file, merged over the bundled defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
    """
    # Load environment variables from .env file
    load_dotenv()

    ctx.obj = load_config_with_defaults(config_path)


@cli.command("validate")
@click.argument("text")
@format_option
@click.pass_context
def validate_cmd(ctx: click.Context, text: str, output_format: str | None) -> None:
    """Check syntax and conflicts of a canonical-language search string.

    Exits with status 1 when the string is invalid.
    """
    runner = CommandRunner(ctx.obj)
    valid = runner.run(
        ctx.command.name,
        lambda service, writer: ValidateCommand(service=service, output_writer=writer, text=text),
        output_format=output_format,
    )
    if not valid:
        ctx.exit(1)


@cli.command("parse")
@click.argument("text")
@click.option("--from", "source", default=None, help="Source language (default: translation.source).")
@format_option
@click.pass_context
def parse_cmd(ctx: click.Context, text: str, source: str | None, output_format: str | None) -> None:
    """Translate TEXT to the canonical language, then validate and parse it.

    Exits with status 1 when the canonical string is invalid.
    """
    cfg = ctx.obj
    runner = CommandRunner(cfg)
    valid = runner.run(
        ctx.command.name,
        lambda service, writer: ParseCommand(
            service=service,
            output_writer=writer,
            text=text,
            source=_source_language(cfg, source),
        ),
        output_format=output_format,
    )
    if not valid:
        ctx.exit(1)


@cli.command("translate")
@click.argument("text")
@click.option("--to", "target", default=None, help="Target language (default: translation.target).")
@click.option("--from", "source", default=None, help="Source language (default: translation.source).")
@click.option("--lowercase/--no-lowercase", default=None, help="Lower-case the output for the target locale.")
@format_option
@click.pass_context
def translate_cmd(
    ctx: click.Context,
    text: str,
    target: str | None,
    source: str | None,
    lowercase: bool | None,
    output_format: str | None,
) -> None:
    """Translate TEXT between languages and print warnings."""
    cfg = ctx.obj
    runner = CommandRunner(cfg)
    runner.run(
        ctx.command.name,
        lambda service, writer: TranslateCommand(
            service=service,
            output_writer=writer,
            text=text,
            target=target or cfg.translation.target,
            source=_source_language(cfg, source),
            lowercase=cfg.translation.lowercase if lowercase is None else lowercase,
        ),
        output_format=output_format,
    )


@cli.command("detect")
@click.argument("text")
@format_option
@click.pass_context
def detect_cmd(ctx: click.Context, text: str, output_format: str | None) -> None:
    """Show the languages TEXT could be written in."""
    runner = CommandRunner(ctx.obj)
    runner.run(
        ctx.command.name,
        lambda service, writer: DetectCommand(service=service, output_writer=writer, text=text),
        output_format=output_format,
    )


@cli.command("languages")
@format_option
@click.pass_context
def languages_cmd(ctx: click.Context, output_format: str | None) -> None:
    """List supported languages and their locales."""
    runner = CommandRunner(ctx.obj)
    runner.run(
        ctx.command.name,
        lambda service, writer: LanguagesCommand(service=service, output_writer=writer),
        output_format=output_format,
    )


@cli.command("build")
@click.option("-i", "--include", "include", multiple=True, help="Term to include (OR-combined).")
@click.option("-e", "--exclude", "exclude", multiple=True, help="Term to exclude (negated, AND-combined).")
@format_option
@click.pass_context
def build_cmd(ctx: click.Context, include: tuple[str, ...], exclude: tuple[str, ...], output_format: str | None) -> None:
    """Assemble a search string from included and excluded terms."""
    runner = CommandRunner(ctx.obj)
    runner.run(
        ctx.command.name,
        lambda service, writer: BuildCommand(
            service=service,
            output_writer=writer,
            include=include,
            exclude=exclude,
        ),
        output_format=output_format,
    )
