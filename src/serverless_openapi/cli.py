"""CLI entry point for serverless-openapi."""

import json
import logging
from pathlib import Path

import click
import yaml

from serverless_openapi.errors import DocumentationError
from serverless_openapi.generator import DefinitionGenerator
from serverless_openapi.loader import load_config_file


def _resolve_format(output: Path, fmt: str) -> str:
    """Pick the output format; ``auto`` goes by the file suffix."""
    if fmt != "auto":
        return fmt
    return "json" if output.suffix.lower() == ".json" else "yaml"


def _serialize(definition: dict, fmt: str, indent: int) -> str:
    if fmt == "json":
        return json.dumps(definition, indent=indent, ensure_ascii=False) + "\n"
    return yaml.safe_dump(definition, sort_keys=False, indent=indent, allow_unicode=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log generation progress.")
def main(verbose: bool):
    """Generate OpenAPI 3.0.0 documents from serverless function documentation."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0), help="Indentation width.")
@click.option("--strict", is_flag=True, help="Fail on references to undeclared models.")
def generate(config_path: Path, output: Path, fmt: str, indent: int, strict: bool):
    """Generate an OpenAPI document from a documentation config file."""
    click.echo(f"Reading {config_path}...")
    try:
        documentation, functions = load_config_file(config_path)
        click.echo(f"Found {len(functions)} functions.")

        generator = DefinitionGenerator(documentation, strict=strict)
        definition = generator.generate(functions)
    except DocumentationError as e:
        raise click.ClickException(str(e)) from e

    fmt = _resolve_format(output, fmt)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_serialize(definition, fmt, indent), encoding="utf-8")
    click.echo(f"Documented {len(definition['paths'])} paths, {len(definition['components']['schemas'])} schemas.")
    click.echo(f"OpenAPI document saved to {output}")
