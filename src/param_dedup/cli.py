"""CLI entry point for param-dedup."""

import logging
from pathlib import Path

import click

from param_dedup.dedup.collector import collect_shared_parameters
from param_dedup.dedup.pipeline import share_parameters
from param_dedup.errors import DedupError
from param_dedup.model.base import SwaggerDoc
from param_dedup.parser.swagger import dump_document, load_document, output_format_for


def _load(doc_path: Path) -> SwaggerDoc:
    try:
        return load_document(doc_path)
    except DedupError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Param Dedup: share identical Swagger parameters via #/parameters references."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the rewritten document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto: by file suffix).")
def dedupe(doc_path: Path, output: Path, fmt: str):
    """Replace inline parameters with shared references."""
    click.echo(f"Parsing {doc_path}...")
    doc = _load(doc_path)
    click.echo(f"Found {len(doc.paths or {})} paths.")

    try:
        result, shared = share_parameters(doc)
    except DedupError as e:
        raise click.ClickException(str(e)) from e

    if fmt == "auto":
        fmt = output_format_for(output)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(result, fmt), encoding="utf-8")
    click.echo(f"Shared {len(shared)} parameters.")
    click.echo(f"Document saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def inspect(doc_path: Path):
    """List the shared names that dedupe would assign."""
    doc = _load(doc_path)
    try:
        _, shared = collect_shared_parameters(doc)
    except DedupError as e:
        raise click.ClickException(str(e)) from e

    for name, param in sorted(shared.items()):
        click.echo(f"{name}\t{param.location or '-'}\t{param.name or '-'}")
    click.echo(f"{len(shared)} distinct parameters.")
