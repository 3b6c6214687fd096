"""CLI entry point for rest-docgen."""

from pathlib import Path

import click

from rest_docgen.collector.collector import Collector
from rest_docgen.exceptions import RestDocError
from rest_docgen.logging_config import setup_logging
from rest_docgen.parser.declarations import parse_declarations
from rest_docgen.writer.base import Configuration
from rest_docgen.writer.html import SimpleHtmlWriter


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """rest-docgen: document REST controllers from source declarations."""
    setup_logging("DEBUG" if verbose else "WARNING")


@main.command()
@click.argument("declarations_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory for the document.")
@click.option("--title", default=None, help="Document title.")
@click.option("--stylesheet", default=None, help="Stylesheet to link instead of the bundled one.")
def render(declarations_path: Path, output: Path, title: str | None, stylesheet: str | None):
    """Render an HTML document from a declaration dump."""
    click.echo(f"Parsing {declarations_path}...")
    try:
        declarations = parse_declarations(declarations_path)
        descriptors = Collector().collect(declarations)
        click.echo(f"Found {sum(len(d.endpoints) for d in descriptors)} endpoints in {len(descriptors)} controllers.")

        output.mkdir(parents=True, exist_ok=True)
        config = Configuration.from_options(title=title, stylesheet=stylesheet, output_dir=output)
        SimpleHtmlWriter(types=declarations).write(descriptors, config)
    except (RestDocError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Document saved to {config.output_path}")


@main.command("list")
@click.argument("declarations_path", type=click.Path(exists=True, path_type=Path))
def list_endpoints(declarations_path: Path):
    """List the endpoints found in a declaration dump."""
    try:
        declarations = parse_declarations(declarations_path)
    except RestDocError as e:
        raise click.ClickException(str(e)) from e

    descriptors = Collector().collect(declarations)
    total = 0
    for descriptor in descriptors:
        click.echo(descriptor.name)
        for endpoint in descriptor.endpoints:
            click.echo(f"  {endpoint.http_method} {endpoint.path}")
            total += 1
    click.echo(f"{total} endpoints")
