"""CLI entry point for api-docs-postman."""

import json
import logging
from pathlib import Path

import click

from api_docs_postman.config import ConfigError, load_config
from api_docs_postman.parser.endpoints import EndpointFileError, load_grouping
from api_docs_postman.writer.collection import PostmanCollectionWriter


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """Export documented endpoints as a Postman collection."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("endpoints_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the collection JSON.")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="Documentation config YAML.")
@click.option("--base-url", default=None, help="Base URL for the collection (overrides postman.base_url).")
def generate(endpoints_path: Path, output: Path, config_path: Path | None, base_url: str | None):
    """Generate a Postman collection from extracted endpoint documentation."""
    try:
        config = load_config(config_path)
        grouping = load_grouping(endpoints_path)
    except (ConfigError, EndpointFileError) as e:
        raise click.ClickException(str(e)) from e

    if base_url:
        config.postman.base_url = base_url

    click.echo(f"Found {sum(len(eps) for eps in grouping.values())} endpoints in {len(grouping)} groups.")
    collection = PostmanCollectionWriter(config).generate(grouping)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(collection, indent=4, ensure_ascii=False, default=str), encoding="utf-8")
    click.echo(f"Postman collection saved to {output}")


@main.command()
@click.argument("endpoints_path", type=click.Path(exists=True, path_type=Path))
def inspect(endpoints_path: Path):
    """List the groups and endpoints that would be exported."""
    try:
        grouping = load_grouping(endpoints_path)
    except EndpointFileError as e:
        raise click.ClickException(str(e)) from e

    for group_name, endpoints in grouping.items():
        click.echo(f"{group_name} ({len(endpoints)})")
        for ep in endpoints:
            click.echo(f"  {ep.methods[0]} {ep.uri}")
