"""Command-line interface for repo-import."""

from pathlib import Path
from typing import Optional

import click  # type: ignore
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .core.config import ExtractorConfig
from .core.csv_writer import write_into_csv
from .core.errors import RepoImportError
from .core.extractor import RepoExtractor
from .core.logging_setup import setup_logging
from .discovery.manifest_parser import ManifestParser
from .discovery.target_classifier import CargoMetadataProvider, TargetClassifier
from .models.program import Application, Library, Program
from .utils.namespace import extract_namespace


def _load_config(config: Optional[str]) -> ExtractorConfig:
    if not config:
        return ExtractorConfig()
    try:
        return ExtractorConfig.from_file(config)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error loading config file: {e}")


def build_extractor(config: ExtractorConfig) -> RepoExtractor:
    """Wire parser, classifier and extractor from a configuration."""
    parser = ManifestParser(description_key=config.description_key)
    classifier = TargetClassifier(
        provider=CargoMetadataProvider(cargo_bin=config.cargo_bin),
        manifest_name=config.manifest_name,
    )
    return RepoExtractor(parser=parser, classifier=classifier, manifest_name=config.manifest_name)


@click.group()
def cli():
    """repo-import - extract crate records from local repository checkouts."""
    load_dotenv(Path.cwd() / ".env")


@cli.command()
@click.argument('repo_path',
                type=click.Path(exists=True, file_okay=False, dir_okay=True))
@click.option('--output-dir',
              help='Directory for programs.csv, libraries.csv and applications.csv',
              type=click.Path(file_okay=False, dir_okay=True))
@click.option('--config',
              help='Path to configuration file',
              type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--cargo-bin',
              help='cargo executable used for metadata queries')
@click.option('--verbose',
              is_flag=True,
              help='Enable debug logging')
def extract(repo_path: str,
            output_dir: Optional[str],
            config: Optional[str],
            cargo_bin: Optional[str],
            verbose: bool):
    """
    Scan REPO_PATH for crates and write them to CSV.

    \b
    # Single checkout
    repo-import extract ./tokio --output-dir out/
    \b
    # Directory of owner/project checkouts
    repo-import extract ./mirror --config repo_import.yaml
    """
    settings = _load_config(config)
    overrides = {}
    if output_dir:
        overrides["output_dir"] = output_dir
    if cargo_bin:
        overrides["cargo_bin"] = cargo_bin
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings.log_level, debug_mode=verbose)

    extractor = build_extractor(settings)
    result = extractor.extract(repo_path)

    try:
        Path(settings.output_dir).mkdir(parents=True, exist_ok=True)
        write_into_csv(settings.output_path(settings.program_csv), result.programs(), Program)
        write_into_csv(settings.output_path(settings.library_csv), result.libraries(), Library)
        write_into_csv(settings.output_path(settings.application_csv), result.applications(), Application)
    except OSError as e:
        raise click.ClickException(f"Failed to write CSV output: {e}")

    summary = result.get_summary()
    table = Table(title=f"Run {result.run_id}")
    table.add_column("Crates", justify="right")
    table.add_column("Libraries", justify="right")
    table.add_column("Applications", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_row(
        str(summary["total"]),
        str(summary["libraries"]),
        str(summary["applications"]),
        str(summary["skipped"]),
    )
    Console().print(table)
    click.echo(f"CSV files written to {settings.output_dir}")


@cli.command()
@click.argument('url')
def namespace(url: str):
    """Print the owner/repo namespace of a repository URL."""
    try:
        click.echo(extract_namespace(url))
    except RepoImportError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.option('--config-template',
              default='repo_import.yaml',
              help='Output file for configuration template')
def init_config(config_template: str):
    """Generate a configuration template file."""
    ExtractorConfig().save(config_template)
    click.echo(f"Configuration template created: {config_template}")
    click.echo("Edit the file with your settings and use with --config option")


def main():
    cli()


if __name__ == '__main__':
    main()
