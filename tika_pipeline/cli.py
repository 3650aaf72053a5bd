"""Command line interface for tika-pipeline."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from tika_pipeline import __version__
from tika_pipeline.core.config import TikaConfig
from tika_pipeline.core.enums import MetadataRecordType, OutputFormat
from tika_pipeline.core.exceptions import ExtractionFailure, OutputParseFailure, TikaPipelineError
from tika_pipeline.core.logging import add_log_file, get_logger, set_log_level
from tika_pipeline.extraction.wrapper import TikaWrapper
from tika_pipeline.model.document import Document


@click.group()
@click.version_option(version=__version__, prog_name="tika-pipeline")
def main():
    """tika-pipeline - extract text and metadata from documents with Apache Tika."""


@main.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path (YAML or JSON)')
@click.option('--tika-path', type=str, help='Path to the Tika app jar (overrides config/env)')
@click.option('--java-path', type=str, help='Java runtime executable (overrides config)')
@click.option('--format', 'output_format', type=click.Choice([f.value for f in OutputFormat]), help='Tika output format')
@click.option('--encoding', type=str, help='Output encoding')
@click.option('--metadata-only/--full-content', default=None, help='Only extract metadata (JSON), or extract the full document')
@click.option('--metadata-class', type=click.Choice([r.value for r in MetadataRecordType]), help='Metadata record type')
@click.option('--password', type=str, help='Password for encrypted documents')
@click.option('--timeout', type=float, help='Per-document timeout in seconds')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write logs to this file')
@click.option('--save-results', type=click.Path(dir_okay=False), help='Save extraction results to JSON file')
def extract(
    files: tuple[str, ...],
    config: Optional[str],
    tika_path: Optional[str],
    java_path: Optional[str],
    output_format: Optional[str],
    encoding: Optional[str],
    metadata_only: Optional[bool],
    metadata_class: Optional[str],
    password: Optional[str],
    timeout: Optional[float],
    debug: bool,
    log_file: Optional[str],
    save_results: Optional[str],
):
    """Extract text and metadata from FILES."""
    try:
        tika_config = TikaConfig.from_file(config) if config else TikaConfig()

        overrides = {
            "tika_binary_path": tika_path,
            "java_binary_path": java_path,
            "output_format": output_format,
            "output_encoding": encoding,
            "metadata_only": metadata_only,
            "metadata_class": metadata_class,
            "timeout": timeout,
        }
        for name, value in overrides.items():
            if value is not None:
                tika_config.set_parameter(name, value)
        if debug:
            tika_config.set_parameter("log_level", "DEBUG")
    except (TikaPipelineError, ValueError) as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    set_log_level(tika_config.log_level)
    if log_file:
        add_log_file(log_file, level=tika_config.log_level.value)

    wrapper = TikaWrapper(config=tika_config, logger=get_logger("tika"))
    for file_path in files:
        wrapper.add_document(Document(name=file_path, path=file_path, password=password))

    try:
        wrapper.execute()
    except ExtractionFailure as e:
        click.echo(f"Error: Tika failed: {e.error_output.strip() or e.returncode}", err=True)
        sys.exit(1)
    except OutputParseFailure as e:
        click.echo(f"Error: Cannot parse Tika output for {e.document_name}: {e}", err=True)
        sys.exit(1)

    results = [document.to_dict() for document in wrapper.get_document().values()]

    if save_results:
        results_path = Path(save_results)
        results_path.parent.mkdir(parents=True, exist_ok=True)
        with open(results_path, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, default=str, ensure_ascii=False)
        click.echo(f"✓ Extracted {len(results)} documents")
        click.echo(f"Results saved to: {results_path}")
    else:
        click.echo(json.dumps(results, indent=2, default=str, ensure_ascii=False))


@main.command("init-config")
@click.argument('output', type=click.Path(dir_okay=False))
def init_config(output: str):
    """Write a default configuration file to OUTPUT (.yaml or .json)."""
    try:
        TikaConfig().save(output)
    except TikaPipelineError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Configuration written to: {output}")


if __name__ == "__main__":
    main()
