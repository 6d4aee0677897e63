"""CLI entry point for openapi-dedupe."""

import sys
from pathlib import Path

import click

from openapi_dedupe.errors import DedupeError
from openapi_dedupe.loader.document import load_document
from openapi_dedupe.normalizer.document import process_document
from openapi_dedupe.report import ClickReporter, DedupeSummary, Reporter
from openapi_dedupe.writer import count_parameters, write_document

DEFAULT_INPUT = Path("api") / "openapi.raw.json"
DEFAULT_OUTPUT = Path("api") / "openapi.public.json"


def run_dedupe(
    input_path: Path,
    output_path: Path,
    reporter: Reporter,
    dry_run: bool = False,
) -> DedupeSummary:
    """Load, normalize and write one document. Raises DedupeError on failure."""
    reporter.info(f"Reading OpenAPI spec from: {input_path}")
    doc = load_document(input_path)

    reporter.info("Processing OpenAPI spec...")
    processed = process_document(doc, reporter)

    summary = DedupeSummary(
        input_path=input_path,
        output_path=output_path,
        params_before=count_parameters(doc),
        params_after=count_parameters(processed, merged=True),
        written=not dry_run,
    )

    if summary.written:
        reporter.info(f"Writing processed OpenAPI spec to: {output_path}")
        write_document(processed, output_path)
        reporter.info("Successfully deduplicated OpenAPI parameters!")
    else:
        reporter.info(f"Dry run: not writing {output_path}")

    reporter.info(summary.summary_line())
    return summary


@click.group()
def main():
    """OpenAPI Dedupe: collapse redundant parameter declarations in API docs."""
    pass


@main.command()
@click.option("-i", "--input", "input_path", default=DEFAULT_INPUT, show_default=True, type=click.Path(path_type=Path), help="Raw OpenAPI document (JSON or YAML).")
@click.option("-o", "--output", "output_path", default=DEFAULT_OUTPUT, show_default=True, type=click.Path(path_type=Path), help="Output path for the processed JSON document.")
@click.option("--dry-run", is_flag=True, help="Process and report counts without writing the output.")
def dedupe(input_path: Path, output_path: Path, dry_run: bool):
    """Merge path-level parameters into operations and remove duplicates."""
    reporter = ClickReporter()
    try:
        run_dedupe(input_path, output_path, reporter, dry_run=dry_run)
    except DedupeError as e:
        reporter.error(f"Error processing OpenAPI spec: {e}")
        sys.exit(1)
