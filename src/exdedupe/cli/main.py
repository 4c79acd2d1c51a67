"""Command-line interface for exdedupe.

Every command reads a snapshot of name records from a JSON or JSONL file
(one object per record with an id and a name) and never writes back to
it. Plans are written to a separate file for the record store to apply.
"""

import importlib.metadata
import json
import sys
from pathlib import Path
from typing import NoReturn

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("exdedupe")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.4.0"  # Fallback for development


def _fail(message: str) -> NoReturn:
    click.secho(f"✗ Error: {message}", fg="red", err=True)
    sys.exit(1)


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__, prog_name="exdedupe")
def cli() -> None:
    """Fuzzy matching and deduplication of exercise names.

    Use 'exdedupe COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("records_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--threshold",
    "-t",
    type=click.FloatRange(0.0, 1.0),
    default=0.85,
    show_default=True,
    help="Minimum similarity to group two names",
)
@click.option("--json", "as_json", is_flag=True, help="Print clusters as JSON")
def clusters(records_path: str, threshold: float, as_json: bool) -> None:
    """Group near-duplicate names in RECORDS_PATH for review.

    Examples
    --------
        exdedupe clusters exercises.jsonl
        exdedupe clusters exercises.json --threshold 0.75 --json
    """
    from exdedupe import build_clusters, load_records

    try:
        records = load_records(records_path)
    except Exception as e:
        _fail(str(e))

    found = build_clusters(records, threshold=threshold)

    if as_json:
        _echo_json([cluster.to_dict() for cluster in found])
        return

    if not found:
        click.secho(f"✓ No similar names among {len(records)} records", fg="green")
        return

    for cluster in found:
        click.secho(f"{cluster.main.name} ({cluster.total_count} records)", bold=True)
        for member in cluster.similar:
            click.echo(f"  {member.similarity:6.1%}  {member.record.name}  [{member.record.rid}]")


@cli.command()
@click.argument("name")
@click.argument("records_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--threshold",
    "-t",
    type=click.FloatRange(0.0, 1.0),
    default=0.7,
    show_default=True,
    help="Minimum similarity for a suggestion",
)
@click.option("--limit", type=click.IntRange(min=1), default=5, show_default=True)
@click.option(
    "--catalogue",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Extra candidate names checked after RECORDS_PATH",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def check(
    name: str,
    records_path: str,
    threshold: float,
    limit: int,
    catalogue: str | None,
    as_json: bool,
) -> None:
    """Check whether NAME duplicates a name in RECORDS_PATH.

    Exits with status 1 when NAME is rejected.

    Examples
    --------
        exdedupe check "Bench Pres" exercises.jsonl
    """
    from exdedupe import ExactMatch, Rejected, Warned, load_records, validate

    try:
        records = load_records(records_path)
        external = load_records(catalogue) if catalogue else []
    except Exception as e:
        _fail(str(e))

    result = validate(name, records, threshold, external=external, max_suggestions=limit)

    if as_json:
        _echo_json(result.to_dict())
    elif isinstance(result, Rejected):
        click.secho(f"✗ {result.reason}", fg="red", err=True)
    elif isinstance(result, Warned):
        click.secho(result.message, fg="yellow")
        for suggestion in result.suggestions:
            click.echo(f"  {suggestion.similarity:6.1%}  {suggestion.original}")
    elif isinstance(result, ExactMatch):
        click.secho(f'✓ Matches existing "{result.record.name}"', fg="green")
    else:
        click.secho(f'✓ "{name.strip()}" is a new name', fg="green")

    if isinstance(result, Rejected):
        sys.exit(1)


@cli.command()
@click.argument("name")
@click.option(
    "--corrections",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of extra corrections {variant: display}",
)
def autocorrect(name: str, corrections: str | None) -> None:
    """Print the canonical spelling of NAME."""
    from exdedupe.normalize import autocorrect as correct
    from exdedupe.normalize import load_corrections

    try:
        table = load_corrections(corrections) if corrections else None
    except (OSError, ValueError) as e:
        _fail(str(e))

    click.echo(correct(name, table))


@cli.command()
@click.argument("records_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--ids", required=True, help="Comma-separated ids of the records to merge")
@click.option("--target", required=True, help="Name to merge the records into")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the plan as JSONL instead of printing it",
)
def merge(records_path: str, ids: str, target: str, output: str | None) -> None:
    """Plan renaming the selected records of RECORDS_PATH to one name.

    Examples
    --------
        exdedupe merge exercises.jsonl --ids r2,r7 --target "Bench Press" -o plan.jsonl
    """
    from exdedupe import DedupeError, load_records, plan_merge, write_jsonl

    wanted = [rid.strip() for rid in ids.split(",") if rid.strip()]

    try:
        records = load_records(records_path)
        by_rid = {record.rid: record for record in records}
        missing = [rid for rid in wanted if rid not in by_rid]
        if missing:
            _fail(f"Unknown record ids: {', '.join(missing)}")
        plan = plan_merge([by_rid[rid] for rid in wanted], target)
    except DedupeError as e:
        _fail(str(e))

    if output:
        count = write_jsonl(plan, output)
        click.secho(f"✓ Wrote {count} renames to {output}", fg="green")
    else:
        _echo_json([rename.to_dict() for rename in plan])


@cli.command()
@click.argument("records_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default="out",
    help="Output directory for results (default: out)",
)
@click.option("--cluster-threshold", type=float, default=0.85, show_default=True)
@click.option("--auto-threshold", type=float, default=0.9, show_default=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def review(
    records_path: str,
    output_dir: str,
    cluster_threshold: float,
    auto_threshold: float,
    verbose: bool,
) -> None:
    """Run an audited duplicate review of RECORDS_PATH.

    Writes clusters.jsonl, auto_merge_plan.jsonl, a summary report, the
    event log and the run manifest to OUTPUT_DIR.

    Examples
    --------
        exdedupe review exercises.jsonl -o review
    """
    from exdedupe import load_records
    from exdedupe.engine import EngineConfig, run_review

    try:
        records = load_records(records_path)
        config = EngineConfig(
            cluster_threshold=cluster_threshold,
            auto_merge_threshold=auto_threshold,
            output_dir=Path(output_dir),
        )
    except Exception as e:
        _fail(str(e))

    if verbose:
        click.echo(f"Reviewing {len(records)} records", err=True)
        click.echo(f"  cluster threshold: {config.cluster_threshold}", err=True)
        click.echo(f"  auto-merge threshold: {config.auto_merge_threshold}", err=True)

    result = run_review(records, config)

    if not result.success:
        _fail(f"Review failed: {result.error_message}")

    click.secho(
        f"✓ Reviewed {result.total_records} records "
        f"({result.total_clusters} clusters, {result.auto_merge_renames} auto-merge renames)",
        fg="green",
    )
    if verbose:
        for name, path in result.output_files.items():
            click.echo(f"  {name}: {path}", err=True)


@cli.command()
@click.argument("left_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("right_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the full comparison as JSON")
def compare(left_path: str, right_path: str, as_json: bool) -> None:
    """Compare the names held in LEFT_PATH and RIGHT_PATH."""
    from exdedupe import load_records
    from exdedupe.reconcile import compare_sources

    try:
        left = load_records(left_path)
        right = load_records(right_path)
    except Exception as e:
        _fail(str(e))

    comparison = compare_sources(left, right)

    if as_json:
        _echo_json(comparison.to_dict())
        return

    for key, value in comparison.summary().items():
        click.echo(f"{key}: {value}")


if __name__ == "__main__":
    cli()
