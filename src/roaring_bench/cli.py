import logging
import os
import sys
import time
from datetime import UTC, datetime
from pathlib import Path

import click
from dotenv import load_dotenv

from .config import ENV_DOTENV_PATH, ENV_LOG_LEVEL, BenchConfig
from .datasets import ZipPositionsDataset
from .errors import BenchError, DatasetNotFoundError, EmptyDatasetError
from .runner import BenchmarkSuite, ResultRow, RunReport
from .runner.metadata import build_run_metadata
from .report import HEADER, format_row
from .variants import VARIANTS

logger = logging.getLogger(__name__)


def _load_env() -> None:
    dotenv_path = os.getenv(ENV_DOTENV_PATH, "").strip()
    if dotenv_path:
        path = Path(dotenv_path).expanduser()
        if path.exists():
            load_dotenv(path)
            return
        click.echo(f"Warning: {ENV_DOTENV_PATH} does not exist: {dotenv_path}", err=True)
    load_dotenv()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(ENV_LOG_LEVEL, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=(
        "Example:\n\n"
        "  roaring-bench real-roaring-dataset/census1881.zip "
        "--warmup 15 --samples 30 --targetMs 50"
    ),
)
@click.argument("datasets", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    "--warmup",
    type=int,
    default=None,
    help="Unmeasured warmup iterations per task (default 10, negative clamps to 0)",
)
@click.option(
    "--samples",
    type=int,
    default=None,
    help="Timed samples per task (default 20, values below 5 clamp to 5)",
)
@click.option(
    "--targetMs",
    "--target-ms",
    "target_ms",
    type=int,
    default=None,
    help="Target duration of one timed sample in ms (default 50, non-positive clamps to 1)",
)
@click.option(
    "--impl",
    "impls",
    multiple=True,
    type=click.Choice(list(VARIANTS)),
    help="Only run the given implementation (repeatable; default: all)",
)
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also write full statistics and run metadata to this JSON file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
def main(
    datasets: tuple[str, ...],
    warmup: int | None,
    samples: int | None,
    target_ms: int | None,
    impls: tuple[str, ...],
    output: str | None,
    verbose: bool,
) -> None:
    """A/B micro-benchmark of two roaring bitmap implementations.

    Prints one tab-separated row per implementation with median ns/op for
    pairwise AND, pairwise OR, wide OR and a three-point membership test.
    """
    _load_env()
    _configure_logging(verbose)

    try:
        config = BenchConfig.from_env(warmup=warmup, samples=samples, target_ms=target_ms)
    except BenchError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    variants = [VARIANTS[label] for label in (impls or VARIANTS)]
    suite = BenchmarkSuite(config, variants=variants)
    logger.info(
        "Config: warmup=%d samples=%d targetMs=%g impl=%s",
        config.warmup_iterations,
        config.sample_count,
        config.target_sample_ms,
        ",".join(v.LABEL for v in variants),
    )

    # Abort before any output if a path is missing
    for dataset_path in datasets:
        if not Path(dataset_path).is_file():
            click.echo(f"I can't find the file: {dataset_path}", err=True)
            sys.exit(1)

    started_at = datetime.now(UTC)
    start = time.perf_counter()
    rows: list[ResultRow] = []
    header_printed = False

    for dataset_path in datasets:
        dataset = ZipPositionsDataset(dataset_path)
        try:
            positions = dataset.fetch_positions()
        except DatasetNotFoundError as e:
            click.echo(e.message, err=True)
            sys.exit(1)
        except BenchError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)

        try:
            dataset_rows = suite.run_dataset(dataset.name, positions)
        except EmptyDatasetError as e:
            click.echo(f"Warning: {e.message}", err=True)
            continue

        if not header_printed:
            click.echo(HEADER)
            header_printed = True
        for row in dataset_rows:
            click.echo(format_row(row))
        rows.extend(dataset_rows)

    if output:
        report = RunReport(
            metadata=build_run_metadata(
                config=config,
                datasets=list(datasets),
                variants=[v.LABEL for v in variants],
                started_at=started_at,
                completed_at=datetime.now(UTC),
                duration_ms=(time.perf_counter() - start) * 1000.0,
            ),
            rows=rows,
        )
        saved = report.save(Path(output))
        click.echo(f"Results saved to: {saved}", err=True)


if __name__ == "__main__":
    main()
