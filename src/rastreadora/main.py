# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to scrape missing person posters and inspect sources and logging

import math
from pathlib import Path

import asyncclick as click
from rich.console import Console

from rastreadora import __version__
from rastreadora.config import get_config
from rastreadora.core.output import write_output
from rastreadora.core.pipeline import ScrapePipeline, ScrapeResult
from rastreadora.errors import ConfigurationError, OutputError
from rastreadora.extraction.base import Site
from rastreadora.extraction.fetch import NetworkConfig
from rastreadora.extraction.registry import SITES, available_sites, get_site
from rastreadora.utils.logging import (
    LoggingMode,
    configure_logging,
    create_smart_progress,
    get_logger,
    get_logging_status,
)
from rastreadora.utils.rich_tables import (
    create_alert_types_table,
    create_logging_status_table,
    create_scrape_summary_table,
    print_rich_table,
)

# Standard output carries the scraped data
console = Console(stderr=True)
logger = get_logger(__name__)


class TimeoutSeconds(click.ParamType):
    """A positive number of seconds, or ``none`` to wait forever."""

    name = "seconds"

    def convert(self, value, param, ctx):
        if isinstance(value, str) and value.strip().lower() == "none":
            return math.inf
        seconds = click.FloatRange(min=0, min_open=True).convert(value, param, ctx)
        if math.isnan(seconds):
            self.fail(f"{value!r} is not a number of seconds", param, ctx)
        return seconds


async def _run_with_progress(pipeline: ScrapePipeline, page_from: int, page_until: int, json_output: bool):
    """Run the pipeline, showing a spinner in interactive mode."""
    if json_output:
        return await pipeline.run(page_from, page_until)

    _, _, tracker = create_smart_progress(console)
    with tracker:
        tracker.update(f"🕷️ Scraping {pipeline.site.name} pages {page_from}-{page_until}...")
        return await pipeline.run(page_from, page_until)


def _poster_legend(count: int) -> str:
    return "missing person poster" if count == 1 else "missing person posters"


@click.command()
@click.argument("alert_type", type=click.Choice(available_sites()))
@click.argument("page_from", metavar="FROM", type=click.IntRange(min=0))
@click.argument("page_until", metavar="[UNTIL]", type=click.IntRange(min=0), required=False)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to write the posters to (defaults to standard output)",
)
@click.option("--skip-verify", is_flag=True, help="Skip TLS certificate and hostname verification")
@click.option("--timeout", type=TimeoutSeconds(), help="Per-request timeout in seconds, 'none' to wait forever")
@click.option("--max-concurrency", type=click.IntRange(min=1), help="Maximum simultaneous page requests")
@click.pass_context
async def scrape(
    ctx,
    alert_type: str,
    page_from: int,
    page_until: int | None,
    output: Path | None,
    skip_verify: bool,
    timeout: float | None,
    max_concurrency: int | None,
):
    """
    🕷️ Scrape missing person posters from a range of listing pages.

    Pages FROM to UNTIL (inclusive, UNTIL defaults to FROM) of ALERT_TYPE are
    fetched concurrently and their posters are written as one JSON array.
    """
    if page_until is None:
        page_until = page_from
    if page_from > page_until:
        raise click.UsageError(f"FROM ({page_from}) can't be greater than UNTIL ({page_until})", ctx=ctx)

    overrides = {}
    if timeout is not None:
        overrides["timeout"] = None if math.isinf(timeout) else timeout
    if max_concurrency is not None:
        overrides["max_concurrency"] = max_concurrency
    network = get_config().network(skip_verify=skip_verify or None, **overrides)
    site = get_site(alert_type)

    try:
        result = await _scrape_async(site, page_from, page_until, network, ctx.obj["json_output"])
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    try:
        write_output(result.posters, output)
    except OutputError as e:
        console.print(f"[red]❌ {e}[/red]")
        ctx.exit(1)

    collected = len(result.posters)
    logger.info(f"{collected} {_poster_legend(collected)} collected", collected=collected, site=site.name)

    if not ctx.obj["json_output"]:
        destination = str(output) if output else "<stdout>"
        print_rich_table(console, create_scrape_summary_table(result, site.name, destination))


async def _scrape_async(
    site: Site, page_from: int, page_until: int, network: NetworkConfig, json_output: bool
) -> ScrapeResult:
    pipeline = ScrapePipeline(site, network=network)
    return await _run_with_progress(pipeline, page_from, page_until, json_output)


@click.command(name="alert-types")
def alert_types():
    """
    🗂️ List the alert types that can be scraped.
    """
    print_rich_table(console, create_alert_types_table(list(SITES.values())))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    try:
        config = get_config()
        mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

        # Use config defaults when CLI parameters are not provided
        final_log_level = log_level or config.log_level
        final_log_file = log_file or (str(config.log_file) if config.log_file else None)

        configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)
    except (FileNotFoundError, PermissionError, OSError):
        # Fall back to JSON logs on stderr when the log files can't be opened
        configure_logging(mode=LoggingMode.PRODUCTION, log_level=log_level or "INFO")


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs on stderr instead of the rich interface")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to RASTREADORA_LOG_LEVEL or INFO)",
)
@click.option("--log-file", help="Custom log file path")
@click.version_option(__version__, prog_name="rastreadora")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🔎 Rastreadora - missing person poster scraper

    Collects the missing person posters published by Mexican state
    prosecutors' offices into a single JSON document.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level.upper() if log_level else None, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(scrape)
app.add_command(alert_types)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
