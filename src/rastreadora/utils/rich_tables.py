# ABOUTME: Rich table utilities for the CLI's styled, colorful displays
# ABOUTME: Provides pre-configured table generators for sources, scrape summaries and logging status

from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table.

    Args:
        title: Table title with emoji/styling
        columns: List of (column_name, column_style) tuples
        rows: List of row data
        title_style: Style for the table title
        header_style: Style for column headers
        alternate_row_styles: Alternating row styles for zebra striping
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def create_alert_types_table(sites: list[Any]) -> Table:
    """Create a table listing the available sources.

    Args:
        sites: Registered Site objects

    Returns:
        Table with each source's name, description and first listing page
    """
    columns = [("Alert type", "bold cyan"), ("Source", "white"), ("First page", "dim white")]
    rows = [[site.name, site.description, site.build_url(1)] for site in sites]

    return create_multi_column_table(title="🗂️ Available Alert Types", columns=columns, rows=rows)


def create_scrape_summary_table(result: Any, site_name: str, destination: str) -> Table:
    """Create a scrape run summary table.

    Args:
        result: ScrapeResult of the run
        site_name: Alert type that was scraped
        destination: Where the posters were written

    Returns:
        Summary table with page and entry counts
    """
    failed_pages = result.failed_pages
    entry_errors = result.entry_errors

    summary_data = {
        "🗂️ Alert Type": site_name,
        "📄 Pages": str(len(result.pages)),
        "🧾 Posters": f"[bold green]{len(result.posters)}[/bold green]",
        "🚫 Failed Pages": f"[bold red]{failed_pages}[/bold red]" if failed_pages else "0",
        "⚠️ Entry Errors": f"[bold yellow]{entry_errors}[/bold yellow]" if entry_errors else "0",
        "💾 Output": destination,
    }

    return create_key_value_table(
        title="🕷️ Scrape Summary",
        data=summary_data,
        title_style="bold green",
        key_style="cyan",
        value_style="white",
        box_style=SIMPLE,
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
