"""CLI runner for the browser telemetry MCP server."""

import logging
import os
import signal
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from browser_telemetry import __version__
from browser_telemetry.core.config import Config
from browser_telemetry.core.logging import configure_structlog, quiet_noisy_loggers, setup_logging
from browser_telemetry.server.app import build_server

# stdout is the MCP transport
console = Console(stderr=True)

logger = logging.getLogger("browser_telemetry.cli")


def setup_cli_logging(verbose: bool = False) -> None:
    """Set up logging for CLI."""
    level = "DEBUG" if verbose else "INFO"

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(
            console=console,
            rich_tracebacks=True,
            show_time=False,
        )],
        force=True,
    )

    configure_structlog()
    quiet_noisy_loggers()


def exit_on_browser_close() -> None:
    """The user closed the browser window; nothing is left to observe."""
    logger.info("Browser closed, exiting...")
    # Runs inside the Playwright event dispatch; leave without unwinding
    # through it
    os._exit(0)


def install_shutdown_handlers() -> None:
    """Treat SIGTERM like Ctrl-C so the server lifespan closes the browser."""
    signal.signal(signal.SIGTERM, signal.default_int_handler)


@click.group()
@click.version_option(version=__version__)
def cli():
    """🔎 Browser Telemetry - console, click and navigation capture over MCP"""
    pass


@cli.command()
@click.argument("url", required=False)
@click.option("--headless", "-h", is_flag=True, help="Run browser in headless mode")
@click.option("--user-data-dir", "-d", help="Persistent browser profile directory")
@click.option("--log-file", help="Also write logs to this file")
@click.option("--json-logs", is_flag=True, help="Emit JSON formatted logs")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def serve(
    url: Optional[str],
    headless: bool,
    user_data_dir: Optional[str],
    log_file: Optional[str],
    json_logs: bool,
    verbose: bool,
):
    """Open a browser and serve its telemetry over MCP (stdio).

    Examples:

        browser-telemetry serve

        browser-telemetry serve https://example.com

        browser-telemetry serve http://localhost:3000 --user-data-dir ./profile
    """
    config = Config.from_env()
    if headless:
        config.browser.headless = True
    if user_data_dir:
        config.browser.user_data_dir = user_data_dir
    if log_file:
        config.log_file = log_file
    if json_logs:
        config.json_logs = True
    if verbose:
        config.log_level = "DEBUG"

    if config.json_logs or config.log_file:
        setup_logging(config.log_level, config.log_file, config.json_logs)
    else:
        setup_cli_logging(verbose)

    config.ensure_directories()
    logger.info(f"User data: {config.browser.user_data_dir}")

    server = build_server(config, start_url=url, on_browser_close=exit_on_browser_close)
    install_shutdown_handlers()

    try:
        server.run("stdio")
    except KeyboardInterrupt:
        console.print("\n[yellow]Shutting down...[/yellow]")
    except Exception as e:
        console.print(f"\n[red]Fatal error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


@cli.command()
def info():
    """Show server information and configuration."""
    config = Config.from_env()

    table = Table(title="Configuration", border_style="blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Server Name", config.server_name)
    table.add_row("Headless", "Yes" if config.browser.headless else "No")
    table.add_row("User Data", config.browser.user_data_dir)
    table.add_row("Timeout", f"{config.browser.timeout}ms")

    table.add_row("Max Logs", f"{config.capture.max_logs:,}")
    table.add_row("Max Clicks", str(config.capture.max_clicks))
    table.add_row("Max Navigations", str(config.capture.max_navigations))
    table.add_row("Default Logs Returned", str(config.capture.default_logs_return))

    table.add_row("Log Level", config.log_level)
    table.add_row("Log File", config.log_file or "-")

    console.print(table)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
