"""Command-line interface for webdeploy."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from loguru import logger

from .config import load_settings, save_settings, DeploySettings, RemoteAgent, TraceLevel
from .log import configure_logging

app = typer.Typer(
    name="webdeploy",
    help="Build and inspect settings for remote web-publishing deployments",
    add_completion=False
)
console = Console()


def _print_settings(settings: DeploySettings, title: str) -> None:
    console.print(Panel.fit(
        json.dumps(settings.to_dict(mask_password=True), indent=2),
        title=title
    ))


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Configure logging before any command runs."""
    configure_logging(TraceLevel.VERBOSE if verbose else TraceLevel.WARNING)


@app.command()
def show(
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """Show the deploy settings resolved from file and environment."""

    try:
        settings = load_settings(config_file)
    except (ValueError, OSError) as e:
        console.print(f"[red]✗ Failed to load settings: {e}[/red]")
        logger.error(f"Load error: {e}")
        raise typer.Exit(1)

    _print_settings(settings, "Current Settings")


@app.command()
def build(
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file to start from"),
    publish_url: Optional[str] = typer.Option(None, "--publish-url", help="Target publish endpoint"),
    agent: Optional[RemoteAgent] = typer.Option(None, "--agent", case_sensitive=False, help="Remote agent type"),
    ntlm: Optional[bool] = typer.Option(None, "--ntlm/--no-ntlm", help="Use NTLM authentication"),
    allow_untrusted: Optional[bool] = typer.Option(None, "--allow-untrusted/--no-allow-untrusted", help="Accept untrusted certificates"),
    computer_name: Optional[str] = typer.Option(None, "--computer-name", help="Target host name"),
    port: Optional[int] = typer.Option(None, "--port", help="Remote connection port"),
    site_name: Optional[str] = typer.Option(None, "--site-name", help="Website name (shares the computer name slot)"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Username to connect with"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password to connect with"),
    trace_level: Optional[TraceLevel] = typer.Option(None, "--trace-level", case_sensitive=False, help="Executor trace level"),
    delete: Optional[bool] = typer.Option(None, "--delete/--no-delete", help="Delete remote files missing from the source"),
    what_if: Optional[bool] = typer.Option(None, "--what-if/--no-what-if", help="Simulate operations without applying them"),
    source: Optional[str] = typer.Option(None, "--source", help="Local package path"),
    dest: Optional[str] = typer.Option(None, "--dest", help="Remote destination path"),
    save: Optional[str] = typer.Option(None, "--save", help="Save the resulting settings to file"),
):
    """Build deploy settings by chaining the given options onto a base configuration."""

    try:
        settings = load_settings(config_file)

        if publish_url is not None:
            settings.set_publish_url(publish_url)
        if agent is not None:
            settings.use_agent_type(agent)
        if ntlm is not None:
            settings.use_ntlm(ntlm)
        if allow_untrusted is not None:
            settings.set_allow_untrusted(allow_untrusted)
        if computer_name is not None:
            settings.use_computer_name(computer_name)
        if port is not None:
            settings.use_port(port)
        if site_name is not None:
            settings.use_site_name(site_name)
        if username is not None:
            settings.use_username(username)
        if password is not None:
            settings.use_password(password)
        if trace_level is not None:
            settings.set_trace_level(trace_level)
        if delete is not None:
            settings.set_delete(delete)
        if what_if is not None:
            settings.set_what_if(what_if)
        if source is not None:
            settings.from_source_path(source)
        if dest is not None:
            settings.to_destination_path(dest)

        if save:
            save_settings(settings, save)
            console.print(f"[green]✓ Settings saved to: {save}[/green]")

    except (ValueError, OSError) as e:
        console.print(f"[red]✗ Failed to build settings: {e}[/red]")
        logger.error(f"Build error: {e}")
        raise typer.Exit(1)

    _print_settings(settings, "Deploy Settings")


@app.command()
def agents():
    """List remote agent types and their default ports."""

    table = Table(title="Remote Agents")
    table.add_column("Agent", style="cyan")
    table.add_column("Default Port", justify="right")

    for agent in RemoteAgent:
        table.add_row(agent.value, str(agent.default_port))

    console.print(table)


@app.command()
def trace_levels():
    """List executor trace levels and the log level each maps to."""

    table = Table(title="Trace Levels")
    table.add_column("Trace Level", style="cyan")
    table.add_column("Log Level", style="green")

    for level in TraceLevel:
        table.add_row(level.value, level.log_level or "-")

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
