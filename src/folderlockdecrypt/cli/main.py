"""Main CLI interface for Folder Lock Decrypt using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import ConfigManager, FolderLockConfig, get_config_manager
from ..core import DecryptSession
from ..exceptions import DirectoryListingError, ExportError, InvalidDirectoryError
from ..ledger import ExportFormat, Ledger
from ..utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)

FORMAT_CHOICES = [f.value for f in ExportFormat]


def _load_config(ctx) -> FolderLockConfig:
    """Load configuration for a command and apply its logging settings."""
    config_manager = get_config_manager(ctx.obj.get("config_path"))
    config = config_manager.load(create_if_missing=True)

    level = "DEBUG" if ctx.obj.get("verbose") else config.logging.level
    setup_logging(
        level=level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )
    return config


def render_ledger(ledger: Ledger) -> Table:
    """Build the decryption log table."""
    table = Table(title="Decryption Log", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Source", style="cyan", overflow="fold")
    table.add_column("Restored", style="green", overflow="fold")

    for i, entry in enumerate(ledger, 1):
        table.add_row(str(i), entry.file_name, entry.output_path)

    return table


@click.group()
@click.version_option(version=__version__, prog_name="folderlock-decrypt")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: bool):
    """
    Folder Lock Decrypt - restore files hidden by the Android Folder Lock app.

    Reverses the 111-byte header obfuscation and restores the original file names.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("input_dir", required=False)
@click.argument("output_dir", required=False)
@click.option(
    "--export-dir",
    "-e",
    help="Directory to export the processing ledger into",
)
@click.option(
    "--format",
    "-f",
    "formats",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    multiple=True,
    help="Export format, repeatable (default: from config)",
)
@click.pass_context
def decrypt(
    ctx,
    input_dir: Optional[str],
    output_dir: Optional[str],
    export_dir: Optional[str],
    formats: tuple[str, ...],
):
    """
    Restore every hidden file in INPUT_DIR into OUTPUT_DIR.

    Directories not given on the command line are taken from the configuration.
    Files that cannot be restored are reported and skipped.

    \b
    Examples:
        folderlock-decrypt decrypt ./hidden ./restored
        folderlock-decrypt decrypt ./hidden ./restored -e ./logs -f txt -f json
    """
    console.print("\n[bold cyan]Folder Lock File Decrypt[/bold cyan]\n")

    try:
        config = _load_config(ctx)
    except ValueError as e:
        console.print(f"[bold red]✗ Configuration error:[/bold red] {e}")
        sys.exit(1)

    session = DecryptSession.from_config(config)
    if input_dir is not None:
        session.input_dir = input_dir
    if output_dir is not None:
        session.output_dir = output_dir
    if export_dir is not None:
        session.export_dir = export_dir

    try:
        result = session.decrypt()
    except (InvalidDirectoryError, DirectoryListingError) as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]", soft_wrap=True)
        logger.debug("Batch setup failed", exc_info=True)
        sys.exit(1)

    if len(session.ledger):
        console.print(render_ledger(session.ledger))
    else:
        console.print("[yellow]No files were restored.[/yellow]")

    if result.warnings:
        console.print(f"\n[yellow]{result.warning_count} file(s) could not be restored:[/yellow]")
        for warning in result.warnings:
            console.print(f"  • {warning}", style="yellow", markup=False, highlight=False, soft_wrap=True)

    console.print(
        f"\n[green]Restored:[/green] {result.success_count}  "
        f"[yellow]Warnings:[/yellow] {result.warning_count}  "
        f"[dim]Skipped:[/dim] {len(result.skipped)}"
    )

    if not session.export_dir:
        if formats:
            console.print(
                f"\n[yellow]⚠ No export directory given; ignoring requested "
                f"format(s): {', '.join(f.lower() for f in formats)}[/yellow]"
            )
        return

    selected = [ExportFormat(f.lower()) for f in formats] or list(config.export.formats)
    try:
        written = session.export(selected)
    except ExportError as e:
        console.print(f"\n[bold red]✗ Export failed:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    console.print("\n[bold green]✓ The data has been successfully exported.[/bold green]")
    for path in written:
        console.print(f"  [green]{escape(str(path))}[/green]", soft_wrap=True)


@cli.command()
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("config/folderlock.yaml"),
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def init(config_path: Path, force: bool):
    """Create a default configuration file."""
    if config_path.exists() and not force:
        console.print(
            f"[yellow]⚠ Configuration already exists:[/yellow] {config_path} "
            "(use --force to overwrite)"
        )
        return

    try:
        written = ConfigManager(config_path).save(FolderLockConfig(), config_path)
    except OSError as e:
        console.print(f"[bold red]✗ Could not write configuration:[/bold red] {e}")
        sys.exit(1)

    console.print(f"✓ Created default configuration: [green]{written}[/green]")


@cli.group(name="config")
def config_group():
    """Manage Folder Lock Decrypt configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    console.print("\n[bold cyan]Folder Lock Decrypt Configuration[/bold cyan]\n")

    try:
        config_manager = get_config_manager(ctx.obj.get("config_path"))
        config = config_manager.load(create_if_missing=True)
    except ValueError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    def _show(value) -> str:
        return str(value) if value is not None else "(not set)"

    console.print("[bold]Directories:[/bold]")
    console.print(f"  Input:  {_show(config.directories.input_dir)}")
    console.print(f"  Output: {_show(config.directories.output_dir)}")
    console.print(f"  Export: {_show(config.directories.export_dir)}")

    console.print("\n[bold]Export:[/bold]")
    console.print(f"  Formats: {', '.join(f.value for f in config.export.formats)}")
    console.print(f"  JSON indent: {_show(config.export.json_indent)}")
    console.print(f"  UTC timestamps: {config.export.utc_timestamps}")

    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  Log dir: {config.logging.log_dir}")
    console.print(f"  File logging: {config.logging.file_enabled}")

    source = config_manager.config_path or "(defaults)"
    console.print(f"\n[dim]Config file: {source}[/dim]")


if __name__ == "__main__":
    cli()
