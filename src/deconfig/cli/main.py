"""Typer-based command line interface for deconfig."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import click
import structlog
import typer
import yaml

from ..config import AppConfig, dump_default_config, load_config
from ..exceptions import ConsistencyViolation, DeconfigError
from ..logging import configure_logging
from ..maintenance import remove_hidden as sweep_hidden
from ..storage import DeconfigStorage, FileStorage

app = typer.Typer(help="Hide configuration fields from exported configuration")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except DeconfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())


def _storages(sync: Optional[Path], active: Optional[Path]) -> tuple[DeconfigStorage, FileStorage]:
    config: AppConfig = click.get_current_context().obj
    try:
        active_storage = FileStorage(active or config.storage.active_dir)
        sync_storage = FileStorage(sync or config.storage.sync_dir)
    except DeconfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    return DeconfigStorage(sync_storage, active_storage), active_storage


_SYNC_OPTION = typer.Option(None, "--sync", help="Sync (export) storage directory")
_ACTIVE_OPTION = typer.Option(None, "--active", help="Active (live) storage directory")


@app.command("remove-hidden")
def remove_hidden(
    sync: Optional[Path] = _SYNC_OPTION,
    active: Optional[Path] = _ACTIVE_OPTION,
) -> None:
    """Remove hidden configuration that leaked into the sync storage."""
    storage, _active = _storages(sync, active)
    try:
        repaired = sweep_hidden(storage)
    except DeconfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    for name in repaired:
        typer.echo(f'Removed hidden configuration from "{name}"')


@app.command()
def show(
    name: str = typer.Argument(..., help="Configuration record name"),
    raw: bool = typer.Option(False, "--raw", help="Skip the hidden configuration check"),
    sync: Optional[Path] = _SYNC_OPTION,
    active: Optional[Path] = _ACTIVE_OPTION,
) -> None:
    """Print a record from the sync storage with hidden fields restored."""
    storage, _active = _storages(sync, active)
    try:
        data = storage.read_raw(name) if raw else storage.read(name)
    except DeconfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    if data is None:
        typer.echo(f"No such record: {name}", err=True)
        raise typer.Exit(code=1)
    typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)


@app.command("export")
def export_config(
    names: Optional[List[str]] = typer.Argument(None, help="Records to export (default: all)"),
    full: bool = typer.Option(False, "--full", help="Delete the sync storage contents before exporting"),
    sync: Optional[Path] = _SYNC_OPTION,
    active: Optional[Path] = _ACTIVE_OPTION,
) -> None:
    """Write active configuration to the sync storage, hiding marked fields."""
    storage, active_storage = _storages(sync, active)
    selected = names or active_storage.list_all()
    try:
        if full:
            storage.delete_all()
        for name in selected:
            data = active_storage.read(name)
            if data is None:
                typer.echo(f"No such record: {name}", err=True)
                raise typer.Exit(code=1)
            storage.write(name, data)
    except DeconfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    logger.info("export.done", records=len(selected), full=full)
    typer.echo(f"Exported {len(selected)} record(s)")


@app.command("import")
def import_config(
    names: Optional[List[str]] = typer.Argument(None, help="Records to import (default: all)"),
    sync: Optional[Path] = _SYNC_OPTION,
    active: Optional[Path] = _ACTIVE_OPTION,
) -> None:
    """Write sync configuration to the active storage, restoring hidden fields."""
    storage, active_storage = _storages(sync, active)
    selected = names or storage.list_all()
    try:
        for name in selected:
            data = storage.read(name)
            if data is None:
                typer.echo(f"No such record: {name}", err=True)
                raise typer.Exit(code=1)
            active_storage.write(name, data)
    except ConsistencyViolation as exc:
        typer.echo(f"{exc} Import stopped at {exc.name}.", err=True)
        raise typer.Exit(code=1)
    except DeconfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    logger.info("import.done", records=len(selected))
    typer.echo(f"Imported {len(selected)} record(s)")


@app.command("init-config")
def init_config(target: Path = typer.Argument(Path(".deconfig/config.yaml"), help="Where to write the defaults")) -> None:
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
