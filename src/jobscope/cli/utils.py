"""
CLI utility helpers: output formatting and job store access.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import asdict, fields
from enum import Enum
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from jobscope.core.errors import ConfigError, JobscopeError
from jobscope.core.logging import configure_logging
from jobscope.core.settings import JobscopeSettings
from jobscope.introspection.service import JobIntrospectionService

console = Console()
err_console = Console(stderr=True)


# ── Job store helper ─────────────────────────────────────────────────────


def load_settings(jobstore_url: str | None = None) -> JobscopeSettings:
    """Settings from the environment, with the job store URL optionally overridden."""
    overrides = {} if jobstore_url is None else {"jobstore_url": jobstore_url}
    try:
        return JobscopeSettings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc.error_count()} error(s)", cause=exc) from exc


@contextmanager
def open_service(jobstore_url: str | None = None) -> Iterator[JobIntrospectionService]:
    """Open the configured job store and yield a service over it."""
    from jobscope.introspection.apscheduler_engine import open_engine

    try:
        settings = load_settings(jobstore_url)
        configure_logging(level=settings.log_level, json_format=settings.json_logs)
        with open_engine(settings) as engine:
            yield JobIntrospectionService(engine)
    except JobscopeError as exc:
        err_console.print(f"[bold red]Error[/bold red] ({exc.category.value}): {exc.message}")
        raise typer.Exit(code=1) from exc


# ── Output helpers ───────────────────────────────────────────────────────


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def output_records(
    records: Sequence[Any],
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render a list of introspection dataclasses as a table or JSON."""
    if as_json:
        console.print_json(json.dumps([asdict(r) for r in records], default=str))
        return

    if not records:
        console.print("[dim]No items.[/dim]")
        return

    columns = [f.name for f in fields(records[0])]
    table = Table(title=title or None)
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for record in records:
        table.add_row(*(_cell(getattr(record, c)) for c in columns))
    console.print(table)


def output_names(names: Sequence[str], *, as_json: bool = False, title: str = "") -> None:
    """Render a list of group names."""
    if as_json:
        console.print_json(json.dumps(list(names)))
        return

    if not names:
        console.print("[dim]No items.[/dim]")
        return

    table = Table(title=title or None)
    table.add_column("Name")
    for name in names:
        table.add_row(name)
    console.print(table)
