"""
Root Typer application for the jobscope CLI.

Every command opens the job store read-only (the scheduler attached to it
is started paused), prints what it finds and closes it again.
"""

from __future__ import annotations

import typer
from typer import Typer

from jobscope.cli.utils import console, open_service, output_names, output_records

app = Typer(
    name="jobscope",
    help="jobscope: read-only introspection over a job scheduler.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

JobstoreUrl = typer.Option(
    None,
    "--jobstore-url",
    "-u",
    help="SQLAlchemy URL of the job store (default: JOBSCOPE_JOBSTORE_URL).",
)
JsonOut = typer.Option(False, "--json", help="Print JSON instead of a table.")


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from jobscope import __version__

        typer.echo(f"jobscope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """jobscope CLI: list jobs, triggers, parameters and groups."""


# ── Introspection commands ───────────────────────────────────────────────


@app.command("jobs")
def list_jobs(
    jobstore_url: str | None = JobstoreUrl,
    json_out: bool = JsonOut,
) -> None:
    """List all jobs with their aggregate status."""
    with open_service(jobstore_url) as service:
        output_records(service.list_jobs(), as_json=json_out, title="Jobs")


@app.command("params")
def list_job_parameters(
    job_name: str = typer.Argument(..., help="Job name"),
    job_group: str = typer.Option("default", "--group", "-g", help="Job group"),
    jobstore_url: str | None = JobstoreUrl,
    json_out: bool = JsonOut,
) -> None:
    """List the parameters of one job."""
    with open_service(jobstore_url) as service:
        output_records(
            service.list_job_parameters(job_name, job_group),
            as_json=json_out,
            title=f"Parameters: {job_group}.{job_name}",
        )


@app.command("triggers")
def list_job_triggers(
    job_name: str = typer.Argument(..., help="Job name"),
    job_group: str = typer.Option("default", "--group", "-g", help="Job group"),
    jobstore_url: str | None = JobstoreUrl,
    json_out: bool = JsonOut,
) -> None:
    """List the triggers of one job."""
    with open_service(jobstore_url) as service:
        output_records(
            service.list_job_triggers(job_name, job_group),
            as_json=json_out,
            title=f"Triggers: {job_group}.{job_name}",
        )


@app.command("job-groups")
def list_job_groups(
    jobstore_url: str | None = JobstoreUrl,
    json_out: bool = JsonOut,
) -> None:
    """List job group names."""
    with open_service(jobstore_url) as service:
        output_names(service.list_job_groups(), as_json=json_out, title="Job groups")


@app.command("trigger-groups")
def list_trigger_groups(
    jobstore_url: str | None = JobstoreUrl,
    json_out: bool = JsonOut,
) -> None:
    """List trigger group names."""
    with open_service(jobstore_url) as service:
        output_names(service.list_trigger_groups(), as_json=json_out, title="Trigger groups")


# ── Server ───────────────────────────────────────────────────────────────


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the read-only REST API."""
    import uvicorn

    from jobscope.cli.utils import load_settings

    settings = load_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting jobscope API[/bold green] on {host}:{port}")
    uvicorn.run(
        "jobscope.api:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=log_level,
    )
