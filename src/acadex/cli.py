"""Command line interface for the Acadex catalog."""

from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

from acadex.catalog import (
    AcademicWork,
    CatalogError,
    ChartDataPoint,
    DocumentType,
    FilterState,
    WorkType,
    seeded_store,
)
from acadex.catalog.view import AggregationScope, CatalogView
from acadex.config import AcadexConfig, ConfigError, ConfigManager
from acadex.ingestion import extract_metadata, format_file_size, validate_draft_fields
from acadex.reports import paginate, write_csv

console = Console()
LOGGER = logging.getLogger(__name__)

_WORK_TYPE_CHOICES = [kind.value for kind in WorkType]
_DOCUMENT_TYPE_CHOICES = [kind.value for kind in DocumentType]


@dataclass(slots=True)
class Session:
    """Per-invocation catalog session.

    Attributes:
        config: Effective configuration.
        view: Derived view over a freshly seeded store.
        quiet: Whether non-error output is suppressed.
    """

    config: AcadexConfig
    view: CatalogView
    quiet: bool


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    original: Exception | None = None,
) -> None:
    """Emit a standardized error and terminate the command appropriately.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier.
        json_output: Indicates whether JSON mode is active.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """

    if json_output:
        console.print_json(data={"error": {"code": code, "message": message}})
        raise SystemExit(1)

    raise click.ClickException(message) from original


def _emit_message(message: Any, *, mode: str, quiet: bool) -> None:
    """Print ``message`` unless quiet mode hides it.

    Args:
        message: Renderable or string to emit.
        mode: Output mode identifier (`detail`, `summary`, or `error`).
        quiet: Whether quiet mode is active.
    """

    if quiet and mode != "error":
        return
    console.print(message)


def _format_summary_line(command: str, metrics: dict[str, Any]) -> str:
    """Return a consistent summary line for CLI commands."""

    parts = ", ".join(f"{key}={value}" for key, value in metrics.items())
    return f"[green]{command} summary: {parts}.[/green]"


def _configure_logging(level: str) -> None:
    """Route log records through Rich on stderr at ``level``."""

    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)


def _open_session(ctx: click.Context, *, json_output: bool) -> Session:
    """Load configuration and seed a fresh catalog for this invocation."""

    options = ctx.find_root().obj or {}
    try:
        manager = ConfigManager()
        config = manager.load()
    except ConfigError as exc:
        _handle_cli_error(str(exc), code="config_error", json_output=json_output, original=exc)
        raise  # pragma: no cover - _handle_cli_error always raises

    level = "DEBUG" if options.get("verbose") else config.logging.level
    _configure_logging(level)

    store = seeded_store(strict=config.catalog.strict_ids)
    view = CatalogView(
        store,
        recent_limit=config.catalog.recent_limit,
        trend_months=config.reports.trend_months,
        suggestion_limit=config.search.suggestion_limit,
        suggestion_min_length=config.search.suggestion_min_length,
    )
    quiet = bool(options.get("quiet")) or config.cli.quiet_default
    LOGGER.debug("Seeded session with %s works.", len(store.get_works()))
    return Session(config=config, view=view, quiet=quiet and not json_output)


def _work_table(works: Iterable[AcademicWork], *, title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Nombre")
    table.add_column("Materia")
    table.add_column("Tipo")
    table.add_column("Profesor")
    table.add_column("Semestre")
    table.add_column("Fecha")
    table.add_column("Formato")
    table.add_column("Tamaño", justify="right")
    for work in works:
        table.add_row(
            work.id,
            work.name,
            work.subject,
            work.work_type_label,
            work.professor,
            work.semester,
            work.date,
            work.document_type_label,
            format_file_size(work.file_size),
        )
    return table


def _series_table(title: str, points: Iterable[ChartDataPoint]) -> Table:
    table = Table(title=title)
    table.add_column("Nombre")
    table.add_column("Total", justify="right")
    for point in points:
        table.add_row(point.name, str(point.value))
    return table


def _dump(values: Iterable[Any]) -> list[dict[str, Any]]:
    return [value.model_dump(mode="json") for value in values]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="acadex")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--quiet", is_flag=True, help="Suppress non-error output.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Acadex catalogs academic works and reports statistics about them.

    Every invocation starts from the bundled sample catalog.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


@cli.command()
@click.option("--semester", default="", help="Quick filter on semester.")
@click.option("--subject", default="", help="Quick filter on subject.")
@click.option("--type", "work_type", type=click.Choice(_WORK_TYPE_CHOICES), default=None)
@click.option("--format", "document_type", type=click.Choice(_DOCUMENT_TYPE_CHOICES), default=None)
@click.option(
    "--scope",
    type=click.Choice([scope.value for scope in AggregationScope]),
    default=AggregationScope.ALL.value,
    show_default=True,
    help="Aggregate over every work or only the filtered ones.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of tables.")
@click.pass_context
def stats(
    ctx: click.Context,
    semester: str,
    subject: str,
    work_type: Optional[str],
    document_type: Optional[str],
    scope: str,
    json_output: bool,
) -> None:
    """Show dashboard counters, charts data, and recent works."""
    session = _open_session(ctx, json_output=json_output)
    session.view.set_filters(
        FilterState(
            semester=semester,
            subject=subject,
            work_type=work_type or "",
            document_type=document_type or "",
        )
    )
    snapshot = session.view.dashboard(AggregationScope(scope))

    if json_output:
        console.print_json(
            data={
                "scope": snapshot.scope.value,
                "stats": snapshot.stats.model_dump(mode="json"),
                "by_subject": _dump(snapshot.by_subject),
                "by_type": _dump(snapshot.by_type),
                "trend": _dump(snapshot.trend),
                "recent": _dump(snapshot.recent),
                "counts": {
                    "filtered": snapshot.filtered_count,
                    "has_active_filters": snapshot.has_active_filters,
                },
            }
        )
        return

    quiet = session.quiet
    summary = snapshot.stats
    overview = Table(title="Resumen")
    overview.add_column("Métrica")
    overview.add_column("Valor", justify="right")
    overview.add_row("Trabajos", str(summary.total_works))
    overview.add_row("Materias", str(summary.total_subjects))
    overview.add_row("Semestres", str(summary.total_semesters))
    overview.add_row("Profesores", str(summary.total_professors))
    overview.add_row("Este mes", str(summary.works_this_month))
    overview.add_row("Plantillas", str(summary.templates_count))
    _emit_message(overview, mode="detail", quiet=quiet)
    _emit_message(_series_table("Por materia", snapshot.by_subject), mode="detail", quiet=quiet)
    _emit_message(_series_table("Por tipo", snapshot.by_type), mode="detail", quiet=quiet)

    trend = Table(title="Tendencia mensual")
    trend.add_column("Mes")
    trend.add_column("Total", justify="right")
    for point in snapshot.trend:
        trend.add_row(point.month, str(point.count))
    _emit_message(trend, mode="detail", quiet=quiet)
    _emit_message(_work_table(snapshot.recent, title="Recientes"), mode="detail", quiet=quiet)
    _emit_message(
        _format_summary_line(
            "Stats",
            {"works": summary.total_works, "filtered": snapshot.filtered_count},
        ),
        mode="summary",
        quiet=quiet,
    )


@cli.command()
@click.option("--query", "-q", default="", help="Case-insensitive text to search for.")
@click.option("--semester", default="", help="Exact semester, e.g. 2024-2.")
@click.option("--subject", default="", help="Exact subject name.")
@click.option("--type", "work_type", type=click.Choice(_WORK_TYPE_CHOICES), default=None)
@click.option("--format", "document_type", type=click.Choice(_DOCUMENT_TYPE_CHOICES), default=None)
@click.option("--professor", default="", help="Exact professor name.")
@click.option("--from", "date_from", default="", help="Earliest work date (inclusive).")
@click.option("--to", "date_to", default="", help="Latest work date (inclusive).")
@click.option("--tag", "tags", multiple=True, help="Tag id; repeat to match any of several.")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum results.")
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of a table.")
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    semester: str,
    subject: str,
    work_type: Optional[str],
    document_type: Optional[str],
    professor: str,
    date_from: str,
    date_to: str,
    tags: tuple[str, ...],
    limit: Optional[int],
    json_output: bool,
) -> None:
    """Search the catalog with field filters and free text."""
    session = _open_session(ctx, json_output=json_output)
    filters = FilterState(
        semester=semester,
        subject=subject,
        work_type=work_type or "",
        document_type=document_type or "",
        professor=professor,
        date_from=date_from,
        date_to=date_to,
        search_query=query,
        tags=tags,
    )
    view = session.view
    view.set_filters(filters)
    matches = view.filtered_works
    shown = matches[:limit] if limit else matches
    counts = {
        "total": len(view.store.get_works()),
        "matches": len(shown),
        "truncated": len(matches) - len(shown),
        "active_filters": view.active_filter_count,
    }

    if json_output:
        console.print_json(
            data={
                "filters": filters.model_dump(mode="json"),
                "counts": counts,
                "results": _dump(shown),
            }
        )
        return

    if shown:
        _emit_message(_work_table(shown, title="Resultados"), mode="detail", quiet=session.quiet)
    else:
        _emit_message(
            "[yellow]No works match the filters.[/yellow]", mode="detail", quiet=session.quiet
        )
    _emit_message(_format_summary_line("Search", counts), mode="summary", quiet=session.quiet)


@cli.command()
@click.option("--semester", default="", help="Semester to report on; defaults to all.")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False, writable=True, allow_dash=True),
    default=None,
    help="Write the report rows as CSV to this path ('-' for stdout) instead of tables.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of tables.")
@click.pass_context
def report(
    ctx: click.Context,
    semester: str,
    page: int,
    csv_path: Optional[str],
    json_output: bool,
) -> None:
    """Summarize works per semester and export them as CSV."""
    session = _open_session(ctx, json_output=json_output)
    snapshot = session.view.report(semester)

    if csv_path is not None:
        with click.open_file(csv_path, "w", encoding="utf-8", lazy=False) as stream:
            written = write_csv(
                snapshot.rows, stream, delimiter=session.config.reports.csv_delimiter
            )
        LOGGER.info("Exported %s report rows.", written)
        if csv_path != "-":
            _emit_message(
                _format_summary_line("Export", {"rows": written, "path": csv_path}),
                mode="summary",
                quiet=session.quiet,
            )
        return

    current = paginate(snapshot.works, page, session.config.reports.page_size)

    if json_output:
        console.print_json(
            data={
                "semester": snapshot.semester,
                "by_subject": _dump(snapshot.by_subject),
                "by_type": _dump(snapshot.by_type),
                "by_document_type": _dump(snapshot.by_document_type),
                "trend": _dump(snapshot.trend),
                "page": {
                    "number": current.page,
                    "per_page": current.per_page,
                    "total_items": current.total_items,
                    "total_pages": current.total_pages,
                },
                "rows": _dump(snapshot.rows),
            }
        )
        return

    quiet = session.quiet
    _emit_message(_series_table("Por materia", snapshot.by_subject), mode="detail", quiet=quiet)
    _emit_message(_series_table("Por tipo", snapshot.by_type), mode="detail", quiet=quiet)
    _emit_message(
        _series_table("Por formato", snapshot.by_document_type), mode="detail", quiet=quiet
    )
    page_title = f"Página {current.page} de {max(current.total_pages, 1)}"
    _emit_message(
        _work_table(current.items, title=page_title),
        mode="detail",
        quiet=quiet,
    )
    _emit_message(
        _format_summary_line(
            "Report",
            {
                "semester": semester or "all",
                "works": len(snapshot.works),
                "pages": current.total_pages,
            },
        ),
        mode="summary",
        quiet=quiet,
    )


@cli.command()
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of tables.")
@click.pass_context
def templates(ctx: click.Context, json_output: bool) -> None:
    """List works flagged as reusable templates, grouped by subject."""
    session = _open_session(ctx, json_output=json_output)
    summary = session.view.templates()

    if json_output:
        console.print_json(
            data={
                "total": summary.total,
                "subjects": summary.subjects,
                "versioned": summary.versioned,
                "by_subject": {
                    subject: _dump(works) for subject, works in summary.by_subject.items()
                },
            }
        )
        return

    for subject, works in summary.by_subject.items():
        _emit_message(_work_table(works, title=subject), mode="detail", quiet=session.quiet)
    _emit_message(
        _format_summary_line(
            "Templates",
            {"total": summary.total, "subjects": summary.subjects, "versioned": summary.versioned},
        ),
        mode="summary",
        quiet=session.quiet,
    )


@cli.command()
@click.argument("query")
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of text.")
@click.pass_context
def suggest(ctx: click.Context, query: str, json_output: bool) -> None:
    """Suggest names, subjects, professors, and tags containing QUERY."""
    session = _open_session(ctx, json_output=json_output)
    suggestions = session.view.suggestions(query)

    if json_output:
        console.print_json(data={"query": query, "suggestions": suggestions})
        return

    for term in suggestions:
        _emit_message(f"  - {term}", mode="detail", quiet=session.quiet)
    _emit_message(
        _format_summary_line("Suggest", {"matches": len(suggestions)}),
        mode="summary",
        quiet=session.quiet,
    )


@cli.command()
@click.argument("file_name")
@click.option("--size", type=click.IntRange(min=0), default=0, help="File size in bytes.")
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of text.")
@click.pass_context
def inspect(ctx: click.Context, file_name: str, size: int, json_output: bool) -> None:
    """Guess upload metadata for FILE_NAME."""
    session = _open_session(ctx, json_output=json_output)
    extracted = extract_metadata(file_name, session.view.store.get_subjects())
    candidate = extracted.model_dump(mode="json")
    candidate["file_name"] = file_name
    missing = validate_draft_fields(candidate)

    if json_output:
        console.print_json(
            data={
                "metadata": extracted.model_dump(mode="json"),
                "file_size": size,
                "file_size_label": format_file_size(size),
                "missing": missing,
            }
        )
        return

    table = Table(title=file_name)
    table.add_column("Campo")
    table.add_column("Valor")
    table.add_row("Nombre", extracted.name)
    table.add_row("Materia", extracted.subject or "-")
    table.add_row("Tipo", extracted.work_type.value if extracted.work_type else "-")
    table.add_row("Formato", extracted.document_type.value if extracted.document_type else "-")
    table.add_row("Tamaño", format_file_size(size))
    _emit_message(table, mode="detail", quiet=session.quiet)
    _emit_message(
        _format_summary_line("Inspect", {"missing_fields": len(missing)}),
        mode="summary",
        quiet=session.quiet,
    )


@cli.group()
def config() -> None:
    """Manage Acadex configuration files and overrides."""


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
def config_view(no_env: bool) -> None:
    """Display the effective configuration after applying precedence rules.

    Args:
        no_env: If True, ignore environment-derived overrides.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    manager = ConfigManager()
    try:
        manager.ensure_exists()
        effective = manager.load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(effective.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Args:
        key: Dotted path describing the configuration field to update.
        value: YAML-literal value to write into the configuration file.

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    manager = ConfigManager()
    try:
        manager.ensure_exists()
        before = manager.read_text().splitlines()
        manager.set_value(key, value)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    diff = [
        line
        for line in difflib.unified_diff(
            before,
            manager.read_text().splitlines(),
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
        if not line.startswith(("-# Last updated", "+# Last updated"))
    ]
    if not any(
        line.startswith(("+", "-")) and not line.startswith(("---", "+++")) for line in diff
    ):
        console.print("[yellow]No changes applied; value already up to date.[/yellow]")
        return

    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {key.strip()}.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    try:
        cli()
    except CatalogError as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
