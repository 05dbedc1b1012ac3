import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _dist_version
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from vscode_problems_filtering.config import get_settings, setup_logging
from vscode_problems_filtering.core.pipeline import FilterOptions, run_pipeline
from vscode_problems_filtering.errors import ProblemsFilterError
from vscode_problems_filtering.sources import FileSystemSource

PROG_NAME = "vscode-problems-filtering"
_FALLBACK_VERSION = "0.1.0"

app = typer.Typer(
    name=PROG_NAME,
    help="Filtre les problèmes VS Code selon des critères d'inclusion et d'exclusion.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _package_version() -> str:
    try:
        return _dist_version(PROG_NAME)
    except PackageNotFoundError:
        return _FALLBACK_VERSION


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {_package_version()}")
        raise typer.Exit()


@app.command()
def filter_problems(
    input: Annotated[
        Path,
        typer.Option("-f", "--input", metavar="FILE", help="Fichier JSON contenant les problèmes VS Code."),
    ],
    include: Annotated[
        list[str] | None,
        typer.Option(
            "-i", "--include", metavar="TERM", help="Termes à inclure (tous doivent être présents dans le message)."
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "-e", "--exclude", metavar="TERM", help="Termes à exclure (aucun ne doit être présent dans le message)."
        ),
    ] = None,
    ignore_case: Annotated[
        bool, typer.Option("--ignore-case", help="Ignorer la casse lors de la comparaison.")
    ] = False,
    count_only: Annotated[
        bool, typer.Option("-c", "--count-only", help="Afficher seulement le nombre de résultats (pas le tableau).")
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Sortie au format JSON.")] = False,
    version: Annotated[
        bool | None,
        typer.Option("-V", "--version", callback=_version_callback, is_eager=True, help="Afficher la version."),
    ] = None,
) -> None:
    """Filtre les problèmes VS Code selon des critères d'inclusion et d'exclusion."""
    setup_logging(get_settings())
    options = FilterOptions(
        input_path=input,
        include_terms=tuple(include or ()),
        exclude_terms=tuple(exclude or ()),
        ignore_case=ignore_case,
        count_only=count_only,
        json_output=json_output,
    )
    try:
        run_pipeline(options, FileSystemSource(), sys.stdout)
    except ProblemsFilterError as exc:
        err_console.print(f"[red]Erreur:[/red] {escape(exc.describe())}")
        raise typer.Exit(1) from exc


def main() -> None:
    app()
