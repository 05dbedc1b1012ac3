from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.measure import Measurement
from rich.table import Table

from vscode_problems_filtering.core.problems import encode_outputs
from vscode_problems_filtering.models import ProblemOutput

NO_MATCH_MESSAGE = "Aucun problème ne correspond aux critères de filtrage."
TABLE_HEADERS = ("Resource", "Message", "Line")

# Upper bound used only to measure the natural width of the table.
_MEASURE_WIDTH = 10_000


def make_console(sink: TextIO) -> Console:
    """Console writing uncoloured plain text to ``sink``; messages are never parsed as markup."""
    return Console(file=sink, markup=False, highlight=False, emoji=False, soft_wrap=True, color_system=None)


def build_table(outputs: Sequence[ProblemOutput]) -> Table:
    table = Table(show_lines=False)
    for header in TABLE_HEADERS:
        table.add_column(header, no_wrap=True, justify="right" if header == "Line" else "left")
    for output in outputs:
        table.add_row(output.resource, output.message, str(output.line))
    return table


def print_table(console: Console, table: Table) -> None:
    """Print ``table`` without wrapping cells, widening the console if needed."""
    options = console.options.update_width(_MEASURE_WIDTH)
    needed = Measurement.get(console, options, table).maximum
    if needed > console.width:
        console.width = needed
    console.print(table)


def render_json(outputs: Sequence[ProblemOutput], sink: TextIO) -> None:
    sink.write(encode_outputs(outputs))
    sink.write("\n")


def render_report(
    sink: TextIO,
    *,
    total: int,
    outputs: Sequence[ProblemOutput],
    include_terms: Sequence[str],
    exclude_terms: Sequence[str],
    ignore_case: bool,
    count_only: bool,
) -> None:
    """Write the human-readable summary and, unless ``count_only``, the table."""
    console = make_console(sink)
    console.out(f"Nombre total de problèmes: {total}")
    if include_terms:
        console.out(f"Termes à inclure: {', '.join(include_terms)}")
    if exclude_terms:
        console.out(f"Termes à exclure: {', '.join(exclude_terms)}")
    if ignore_case:
        console.out("Mode insensible à la casse activé")
    console.out()
    console.out(f"Nombre de problèmes filtrés: {len(outputs)}")

    if count_only:
        return

    console.out()
    if not outputs:
        console.out(NO_MATCH_MESSAGE)
    else:
        print_table(console, build_table(outputs))
