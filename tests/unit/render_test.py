"""Unit tests for report and JSON rendering."""

import io
import json

import pytest

from vscode_problems_filtering.core.render import (
    NO_MATCH_MESSAGE,
    build_table,
    render_json,
    render_report,
)
from vscode_problems_filtering.models import ProblemOutput

OUTPUTS = [
    ProblemOutput(resource="acme/Legacy.java", message="The type ActionError is deprecated", line=10),
    ProblemOutput(resource="acme/Other.java", message="[unchecked] raw type", line=7),
]


def _report(**overrides: object) -> str:
    kwargs: dict[str, object] = {
        "total": 5,
        "outputs": OUTPUTS,
        "include_terms": ["deprecated"],
        "exclude_terms": [],
        "ignore_case": False,
        "count_only": False,
    }
    kwargs.update(overrides)
    sink = io.StringIO()
    render_report(sink, **kwargs)  # type: ignore[arg-type]
    return sink.getvalue()


def test_report_header_lines_in_order() -> None:
    out = _report(include_terms=["a", "b"], exclude_terms=["c"], ignore_case=True, count_only=True)
    assert out.splitlines() == [
        "Nombre total de problèmes: 5",
        "Termes à inclure: a, b",
        "Termes à exclure: c",
        "Mode insensible à la casse activé",
        "",
        "Nombre de problèmes filtrés: 2",
    ]


def test_report_omits_empty_term_lines() -> None:
    out = _report(include_terms=[], exclude_terms=["x"], count_only=True)
    assert "Termes à inclure" not in out
    assert "Termes à exclure: x" in out
    assert "Mode insensible" not in out


def test_report_table_has_headers_and_rows() -> None:
    out = _report()
    lines = out.splitlines()
    assert lines[:5] == [
        "Nombre total de problèmes: 5",
        "Termes à inclure: deprecated",
        "",
        "Nombre de problèmes filtrés: 2",
        "",
    ]
    table = "\n".join(lines[5:])
    assert table.index("Resource") < table.index("Message") < table.index("Line")
    assert "acme/Legacy.java" in table
    assert "The type ActionError is deprecated" in table
    assert "10" in table


def test_report_does_not_interpret_markup_in_messages() -> None:
    out = _report()
    assert "[unchecked] raw type" in out


def test_report_table_does_not_wrap_long_messages() -> None:
    long_message = "m" * 150
    out = _report(outputs=[ProblemOutput(resource="a/b.py", message=long_message, line=1)])
    assert long_message in out


def test_report_has_no_ansi_codes_when_color_is_forced(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.delenv("NO_COLOR", raising=False)
    out = _report()
    assert "Resource" in out
    assert "\x1b[" not in out


def test_report_without_matches() -> None:
    out = _report(outputs=[])
    assert out.splitlines()[-1] == NO_MATCH_MESSAGE
    assert "Resource" not in out


def test_count_only_stops_after_filtered_count() -> None:
    out = _report(count_only=True)
    assert out.endswith("Nombre de problèmes filtrés: 2\n")
    assert "Resource" not in out


def test_build_table_columns() -> None:
    table = build_table(OUTPUTS)
    assert [str(c.header) for c in table.columns] == ["Resource", "Message", "Line"]
    assert table.row_count == 2


def test_render_json_appends_newline() -> None:
    sink = io.StringIO()
    render_json(OUTPUTS, sink)
    text = sink.getvalue()
    assert text.endswith("]\n")
    assert json.loads(text)[1] == {"resource": "acme/Other.java", "message": "[unchecked] raw type", "line": 7}
