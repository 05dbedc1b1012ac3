import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from vscode_problems_filtering.core.filtering import ProblemFilter
from vscode_problems_filtering.core.ports.source import ProblemSource
from vscode_problems_filtering.core.problems import decode_problems
from vscode_problems_filtering.core.render import render_json, render_report
from vscode_problems_filtering.errors import InputReadError, MissingCriteriaError
from vscode_problems_filtering.models import ProblemOutput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOptions:
    input_path: Path
    include_terms: tuple[str, ...] = ()
    exclude_terms: tuple[str, ...] = ()
    ignore_case: bool = False
    count_only: bool = False
    json_output: bool = False

    def to_filter(self) -> ProblemFilter:
        return ProblemFilter(self.include_terms, self.exclude_terms, self.ignore_case)


@dataclass(frozen=True)
class FilterResult:
    total: int
    outputs: list[ProblemOutput]


def run_pipeline(options: FilterOptions, source: ProblemSource, sink: TextIO) -> FilterResult:
    """Read, decode, filter and render one problems export.

    Raises a ``ProblemsFilterError`` subclass on any failure; nothing is
    written to ``sink`` before the input has been read and decoded.
    """
    problem_filter = options.to_filter()
    if not problem_filter.has_criteria:
        raise MissingCriteriaError()

    try:
        raw = source.read_text(options.input_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(options.input_path) from exc

    problems = decode_problems(raw)
    outputs = [ProblemOutput.from_problem(p) for p in problem_filter.select(problems)]
    logger.info("Kept %d of %d problem(s) from %s", len(outputs), len(problems), options.input_path)

    if options.json_output:
        render_json(outputs, sink)
    else:
        render_report(
            sink,
            total=len(problems),
            outputs=outputs,
            include_terms=options.include_terms,
            exclude_terms=options.exclude_terms,
            ignore_case=options.ignore_case,
            count_only=options.count_only,
        )
    return FilterResult(total=len(problems), outputs=outputs)
