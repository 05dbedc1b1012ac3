import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from vscode_problems_filtering.errors import ProblemDecodeError, ProblemEncodeError
from vscode_problems_filtering.models import Problem, ProblemOutput

logger = logging.getLogger(__name__)

_PROBLEM_LIST = TypeAdapter(list[Problem])
_OUTPUT_LIST = TypeAdapter(list[ProblemOutput])

_MAX_REPORTED_ERRORS = 3


def _summarize(exc: ValidationError) -> str:
    """Render the first few validation errors as ``location: message``."""
    parts: list[str] = []
    for err in exc.errors(include_url=False)[:_MAX_REPORTED_ERRORS]:
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    remaining = exc.error_count() - len(parts)
    if remaining > 0:
        parts.append(f"(+{remaining} autres erreurs)")
    return "; ".join(parts)


def decode_problems(raw: str | bytes) -> list[Problem]:
    """Parse a Problems panel export.

    The whole document is rejected if it is not a JSON array or if any
    element lacks ``resource``, ``startLineNumber`` or ``message``.
    """
    try:
        problems = _PROBLEM_LIST.validate_json(raw)
    except ValidationError as exc:
        raise ProblemDecodeError(_summarize(exc)) from exc
    logger.debug("Decoded %d problem(s)", len(problems))
    return problems


def encode_outputs(outputs: Sequence[ProblemOutput]) -> str:
    """Serialize display records as indented JSON (no trailing newline)."""
    try:
        return _OUTPUT_LIST.dump_json(list(outputs), indent=2).decode("utf-8")
    except PydanticSerializationError as exc:
        raise ProblemEncodeError() from exc
