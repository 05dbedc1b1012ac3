from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MAX_MESSAGE_LENGTH = 150
_ELLIPSIS = "..."


class Problem(BaseModel):
    """A single entry of the VS Code Problems panel export."""

    model_config = ConfigDict(extra="allow", strict=True)

    resource: str
    start_line: int = Field(alias="startLineNumber", ge=0)
    message: str

    @property
    def extra(self) -> dict[str, Any]:
        # severity, owner, code, ... are carried along but never used
        return dict(self.model_extra or {})


class ProblemOutput(BaseModel):
    """Display shape of a problem: shortened path, truncated message."""

    model_config = ConfigDict(frozen=True)

    resource: str
    message: str
    line: int

    @classmethod
    def from_problem(cls, problem: Problem) -> "ProblemOutput":
        return cls(
            resource=shorten_resource(problem.resource),
            message=truncate_message(problem.message),
            line=problem.start_line,
        )


def shorten_resource(resource: str) -> str:
    """Keep only the file name and its immediate parent directory."""
    parent, sep, filename = resource.rpartition("/")
    if not sep:
        return resource
    # A leading relative segment is a parent too: "a/c.txt" stays "a/c.txt".
    # Only an empty parent ("/c.txt") reduces to the bare file name.
    parent_name = parent.rpartition("/")[2]
    if not parent_name:
        return filename
    return f"{parent_name}/{filename}"


def truncate_message(message: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    if len(message) > max_length:
        return message[: max_length - len(_ELLIPSIS)] + _ELLIPSIS
    return message
