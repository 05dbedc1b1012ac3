"""Exceptions raised by the filtering pipeline.

Every error is fatal for the run; the CLI turns them into a message on
stderr and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class ProblemsFilterError(Exception):
    """Base class for all user-facing failures."""

    def describe(self) -> str:
        """Return the message followed by the chain of underlying causes."""
        parts = [str(self)]
        cause = self.__cause__
        while cause is not None:
            parts.append(str(cause))
            cause = cause.__cause__
        return "\n  causé par: ".join(parts)


class MissingCriteriaError(ProblemsFilterError):
    def __init__(self) -> None:
        super().__init__("Au moins un terme d'inclusion ou d'exclusion doit être spécifié")


class InputReadError(ProblemsFilterError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Impossible de lire le fichier: {str(self.path)!r}")


class ProblemDecodeError(ProblemsFilterError):
    def __init__(self, details: str = "") -> None:
        self.details = details
        message = "Erreur lors du parsing du JSON"
        super().__init__(f"{message}: {details}" if details else message)

    def describe(self) -> str:
        # details already summarise the pydantic errors
        return str(self)


class ProblemEncodeError(ProblemsFilterError):
    def __init__(self) -> None:
        super().__init__("Erreur lors de la sérialisation JSON")
