from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path


class InMemorySource:
    """``ProblemSource`` backed by a dict of path -> document text.

    Unknown paths raise ``FileNotFoundError`` like a missing file would.
    """

    def __init__(self, documents: Mapping[str | Path, str] | None = None) -> None:
        self._documents: dict[Path, str] = {Path(k): v for k, v in (documents or {}).items()}
        self.reads: list[Path] = []

    def add(self, path: str | Path, text: str) -> None:
        self._documents[Path(path)] = text

    def read_text(self, path: Path) -> str:
        key = Path(path)
        self.reads.append(key)
        try:
            return self._documents[key]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(key)) from None
