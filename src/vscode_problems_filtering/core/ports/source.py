from pathlib import Path
from typing import Protocol


class ProblemSource(Protocol):
    def read_text(self, path: Path) -> str: ...
