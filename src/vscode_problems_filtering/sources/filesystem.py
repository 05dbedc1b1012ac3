import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemSource:
    """Read problem exports from the local file system.

    Implements the ``ProblemSource`` protocol.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read_text(self, path: Path) -> str:
        text = Path(path).read_text(encoding=self._encoding)
        logger.debug("Read %d characters from %s", len(text), path)
        return text
