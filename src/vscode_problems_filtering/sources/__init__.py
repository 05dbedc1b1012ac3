from vscode_problems_filtering.sources.filesystem import FileSystemSource
from vscode_problems_filtering.sources.memory import InMemorySource

__all__ = [
    "FileSystemSource",
    "InMemorySource",
]
