from pathlib import Path
from typing import Union


class StreamError(Exception):
    """Raised when a source file cannot be read to the end."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {message}")


class EmptySourceError(StreamError):
    """Raised when a source file has no header row."""
