"""Source that reads a local Markdown file."""
from pathlib import Path

from mdrefactor.errors import RefactorError
from mdrefactor.sources.base import Source


class FileSource(Source):
    """Reads a whole Markdown file as text.

    Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
    rejected.
    """

    flag = "input"

    def load(self) -> str:
        path = Path(self.location)
        try:
            with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
                return f.read()
        except OSError as e:
            raise RefactorError.io(f"Error reading input file {self.location}: {e}") from e
