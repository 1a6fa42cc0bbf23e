"""Base source class for mdrefactor."""

from abc import ABC, abstractmethod


class Source(ABC):
    """A place a Markdown document is loaded from."""

    # Name of the command-line flag that selects this source
    flag = None

    def __init__(self, location: str):
        self.location = location

    @abstractmethod
    def load(self) -> str:
        """Return the document text to send for refactoring."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.location!r})"
