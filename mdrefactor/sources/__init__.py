"""Source registration and lookup for mdrefactor."""
from typing import List

from .base import Source


class SourceRegistry:
    """Registry mapping command-line flags to source classes."""

    _instance = None
    _sources = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SourceRegistry, cls).__new__(cls)
        return cls._instance

    def register_source(self, source_class):
        """Register a source class under its flag."""
        self._sources[source_class.flag] = source_class
        return source_class

    def get_source(self, flag: str):
        """Get a source class by flag."""
        if flag not in self._sources:
            raise ValueError(f"Source '{flag}' is not registered. Available sources: {', '.join(self._sources)}")
        return self._sources[flag]

    def get_available_sources(self) -> List[str]:
        return list(self._sources.keys())


# Global registry instance
registry = SourceRegistry()

from .file import FileSource
from .github import GitHubSource, raw_github_url

registry.register_source(FileSource)
registry.register_source(GitHubSource)

__all__ = [
    'registry',
    'Source',
    'FileSource',
    'GitHubSource',
    'raw_github_url',
]
