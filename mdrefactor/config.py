"""Configuration management for mdrefactor."""
import os
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import RefactorError

API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT = 60.0

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant that refactors Markdown content. Please improve its structure, "
    "clarity, and formatting while preserving the original meaning."
)

GITHUB_SYSTEM_PROMPT = (
    "You are a helpful assistant that reads a github repo and writes a Markdown README file. "
    "Please explain how to use the repo and what is important for a new user to know about this repository."
)

USER_PREFIX = "Refactor the following Markdown content:\n\n"


class Settings:
    """Immutable settings for a single refactoring run."""

    __slots__ = ('values',)

    def __init__(self, api_key: str = '', model: str = DEFAULT_MODEL,
                 api_url: str = API_URL, timeout: float = DEFAULT_TIMEOUT):
        object.__setattr__(self, 'values', MappingProxyType({
            'api_key': api_key or '',
            'model': model,
            'api_url': api_url,
            'timeout': timeout,
        }))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getattr__(self, key: str) -> Any:
        if key == 'values':
            raise AttributeError(key)
        try:
            return self.values[key]
        except KeyError:
            raise AttributeError(key) from None

    def __eq__(self, other):
        return isinstance(other, Settings) and dict(self.values) == dict(other.values)

    def __repr__(self):
        shown = dict(self.values, api_key='***' if self.values['api_key'] else '')
        return f"Settings({shown})"

    def with_overrides(self, **overrides) -> 'Settings':
        """Return a copy with the given non-empty values replaced."""
        values = dict(self.values)
        values.update({k: v for k, v in overrides.items() if v not in (None, '')})
        return Settings(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        timeout = env.get('MDREFACTOR_TIMEOUT', str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout)
        except ValueError:
            raise RefactorError.configuration(
                f"MDREFACTOR_TIMEOUT must be a number of seconds, got {timeout!r}") from None
        if timeout <= 0:
            raise RefactorError.configuration("MDREFACTOR_TIMEOUT must be greater than zero")

        return cls(
            api_key=env.get('OPENAI_API_KEY', ''),
            api_url=env.get('MDREFACTOR_API_URL') or API_URL,
            timeout=timeout,
        )
