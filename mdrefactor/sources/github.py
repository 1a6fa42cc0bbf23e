"""Source that takes a GitHub URL."""
from typing import Optional
from urllib.parse import urlparse

import requests
from colorama import Fore

from mdrefactor.config import DEFAULT_TIMEOUT
from mdrefactor.errors import RefactorError
from mdrefactor.sources.base import Source
from mdrefactor.utils import log_msg

RAW_HOST = "raw.githubusercontent.com"


def raw_github_url(github_url: str) -> str:
    """Convert a GitHub blob URL to its raw.githubusercontent.com form.

    ``https://github.com/<user>/<repo>/blob/<branch>/<path>`` becomes
    ``https://raw.githubusercontent.com/<user>/<repo>/<branch>/<path>``.
    """
    parts = urlparse(github_url).path.strip('/').split('/')
    if len(parts) < 5 or parts[2] != 'blob':
        raise RefactorError.configuration(
            f"Could not convert to raw GitHub URL: {github_url} is not a file (blob) URL")

    user, repo, _, branch = parts[:4]
    path = '/'.join(parts[4:])
    return f"https://{RAW_HOST}/{user}/{repo}/{branch}/{path}"


class GitHubSource(Source):
    """Validates a GitHub URL and uses it as the document.

    By default the URL string itself is the payload; nothing is fetched. With
    ``fetch=True`` the raw file behind a blob URL is downloaded instead.
    """

    flag = "git"

    def __init__(self, location: str, fetch: bool = False, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        super().__init__(location)
        self.fetch = fetch
        self.timeout = timeout
        self.session = session

    def validate(self) -> None:
        try:
            host = urlparse(self.location).netloc
        except ValueError:
            host = ''
        if 'github.com' not in host:
            raise RefactorError.configuration(f"Invalid GitHub URL: {self.location}")

    def load(self) -> str:
        self.validate()
        log_msg(self.location, Fore.CYAN, '🔗')
        if not self.fetch:
            return self.location
        return self.download(raw_github_url(self.location))

    def download(self, raw_url: str) -> str:
        session = self.session or requests.Session()
        try:
            response = session.get(raw_url, timeout=self.timeout)
        except requests.RequestException as e:
            raise RefactorError.transport(f"Failed to fetch {raw_url}: {e}") from e
        finally:
            if self.session is None:
                session.close()

        if not response.ok:
            raise RefactorError.protocol(
                f"Failed to fetch {raw_url}: HTTP {response.status_code}. Raw response: {response.text}",
                raw_body=response.text, status_code=response.status_code)
        return response.text
