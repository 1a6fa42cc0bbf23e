"""Chat-completion client used to refactor Markdown documents."""
import json
import logging
import time
from typing import Dict, List, Optional

import requests
from colorama import Fore

from .config import Settings, USER_PREFIX
from .errors import RefactorError
from .utils import log_msg

logger = logging.getLogger(__name__)


def build_messages(system_prompt: str, document: str) -> List[Dict[str, str]]:
    """Build the system and user messages for a refactoring request."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": f"{USER_PREFIX}{document}"},
    ]


def build_payload(model: str, system_prompt: str, document: str) -> Dict:
    return {
        "model": model,
        "messages": build_messages(system_prompt, document),
        "stream": False,
    }


class RefactorClient:
    """Sends a document to the chat-completion endpoint and returns the reply.

    Makes exactly one request per call. Timeouts and network failures are not
    retried.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def refactor(self, system_prompt: str, document: str) -> str:
        """Refactor ``document`` using ``system_prompt`` as instructions.

        Returns:
            The content of the first choice, unmodified.

        Raises:
            RefactorError: On a missing API key, a transport failure, or an
                unusable response.
        """
        if not self.settings.api_key:
            raise RefactorError.configuration(
                "OpenAI API key is not set. Please set the OPENAI_API_KEY environment variable "
                "or use the -apikey flag")

        payload = build_payload(self.settings.model, system_prompt, document)

        log_msg("Sending content to API for refactoring...", Fore.CYAN, '🔄')
        start_time = time.time()
        try:
            response = self.session.post(
                self.settings.api_url,
                headers=self.headers,
                data=json.dumps(payload),
                timeout=self.settings.timeout,
            )
        except requests.Timeout as e:
            raise RefactorError.transport(
                f"Request to {self.settings.api_url} timed out after {self.settings.timeout}s: {e}") from e
        except requests.RequestException as e:
            raise RefactorError.transport(f"Failed to send HTTP request: {e}") from e
        logger.info(f"API call took {time.time() - start_time:.2f} seconds")

        content = parse_response(response.text, response.status_code)
        log_msg("Refactoring successful.", Fore.GREEN, '✅')
        return content


def parse_response(body: str, status_code: Optional[int] = None) -> str:
    """Extract the first choice's content from a chat-completion response body."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise RefactorError.protocol(
            f"Failed to decode API response: {e}. Raw response: {body}",
            raw_body=body, status_code=status_code) from e

    if not isinstance(data, dict):
        raise RefactorError.protocol(
            f"Unexpected API response. Raw response: {body}",
            raw_body=body, status_code=status_code)

    error = data.get('error')
    if error is not None:
        if not isinstance(error, dict):
            error = {'message': str(error)}
        message = error.get('message') or ''
        error_type = error.get('type')
        code = error.get('code')
        raise RefactorError.protocol(
            f"API error: {message} (Type: {error_type or ''}, Code: {'' if code is None else code})",
            error_type=error_type, code=code, raw_body=body, status_code=status_code)

    choices = data.get('choices') or []
    if not choices:
        raise RefactorError.protocol(
            f"No refactored content received from API. Raw response: {body}",
            raw_body=body, status_code=status_code)

    try:
        content = choices[0]['message']['content']
    except (KeyError, TypeError) as e:
        raise RefactorError.protocol(
            f"Malformed choice in API response. Raw response: {body}",
            raw_body=body, status_code=status_code) from e

    if content is None:
        return ''
    if not isinstance(content, str):
        raise RefactorError.protocol(
            f"Malformed choice in API response, content is not text. Raw response: {body}",
            raw_body=body, status_code=status_code)
    return content


def refactor(api_key: str, model: str, system_prompt: str, document: str,
             settings: Optional[Settings] = None) -> str:
    """Refactor a document in one call, building a client for the request."""
    settings = (settings or Settings()).with_overrides(api_key=api_key, model=model)
    with RefactorClient(settings) as client:
        return client.refactor(system_prompt, document)
