"""Output handling for refactored documents."""
from typing import Optional

from colorama import Fore

from .errors import RefactorError
from .utils import log_msg

BANNER = "\n--- Refactored Markdown ---"


def write_output(content: str, output_path: Optional[str] = None) -> None:
    """Write refactored content to ``output_path``, or print it to stdout."""
    if not output_path:
        print(BANNER)
        print(content)
        return

    try:
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise RefactorError.io(f"Error writing output file {output_path}: {e}") from e
    log_msg(f"Refactored content successfully written to {output_path}", Fore.GREEN, '💾')
