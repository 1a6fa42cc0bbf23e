"""Command line interface for mdrefactor."""
from dotenv import load_dotenv
load_dotenv()

import sys
import logging
import argparse
from typing import List, Optional

from colorama import Fore, init

from . import __version__
from .config import Settings, DEFAULT_MODEL, DEFAULT_SYSTEM_PROMPT, GITHUB_SYSTEM_PROMPT
from .errors import RefactorError
from .llm import RefactorClient
from .sources import registry
from .utils import log_msg, log_error
from .writer import write_output

init(autoreset=True)

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mdrefactor',
        description='Refactor a Markdown document using a chat-completion API.')
    parser.add_argument('-input', '--input', default='',
                        help='Path to the input Markdown file')
    parser.add_argument('-output', '--output', default='',
                        help='Path to the output Markdown file (prints to stdout if not provided)')
    parser.add_argument('-apikey', '--apikey', default='',
                        help='OpenAI API key (can also be set via OPENAI_API_KEY environment variable)')
    parser.add_argument('-model', '--model', default=DEFAULT_MODEL,
                        help='Model to use (e.g., gpt-3.5-turbo, gpt-4)')
    parser.add_argument('-prompt', '--prompt', default=DEFAULT_SYSTEM_PROMPT,
                        help='System prompt to guide the AI refactoring')
    parser.add_argument('-git', '--git', default='',
                        help='GitHub URL to use as the document')
    parser.add_argument('-gitprompt', '--gitprompt', default=GITHUB_SYSTEM_PROMPT,
                        help='System prompt to guide the AI building the README file')
    parser.add_argument('-fetch', '--fetch', action='store_true',
                        help='With -git, download the raw file instead of sending the URL itself')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def resolve_settings(parsed_args: argparse.Namespace) -> Settings:
    """Combine environment settings with command-line flags."""
    settings = Settings.from_env().with_overrides(api_key=parsed_args.apikey, model=parsed_args.model)
    if not settings.api_key:
        raise RefactorError.configuration(
            "OpenAI API key is missing. Please provide it using the -apikey flag "
            "or set the OPENAI_API_KEY environment variable.")
    return settings


def select_source(parsed_args: argparse.Namespace, settings: Settings):
    """Return the source to load and the system prompt that goes with it.

    ``-input`` takes precedence over ``-git`` when both are given.
    """
    if parsed_args.input:
        if parsed_args.git:
            log_msg(f"Both -input and -git given, ignoring -git {parsed_args.git}", Fore.YELLOW, '⚠️')
        return registry.get_source('input')(parsed_args.input), parsed_args.prompt

    source_class = registry.get_source('git')
    source = source_class(parsed_args.git, fetch=parsed_args.fetch, timeout=settings.timeout)
    return source, parsed_args.gitprompt


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the mdrefactor command line tool."""
    if args is None:
        args = sys.argv[1:]

    parser = build_parser()
    parsed_args = parser.parse_args(args)

    try:
        settings = resolve_settings(parsed_args)

        if not parsed_args.input and not parsed_args.git:
            flags = ", ".join(f"-{flag}" for flag in registry.get_available_sources())
            log_error(f"Error: Input file path or GitHub url is required (one of {flags}).")
            parser.print_usage(sys.stderr)
            return 1

        source, system_prompt = select_source(parsed_args, settings)
        document = source.load()
        logger.debug(f"Loaded {len(document)} characters from {source!r}")

        with RefactorClient(settings) as client:
            content = client.refactor(system_prompt, document)

        write_output(content, parsed_args.output)
    except RefactorError as e:
        log_error(f"Error ({e.kind.value}): {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
