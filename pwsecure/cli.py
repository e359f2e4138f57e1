"""CLI for pwsecure — check a password against a local Ollama model."""

import argparse
import asyncio
import json
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .assessor import assess_password
from .config import options_from_env
from .errors import PasswordCheckError

RATING_STYLES = {
    "very weak": "bold red",
    "weak": "red",
    "moderate": "yellow",
    "strong": "green",
    "very strong": "bold green",
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def cmd_check(args) -> int:
    options = options_from_env()
    # explicit flags win over the environment
    if args.url:
        options["inference_url"] = args.url
    if args.model:
        options["model"] = args.model
    if args.timeout is not None:
        options["timeout_ms"] = args.timeout

    try:
        result = asyncio.run(assess_password(args.password, options))
    except PasswordCheckError as e:
        print(f"[red]Error during password analysis: {escape(str(e))}[/red]")
        return 1

    if args.json:
        # plain stdout so the output stays machine-readable
        sys.stdout.write(json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n")
        return 0

    style = RATING_STYLES.get(str(result.rating).lower(), "white")
    header = f"Score: {result.score} / 100 — [{style}]{escape(str(result.rating))}[/{style}]"
    secure = "[green]YES[/green]" if result.is_secure else "[red]NO[/red]"
    body = f"Secure: {secure}\n\nSuggestions: {escape(str(result.feedback))}"
    print(Panel(body, title=header))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pwsecure")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    ck = sub.add_parser("check", help="Ask the model to rate a password")
    ck.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    ck.add_argument("--url", type=str, help="Ollama server URL (default: $OLLAMA_URL or http://localhost:11434)")
    ck.add_argument("--model", type=str, help="Model name (default: $OLLAMA_MODEL or llama2)")
    ck.add_argument("--timeout", type=int, help="Request timeout in milliseconds (default: 10000)")
    ck.add_argument("--json", action="store_true", help="Print the result as JSON")
    ck.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
