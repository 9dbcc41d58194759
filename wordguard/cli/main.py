"""
wordguard CLI — Check text against the bad word catalog from the shell.
"""

import argparse
import sys
from pathlib import Path

from wordguard import __version__
from wordguard.catalog.enums import DEFAULT_LANGUAGE, Language
from wordguard.catalog.words import get_catalog
from wordguard.core.logging import LogChannel, configure_logging, get_logger
from wordguard.output.report import build_report
from wordguard.validate.models import DEFAULT_MESSAGE
from wordguard.validate.not_bad_word import get_validator


def parse_languages(value: str) -> list[Language]:
    """Parse a comma-separated list of language tags."""
    languages = []
    for tag in value.split(","):
        if not tag.strip():
            continue
        try:
            languages.append(Language.parse(tag))
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    return languages


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordguard",
        description="Check text for banned words",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"wordguard {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a text")
    check_parser.add_argument(
        "input",
        type=str,
        help="Input text or path to file (use - for stdin)",
    )
    check_parser.add_argument(
        "--lang",
        type=parse_languages,
        default=[],
        help=f"Comma-separated language tags (default: {DEFAULT_LANGUAGE.value})",
    )
    check_parser.add_argument(
        "--message",
        type=str,
        default=DEFAULT_MESSAGE,
        help=f"Failure message (default: {DEFAULT_MESSAGE!r})",
    )
    check_parser.add_argument(
        "--explain",
        action="store_true",
        help="List the banned words that were found",
    )
    check_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    _add_logging_arguments(check_parser)

    # Words command
    words_parser = subparsers.add_parser("words", help="List banned words")
    words_parser.add_argument(
        "--lang",
        type=parse_languages,
        default=[],
        help="Comma-separated language tags (default: all)",
    )
    _add_logging_arguments(words_parser)

    return parser


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or WORDGUARD_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (catalog,validate,integration,cli,system). Default: all",
    )


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(level=args.log_level, channels=channels, force=True)

    if args.command == "check":
        try:
            return run_check(args)
        except ValueError as e:
            get_logger(LogChannel.SYSTEM).error(
                "configuration_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            parser.error(str(e))
    if args.command == "words":
        return run_words(args)

    return 0


def run_check(args: argparse.Namespace) -> int:
    """Run the check command. Returns 0 if valid, 1 if not."""
    log = get_logger(LogChannel.CLI)

    if args.input == "-":
        text = sys.stdin.read()
    elif len(args.input) < 256 and Path(args.input).is_file():
        text = Path(args.input).read_text(encoding="utf-8")
    else:
        text = args.input

    validator = get_validator()
    config = validator.configure(args.lang, message=args.message)
    result = validator.evaluate(text, config)
    log.info(
        "check_completed",
        valid=result.valid,
        languages=sorted(lang.value for lang in config.languages),
    )

    report = build_report(text, config, result, validator if args.explain else None)

    if args.format == "json":
        print(report.model_dump_json(indent=2))
    else:
        print("valid" if report.valid else f"invalid: {report.message}")
        for hit in report.hits:
            print(f"  [{hit.language}] {hit.word}")

    return 0 if result.valid else 1


def run_words(args: argparse.Namespace) -> int:
    """Print the banned words per language."""
    catalog = get_catalog()
    languages = args.lang or list(catalog.languages())

    for language in languages:
        words = catalog.words_for(language)
        print(f"{language.value}: {', '.join(words) if words else '(none)'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
