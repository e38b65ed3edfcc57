import argparse
import sys
from typing import List, Optional

import uvicorn

from sga_transcoder import __version__
from sga_transcoder.application.services.transcoder import Transcoder
from sga_transcoder.config import LOG_LEVELS, load_settings
from sga_transcoder.domain.entities.conversion_result import Direction
from sga_transcoder.infrastructure.mapping.sga_alphabet import SGAAlphabet
from sga_transcoder.logging_utils import build_uvicorn_log_config, configure_logging


_DIRECTIONS = {
    "encode": Direction.ENCODE,
    "decode": Direction.DECODE,
    "auto": None,
}


def _add_version_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"sga {__version__}",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sga",
        description="Convert text between Latin script and the Standard Galactic Alphabet.",
    )
    _add_version_flag(ap)
    sub = ap.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("encode", "Latin → SGA"),
        ("decode", "SGA → Latin"),
        ("auto", "Decode if the text contains SGA glyphs, otherwise encode"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "text",
            nargs="*",
            help="Text to convert (joined with spaces). Reads stdin when omitted.",
        )

    sub.add_parser("alphabet", help="Print the letter → glyph table")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    # Unset options fall back to SGA_* settings, read only when serving.
    serve.add_argument("--host", help="Bind address (default: SGA_HOST or 127.0.0.1)")
    serve.add_argument("--port", type=int, help="Port (default: SGA_PORT or 8000)")
    serve.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level (default: SGA_LOG_LEVEL or INFO)",
    )
    return ap


def _read_text(words: List[str]) -> str:
    if words:
        return " ".join(words)
    # Drop the single trailing newline a shell pipe adds; keep everything else.
    text = sys.stdin.read()
    return text[:-1] if text.endswith("\n") else text


def _run_convert(command: str, words: List[str]) -> int:
    result = Transcoder().convert(_read_text(words), _DIRECTIONS[command])
    print(result.text)
    return 0


def _run_alphabet() -> int:
    for latin, glyph in SGAAlphabet().get_all_mappings().items():
        print(f"{latin}\t{glyph}")
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    from sga_transcoder.main import create_app

    settings = load_settings()
    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port
    log_level = args.log_level or settings.log_level

    configure_logging(log_level)
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_config=build_uvicorn_log_config(log_level),
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(argv)
    if args.command in _DIRECTIONS:
        return _run_convert(args.command, args.text)
    if args.command == "alphabet":
        return _run_alphabet()
    return _run_serve(args)


if __name__ == "__main__":
    raise SystemExit(main())
