from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict

from lineread import __version__
from lineread.config import AppConfig, ConfigError, find_config_path, initialize_default_config, load_app_config
from lineread.errors import IoFailure, ParseFailure
from lineread.reader import EofPolicy, PromptStyle
from lineread.stdio import read_stdin, read_stdin_tolerant
from lineread.ui import build_console, report_error

TARGETS: Dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "decimal": Decimal,
}

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_PARSE = 2
EXIT_IO = 3
EXIT_EOF = 4
EXIT_INTERRUPTED = 130


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read typed values from stdin, one per line", add_help=True)
    parser.add_argument("--type", dest="target", choices=sorted(TARGETS), default="str", help="Value type to parse")
    parser.add_argument("--prompt", help="Prompt printed before each read")
    parser.add_argument("--prompt-style", choices=[s.value for s in PromptStyle], help="Print prompt inline or on its own line")
    parser.add_argument("--count", type=int, default=1, help="Number of values to read (0 = until EOF, needs the tolerate policy)")
    parser.add_argument("--tolerant", action="store_true", help="Treat end of input as a normal stop, not an error")
    parser.add_argument("--blank-is-eof", action="store_true", help="Stop at the first empty line (tolerate policy only)")
    parser.add_argument("--config", help="Path to config TOML file")
    parser.add_argument("--init-config", action="store_true", help="Write a default config file (at --config or the default location) and exit")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must be zero or positive")
    return args


def load_config(args: argparse.Namespace) -> AppConfig:
    cli_path = Path(args.config).expanduser() if args.config else None
    if cli_path and not cli_path.is_file():
        raise ConfigError(f"Config file not found: {cli_path}")

    config = load_app_config(cli_path or find_config_path())
    if args.prompt_style:
        config.reader.prompt_style = args.prompt_style
    if args.tolerant:
        config.reader.policy = EofPolicy.TOLERATE.value
    if args.blank_is_eof:
        config.reader.blank_is_eof = True

    tolerant = config.reader.policy == EofPolicy.TOLERATE.value
    if args.count == 0 and not tolerant:
        raise ConfigError("--count 0 reads until EOF and needs the tolerate policy (--tolerant or policy = \"tolerate\")")
    if config.reader.blank_is_eof and not tolerant:
        raise ConfigError("--blank-is-eof needs the tolerate policy (--tolerant or policy = \"tolerate\")")
    return config


def main() -> int:
    args = parse_args(sys.argv[1:])

    if args.version:
        print(f"lineread {__version__}")
        return EXIT_OK

    if args.init_config:
        path = initialize_default_config(args.config)
        print(f"Config written to {path}", file=sys.stderr)
        return EXIT_OK

    try:
        config = load_config(args)
    except ConfigError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    console = build_console(config.ui.rich)
    options = config.reader.read_kwargs()
    policy = options.pop("policy")
    read = read_stdin_tolerant if policy is EofPolicy.TOLERATE else read_stdin
    target = TARGETS[args.target]

    remaining = args.count
    try:
        while args.count == 0 or remaining > 0:
            result = read(target, args.prompt, **options)
            if result.eof:
                break
            if not result.ok:
                report_error(console, result.error)
                if isinstance(result.error, ParseFailure):
                    return EXIT_PARSE
                if isinstance(result.error, IoFailure):
                    return EXIT_IO
                return EXIT_EOF
            print(result.value, file=sys.stdout, flush=True)
            remaining -= 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
