"""CLI entrypoint for errshape."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from errshape import __version__
from errshape.config import TransformOptions, load_options, validate_config_file
from errshape.constants.branding import CLI_DESCRIPTION
from errshape.constants.io import DEFAULT_JSON_INDENT, OUTPUT_TEMP_PREFIX, OUTPUT_TEMP_SUFFIX
from errshape.exceptions import ConfigError, InvalidArgument, format_issues
from errshape.io import dump_json, load_error_document, write_json_atomic
from errshape.transform import transform_error_dict

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="errshape", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    transform = subparsers.add_parser("transform", help="Normalize a JSON or YAML error document")
    transform.add_argument("input", type=Path, help="Error document (.json, .yaml or .yml)")
    transform.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding errshape.yaml")
    transform.add_argument("-c", "--config", type=Path, help="Explicit config file")
    transform.add_argument(
        "-k",
        "--preserve-key",
        action="append",
        default=[],
        help="Top-level field whose nested structure is kept (repeat flag for multiple values)",
    )
    transform.add_argument("--max-depth", type=int, default=None, help="Maximum nesting depth of the error tree")
    transform.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the result to this file instead of stdout",
    )
    transform.add_argument("--indent", type=int, default=DEFAULT_JSON_INDENT, help="JSON indentation")
    transform.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without transforming")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding errshape.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "transform":
        parser.error(f"Unsupported command: {args.command}")

    try:
        options = _resolve_options(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        document = load_error_document(args.input)
        result = transform_error_dict(document, options)
        if args.output is None:
            print(dump_json(result, indent=args.indent))
        else:
            write_json_atomic(
                path=args.output,
                payload=result,
                temp_prefix=OUTPUT_TEMP_PREFIX,
                temp_suffix=OUTPUT_TEMP_SUFFIX,
                indent=args.indent,
            )
            logger.info("Wrote %d field(s) to %s", len(result), args.output)
    except InvalidArgument as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 1
    return 0


def _resolve_options(args: argparse.Namespace) -> TransformOptions:
    """Merge config file options with command-line overrides."""
    options = load_options(args.root, args.config).with_preserved_keys(*args.preserve_key)
    if args.max_depth is not None:
        if args.max_depth <= 0:
            raise ConfigError("--max-depth must be a positive integer")
        options = replace(options, max_depth=args.max_depth)
    return options


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    issues = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if issues:
        print(format_issues(issues), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
