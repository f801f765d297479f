import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

import yaml

from .core.ast_parser import detect_language, should_skip_directory
from .core.config import find_default_config, load_options
from .core.transform import TransformOptions, transform_file


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging.

    Logs go to stderr: stdout carries the transformed source.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_WOULD_CHANGE = 1
EXIT_FAILED = 2


def collect_files(targets: List[str]) -> Tuple[List[str], List[str]]:
    """Expand files and directories into supported source files.

    Returns:
        (files, missing) where missing lists targets that do not exist
    """
    files: List[str] = []
    missing: List[str] = []
    for target in targets:
        if os.path.isdir(target):
            for dirpath, dirnames, filenames in os.walk(target):
                dirnames[:] = sorted(d for d in dirnames if not should_skip_directory(d))
                for fname in sorted(filenames):
                    if detect_language(fname):
                        files.append(os.path.join(dirpath, fname))
        elif os.path.isfile(target):
            files.append(target)
        else:
            missing.append(target)
    return files, missing


def build_options(args: argparse.Namespace) -> TransformOptions:
    """Config file first, then command-line flags on top."""
    config_path = args.config or find_default_config()
    options = load_options(config_path) if config_path else TransformOptions()

    overrides = {}
    if args.only_root is not None:
        overrides["only_root"] = args.only_root
    if args.function_types:
        overrides["function_type_names"] = args.function_types
    if args.base_classes:
        overrides["base_class_names"] = args.base_classes
    if args.factories:
        overrides["factory_function_names"] = args.factories
    return options.merge(overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="displayname",
        description="Add static displayName properties to React components",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Source files or directories (.ts, .tsx, .js, .jsx)"
    )
    parser.add_argument(
        "--only-root",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only name components declared at the top level of each file (default: from config, else off)"
    )
    parser.add_argument(
        "--function-type",
        dest="function_types",
        action="append",
        metavar="NAME",
        help="Type annotation marking a function component (repeatable, replaces the defaults)"
    )
    parser.add_argument(
        "--base-class",
        dest="base_classes",
        action="append",
        metavar="NAME",
        help="Base class prefix marking a class component (repeatable, replaces the defaults)"
    )
    parser.add_argument(
        "--factory",
        dest="factories",
        action="append",
        metavar="NAME",
        help="Factory call producing a component (repeatable, replaces the defaults)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML options file (default: ./displayname.yaml if present)"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--write",
        action="store_true",
        help="Rewrite files in place"
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="List files that would change and exit with status 1 if any"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for displayname."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    try:
        options = build_options(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_FAILED

    files, missing = collect_files(args.paths)
    exit_code = EXIT_OK
    for target in missing:
        logger.error(f"No such file or directory: {target}")
        exit_code = EXIT_FAILED

    would_change = False
    for path in files:
        try:
            result = transform_file(path, options)
        except ValueError as e:
            logger.error(f"Skipping {path}: {e}")
            exit_code = EXIT_FAILED
            continue

        if not result.ok:
            exit_code = EXIT_FAILED
            continue

        for added in result.added:
            logger.info(f"{path}:{added.line}: added displayName {added.name!r} ({added.kind})")

        if args.write:
            if result.changed:
                with open(path, "wb") as f:
                    f.write(result.source_bytes)
                logger.info(f"Rewrote {path}")
        elif args.check:
            if result.changed:
                would_change = True
                print(path)
        else:
            sys.stdout.write(result.source)

    if exit_code == EXIT_OK and would_change:
        return EXIT_WOULD_CHANGE
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
