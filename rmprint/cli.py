# rmprint/cli.py
# Command line entry point
#
# Thin plumbing around process_file: argument parsing, directory walking,
# optional parallelism across files, and exit codes.

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Iterable, List, Optional

from . import __version__
from .config import load_settings
from .errors import ConfigError, RmprintError
from .processor import process_file


def non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rmprint',
        description='Remove debug print calls and commented-out prints from Python files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rmprint app.py
  rmprint src/ tests/ --dry-run
  rmprint src/ --config config.py --max-blank-lines 2 --jobs 4
        """
    )
    parser.add_argument('paths', nargs='+', help='Python files or directories to clean')
    parser.add_argument('--config', '-c', help='Configuration file (see config.example.py)')
    parser.add_argument('--dry-run', '-n', action='store_true',
                        help='Report what would change without writing')
    parser.add_argument('--keep-comments', action='store_true',
                        help='Do not remove commented-out debug prints')
    parser.add_argument('--max-blank-lines', type=non_negative_int, default=None,
                        help='Longest run of blank lines kept after cleaning (default: 1)')
    parser.add_argument('--jobs', '-j', type=positive_int, default=1,
                        help='Files processed in parallel (default: 1)')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    verbosity.add_argument('--quiet', '-q', action='store_true', help='Only report errors')
    parser.add_argument('--version', action='version', version=f'rmprint {__version__}')
    return parser


def configure_logging(verbose=False, quiet=False):
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='[%(name)s] %(message)s', stream=sys.stderr)


def collect_files(paths: Iterable[str], skip_dirs: Iterable[str] = ()) -> List[Path]:
    """
    Expand directories into the Python files they contain.

    Explicit file paths are kept as given, whatever their suffix. Duplicates
    are dropped and order is preserved.
    """
    skip_dirs = set(skip_dirs)
    files = []

    for raw in paths:
        path = Path(raw)
        if not path.is_dir():
            files.append(path)
            continue

        for candidate in sorted(path.rglob('*.py')):
            parents = candidate.relative_to(path).parts[:-1]
            if any(part in skip_dirs for part in parents):
                continue
            if candidate.is_file():
                files.append(candidate)

    return list(dict.fromkeys(files))


def _run_one(path, settings, dry_run):
    try:
        return path, process_file(path, settings, dry_run), None
    except RmprintError as exc:
        return path, None, exc


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1

    if args.keep_comments:
        settings.scrub_comments = False
    if args.max_blank_lines is not None:
        settings.max_blank_lines = args.max_blank_lines

    files = collect_files(args.paths, settings.skip_dirs)
    if not files:
        parser.error("no Python files found")

    run = partial(_run_one, settings=settings, dry_run=args.dry_run)
    if args.jobs > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=args.jobs) as executor:
            outcomes = list(executor.map(run, files))
    else:
        outcomes = [run(path) for path in files]

    cleaned = 0
    failed = 0
    verb = 'Would clean' if args.dry_run else 'Cleaned'

    for path, result, error in outcomes:
        if error is not None:
            failed += 1
            print(f"❌ Error: {error}", file=sys.stderr)
            continue
        if result.changed:
            cleaned += 1
            if not args.quiet:
                print(f"✓ {verb} {path} ({result.removed_statements} statements, "
                      f"{result.removed_comments} comments)")

    if not args.quiet:
        print(f"\nProcessed {len(files)} file(s): {cleaned} {'to clean' if args.dry_run else 'cleaned'}, "
              f"{failed} failed")

    return 1 if failed else 0
