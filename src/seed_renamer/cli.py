"""Command line interface for the seed project renamer."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import RenameOptions
from .errors import ConfigurationError
from .renamer import rename_project

LOGGER = logging.getLogger("seed_renamer")

EPILOG = """examples:
  seed-renamer my-new-service
  seed-renamer --dotnet MyNewApi
  seed-renamer --from seed-nodejs-npm-lib my-new-service
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seed-renamer",
        description="Rename a checked-out seed project to a new project name",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("name", nargs="?", help="New project name (letters, numbers and hyphens)")
    parser.add_argument(
        "--from",
        dest="seed_name",
        metavar="SEED",
        help="Seed name to replace instead of detecting it from package.json or the directory",
    )
    parser.add_argument(
        "--dotnet",
        action="store_true",
        help="Process as a .NET project (rename solution, project folders and .csproj files)",
    )
    parser.add_argument(
        "-C",
        "--directory",
        type=Path,
        default=None,
        help="Project directory to rename (defaults to the current directory)",
    )
    parser.add_argument(
        "--exclude",
        metavar="GLOB",
        action="append",
        default=[],
        help="Additional glob pattern to leave untouched; may be repeated",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not regenerate the lockfile with the package manager",
    )
    parser.add_argument(
        "--keep-directory",
        action="store_true",
        help="Do not rename the project directory itself",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")


def _handle_rename(args: argparse.Namespace) -> int:
    options = RenameOptions.from_name(
        args.name,
        seed_name=args.seed_name,
        root=args.directory,
        dotnet=args.dotnet,
        run_install=not args.skip_install,
        rename_root=not args.keep_directory,
        extra_excludes=args.exclude,
    )
    rename_project(options)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # --help and --version exit with 0; usage errors map to 1.
        return 0 if exc.code in (0, None) else 1

    configure_logging(args)
    try:
        return _handle_rename(args)
    except ConfigurationError as exc:
        LOGGER.error("Error: %s", exc)
        if exc.hint:
            LOGGER.error(exc.hint)
        return 1
    except Exception:
        LOGGER.exception("Error during rename process")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
