"""CLI entrypoint for Buildskip."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from buildskip import __version__
from buildskip.config import BuildSkipConfig, load_config
from buildskip.constants.branding import CLI_DESCRIPTION
from buildskip.exceptions import ConfigError, UnknownPlatformError
from buildskip.model import Dependency, parse_platform
from buildskip.versionfile import (
    can_skip_build,
    encode_text,
    locate,
    platform_artifacts_from_products,
    read,
    record_build_result,
)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="buildskip",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Exit 0 when cached frameworks can replace a build")
    _add_common_arguments(check)
    check.add_argument("-C", "--commitish", required=True, help="Pinned revision of the dependency")
    check.add_argument(
        "-p",
        "--platform",
        type=parse_platform,
        action="append",
        default=None,
        help="Platform to check (repeat for multiple; default: platforms in the version file)",
    )

    record = subparsers.add_parser("record", help="Record digests of freshly built frameworks")
    _add_common_arguments(record)
    record.add_argument("-C", "--commitish", required=True, help="Pinned revision of the dependency")
    record.add_argument(
        "-P",
        "--product",
        type=Path,
        action="append",
        required=True,
        help="Built <platform>/<Name>.framework directory (repeat for multiple)",
    )

    show = subparsers.add_parser("show", help="Print the stored version file")
    _add_common_arguments(show)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    parser.add_argument("-n", "--name", required=True, help="Dependency project name")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show cache diagnostics")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "check":
        return _handle_check(args, config)
    if args.command == "record":
        return _handle_record(args, config)
    if args.command == "show":
        return _handle_show(args, config)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_check(args: argparse.Namespace, config: BuildSkipConfig) -> int:
    """Report whether the dependency build can be skipped."""
    dependency = Dependency(project_name=args.name, commitish=args.commitish)
    platforms = tuple(args.platform) if args.platform else config.platforms
    if can_skip_build(dependency, platforms, args.root, config.binaries_folder):
        print(f"{dependency.project_name}: up to date, build can be skipped")
        return 0
    print(f"{dependency.project_name}: build required")
    return 1


def _handle_record(args: argparse.Namespace, config: BuildSkipConfig) -> int:
    """Write the version file for freshly built products."""
    dependency = Dependency(project_name=args.name, commitish=args.commitish)
    try:
        platform_artifacts = platform_artifacts_from_products(args.product)
    except UnknownPlatformError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if not record_build_result(dependency, platform_artifacts, args.root, config.binaries_folder):
        print(f"{dependency.project_name}: failed to record build result", file=sys.stderr)
        return 1
    print(f"{dependency.project_name}: recorded {len(platform_artifacts)} framework(s)")
    return 0


def _handle_show(args: argparse.Namespace, config: BuildSkipConfig) -> int:
    """Print the decoded version file, if one exists."""
    path = locate(args.root, args.name, config.binaries_folder)
    record = read(path)
    if record is None:
        print(f"No usable version file at {path}", file=sys.stderr)
        return 1
    print(encode_text(record), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
