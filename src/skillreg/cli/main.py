"""CLI entrypoint for the skill registry loader."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from skillreg import __version__
from skillreg.constants.branding import CLI_DESCRIPTION
from skillreg.exceptions import ConfigError, SkillregError
from skillreg.exceptions.config import format_config_issues
from skillreg.model import Registry
from skillreg.preflight import preflight_validate
from skillreg.reporting import StdoutReporter, build_registry_payload, write_registry_report
from skillreg.scanner import build_registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillreg",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate every skill folder under a root")
    _add_root_arguments(check)
    check.add_argument("-o", "--output", type=Path, default=None, help="Write the registry as JSON to this file")
    check.add_argument("-j", "--workers", type=int, default=None, help="Evaluate skill folders on N threads")
    check.add_argument("--exit-zero", action="store_true", help="Exit 0 even when issues are found")
    check.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    check.add_argument("--no-color", action="store_true", help="Disable colored output")
    check.add_argument("-v", "--verbose", action="store_true", help="List accepted skills and debug logging")

    listing = subparsers.add_parser("list", help="List the skills that pass validation")
    _add_root_arguments(listing)
    listing.add_argument("--json", action="store_true", help="Print the registry export as JSON")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    _add_root_arguments(validate)

    return parser


def _add_root_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Directory holding skill folders")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    issues = preflight_validate(args.root, args.config)
    if issues:
        print(format_config_issues(issues), file=sys.stderr)
        return 2

    if args.command == "validate-config":
        print("Configuration is valid.")
        return 0

    if args.command == "check" and args.workers is not None and args.workers <= 0:
        print("Configuration error: --workers must be a positive integer", file=sys.stderr)
        return 2

    try:
        registry = build_registry(
            args.root,
            config_path=args.config,
            workers=getattr(args, "workers", None),
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillregError as exc:
        print(f"Registry error: {exc}", file=sys.stderr)
        return 1

    if args.command == "list":
        return _handle_list(registry, as_json=args.json)
    return _handle_check(registry, args)


def _handle_check(registry: Registry, args: argparse.Namespace) -> int:
    """Report a registry build and map issues to the exit code."""
    if args.output is not None:
        try:
            write_registry_report(args.output, registry)
        except OSError as exc:
            print(f"Cannot write {args.output}: {exc}", file=sys.stderr)
            return 2

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(registry, color=use_color, verbose=args.verbose).render())

    if registry.issues and not args.exit_zero:
        return 1
    return 0


def _handle_list(registry: Registry, *, as_json: bool) -> int:
    if as_json:
        print(json.dumps(build_registry_payload(registry), indent=2, sort_keys=True))
        return 0

    for name, record in registry.records.items():
        print(f"{name}\t{record.description}")
    if registry.issues:
        logger.warning("%d issue(s) found; run `skillreg check` for details", len(registry.issues))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
