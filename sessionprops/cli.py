"""Command line helper for inspecting the catalog and checking property sets."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .catalog import PropertyCatalog
from .config import RegistryConfig, load_config
from .errors import SessionPropertyError
from .validation import UnknownPropertyPolicy, normalize_properties

LOG = logging.getLogger(__name__)


def _pair(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sessionprops", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Print the known session properties")
    list_cmd.add_argument("--required", action="store_true", help="Only print required properties")

    check_cmd = commands.add_parser("check", help="Validate NAME=VALUE pairs")
    check_cmd.add_argument("pairs", nargs="+", type=_pair, metavar="NAME=VALUE")
    check_cmd.add_argument(
        "--unknown",
        choices=[policy.value for policy in UnknownPropertyPolicy],
        default=None,
        help="Override the configured handling of unrecognized names",
    )
    check_cmd.add_argument(
        "--allow-incomplete",
        action="store_true",
        help="Do not fail when required properties are missing",
    )
    return parser


def list_properties(catalog: PropertyCatalog, *, required_only: bool = False) -> list[str]:
    """Format catalog entries, one per line."""

    lines: list[str] = []
    for definition in catalog:
        if required_only and not definition.required:
            continue
        names = definition.key
        if definition.aliases:
            names += f" ({', '.join(definition.aliases)})"
        flag = "required" if definition.required else "optional"
        lines.append(f"{names}\t{definition.kind.value}\t{flag}\t{definition.description}")
    return lines


def check_properties(
    pairs: Sequence[tuple[str, str]],
    config: RegistryConfig,
    *,
    catalog: PropertyCatalog | None = None,
    allow_incomplete: bool = False,
) -> list[str]:
    """Normalize ``pairs`` and format the result; raises on invalid input."""

    if catalog is None:
        catalog = PropertyCatalog.default()
    result = normalize_properties(pairs, catalog=catalog, unknown=config.unknown_properties)
    if not allow_incomplete:
        result.require_complete()
    lines: list[str] = []
    for key, value in result.values.items():
        definition = catalog[key]
        shown = definition.display_value(value) if config.redact_sensitive else repr(value)
        lines.append(f"{key} = {shown}")
    for name in result.unknown:
        lines.append(f"{name} (unrecognized)")
    for key in sorted(result.missing_required):
        lines.append(f"{key} (missing)")
    return lines


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    catalog = PropertyCatalog.default()
    if args.command == "list":
        for line in list_properties(catalog, required_only=args.required):
            print(line)
        return 0

    config = load_config()
    if args.unknown is not None:
        config = config.with_unknown_policy(args.unknown)
    try:
        lines = check_properties(
            args.pairs,
            config,
            catalog=catalog,
            allow_incomplete=args.allow_incomplete,
        )
    except SessionPropertyError as exc:
        LOG.debug("Property check failed", extra={"code": exc.code.value, "property": exc.property_key})
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


__all__ = ["build_parser", "check_properties", "list_properties", "main"]
