"""Command line interface for inspecting formatter configurations."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import load_sitemap_config
from .errors import ConfigurationError
from .index import ResourceTypeFormatterView
from .info import FormatterInfo
from .schema import ResourceType


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    common.add_argument(
        "--locale", default=None, help="Locale used for error messages (defaults to English)"
    )

    parser = argparse.ArgumentParser(
        description="Inspect the formatters a sitemap configuration offers for a resource type"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser(
        "show", parents=[common], help="list the active formatters of a resource type"
    )
    show_parser.add_argument("config", type=Path, help="Path to the JSON sitemap configuration")
    show_parser.add_argument("type_name", metavar="TYPE", help="Resource type name")
    show_parser.add_argument(
        "-c", "--container", help="Only list formatters rendering into this container type"
    )
    show_parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")

    containers_parser = subparsers.add_parser(
        "containers",
        parents=[common],
        help="list the container types served by a resource type's formatters",
    )
    containers_parser.add_argument("config", type=Path, help="Path to the JSON sitemap configuration")
    containers_parser.add_argument("type_name", metavar="TYPE", help="Resource type name")

    return parser


def _load_view(args: argparse.Namespace) -> ResourceTypeFormatterView:
    config = load_sitemap_config(args.config)
    context = {"locale": args.locale}
    return ResourceTypeFormatterView(context, config, ResourceType(type_name=args.type_name))


def _as_dict(info: FormatterInfo) -> dict[str, object]:
    return {
        "key": info.key,
        "id": info.id,
        "label": info.label,
        "description": info.description,
        "rank": info.rank,
        "resource_type_names": list(info.resource_type_names),
        "container_types": list(info.container_types),
    }


def _handle_show(args: argparse.Namespace) -> int:
    view = _load_view(args)
    if args.container:
        infos = view.formatter_info_for_container(args.container)
    else:
        infos = view.formatter_info()

    if args.json:
        payload = {"type": view.name, "formatters": [_as_dict(info) for info in infos]}
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
        sys.stdout.write("\n")
        return 0

    for info in infos:
        containers = ", ".join(info.container_types) or "-"
        sys.stdout.write(f"{info.key}\t{info.label}\t{containers}\n")
    return 0


def _handle_containers(args: argparse.Namespace) -> int:
    view = _load_view(args)
    for container_type in view.formatter_container_types():
        sys.stdout.write(f"{container_type}\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "show":
            return _handle_show(args)
        if args.command == "containers":
            return _handle_containers(args)
    except ConfigurationError as exc:
        sys.stderr.write(f"error: {exc.localized_message(args.locale)}\n")
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
