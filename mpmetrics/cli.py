"""
mpmetrics CLI

Command-line interface for building metadata and inspecting gauges.

Usage:
    # Build metadata and print it as JSON (MP_METRICS_TAGS applies)
    mpmetrics build --name heap_used --type gauge --unit bytes --tag pool=eden

    # List the gauges a class exposes
    mpmetrics gauges mpmetrics.tck:InheritedChildGaugeMethodBean
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from typing import List, Optional

from .core.builder import MetadataBuilder
from .core.decorator import find_gauges
from .core.types import MetricType, MetricUnits
from .exceptions import MetricsError


def cmd_build(args: argparse.Namespace) -> int:
    """Build metadata from arguments and print it as JSON."""
    builder = MetadataBuilder().with_name(args.name)

    if args.display_name is not None:
        builder.with_display_name(args.display_name)
    if args.description is not None:
        builder.with_description(args.description)
    if args.type is not None:
        builder.with_type(MetricType.from_name(args.type))
    builder.with_unit(args.unit)
    if args.reusable:
        builder.reusable()

    builder.add_tags(args.tags)
    for tag in args.tag:
        builder.add_tag(tag)

    print(json.dumps(builder.build().to_dict(), indent=2))
    return 0


def cmd_gauges(args: argparse.Namespace) -> int:
    """Print the gauges discovered on MODULE:CLASS as JSON."""
    module_name, _, class_name = args.target.partition(":")
    if not class_name:
        print(f"❌ Expected MODULE:CLASS, got {args.target!r}", file=sys.stderr)
        return 1

    try:
        cls = getattr(importlib.import_module(module_name), class_name)
    except (ImportError, AttributeError) as e:
        print(f"❌ Cannot load {args.target}: {e}", file=sys.stderr)
        return 1

    gauges = [
        {
            "method": registration.method,
            "owner": registration.owner.__qualname__,
            **registration.metadata.to_dict(),
        }
        for registration in find_gauges(cls)
    ]
    print(json.dumps(gauges, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="mpmetrics",
        description="mpmetrics - Metric metadata tools",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # build
    build_parser = subparsers.add_parser("build", help="Build metadata as JSON")
    build_parser.add_argument("--name", "-n", required=True, help="Metric name")
    build_parser.add_argument("--display-name", help="Human-readable label")
    build_parser.add_argument("--description", "-d", help="Metric description")
    build_parser.add_argument(
        "--type",
        "-t",
        choices=[t.value for t in MetricType],
        help="Metric type",
    )
    build_parser.add_argument(
        "--unit", "-u", default=MetricUnits.NONE, help="Unit of measure"
    )
    build_parser.add_argument(
        "--reusable", action="store_true", help="Mark the metric reusable"
    )
    build_parser.add_argument(
        "--tags", default=None, help='Comma-separated tags, e.g. "k1=v1,k2=v2"'
    )
    build_parser.add_argument(
        "--tag", action="append", default=[], help="Single key=value tag"
    )

    # gauges
    gauges_parser = subparsers.add_parser(
        "gauges", help="List gauges declared on a class"
    )
    gauges_parser.add_argument("target", help="Class as MODULE:CLASS")

    args = parser.parse_args(argv)

    try:
        if args.command == "build":
            return cmd_build(args)
        elif args.command == "gauges":
            return cmd_gauges(args)
        else:
            parser.print_help()
            return 1
    except MetricsError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
