#!/usr/bin/env python3
"""
Inspect parametric controls of NAM models.

Usage:
    python tools/inspect_parametric.py <subcommand> [options]

Subcommands:
    describe <model.nam>        Print descriptors from a model's config.parametric block
    check <parametric.json>     Validate a bare parametric config object

Options:
    --json               Print the name-keyed schema as JSON instead of a table
"""
import sys
import os
import json
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from namengine.core.io import ModelIO
from namengine.params.errors import SchemaError
from namengine.params.parametric import parse_parameter_descriptors, descriptors_to_schema


def _fmt_bound(value) -> str:
    return "-" if value is None else f"{value:g}"


def _print_descriptors(descriptors, as_json: bool) -> None:
    if as_json:
        print(json.dumps(descriptors_to_schema(descriptors), indent=2))
        return
    print(f"{'name':<24} {'type':<11} {'default':>10} {'min':>10} {'max':>10}")
    for d in descriptors:
        print(
            f"{d.name:<24} {d.type.value:<11} {d.default_value:>10g} "
            f"{_fmt_bound(d.min_value):>10} {_fmt_bound(d.max_value):>10}"
        )


def cmd_describe(args):
    """Print descriptors from a .nam model file."""
    model = ModelIO.load_model(args.model)
    block = ModelIO.parametric_config(model)
    if block is None:
        print(f"{args.model}: no parametric block")
        return 0
    _print_descriptors(parse_parameter_descriptors(block), args.json)
    return 0


def cmd_check(args):
    """Validate a bare parametric config JSON file."""
    with open(args.config, "r", encoding="utf-8") as f:
        config = json.load(f)
    descriptors = parse_parameter_descriptors(config)
    _print_descriptors(descriptors, args.json)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Inspect parametric controls of NAM models",
    )
    subparsers = parser.add_subparsers(dest="command", help="Subcommand")

    p_describe = subparsers.add_parser("describe", help="Describe a model's parametric block")
    p_describe.add_argument("model", help="Path to .nam model file")
    p_describe.add_argument("--json", action="store_true", help="Print schema JSON")

    p_check = subparsers.add_parser("check", help="Validate a parametric config JSON file")
    p_check.add_argument("config", help="Path to JSON file holding the parametric object")
    p_check.add_argument("--json", action="store_true", help="Print schema JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "describe":
            return cmd_describe(args)
        elif args.command == "check":
            return cmd_check(args)
    except SchemaError as e:
        print(f"Schema error: {e.message}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read {args.command} input: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
