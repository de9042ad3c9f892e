"""Orchestration logic for converting rustdoc JSON to Zod schemas."""

import argparse

from rustdoc_zod.format_debug import format_debug
from rustdoc_zod.generate_schemas import generate_schemas
from rustdoc_zod.load_config import ERROR, load_config
from rustdoc_zod.load_crate import load_crate
from rustdoc_zod.render_zod import render_zod


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    config = load_config(args.config)
    if args.strict:
        config["on_unsupported"] = ERROR

    graph = load_crate(args.crate_json)
    result = generate_schemas(graph, config)

    if args.dump:
        print(format_debug(result))

    if args.report:
        result.report.generate_report(args.report)
        print(f"Skip report written to {args.report}")

    if args.dry_run:
        print(
            f"Dry run: {len(result.schemas)} schemas, "
            f"{len(result.report)} skipped items"
        )
        return 0

    source = render_zod(result.schemas, export=config["output"].get("export", True))
    out_file = args.out_ts.resolve()
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(source, encoding="utf-8")

    print(f"Generated {len(result.schemas)} Zod schemas into: {out_file}")
    return 0
