"""Convert rustdoc JSON metadata to Zod schemas.

Only structs implementing ``serde::Serialize`` are converted. Their named
fields become ``z.object`` properties; ``String``, ``u8``, ``Option<u8>`` and
references to other structs are supported. Unsupported fields are skipped and
reported unless ``--strict`` is given.
"""

import argparse
import logging
import sys
from pathlib import Path

from rustdoc_zod.errors import GenerationError
from rustdoc_zod.run_generation import run_generation


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert rustdoc JSON to Zod schemas for Serialize structs.",
    )
    ap.add_argument(
        "crate_json",
        type=Path,
        help="rustdoc JSON file (cargo rustdoc -- --output-format json)",
    )
    ap.add_argument(
        "out_ts",
        type=Path,
        help="TypeScript file to write the schemas to",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unsupported field shapes instead of skipping them",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate in memory without writing the TypeScript file",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of skipped structs and fields",
    )
    ap.add_argument(
        "--dump",
        action="store_true",
        help="Print a debug dump of the generated schemas",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
