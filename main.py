"""Main orchestration script for generating rustdoc JSON and Zod schemas."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def rustdoc_command(package: str) -> list[str]:
    """Build the cargo invocation that emits rustdoc JSON for a library."""
    return [
        "cargo",
        "+nightly",
        "rustdoc",
        "-p",
        package,
        "--lib",
        "--",
        "-Zunstable-options",
        "--output-format",
        "json",
    ]


def default_crate_name(package: str) -> str:
    """Return the lib target name cargo derives from a package name."""
    return package.replace("-", "_")


def rustdoc_json_path(manifest_dir: Path, crate_name: str) -> Path:
    """Return where cargo writes the rustdoc JSON for a lib target."""
    return manifest_dir / "target" / "doc" / f"{crate_name}.json"


def main() -> None:
    """Run the full schema generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate rustdoc JSON for a crate and convert it to Zod schemas."
    )
    parser.add_argument(
        "--package",
        required=True,
        help="Cargo package whose library should be documented",
    )
    parser.add_argument(
        "--manifest-dir",
        type=Path,
        default=Path.cwd(),
        help="Cargo workspace root (default: current directory)",
    )
    parser.add_argument(
        "--crate-name",
        help=(
            "Lib target name when it differs from the package, e.g. docs_lib "
            "(default: package name with - replaced by _)"
        ),
    )
    parser.add_argument(
        "--crate-json",
        type=Path,
        help="Explicit path to the rustdoc JSON file",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("schemas.ts"),
        help="TypeScript output file (default: schemas.ts)",
    )
    parser.add_argument(
        "--skip-rustdoc",
        action="store_true",
        help="Reuse an existing rustdoc JSON file instead of running cargo",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unsupported field shapes",
    )
    args = parser.parse_args()

    # 1. Generate rustdoc JSON using cargo
    if not args.skip_rustdoc:
        print("--- Step 1: Generating rustdoc JSON ---")
        run_command(rustdoc_command(args.package), cwd=args.manifest_dir)

    crate_json = args.crate_json or rustdoc_json_path(
        args.manifest_dir, args.crate_name or default_crate_name(args.package)
    )
    if not crate_json.exists():
        print(f"rustdoc JSON not found: {crate_json}")
        sys.exit(1)

    # 2. Convert rustdoc JSON to Zod schemas
    print("\n--- Step 2: Converting rustdoc JSON to Zod schemas ---")
    cmd = [
        sys.executable,
        "-m",
        "rustdoc_zod.rustdoc_to_zod",
        str(crate_json),
        str(args.out),
    ]
    if args.config:
        cmd.extend(["--config", args.config])
    if args.strict:
        cmd.append("--strict")

    run_command(cmd)

    print(f"\nSUCCESS: Schemas generated in {args.out}")


if __name__ == "__main__":
    main()
