from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides. The prefix/auto rule is
enforced by the configuration validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sourcemap-rebase CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sourcemap-rebase",
        description="Rewrite local source paths in sourcemaps to package-relative paths.",
        epilog="Example: sourcemap-rebase --auto --include './lib/**/*.js.map' "
               "'./bundles/**/*.js.map' --exclude ./lib/excluded.js.map",
    )

    # --- Sourcemap files (.js.map) ---
    files = p.add_argument_group("Sourcemap files (.js.map)")
    files.add_argument(
        "--include",
        dest="include_patterns",
        nargs="+",
        required=True,
        metavar="GLOB",
        help="Globs of sourcemaps to process.",
    )
    files.add_argument(
        "--exclude",
        dest="exclude_patterns",
        nargs="+",
        default=None,
        metavar="GLOB",
        help="Globs of sourcemaps to exclude.",
    )

    # --- The source path prefix to replace ---
    prefix = p.add_argument_group("The source path prefix to replace")
    prefix.add_argument(
        "-p", "--prefix",
        dest="prefix",
        default=None,
        help="Sets the source path prefix.",
    )
    prefix.add_argument(
        "-a", "--auto",
        action="store_true",
        help="Auto detects the source path prefix.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dryrun", "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Does not write changes to files but prints to stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the validated configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "include_patterns": list(args.include_patterns or []),
        "exclude_patterns": list(args.exclude_patterns or []),
        "prefix": args.prefix,
        "auto": bool(args.auto),
    }
    if args.dry_run:
        overrides["dry_run"] = True
    return overrides
