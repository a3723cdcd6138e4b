from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, validation, pipeline execution and result
rendering. Maps the domain error taxonomy onto process exit codes.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from sourcemap_rebase.core.pipeline.engine import run_pipeline
from sourcemap_rebase.core.pipeline.stages.validator import validate_config
from sourcemap_rebase.domain.config import get_default_config
from sourcemap_rebase.domain.errors import ConfigurationError, SourcemapRebaseError
from sourcemap_rebase.domain.sourcemap_models import RebaseResult
from sourcemap_rebase.infra.logging import LoggingConfig, configure_logging, get_logger
from sourcemap_rebase.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 run failure, 2 usage error).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Merge overrides and validate before any file I/O
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    try:
        clean_conf, warnings = validate_config(raw_conf, strict=False)
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except SourcemapRebaseError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: RebaseResult) -> None:
    """
    Print the run outcome to stdout.

    A dry run prints one 'original -> result' line per source reference,
    in document order, and nothing else.
    """
    if result.dry_run:
        for entry in result.entries:
            print(entry.render())
        return

    summary = result.summary
    print(
        f"Rewrote {summary['rewritten']}/{summary['sources']} source(s) "
        f"in {summary['written']} file(s)."
    )


if __name__ == "__main__":
    sys.exit(main())
