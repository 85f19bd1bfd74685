"""Verify command implementation."""

import logging
from pathlib import Path

from rich.console import Console

from spdx_tagvalue.cli.common import load_cli_config, read_document, render_warnings
from spdx_tagvalue.parsers.errors import TagValueError
from spdx_tagvalue.tagvalue_store import TagValueStore

logger = logging.getLogger("spdx_tagvalue.cli.verify")


def verify_command(args) -> int:
    """Execute verify command.

    Args:
        args: Parsed command-line arguments containing:
            - input: Tag-value file to check
            - config: Configuration source (optional)
            - ignore_missing_license_text: Suppress missing text warnings
            - fail_on_warning: Treat warnings as failure

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    logger.info("=== spdx-tagvalue verify ===")
    input_path = Path(args.input)

    try:
        config = load_cli_config(args)
        store = TagValueStore(config)
        namespace = read_document(input_path, store)
    except (OSError, ValueError, TagValueError) as exc:
        logger.error("Verification failed: %s", exc)
        return 1

    logger.info("Parsed document namespace: %s", namespace)
    render_warnings(store.warnings, str(input_path), Console())

    if store.warnings and getattr(args, "fail_on_warning", False):
        return 1
    return 0
