"""Convert command implementation."""

import logging
import sys
from pathlib import Path

from spdx_tagvalue.cli.common import load_cli_config, read_document
from spdx_tagvalue.export.tagvalue import SerializationError, export_tag_value
from spdx_tagvalue.parsers.errors import TagValueError
from spdx_tagvalue.tagvalue_store import TagValueStore

logger = logging.getLogger("spdx_tagvalue.cli.convert")


def convert_command(args) -> int:
    """Execute convert command.

    Parses the input and writes it back as canonical tag-value text.

    Args:
        args: Parsed command-line arguments containing:
            - input: Tag-value file to read
            - output: Output file path, or "-" for stdout
            - config: Configuration source (optional)
            - no_headers: Omit section header comments

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    logger.info("=== spdx-tagvalue convert ===")
    input_path = Path(args.input)

    try:
        config = load_cli_config(args)
        store = TagValueStore(config)
        namespace = read_document(input_path, store)
        for message in store.warnings:
            logger.debug("Parse warning: %s", message)

        if args.output == "-":
            data = store.serialize(namespace)
            sys.stdout.write(data.decode(config.serialize.encoding))
        else:
            graph = store.get_document(namespace)
            export_tag_value(graph, Path(args.output), config.serialize)
    except (OSError, ValueError, TagValueError, SerializationError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    if store.warnings:
        logger.warning(
            "%d warning(s) while parsing %s; run verify for details",
            len(store.warnings),
            input_path,
        )
    return 0
