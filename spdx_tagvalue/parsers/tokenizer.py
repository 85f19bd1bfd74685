"""Line tokenizer for tag-value text.

Turns raw lines into TagValuePair events. A value wrapped in ``<text>`` /
``</text>`` may span several lines and is delivered as one event carrying
the line number of its tag.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, List, NamedTuple, Optional, Protocol

from .errors import TagValueSyntaxError
from .values import TEXT_END, TEXT_START

logger = logging.getLogger("spdx_tagvalue.parsers.tokenizer")

TAG_PATTERN = re.compile(r"^(\w+):")
COMMENT_PREFIX = "#"


class TagValuePair(NamedTuple):
    tag: str
    value: str
    line_number: int


class TagValueBehavior(Protocol):
    """Consumer of tokenizer events."""

    def build(self, pair: TagValuePair) -> None:
        ...

    def exit(self) -> None:
        """Called once after the last line has been tokenized."""
        ...


class LineTokenizer:
    """Split tag-value text into tag/value events.

    Lines outside a quoted block that do not start with a tag (blank lines,
    comments, stray text) are ignored.
    """

    def __init__(self, behavior: Optional[TagValueBehavior] = None) -> None:
        """Initialize tokenizer.

        Args:
            behavior: Receiver of events and of the end-of-input signal.
        """
        self.behavior = behavior

    def tokenize(self, lines: Iterable[str]) -> None:
        """Feed every pair to the behavior, then signal end of input.

        Raises:
            TagValueSyntaxError: On nested or unterminated quoted blocks.
            RuntimeError: If no behavior was configured.
        """
        if self.behavior is None:
            raise RuntimeError("LineTokenizer.tokenize requires a behavior")
        for pair in self.pairs(lines):
            self.behavior.build(pair)
        self.behavior.exit()

    def pairs(self, lines: Iterable[str]) -> Iterator[TagValuePair]:
        """Yield tag/value pairs from ``lines``.

        Args:
            lines: Text lines, with or without line terminators.

        Yields:
            TagValuePair per tag; quoted blocks collapse into one pair.

        Raises:
            TagValueSyntaxError: On nested or unterminated quoted blocks.
        """
        block_tag: Optional[str] = None
        block_line = 0
        block: List[str] = []

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")

            if block_tag is not None:
                end = line.find(TEXT_END)
                head = line if end < 0 else line[:end]
                if TEXT_START in head:
                    raise TagValueSyntaxError(
                        f"Found a {TEXT_START} inside a quoted block started at "
                        f"line number {block_line}",
                        line_number,
                        block_tag,
                        line,
                    )
                block.append(head)
                if end >= 0:
                    yield TagValuePair(block_tag, "\n".join(block), block_line)
                    block_tag = None
                    block = []
                continue

            if line.lstrip().startswith(COMMENT_PREFIX):
                continue
            match = TAG_PATTERN.match(line)
            if not match:
                if line.strip():
                    logger.debug("Ignoring line %d without a tag", line_number)
                continue

            tag = match.group(1)
            rest = line[match.end():]
            start = rest.find(TEXT_START)
            if start < 0:
                yield TagValuePair(tag, rest.strip(), line_number)
                continue

            after = rest[start + len(TEXT_START):]
            end = after.find(TEXT_END)
            if end >= 0:
                yield TagValuePair(tag, after[:end].strip(), line_number)
            else:
                block_tag = tag
                block_line = line_number
                block = [after.strip()]

        if block_tag is not None:
            raise TagValueSyntaxError(
                f"Unterminated quoted block; missing {TEXT_END}",
                block_line,
                block_tag,
                "\n".join(block),
            )
