"""Ordered, deduplicating collector for non-fatal parse warnings."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List

logger = logging.getLogger("spdx_tagvalue.parsers.diagnostics")


class WarningCollector:
    """Keep warnings in first-seen order, dropping exact duplicates."""

    def __init__(self) -> None:
        self._messages: Dict[str, None] = {}

    def add(self, message: str) -> bool:
        """Record ``message``.

        Returns:
            True if the message was new.
        """
        if message in self._messages:
            return False
        self._messages[message] = None
        logger.warning(message)
        return True

    def extend(self, messages: Iterable[str]) -> None:
        for message in messages:
            self.add(message)

    @property
    def messages(self) -> List[str]:
        return list(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
