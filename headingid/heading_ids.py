"""Registry that hands out unique element identifiers within one document."""

import logging
from collections.abc import Mapping
from typing import Any

from headingid.element_kind import ElementKind
from headingid.slugify import check_separator, slugify
from headingid.transliterations import TRANSLITERATIONS, extend_table

logger = logging.getLogger(__name__)


class HeadingIDs:
    """Tracks every identifier issued or reserved during one rendering session.

    Create one instance per document. Instances are not thread-safe; hosts that
    render concurrently should give each worker its own registry.
    """

    def __init__(
        self,
        sep: str = "-",
        table: Mapping[str, str] = TRANSLITERATIONS,
        heading_fallback: str = "heading",
        other_fallback: str = "id",
    ) -> None:
        """Initialize an empty registry."""
        check_separator(sep)
        self.sep = sep
        self.table = table
        self.fallbacks = {
            ElementKind.HEADING: heading_fallback,
            ElementKind.OTHER: other_fallback,
        }
        self._values: set[str] = set()

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "HeadingIDs":
        """Build a registry from a mapping returned by ``load_config``."""
        fallbacks = config.get("fallbacks") or {}
        return cls(
            sep=config.get("separator", "-"),
            table=extend_table(config.get("transliterations") or {}),
            heading_fallback=fallbacks.get("heading", "heading"),
            other_fallback=fallbacks.get("other", "id"),
        )

    def generate(
        self, text: str | bytes, kind: ElementKind = ElementKind.HEADING
    ) -> str:
        """Return a new identifier for ``text`` and record it as used.

        Text that slugifies to nothing falls back to a token chosen by ``kind``.
        A taken candidate gets the first free numeric suffix, starting at 1.
        """
        result = slugify(text, self.sep, self.table) or self.fallbacks[kind]
        if result not in self._values:
            self._values.add(result)
            return result

        i = 1
        while True:
            candidate = f"{result}{self.sep}{i}"
            if candidate not in self._values:
                self._values.add(candidate)
                logger.debug("Identifier %s taken, using %s", result, candidate)
                return candidate
            i += 1

    def put(self, value: str) -> None:
        """Reserve an identifier supplied directly by the author."""
        logger.debug("Reserving identifier %s", value)
        self._values.add(value)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)
