"""Data model for a document element awaiting an identifier."""

from dataclasses import dataclass

from headingid.element_kind import ElementKind


@dataclass(frozen=True)
class Element:
    """An element's text as supplied by the host renderer."""

    text: str | bytes
    kind: ElementKind = ElementKind.HEADING
    explicit_id: str | None = None  # author-supplied, e.g. `## Intro {#intro}`
