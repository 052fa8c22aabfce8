"""Conversion of arbitrary element text into URL-safe ASCII slugs."""

from collections.abc import Mapping

from headingid.transliterations import TRANSLITERATIONS


def check_separator(sep: str) -> None:
    """Raise ValueError unless ``sep`` is exactly one ASCII character."""
    if len(sep) != 1 or not sep.isascii():
        msg = f"Separator must be a single ASCII character, got {sep!r}"
        raise ValueError(msg)


def slugify(
    text: str | bytes,
    sep: str = "-",
    table: Mapping[str, str] = TRANSLITERATIONS,
) -> str:
    """Convert text to a lowercase ASCII slug joined by ``sep``.

    ASCII letters and digits are kept (letters lowercased). Non-ASCII
    characters found in ``table`` are replaced by their ASCII form. Every other
    run of characters, including letters of scripts the table does not cover,
    collapses into a single separator. Leading and trailing separators are
    dropped, so text with nothing convertible yields an empty string.

    Bytes are decoded as UTF-8; undecodable sequences become U+FFFD and are
    treated like any other unmapped character.
    """
    check_separator(sep)
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    if not text:
        return ""

    out: list[str] = []
    prev_sep = False

    for ch in text:
        if ch.isascii():
            if ch.isalnum():
                out.append(ch.lower())
                prev_sep = False
                continue
        else:
            replacement = table.get(ch.lower())
            if replacement is not None:
                if replacement:
                    out.append(replacement)
                prev_sep = False
                continue

        if not prev_sep and out:
            out.append(sep)
            prev_sep = True

    slug = "".join(out)
    if slug.endswith(sep):
        slug = slug[:-1]
    if slug.startswith(sep):
        slug = slug[1:]
    return slug
