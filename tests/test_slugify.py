"""Tests for slug generation and transliteration."""

import pytest

from headingid.slugify import slugify
from headingid.transliterations import TRANSLITERATIONS, extend_table


def test_slugify_clean_input() -> None:
    """Verify that already clean input is returned unchanged."""
    assert slugify("abc123", "-") == "abc123"


def test_slugify_collapses_punctuation() -> None:
    """Verify that runs of non-alphanumeric characters become one separator."""
    assert slugify("Hello, World!", "-") == "hello-world"
    assert slugify("a - b", "-") == "a-b"
    assert slugify("Section 1.2: Setup", "-") == "section-1-2-setup"


def test_slugify_transliterates() -> None:
    """Verify that accented letters map to their ASCII equivalents."""
    assert slugify("Café Münster", "-") == "cafe-munster"
    assert slugify("ÉCOLE", "-") == "ecole"
    assert slugify("Æther", "-") == "aether"
    assert slugify("Þórr", "-") == "thorr"
    assert slugify("Œuvre Ÿ", "-") == "oeuvre-y"


def test_slugify_empty_and_degenerate() -> None:
    """Verify that input with nothing convertible yields an empty slug."""
    assert slugify("", "-") == ""
    assert slugify("!!!", "-") == ""
    assert slugify(b"", "-") == ""
    assert slugify("   ", "-") == ""


def test_slugify_trims_separators() -> None:
    """Verify that the slug never starts or ends with the separator."""
    assert slugify("  --Hello--  ", "-") == "hello"
    assert slugify("(Intro)", "-") == "intro"
    assert slugify("-", "-") == ""


def test_slugify_drops_unmapped_scripts() -> None:
    """Verify that letters outside the table collapse to a separator."""
    assert slugify("Привет мир", "-") == ""
    assert slugify("abc Привет def", "-") == "abc-def"
    assert slugify("日本語 Guide", "-") == "guide"
    assert slugify("Price €5", "-") == "price-5"


def test_slugify_bytes_input() -> None:
    """Verify that UTF-8 bytes are decoded and malformed bytes degrade."""
    assert slugify("Café".encode(), "-") == "cafe"
    assert slugify(b"ab\xffcd", "-") == "ab-cd"
    assert slugify(b"\xc3", "-") == ""


def test_slugify_custom_separator() -> None:
    """Verify that the separator argument is used for collapsed runs."""
    assert slugify("Hello World", "_") == "hello_world"
    assert slugify("__Hello__", "_") == "hello"


def test_slugify_rejects_bad_separator() -> None:
    """Verify that a separator must be exactly one ASCII character."""
    with pytest.raises(ValueError, match="Separator"):
        slugify("x", "--")
    with pytest.raises(ValueError, match="Separator"):
        slugify("x", "")
    with pytest.raises(ValueError, match="Separator"):
        slugify("x", "é")


def test_slugify_deterministic() -> None:
    """Verify that repeated calls produce identical output."""
    text = "Déjà vu, again & again"
    assert slugify(text, "-") == slugify(text, "-") == "deja-vu-again-again"


def test_extend_table() -> None:
    """Verify that extra transliterations layer over the built-in table."""
    table = extend_table({"ß": "ss", "Ø": ""})
    assert slugify("Straße", "-", table) == "strasse"
    assert slugify("Bjørn", "-", table) == "bjrn"
    assert "ß" not in TRANSLITERATIONS
    assert extend_table({}) is TRANSLITERATIONS


def test_table_is_read_only() -> None:
    """Verify that the built-in table cannot be mutated."""
    with pytest.raises(TypeError):
        TRANSLITERATIONS["ß"] = "ss"  # type: ignore[index]
