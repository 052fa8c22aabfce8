"""Built-in table of extended-alphabet characters and their ASCII replacements."""

from collections.abc import Mapping
from types import MappingProxyType

# Keys are lowercase; callers lowercase a character before looking it up.
_REPLACEMENTS: dict[str, str] = {
    "a": "áàâäãå",
    "e": "éèêë",
    "i": "íìîï",
    "o": "óòôöõ",
    "u": "úùûü",
    "n": "ñ",
    "c": "ç",
    "y": "ýÿ",
    "th": "þ",
    "d": "ð",
    "ae": "æ",
    "oe": "œ",
}

TRANSLITERATIONS: Mapping[str, str] = MappingProxyType(
    {char: ascii_ for ascii_, chars in _REPLACEMENTS.items() for char in chars}
)


def extend_table(extra: Mapping[str, str]) -> Mapping[str, str]:
    """Return a read-only table with ``extra`` layered over the built-in entries."""
    if not extra:
        return TRANSLITERATIONS
    merged = dict(TRANSLITERATIONS)
    merged.update({k.lower(): v for k, v in extra.items()})
    return MappingProxyType(merged)
