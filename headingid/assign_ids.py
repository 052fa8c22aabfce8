"""Logic for assigning identifiers to a document's elements in order."""

from collections.abc import Iterable

from headingid.element import Element
from headingid.heading_ids import HeadingIDs


def assign_ids(
    elements: Iterable[Element], ids: HeadingIDs | None = None
) -> list[str]:
    """Assign an identifier to each element, walking them in document order.

    Author-supplied ids are kept and reserved as they are encountered; every
    other element gets a generated id. Without ``ids`` a fresh registry is used,
    so each call covers exactly one document.
    """
    if ids is None:
        ids = HeadingIDs()

    assigned: list[str] = []
    for element in elements:
        if element.explicit_id:
            ids.put(element.explicit_id)
            assigned.append(element.explicit_id)
        else:
            assigned.append(ids.generate(element.text, element.kind))
    return assigned
