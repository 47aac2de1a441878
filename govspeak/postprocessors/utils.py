"""Helpers shared by the post-process passes."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, NavigableString, Tag


def add_class(element: Tag, *classes: str) -> None:
    """Append classes to ``element`` without duplicating existing ones."""
    existing = element.get("class", [])
    if isinstance(existing, str):
        existing = existing.split()

    new_classes = list(existing)
    for cls in classes:
        if cls not in new_classes:
            new_classes.append(cls)
    element["class"] = new_classes


def has_class(element: Tag, cls: str) -> bool:
    classes = element.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    return cls in classes


def previous_element_sibling(element: Tag) -> Optional[Tag]:
    """The closest preceding sibling that is a tag, skipping text."""
    for sibling in element.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
        if str(sibling).strip():
            return None
    return None


def sole_paragraph(element: Tag) -> Tag:
    """
    Return the ``<p>`` the markdown parser wrapped around ``element``, if the
    element is all it contains; otherwise the element itself.
    """
    parent = element.parent
    if parent is None or parent.name != "p":
        return element

    for child in parent.children:
        if child is element:
            continue
        if isinstance(child, NavigableString) and not str(child).strip():
            continue
        return element
    return parent


def parse_fragment(html: str) -> list:
    """Parse an HTML fragment and detach its top-level nodes."""
    fragment = BeautifulSoup(html, "html.parser")
    return [node.extract() for node in list(fragment.contents)]


def replace_with_html(element: Tag, html: str) -> None:
    """Replace ``element`` in the tree with the nodes parsed from ``html``."""
    nodes = parse_fragment(html)
    if not nodes:
        element.decompose()
        return
    element.replace_with(*nodes)


def first_text_node(element: Tag) -> Optional[NavigableString]:
    """The first text node inside ``element``, in document order."""
    for node in element.descendants:
        if isinstance(node, NavigableString):
            return node
    return None

