"""
Per-render state for a govspeak document.

A DocumentContext is created for every render, including the nested renders
macros start for the bodies of notes, accordions and lists. Nested contexts
share the reference lists, locale and options of their parent and the same
accordion counter handle, so accordion ids stay unique across the page.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

from .config import DEFAULT_LOCALE

if TYPE_CHECKING:
    from .renderer import Renderer


class SharedCounter:
    """Mutable counter handle passed explicitly from a render to its nested renders."""

    def __init__(self, start: int = 1):
        self.start = start
        self.value = start

    def reset(self) -> None:
        self.value = self.start

    def take(self) -> int:
        """Return the current value and advance by one."""
        value = self.value
        self.value += 1
        return value

    def __repr__(self):
        return f"SharedCounter(value={self.value})"


def _records(value) -> Tuple[Any, ...]:
    # Accept a single record, a sequence of records or nothing at all
    if value is None:
        return ()
    if isinstance(value, Mapping):
        return (value,)
    return tuple(value)


def _element_names(value) -> frozenset:
    # A single tag name is one element, not a set of letters
    if isinstance(value, str):
        return frozenset((value,))
    return frozenset(value or ())


def _find(records: Iterable[Any], key: str, value: Optional[str]):
    if value is None:
        return None
    for record in records:
        if isinstance(record, Mapping) and record.get(key) == value:
            return record
    return None


class DocumentContext:
    def __init__(
        self,
        source: Optional[str],
        options: Optional[Mapping[str, Any]] = None,
        *,
        renderer: Optional["Renderer"] = None,
        accordion_counter: Optional[SharedCounter] = None,
        depth: int = 0,
    ):
        options = dict(options or {})

        # str is immutable, so holding it is already a private copy
        self.source = source or ""

        self.images = _records(options.pop("images", None))
        self.attachments = _records(options.pop("attachments", None))
        self.links = _records(options.pop("links", None))
        self.contacts = _records(options.pop("contacts", None))
        self.allowed_elements = _element_names(options.pop("allowed_elements", None))
        self.locale = options.pop("locale", None) or DEFAULT_LOCALE

        options.setdefault("sanitize", True)
        options.setdefault("allow_extra_quotes", False)
        self.options = MappingProxyType(options)

        self.renderer = renderer
        self.accordion_counter = accordion_counter or SharedCounter()
        self.depth = depth
        self.result: Optional[str] = None

    @property
    def sanitize(self) -> bool:
        return bool(self.options["sanitize"])

    @property
    def is_nested(self) -> bool:
        return self.depth > 0

    def nested(self, source: str) -> "DocumentContext":
        """Child context for a fragment captured by a macro."""
        options = dict(
            self.options,
            images=self.images,
            attachments=self.attachments,
            links=self.links,
            contacts=self.contacts,
            allowed_elements=self.allowed_elements,
            locale=self.locale,
        )
        return DocumentContext(
            source,
            options,
            renderer=self.renderer,
            accordion_counter=self.accordion_counter,
            depth=self.depth + 1,
        )

    def render_nested(self, source: str) -> str:
        """Run the whole pipeline over ``source`` and return its HTML."""
        return self.renderer.render(self.nested(source))

    def convert_markdown(self, source: str) -> str:
        """Run only the markdown parser over ``source``, without macros."""
        return self.renderer.convert(source)

    # Reference lookups. Unknown ids resolve to None.

    def find_image(self, image_id):
        return _find(self.images, "id", image_id)

    def find_attachment(self, attachment_id):
        return _find(self.attachments, "id", attachment_id)

    def find_attachment_by_content_id(self, content_id):
        return _find(self.attachments, "content_id", content_id)

    def find_link(self, content_id):
        return _find(self.links, "content_id", content_id)

    def find_contact(self, content_id):
        return _find(self.contacts, "content_id", content_id)

    def __repr__(self):
        return f"<DocumentContext depth={self.depth} locale={self.locale!r}>"
