# govspeak/document.py

"""
Public entry point: render a govspeak source string to HTML.

    >>> Document("^ Mind the gap ^").to_html()
    '<div role="note" aria-label="Information" ...'
"""

import re

from bs4 import BeautifulSoup

from .context import DocumentContext
from .renderer import get_default_renderer

UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class Document:
    """
    A govspeak source string together with its render options.

    Options are ``sanitize`` (default true), ``allowed_elements``,
    ``images``, ``attachments``, ``links``, ``contacts``, ``locale`` (default
    ``"en"``) and ``allow_extra_quotes``. Unknown options are kept.
    """

    def __init__(self, source, renderer=None, **options):
        self.renderer = renderer or get_default_renderer()
        self.context = DocumentContext(source, options, renderer=self.renderer)

    @property
    def source(self):
        return self.context.source

    @property
    def options(self):
        return self.context.options

    def to_html(self):
        return self.renderer.render(self.context)

    def to_text(self):
        """The rendered document as plain text with whitespace collapsed."""
        text = BeautifulSoup(self.to_html(), "html.parser").get_text(" ")
        return " ".join(text.split())

    def is_valid(self):
        """
        True when the sanitizer would leave the source untouched, i.e. the
        source holds no markup outside the allow-list.
        """
        unsanitized = self._with_options(sanitize=False).to_html()
        sanitized = self._with_options(sanitize=True).to_html()
        return _normalise(unsanitized) == _normalise(sanitized)

    def extract_contact_content_ids(self):
        """Unique, UUID-shaped content ids of the ``[Contact:...]`` macros."""
        macro = self.renderer.macros.get("Contact")
        if macro is None:
            return []

        ids = []
        for content_id in macro.pattern.findall(self.source):
            if content_id not in ids and UUID.match(content_id):
                ids.append(content_id)
        return ids

    def _with_options(self, **overrides):
        context = self.context
        options = dict(
            context.options,
            images=context.images,
            attachments=context.attachments,
            links=context.links,
            contacts=context.contacts,
            allowed_elements=context.allowed_elements,
            locale=context.locale,
        )
        options.update(overrides)
        return Document(context.source, renderer=self.renderer, **options)

    def __repr__(self):
        return f"<Document {self.source[:40]!r}>"


def _normalise(html):
    # Compare markup structure, not the serialiser's whitespace or quoting
    return BeautifulSoup(html, "html.parser").decode(formatter="html5")


def to_html(source, **options):
    return Document(source, **options).to_html()
