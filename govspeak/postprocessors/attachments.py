# govspeak/postprocessors/attachments.py
"""
Postprocessors that replace attachment placeholders with rendered components.

``[Attachment:id]`` and ``[AttachmentLink:id]`` leave placeholder elements in
the markup. The block form replaces the paragraph the parser wrapped around
it; the link form stays inline.
"""

import logging

from ..components import render_component
from ..macros.embeds import ATTACHMENT_LINK_TAG, ATTACHMENT_TAG
from ..presenters import AttachmentPresenter
from .utils import replace_with_html, sole_paragraph

logger = logging.getLogger(__name__)


def _embed_attachments(soup, context, tag, component, block):
    for placeholder in soup.find_all(tag):
        target = sole_paragraph(placeholder) if block else placeholder
        attachment = context.find_attachment(placeholder.get("id"))

        if attachment is None:
            logger.debug("Removing placeholder for unknown attachment %r", placeholder.get("id"))
            target.decompose()
            continue

        html = render_component(
            component,
            locale=context.locale,
            attachment=AttachmentPresenter(attachment),
        )
        replace_with_html(target, html)


def embed_attachments(soup, context):
    _embed_attachments(soup, context, ATTACHMENT_TAG, "attachment", block=True)


def embed_attachment_links(soup, context):
    _embed_attachments(soup, context, ATTACHMENT_LINK_TAG, "attachment_link", block=False)
