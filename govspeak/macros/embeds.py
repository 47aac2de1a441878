"""
Macros that embed records supplied by the host: images, attachments and contacts.

References are matched exactly on ``id`` or ``content_id``. A reference that
does not resolve renders as nothing.
"""

import logging

from django.utils.html import format_html

from ..components import render_component
from ..presenters import (
    AttachmentImagePresenter,
    AttachmentPresenter,
    ContactPresenter,
    ImagePresenter,
)

logger = logging.getLogger(__name__)

ATTACHMENT_TAG = "govspeak-embed-attachment"
ATTACHMENT_LINK_TAG = "govspeak-embed-attachment-link"


def render_image(image):
    """Figure markup for an image presenter, on a single line."""
    id_attr = format_html(' id="attachment_{}"', image.id) if image.id else ""
    parts = [
        format_html('<figure{} class="image embedded">', id_attr),
        format_html(
            '<div class="img"><img src="{}" alt="{}"></div>', image.url, image.alt_text
        ),
    ]
    if image.figcaption():
        parts.append(image.figcaption_html())
    parts.append("</figure>")
    return "".join(parts)


def attached_image(context, number):
    """``!!N`` embeds the N-th image, counting from one."""
    index = int(number) - 1
    if index < 0 or index >= len(context.images):
        logger.debug("No image at position %s", number)
        return ""
    return render_image(ImagePresenter(context.images[index]))


def image(context, image_id):
    record = context.find_image(image_id)
    if record is None:
        logger.debug("No image found for id %r", image_id)
        return ""
    return render_image(ImagePresenter(record))


def attachment_inline(context, content_id):
    record = context.find_attachment_by_content_id(content_id)
    if record is None:
        logger.debug("No inline attachment found for content id %r", content_id)
        return ""

    attachment = AttachmentPresenter(record)
    span_id = format_html(' id="attachment_{}"', attachment.id) if attachment.id else ""
    attributes = attachment.attachment_attributes()
    if attributes:
        attributes = f" ({attributes})"
    return format_html(
        '<span{} class="attachment-inline">{}{}</span>',
        span_id,
        attachment.link(attachment.title, attachment.url),
        attributes,
    )


def attachment_image(context, content_id):
    record = context.find_attachment_by_content_id(content_id)
    if record is None:
        logger.debug("No image attachment found for content id %r", content_id)
        return ""
    return render_image(AttachmentImagePresenter(record))


def contact(context, content_id):
    record = context.find_contact(content_id)
    if record is None:
        logger.debug("No contact found for content id %r", content_id)
        return ""
    return render_component("contact", locale=context.locale, contact=ContactPresenter(record))


def _placeholder(tag, context, attachment_id):
    if context.find_attachment(attachment_id) is None:
        logger.debug("No attachment found for id %r", attachment_id)
        return ""
    return format_html('<{} id="{}"></{}>', tag, attachment_id, tag)


def attachment(context, attachment_id):
    """Block attachment, resolved into the attachment component after parsing."""
    return _placeholder(ATTACHMENT_TAG, context, attachment_id)


def attachment_link(context, attachment_id):
    """Inline attachment link, resolved into its component after parsing."""
    return _placeholder(ATTACHMENT_LINK_TAG, context, attachment_id)
