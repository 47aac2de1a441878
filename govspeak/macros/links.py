"""Link macros: call-to-action buttons, external links and embedded content links."""

import logging
import re

from django.utils.html import format_html, format_html_join

logger = logging.getLogger(__name__)

BUTTON = re.compile(
    r"""
    (?:\r|\n|^)         # start of a line
    \{button(.*?)\}     # opening tag, capturing its attributes
    \s*
    \[([^\]]+)\]        # link text
    \(([^)]+)\)         # link href
    \s*
    \{/button\}
    (?:\r|\n|$)         # end of a line
    """,
    re.VERBOSE | re.MULTILINE,
)

CROSS_DOMAIN_TRACKING = re.compile(r"cross-domain-tracking:(?P<code>.[^\s*]+)")


def button(context, attributes, text, href):
    """
    ``{button start secondary cross-domain-tracking:UA-XXX}[Text](href){/button}``

    The anchor is replaced with the button component after parsing; here it
    only records the variant and tracking details.
    """
    classes = "govuk-button"
    if "secondary" in attributes:
        classes += " govuk-button--secondary"

    data = []
    if "start" in attributes:
        data.append(("data-start", "true"))

    tracking = CROSS_DOMAIN_TRACKING.search(attributes)
    if tracking:
        data.append(("data-module", "cross-domain-tracking"))
        data.append(("data-tracking-code", tracking.group("code").strip()))
        data.append(("data-tracking-name", "govspeakButtonTracker"))

    return format_html(
        '\n<a role="button" class="{}" href="{}"{}>{}</a>\n',
        classes,
        href.strip(),
        format_html_join("", ' {}="{}"', data),
        text.strip(),
    )


def external(context, body):
    """``x[text](url)x`` becomes a link marked ``rel="external"``."""
    return context.convert_markdown('[%s){rel="external"}' % body.strip())


def embed_link(context, content_id):
    link = context.find_link(content_id)
    if link is None:
        logger.debug("No link found for content id %r", content_id)
        return ""

    if link.get("url"):
        return "[%s](%s)" % (link.get("title", ""), link["url"])
    return link.get("title", "")
