"""
Multi-section macros: accordions, details, figures and video embeds.
"""

import re
from urllib.parse import quote

from django.utils.html import format_html

from ..exceptions import MalformedMacroError

ACCORDION_SECTION = re.compile(
    r"\$Heading\s*(.*?)\s*\$EndHeading"
    r"\s*\$Summary\s*(.*?)\s*\$EndSummary"
    r"\s*\$Content\s*(.*?)\s*\$EndContent",
    re.DOTALL,
)

DETAILS_SECTION = re.compile(
    r"\$Heading\s*(.*?)\s*\$EndHeading\s*\$Content\s*(.*?)\s*\$EndContent",
    re.DOTALL,
)

FIGURE_ALT = re.compile(r"\$Alt\s*(.*?)\s*\$EndAlt", re.DOTALL)
FIGURE_URL = re.compile(r"\$URL\s*(.*?)\s*\$EndURL", re.DOTALL)
FIGURE_CAPTION = re.compile(r"\$Caption\s*(.*?)\s*\$EndCaption", re.DOTALL)

YOUTUBE_ID = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{}?enablejsapi=1&origin={}"
YOUTUBE_ORIGIN = "https://www.early-career-framework.education.gov.uk"
YOUTUBE_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; "
    "picture-in-picture"
)


def accordion(context, body):
    """
    GOV.UK accordion built from ``$Heading``, ``$Summary`` and ``$Content``
    triples.

    Accordions are numbered per page through the shared counter; sections are
    numbered within their accordion.
    """
    number = context.accordion_counter.take()
    sections = []

    for index, (heading, summary, content) in enumerate(
        ACCORDION_SECTION.findall(body), start=1
    ):
        heading_id = f"accordion-{number}-heading-{index}"
        summary_html = context.render_nested(f"<div>{summary}</div>") if summary else ""
        content_html = context.render_nested(content.strip())

        sections.append(
            '<div class="govuk-accordion__section ">'
            '<div class="govuk-accordion__section-header">'
            '<h2 class="govuk-accordion__section-heading">'
            f'<span class="govuk-accordion__section-button" id="{heading_id}">{heading}</span>'
            "</h2>"
            f"{summary_html}"
            "</div>"
            f'<div id="accordion-{number}-content-{index}" '
            f'class="govuk-accordion__section-content" aria-labelledby="{heading_id}">'
            f"<div class='govuk-body'>{content_html}</div>"
            "</div>"
            "</div>"
        )

    return (
        '<div class="govuk-accordion" data-module="govuk-accordion" '
        f'id="accordion-{number}">{"".join(sections)}</div>'
    )


def details(context, body):
    blocks = []

    for heading, content in DETAILS_SECTION.findall(body):
        summary_html = context.render_nested(heading).replace("<p>", "").replace("</p>", "")
        content_html = context.render_nested(content.strip())

        blocks.append(
            '<details class="govuk-details" data-module="govuk-details">'
            '<summary class="govuk-details__summary">'
            f'<span class="govuk-details__summary-text">{summary_html}</span>'
            "</summary>"
            '<div class="govuk-details__text">'
            f"{content_html}"
            "</div>"
            "</details>"
        )

    return "".join(blocks)


def figure(context, body):
    parts = {}
    for name, pattern in (
        ("Alt", FIGURE_ALT),
        ("URL", FIGURE_URL),
        ("Caption", FIGURE_CAPTION),
    ):
        match = pattern.search(body)
        if match is None:
            raise MalformedMacroError("Figure", f"missing ${name} section")
        parts[name] = match.group(1)

    return format_html(
        '<figure class="image embedded">'
        '<div class="img"><img src="{}" alt="{}"></div>'
        "<figcaption><p>{}</p></figcaption>"
        "</figure>",
        parts["URL"],
        parts["Alt"],
        parts["Caption"],
    )


def youtube_video(context, title, link):
    match = YOUTUBE_ID.match(link)
    if match is None:
        raise MalformedMacroError("YoutubeVideo", f"no video id in {link!r}")

    src = YOUTUBE_EMBED_URL.format(match.group(2), quote(YOUTUBE_ORIGIN, safe=""))
    title_attr = format_html(' title="{}"', title) if title is not None else ""
    return format_html(
        '<iframe width="625" height="345" src="{}"{} frameborder="0" '
        'allow="{}" allowfullscreen=""></iframe>',
        src,
        title_attr,
        YOUTUBE_ALLOW,
    )
