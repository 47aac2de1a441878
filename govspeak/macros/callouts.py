"""
Callout and container macros.

Each of these wraps its body in a fixed ``<div>`` and renders the body again,
either through the whole pipeline or through the markdown parser alone.
"""

import re

# Regions used by the devolved content blocks, keyed by token
DEVOLVED_REGIONS = {
    "scotland": "Scotland",
    "england": "England",
    "england-wales": "England and Wales",
    "northern-ireland": "Northern Ireland",
    "wales": "Wales",
    "london": "London",
}

FIRST_PARAGRAPH = re.compile(r"^<p>(.*)</p>$", re.MULTILINE)


def highlight_answer(context, body):
    return '\n\n<div class="highlight-answer">\n%s</div>\n' % context.render_nested(
        body.strip()
    )


def stat_headline(context, body):
    return '\n\n<div class="stat-headline">\n%s</div>\n' % context.render_nested(
        body.strip()
    )


def informational(context, body):
    return (
        '\n\n<div role="note" aria-label="Information" class="application-notice info-notice">\n'
        "%s</div>\n" % context.render_nested(body.strip())
    )


def important(context, body):
    # Only the first single-line paragraph is emphasised
    html = FIRST_PARAGRAPH.sub(
        r"<p><strong>\1</strong></p>", context.render_nested(body.strip()), count=1
    )
    return '\n\n<div role="note" aria-label="Important" class="advisory">%s</div>\n' % html


def helpful(context, body):
    return (
        '\n\n<div role="note" aria-label="Warning" class="application-notice help-notice">\n'
        "%s</div>\n" % context.render_nested(body.strip())
    )


def devolved(region):
    """Build the handler for one devolved region."""
    name = DEVOLVED_REGIONS[region]

    def handler(context, body):
        return (
            f'<div class="devolved-content {region}">\n'
            f'<p class="devolved-header">This section applies to {name}</p>\n'
            f'<div class="devolved-body">{context.render_nested(body.strip())}</div>\n'
            "</div>\n"
        )

    return handler


def wrap_with_div(class_name, nested=True):
    """
    Build a handler that wraps the body in ``<div class="class_name">``.

    With ``nested`` the body goes through the whole pipeline, otherwise only
    through the markdown parser, so macros inside it stay literal.
    """

    def handler(context, body):
        source = f"{body.strip()}\n"
        if nested:
            content = context.render_nested(source)
        else:
            content = context.convert_markdown(source)
        return f'\n<div class="{class_name}">\n{content}</div>\n'

    return handler


def address(context, body):
    # The first line break follows the opening token
    lines = body.replace("\n", "", 1).replace("\n", "<br />")
    return f'\n<div class="address"><div class="adr org fn"><p>\n{lines}\n</p></div></div>\n'
