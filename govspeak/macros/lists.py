"""
List macros: numbered steps, legislative lists and priority lists.
"""

import logging
import re

from bs4 import BeautifulSoup

from ..exceptions import MalformedMacroError

logger = logging.getLogger(__name__)

STEP = re.compile(r"s(\d+)\.\s(.*)(?:\n|$)", re.MULTILINE)

# "* 1. Item" keeps its authored number as text instead of starting a
# nested ordered list
LEGISLATIVE_NUMBER = re.compile(r"^(\s*[*+-]\s+)(\d+)([.)])(?=\s)", re.MULTILINE)


def numbered_list(context, body, _last_step=None):
    """Lines of ``s1. text`` become ``<ol class="steps">``, one render per step."""

    def step(match):
        return "<li>%s</li>\n" % context.render_nested(match.group(2).strip())

    return '<ol class="steps">\n%s</ol>' % STEP.sub(step, body)


def legislative_list(context, body):
    source = LEGISLATIVE_NUMBER.sub(r"\1\2\\\3", body.strip())
    html = context.convert_markdown(source)
    html = html.replace("<ul>", "<ol>").replace("</ul>", "</ol>")
    return html.replace("<ol>", '<ol class="legislative-list">', 1)


def priority_list(context, count, body):
    """Mark the first ``count`` top-level list items as primary."""
    if not count.isdigit():
        raise MalformedMacroError("Priority list", f"count {count!r} is not a number")

    remaining = int(count)
    soup = BeautifulSoup(context.render_nested(body.strip()), "html.parser")

    for item_list in soup.find_all(["ul", "ol"]):
        if item_list.find_parent(["ul", "ol"]) is not None:
            continue
        for item in item_list.find_all("li", recursive=False):
            if remaining <= 0:
                break
            item["class"] = item.get("class", []) + ["primary-item"]
            remaining -= 1

    return soup.decode(formatter="html5")
