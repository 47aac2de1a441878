# govspeak/postprocessors/buttons.py

from ..components import render_component
from .utils import has_class, replace_with_html

TRACKING_ATTRIBUTES = ("tracking-code", "tracking-name")


def _is_component(element):
    return "govuk-button" in element.get("data-module", "").split()


def buttons(soup, context):
    """Replace ``{button}`` anchors with the button component."""
    for anchor in soup.select(".govuk-button"):
        if _is_component(anchor):
            continue

        html = render_component(
            "button",
            locale=context.locale,
            text=anchor.get_text().strip(),
            href=anchor.get("href", ""),
            start=bool(anchor.get("data-start")),
            secondary=has_class(anchor, "govuk-button--secondary"),
            data_module=anchor.get("data-module", ""),
            data_attributes=[
                (name, anchor[f"data-{name}"])
                for name in TRACKING_ATTRIBUTES
                if anchor.get(f"data-{name}")
            ],
        )
        replace_with_html(anchor, html)
