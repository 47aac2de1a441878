# govspeak/macros/__init__.py

"""
The default macro registry.

Macros run in the order they are registered and each one rewrites the whole
buffer once. More specific tokens must come first: ``$CTA`` before ``$C`` or
the first two characters of ``$CTA`` would open a contact block, and
``$Figure`` (with its ``$Alt`` section) before the ``$A`` address.
"""

import re

from . import barchart, callouts, composites, embeds, links, lists
from .patterns import NEW_PARAGRAPH, bracketed, surrounded_by
from .registry import Macro, MacroRegistry

__all__ = [
    "MACROS",
    "Macro",
    "MacroRegistry",
    "NEW_PARAGRAPH",
    "bracketed",
    "build_default_registry",
    "surrounded_by",
]


def build_default_registry():
    """Build a new, unfrozen registry holding the default macros."""
    registry = MacroRegistry()
    register = registry.register

    register("button", links.BUTTON, links.button)
    register("highlight-answer", handler=callouts.highlight_answer)
    register(
        "stat-headline",
        re.compile(r"\{stat-headline\}(.*?)\{/stat-headline\}", re.DOTALL),
        callouts.stat_headline,
    )
    register("external", surrounded_by("x[", ")x"), links.external)
    register("informational", surrounded_by("^"), callouts.informational)  # ^ note ^
    register("important", surrounded_by("@"), callouts.important)  # @ note @
    register("helpful", surrounded_by("%"), callouts.helpful)  # % note %
    register("barchart", r"\{barchart(.*?)\}", barchart.barchart)
    register("attached-image", re.compile(r"^!!([0-9]+)", re.MULTILINE), embeds.attached_image)

    # Deprecated forms, superseded by [AttachmentLink:id] and [Image:id]
    register(
        "embed attachment inline",
        r"\[embed:attachments:inline:\s*(.*?)\s*\]",
        embeds.attachment_inline,
    )
    register(
        "attachment image",
        r"\[embed:attachments:image:\s*(.*?)\s*\]",
        embeds.attachment_image,
    )

    register(
        "legislative list",
        re.compile(
            NEW_PARAGRAPH + r"\$LegislativeList\s*$(.*?)\$EndLegislativeList",
            re.MULTILINE | re.DOTALL,
        ),
        lists.legislative_list,
    )
    register(
        "numbered list",
        re.compile(r"^[ \t]*((s\d+\.\s.*(?:\n|$))+)", re.MULTILINE),
        lists.numbered_list,
    )

    for region in callouts.DEVOLVED_REGIONS:
        register(
            f"devolved-{region}",
            re.compile(r":%s:(.*?):%s:" % (region, region), re.DOTALL),
            callouts.devolved(region),
        )

    register(
        "Priority list",
        re.compile(
            NEW_PARAGRAPH + r"\$PriorityList:(\S*)\s*$(.*?)(?:^\s*$|\Z)",
            re.MULTILINE | re.DOTALL,
        ),
        lists.priority_list,
    )
    register("embed link", r"\[embed:link:\s*(.*?)\s*\]", links.embed_link)
    register("Contact", r"\[Contact:\s*(.*?)\s*\]", embeds.contact)
    register("Image", NEW_PARAGRAPH + r"\[Image:\s*(.*?)\s*\]", embeds.image)
    register("Attachment", NEW_PARAGRAPH + r"\[Attachment:\s*(.*?)\s*\]", embeds.attachment)
    register("AttachmentLink", r"\[AttachmentLink:\s*(.*?)\s*\]", embeds.attachment_link)

    register(
        "Accordion",
        re.compile(r"\$Accordion\s*$(.*?)\s*\$EndAccordion", re.MULTILINE | re.DOTALL),
        composites.accordion,
    )
    register(
        "YoutubeVideo",
        re.compile(r"\$YoutubeVideo(?:\[(.*?)\])?\((.*?)\)\$EndYoutubeVideo", re.DOTALL),
        composites.youtube_video,
    )
    register(
        "Figure",
        re.compile(r"\$Figure\s*$(.*?)\s*\$EndFigure", re.MULTILINE | re.DOTALL),
        composites.figure,
    )
    register(
        "Details",
        re.compile(r"\$Details\s*$(.*?)\s*\$EndDetails", re.MULTILINE | re.DOTALL),
        composites.details,
    )

    for class_name, token, nested in (
        ("section", "$Section", True),
        ("call-to-action", "$CTA", True),
        ("summary", "$!", False),
        ("form-download", "$D", False),
        ("contact", "$C", False),
        ("place", "$P", True),
        ("information", "$I", True),
        ("additional-information", "$AI", False),
        ("example", "$E", True),
    ):
        register(class_name, surrounded_by(token), callouts.wrap_with_div(class_name, nested))

    # After Figure, or $Alt would open an address
    register("address", surrounded_by("$A"), callouts.address)

    return registry


MACROS = build_default_registry().freeze()
