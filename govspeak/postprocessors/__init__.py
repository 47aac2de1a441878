# govspeak/postprocessors/__init__.py

import logging

from bs4 import BeautifulSoup

from .attachments import embed_attachment_links, embed_attachments
from .barcharts import barchart_tables
from .blockquotes import blockquote_last_child
from .buttons import buttons
from .footnotes import footnotes
from .headings import container_heading_ids
from .images import fix_image_escaping
from .registry import PostProcessPass, PostProcessRegistry
from .tables import table_headers, table_tabindex

logger = logging.getLogger(__name__)

__all__ = [
    "POSTPROCESSORS",
    "PostProcessPass",
    "PostProcessRegistry",
    "apply_postprocessors",
    "build_default_registry",
]


def build_default_registry():
    """Build a new, unfrozen registry holding the default passes."""
    registry = PostProcessRegistry()
    registry.register("add class to last p of blockquote", blockquote_last_child)
    registry.register("fix image attachment escaping", fix_image_escaping)
    registry.register("barchart tables", barchart_tables)  # Before tabindex, which skips charts
    registry.register("embed attachment HTML", embed_attachments)
    registry.register("embed attachment link HTML", embed_attachment_links)
    registry.register("add table headers and row / column scopes", table_headers)
    registry.register("use component for buttons", buttons)
    registry.register("use custom footnotes", footnotes)
    registry.register("add tabindex=0 to tables", table_tabindex)
    registry.register("add index id to container headings", container_heading_ids)
    # Order matters - they run sequentially on one parsed tree
    return registry


POSTPROCESSORS = build_default_registry().freeze()


def apply_postprocessors(html, context, passes=POSTPROCESSORS):
    """
    Apply all postprocessors in order to a single parsed fragment.

    The fragment is serialised once at the end with named entities.
    """
    soup = BeautifulSoup(html, "html.parser")
    for postprocess in passes:
        logger.debug("Running post-process pass %r", postprocess.name)
        postprocess.apply(soup, context)
    return soup.decode(formatter="html5")
