# govspeak/postprocessors/barcharts.py

import logging

from ..macros.barchart import MARKER_TAG
from .utils import add_class, previous_element_sibling, sole_paragraph

logger = logging.getLogger(__name__)


def barchart_tables(soup, context):
    """Move the classes of each barchart marker onto the table above it."""
    for marker in soup.find_all(MARKER_TAG):
        target = sole_paragraph(marker)
        table = previous_element_sibling(target)

        if table is not None and table.name == "table":
            add_class(table, *marker.get("class", []))
        else:
            logger.debug("Barchart marker without a preceding table, dropping it")

        target.decompose()
