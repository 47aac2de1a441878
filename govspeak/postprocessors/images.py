# govspeak/postprocessors/images.py
"""
Postprocessor that restores figure markup escaped by the markdown parser.

Embedded images are emitted as raw ``<figure>`` markup by the preprocessor.
When such a figure ends up inside another block the parser may escape the
inner ``<div class="img">`` and ``<figcaption>`` wrappers into text; this pass
turns them back into elements.
"""

import logging
import re

from .utils import parse_fragment

logger = logging.getLogger(__name__)

ESCAPED_IMAGE_WRAPPER = re.compile(r'&lt;(div class="img")&gt;(.*?)&lt;(/div)&gt;')
ESCAPED_FIGCAPTION = re.compile(r"&lt;(figcaption)&gt;(.*?)&lt;(/figcaption)&gt;")


def fix_image_escaping(soup, context):
    for figure in soup.select("figure.image"):
        markup = figure.decode_contents()
        if not (ESCAPED_IMAGE_WRAPPER.search(markup) or ESCAPED_FIGCAPTION.search(markup)):
            continue

        logger.debug("Restoring escaped markup inside figure %s", figure.get("id", ""))
        markup = ESCAPED_IMAGE_WRAPPER.sub(r"<\1>\2<\3>", markup)
        markup = ESCAPED_FIGCAPTION.sub(r"<\1>\2<\3>", markup)

        figure.clear()
        for node in parse_fragment(markup):
            figure.append(node)
