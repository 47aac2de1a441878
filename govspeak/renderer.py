# govspeak/renderer.py

import logging
from functools import lru_cache

import pypandoc

from .config import MAX_NESTING_DEPTH, get_pandoc_config
from .exceptions import NestingDepthExceeded
from .macros import MACROS
from .postprocessors import POSTPROCESSORS, apply_postprocessors
from .preprocessors import apply_preprocessors
from .sanitizer import sanitize_html

logger = logging.getLogger(__name__)


class Renderer:
    """
    Runs the govspeak pipeline for a DocumentContext.

    The macro and post-process registries are injected so tests can render
    with their own pipelines; the default renderer uses the frozen module
    level registries.
    """

    def __init__(self, macros=None, postprocessors=None, max_depth=MAX_NESTING_DEPTH):
        self.macros = MACROS if macros is None else macros
        self.postprocessors = POSTPROCESSORS if postprocessors is None else postprocessors
        self.max_depth = max_depth
        self.pandoc_config = get_pandoc_config()

    def convert(self, text):
        """Markdown conversion using pypandoc"""
        if not text.strip():
            return ""

        logger.debug("Converting %d characters with pandoc", len(text))
        return pypandoc.convert_text(
            text,
            to=self.pandoc_config["to"],
            format=self.pandoc_config["format"],
            extra_args=self.pandoc_config["extra_args"],
        )

    def render(self, context):
        """
        Main rendering function with pre/post processing pipeline.

        The result is memoized on the context, so asking twice renders once.
        """
        if context.result is not None:
            return context.result

        if context.depth > self.max_depth:
            raise NestingDepthExceeded(context.depth, self.max_depth)

        # Accordion numbering restarts for every top-level document
        if not context.is_nested:
            context.accordion_counter.reset()

        # Pre-processing: Before markdown conversion
        text = apply_preprocessors(context.source, context, self.macros)

        html = self.convert(text)

        if context.sanitize:
            html = sanitize_html(html, context.allowed_elements)

        # Post-processing: After markdown conversion
        html = apply_postprocessors(html, context, self.postprocessors)

        context.result = html
        return html


@lru_cache(maxsize=1)
def get_default_renderer():
    return Renderer()
