# govspeak/preprocessors/__init__.py

from .blockquote_quotes import remove_blockquote_quotes
from .forbidden_characters import remove_forbidden_characters

PREPROCESSORS = [
    remove_blockquote_quotes,  # Strip decorative quotes around "> ..." lines
    remove_forbidden_characters,  # Characters unsuitable for markup
    # Order matters - they run sequentially, macros run last
]


def apply_macros(text, context, macros):
    """Apply every macro in registration order, one global rewrite each."""
    for macro in macros:
        text = macro.apply(text, context)
    return text


def apply_preprocessors(text, context, macros=()):
    """Apply all preprocessors in order, then the macro registry"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return apply_macros(text, context, macros)
