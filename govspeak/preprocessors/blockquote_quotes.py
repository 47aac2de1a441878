"""
Preprocessor that removes decorative quotes from blockquote lines.

Converts:
    > "Quoted text"      → > Quoted text
    > “Quoted text”      → > Quoted text

Quotation marks are added by the stylesheet, so authored ones would be
doubled up.
"""

import re

QUOTES = r"[\"\u201c\u201d\u201e\u201f\u2033\u2036]+"
WHITESPACE = r"[^\S\r\n]*"

LEADING_QUOTE = re.compile(rf"^>{WHITESPACE}{QUOTES}{WHITESPACE}(.+?)$", re.MULTILINE)
TRAILING_QUOTE = re.compile(rf"^>(.+?){QUOTES}{WHITESPACE}(\r?)$", re.MULTILINE)


def remove_blockquote_quotes(text: str, context) -> str:
    if context.options.get("allow_extra_quotes"):
        return text

    text = LEADING_QUOTE.sub(r"> \1", text)
    return TRAILING_QUOTE.sub(r">\1\2", text)
