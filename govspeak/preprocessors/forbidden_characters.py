"""
Preprocessor that removes characters not suitable for use in markup.

See https://www.w3.org/TR/unicode-xml/#Charlist. Control characters other
than tab, line feed and carriage return are removed along with Unicode
non-characters and the format characters listed there. Lone surrogates
cannot be encoded for the parser and go too.
"""

import re

# U+nFFFE and U+nFFFF for every supplementary plane
_SUPPLEMENTARY_NONCHARACTERS = "".join(
    "\\U{:08X}\\U{:08X}".format((plane << 16) | 0xFFFE, (plane << 16) | 0xFFFF)
    for plane in range(1, 17)
)

FORBIDDEN_CHARACTERS = re.compile(
    "["
    r"\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x84\x86-\x9f"
    r"\u0340\u0341\u17a3\u17d3\u2028\u2029\u202a-\u202e\u206a-\u206f"
    r"\ud800-\udfff"
    r"\ufdd0-\ufdef\ufeff\ufff9-\ufffc\ufffe\uffff"
    r"\U0001d173-\U0001d17a"
    + _SUPPLEMENTARY_NONCHARACTERS
    + "]"
)


def remove_forbidden_characters(text: str, context) -> str:
    return FORBIDDEN_CHARACTERS.sub("", text)
