"""
Pattern builders for the govspeak macro token surface.

The tokens are part of every published document; changing a pattern here
changes how existing content renders.
"""

import re

# Only matches at the start of the document or directly after a blank line
NEW_PARAGRAPH = r"(?:\A|(?<=\n\n)|(?<=\r\n\r\n))"


def bracketed(name):
    """``{::name}body{:/name}``"""
    name = re.escape(name)
    return re.compile(r"\{::%s\}(.*?)\{:/%s\}" % (name, name), re.DOTALL)


def surrounded_by(open_token, close_token=None):
    """
    A block opened by ``open_token`` at a line start and closed by ``close_token``.

    When the block is closed by repeating the opening token, the closing token
    is optional and the body runs to the next line end (or the end of the
    document) instead.
    """
    open_token = re.escape(open_token)
    if close_token:
        close_token = re.escape(close_token)
        pattern = r"(?:\r|\n|^)%s(.*?)%s *(?:\r|\n|$)?" % (open_token, close_token)
    else:
        pattern = r"(?:\r|\n|^)%s(.*?)%s? *(?:\r|\n|$)" % (open_token, open_token)
    return re.compile(pattern, re.MULTILINE | re.DOTALL)
