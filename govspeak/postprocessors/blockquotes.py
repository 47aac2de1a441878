# govspeak/postprocessors/blockquotes.py

from .utils import add_class


def blockquote_last_child(soup, context):
    """Mark the closing paragraph of every blockquote for styling."""
    for paragraph in soup.select("blockquote p:last-child"):
        add_class(paragraph, "last-child")
